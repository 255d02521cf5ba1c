"""
Suggest Domain - Pattern-driven design guidance.

This domain handles:
- Keyword matching against common UI patterns
- Merging token guidance across matched patterns
- Resolving suggested components and primitives to catalog entries
- Search-based fallback for unknown patterns
"""

from .models import PatternSuggestion
from .patterns import GENERAL_GUIDANCE, PATTERNS
from .suggester import TokenSuggester

__all__ = [
    "PatternSuggestion",
    "PATTERNS",
    "GENERAL_GUIDANCE",
    "TokenSuggester",
]
