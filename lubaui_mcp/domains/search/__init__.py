"""
Search Domain - Fuzzy ranking of catalog entries.

This domain handles:
- camelCase-aware tokenization
- Tiered exact/prefix/substring/token scoring
- Alias and description fallbacks
- Category filtering and result capping
"""

from .contracts import Ranker
from .fuzzy import FuzzyRanker, rank, score_item, score_match, search, split_camel_case
from .models import ScoredResult, SearchableItem, SearchOptions

__all__ = [
    "Ranker",
    "FuzzyRanker",
    "SearchableItem",
    "SearchOptions",
    "ScoredResult",
    "rank",
    "score_item",
    "score_match",
    "search",
    "split_camel_case",
]
