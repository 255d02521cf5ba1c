"""
Lookup Domain - Fuzzy lookups over the LubaUI catalog.

This domain handles:
- Token lookup with category filtering
- Component and primitive reference lookup
- Color palettes by category or search
"""

from .service import TOKEN_CATEGORIES, LookupService

__all__ = [
    "TOKEN_CATEGORIES",
    "LookupService",
]
