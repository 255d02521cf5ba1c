"""
Search Contracts - Interfaces for search domain.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from .models import ScoredResult, SearchableItem, SearchOptions


@runtime_checkable
class Ranker(Protocol):
    """Contract for ranking implementations."""

    def rank(
        self,
        items: Sequence[SearchableItem],
        query: str,
        options: SearchOptions | None = None,
    ) -> list[ScoredResult]:
        """Score, filter and order items for a query."""
        ...

    def search(
        self,
        items: Sequence[SearchableItem],
        query: str,
        options: SearchOptions | None = None,
    ) -> list[SearchableItem]:
        """Return the best matching items, best first."""
        ...
