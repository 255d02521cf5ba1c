"""
Fuzzy Ranker - Tiered name/alias/description matching.

Scoring tiers (first match wins):
- 100: exact match (case-insensitive)
- 80: prefix match
- 60: substring match
- <=50: share of camelCase query tokens found in the target
- 0: no match
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from .models import ScoredResult, SearchableItem, SearchOptions, T

logger = logging.getLogger(__name__)

__all__ = [
    "FuzzyRanker",
    "rank",
    "score_item",
    "score_match",
    "search",
    "split_camel_case",
]

EXACT_SCORE = 100.0
PREFIX_SCORE = 80.0
SUBSTRING_SCORE = 60.0
PARTIAL_SCORE = 50.0
DESCRIPTION_WEIGHT = 0.5

_LOWER_UPPER = re.compile(r"([a-z])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[\s._-]+")


def split_camel_case(text: str) -> list[str]:
    """
    Split an identifier into lowercase word tokens.

    Example:
        >>> split_camel_case("HTTPServer")
        ['http', 'server']
        >>> split_camel_case("foo_bar-baz")
        ['foo', 'bar', 'baz']
    """
    spaced = _LOWER_UPPER.sub(r"\1 \2", text)
    spaced = _ACRONYM_WORD.sub(r"\1 \2", spaced)
    return [part for part in _SEPARATORS.split(spaced.lower()) if part]


def score_match(query: str, target: str) -> float:
    """Score one target string against the query."""
    q = query.lower()
    t = target.lower()

    if t == q:
        return EXACT_SCORE
    if t.startswith(q):
        return PREFIX_SCORE
    if q in t:
        return SUBSTRING_SCORE

    target_parts = split_camel_case(target)
    query_parts = split_camel_case(query)

    matched = sum(1 for qp in query_parts if any(qp in tp for tp in target_parts))
    if matched > 0:
        return PARTIAL_SCORE * (matched / len(query_parts))

    return 0.0


def score_item(item: SearchableItem, query: str) -> float:
    """Best score across name, aliases and (damped) description."""
    best = score_match(query, item.name)

    for alias in item.aliases or ():
        best = max(best, score_match(query, alias))

    if item.description:
        best = max(best, score_match(query, item.description) * DESCRIPTION_WEIGHT)

    return best


def rank(
    items: Sequence[T],
    query: str,
    options: SearchOptions | None = None,
) -> list[ScoredResult[T]]:
    """
    Score, filter and order items for a query.

    Args:
        items: Candidates; never mutated
        query: Free-text query
        options: Category filter and result cap

    Returns:
        Up to ``max_results`` scored items, highest score first. Equal
        scores keep their input order.
    """
    options = options or SearchOptions()

    candidates: Sequence[T] = items
    if options.category:
        wanted = options.category.lower()
        candidates = [
            item for item in items if item.category is not None and item.category.lower() == wanted
        ]

    scored: list[ScoredResult[T]] = []
    for item in candidates:
        score = score_item(item, query)
        if score > 0:
            scored.append(ScoredResult(item=item, score=score))

    scored.sort(key=lambda result: result.score, reverse=True)
    return scored[: options.max_results]


def search(
    items: Sequence[T],
    query: str,
    options: SearchOptions | None = None,
) -> list[T]:
    """Return the best matching items, best first."""
    return [result.item for result in rank(items, query, options)]


class FuzzyRanker:
    """
    Ranker bound to a default result cap.

    Example:
        >>> ranker = FuzzyRanker(default_max_results=5)
        >>> ranker.search(components, "button")
    """

    def __init__(self, default_max_results: int = 10) -> None:
        """
        Initialize ranker.

        Args:
            default_max_results: Cap used when a call passes no options
        """
        self._default_options = SearchOptions(max_results=default_max_results)

    def rank(
        self,
        items: Sequence[T],
        query: str,
        options: SearchOptions | None = None,
    ) -> list[ScoredResult[T]]:
        results = rank(items, query, options or self._default_options)

        logger.debug(
            "Fuzzy rank: query='%s' candidates=%d -> %d results (top=%.1f)",
            query[:50],
            len(items),
            len(results),
            results[0].score if results else 0.0,
        )

        return results

    def search(
        self,
        items: Sequence[T],
        query: str,
        options: SearchOptions | None = None,
    ) -> list[T]:
        return [result.item for result in self.rank(items, query, options)]
