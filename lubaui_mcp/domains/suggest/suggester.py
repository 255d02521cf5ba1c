"""
Token Suggester - Maps a UI description to LubaUI tokens and components.

Known pattern keywords ("form", "card", "loading"...) pull curated
guidance from the pattern table. Descriptions that hit no pattern fall
back to a fuzzy search over components and primitives.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from lubaui_mcp.domains.catalog import Catalog, ComponentEntry, PrimitiveEntry
from lubaui_mcp.domains.search import FuzzyRanker, Ranker, SearchableItem, SearchOptions

from .patterns import GENERAL_GUIDANCE, PATTERNS

logger = logging.getLogger(__name__)

__all__ = ["TokenSuggester"]

FALLBACK_COMPONENT_LIMIT = 5
FALLBACK_PRIMITIVE_LIMIT = 3
FALLBACK_NOTE = (
    "No exact pattern match. Showing relevant components and primitives "
    "based on your description."
)

# Pattern primitives carry presets and variants, fallback ones only the basics
PATTERN_PRIMITIVE_EXTRAS = ("presets", "variants")


def _merge(lists: Iterable[list[str]]) -> list[str]:
    """Concatenate, dropping repeats but keeping first-seen order."""
    return list(dict.fromkeys(value for values in lists for value in values))


class TokenSuggester:
    """
    Suggest tokens, components and primitives for a UI description.

    Example:
        >>> suggester = TokenSuggester(get_catalog())
        >>> suggester.suggest("login form with a card")
    """

    def __init__(self, catalog: Catalog, ranker: Ranker | None = None) -> None:
        self._components = list(catalog.components)
        self._primitives = list(catalog.primitives)
        self._ranker = ranker or FuzzyRanker()

    def match_patterns(self, description: str) -> list[str]:
        """Pattern keys contained in the description, in table order."""
        lower = description.lower()
        return [pattern for pattern in PATTERNS if pattern in lower]

    def resolve_components(self, names: Iterable[str]) -> list[ComponentEntry]:
        """Resolve component names (``Card`` or ``LubaCard``) to catalog entries."""
        resolved: dict[str, ComponentEntry] = {}
        for name in names:
            match = next(
                (
                    c
                    for c in self._components
                    if c.name == name or c.name == f"Luba{name}" or c.name.lower() == name.lower()
                ),
                None,
            )
            if match is None:
                logger.debug("No component for suggestion '%s'", name)
                continue
            resolved.setdefault(match.name, match)
        return list(resolved.values())

    def resolve_primitives(self, suggestions: Iterable[str]) -> list[PrimitiveEntry]:
        """
        Resolve primitive suggestions to catalog entries.

        Only the first word counts, so "lubaGlass for frosted effect"
        resolves to ``lubaGlass``.
        """
        resolved: dict[str, PrimitiveEntry] = {}
        for suggestion in suggestions:
            word = suggestion.split(" ")[0].lower()
            match = next(
                (
                    p
                    for p in self._primitives
                    if p.name.lower() in (word, f"luba{word}")
                    or p.name.replace("luba", "").lower() == word
                ),
                None,
            )
            if match is None:
                logger.debug("No primitive for suggestion '%s'", suggestion)
                continue
            resolved.setdefault(match.name, match)
        return list(resolved.values())

    def suggest(self, description: str) -> dict[str, Any]:
        """
        Build suggestions for a UI description.

        Returns:
            Pattern-based suggestions with resolved components and
            primitives, or a search-based fallback with general guidance.
        """
        matched = self.match_patterns(description)

        if matched:
            chosen = [PATTERNS[p] for p in matched]
            logger.debug("Suggest: '%s' matched patterns %s", description[:50], matched)
            return {
                "matchedPatterns": matched,
                "suggestions": {
                    "spacing": _merge(s.spacing for s in chosen),
                    "colors": _merge(s.colors for s in chosen),
                    "radius": _merge(s.radius for s in chosen),
                    "typography": _merge(s.typography for s in chosen),
                },
                "recommendedComponents": [
                    c.to_payload() for c in self.resolve_components(_merge(s.components for s in chosen))
                ],
                "recommendedPrimitives": [
                    p.to_payload(extras=PATTERN_PRIMITIVE_EXTRAS)
                    for p in self.resolve_primitives(_merge(s.primitives for s in chosen))
                ],
            }

        return self._fallback(description)

    def _fallback(self, description: str) -> dict[str, Any]:
        by_component = {c.name: c for c in self._components}
        by_primitive = {p.name: p for p in self._primitives}

        components = self._ranker.search(
            [
                SearchableItem(name=c.name, aliases=[c.name.replace("Luba", "")], description=c.description)
                for c in self._components
            ],
            description,
            SearchOptions(max_results=FALLBACK_COMPONENT_LIMIT),
        )
        primitives = self._ranker.search(
            [
                SearchableItem(name=p.name, aliases=[p.name.replace("luba", "")], description=p.description)
                for p in self._primitives
            ],
            description,
            SearchOptions(max_results=FALLBACK_PRIMITIVE_LIMIT),
        )

        logger.debug(
            "Suggest fallback: '%s' -> %d components, %d primitives",
            description[:50],
            len(components),
            len(primitives),
        )

        return {
            "matchedPatterns": [],
            "note": FALLBACK_NOTE,
            "recommendedComponents": [by_component[c.name].to_payload() for c in components],
            "recommendedPrimitives": [by_primitive[p.name].to_payload(extras=()) for p in primitives],
            "generalGuidance": dict(GENERAL_GUIDANCE),
        }
