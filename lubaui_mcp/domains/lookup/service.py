"""
Lookup Service - Token, component, primitive and color lookups.

Every method returns a plain JSON-serialisable dict, ready to be sent
as an MCP text block or a REST response body.
"""

from __future__ import annotations

import logging
from typing import Any

from lubaui_mcp.config import CategoryError
from lubaui_mcp.domains.catalog import COLOR_CATEGORIES, Catalog, FlatToken
from lubaui_mcp.domains.search import FuzzyRanker, Ranker, SearchableItem, SearchOptions

logger = logging.getLogger(__name__)

__all__ = ["TOKEN_CATEGORIES", "LookupService"]

TOKEN_CATEGORIES = ("spacing", "radius", "color", "typography", "motion", "glass")

TOKEN_LIMIT = 8
COMPONENT_LIMIT = 3
PRIMITIVE_LIMIT = 3
COLOR_LIMIT = 10


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in data.items() if v is not None}


def _token_payload(token: FlatToken) -> dict[str, Any]:
    payload = _compact(
        {
            "name": token.name,
            "api": token.api,
            "value": token.value,
            "tier": token.tier,
            "category": token.category,
            "subcategory": token.subcategory,
            "description": token.description,
        }
    )
    # Color-only fields are included only when they carry a value
    for key, value in (
        ("light", token.light),
        ("dark", token.dark),
        ("primitive", token.primitive),
        ("aliasOf", token.alias_of),
    ):
        if value:
            payload[key] = value
    return payload


class LookupService:
    """
    Fuzzy lookups over the LubaUI catalog.

    Example:
        >>> service = LookupService(get_catalog())
        >>> service.lookup_token("spacing large", category="spacing")
        >>> service.lookup_component("button")
    """

    def __init__(self, catalog: Catalog, ranker: Ranker | None = None) -> None:
        """
        Initialize lookup service.

        Args:
            catalog: Loaded catalog
            ranker: Ranker implementation (defaults to FuzzyRanker)
        """
        self._catalog = catalog
        self._ranker = ranker or FuzzyRanker()

        self._components = {c.name: c for c in catalog.components}
        self._component_items = [
            SearchableItem(
                name=c.name,
                aliases=[c.name.replace("Luba", "")],
                description=c.description,
            )
            for c in catalog.components
        ]

        self._primitives = {p.name: p for p in catalog.primitives}
        self._primitive_items = [
            SearchableItem(
                name=p.name,
                aliases=[p.name.replace("luba", ""), p.modifier],
                description=p.description,
            )
            for p in catalog.primitives
        ]

        self._color_tokens = [t for t in catalog.flat_tokens if t.category == "color"]

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def component_items(self) -> list[SearchableItem]:
        """Components as searchable items (alias: name without ``Luba``)."""
        return self._component_items

    @property
    def primitive_items(self) -> list[SearchableItem]:
        """Primitives as searchable items (aliases: short name, modifier)."""
        return self._primitive_items

    def lookup_token(self, query: str, category: str | None = None) -> dict[str, Any]:
        """
        Find design tokens by name, API path or description.

        Args:
            query: Free-text query ("spacing large", "LubaColors.accent")
            category: Optional token category filter

        Raises:
            CategoryError: Unknown category
        """
        if category and category not in TOKEN_CATEGORIES:
            raise CategoryError(
                f"Unknown token category: {category}",
                details={"category": category, "allowed": list(TOKEN_CATEGORIES)},
            )

        results = self._ranker.search(
            self._catalog.flat_tokens,
            query,
            SearchOptions(category=category or None, max_results=TOKEN_LIMIT),
        )

        if not results:
            suffix = f' in category "{category}"' if category else ""
            return {"found": False, "message": f'No tokens matching "{query}"{suffix}'}

        return {
            "found": True,
            "count": len(results),
            "tokens": [_token_payload(t) for t in results],
        }

    def lookup_component(self, query: str) -> dict[str, Any]:
        """Find components with parameters, examples and token usage."""
        results = self._ranker.search(
            self._component_items, query, SearchOptions(max_results=COMPONENT_LIMIT)
        )

        if not results:
            available = ", ".join(self._components)
            return {
                "found": False,
                "message": f'No component matching "{query}". Available: {available}',
            }

        return {
            "found": True,
            "components": [self._components[item.name].to_payload() for item in results],
        }

    def lookup_primitive(self, query: str) -> dict[str, Any]:
        """Find interaction primitives by name or modifier."""
        results = self._ranker.search(
            self._primitive_items, query, SearchOptions(max_results=PRIMITIVE_LIMIT)
        )

        if not results:
            available = ", ".join(self._primitives)
            return {
                "found": False,
                "message": f'No primitive matching "{query}". Available: {available}',
            }

        return {
            "found": True,
            "primitives": [self._primitives[item.name].to_payload() for item in results],
        }

    def get_color_palette(self, query: str) -> dict[str, Any]:
        """
        Return a whole color category, or search across all colors.

        A query naming a category (or a prefix of one) returns that
        category's raw entries; anything else is a fuzzy color search.
        """
        colors = self._catalog.tokens.get("colors", {})
        wanted = query.lower()

        direct = next(
            (c for c in COLOR_CATEGORIES if c == wanted or c.startswith(wanted)),
            None,
        )
        if direct is not None:
            logger.debug("Color palette direct match: '%s' -> %s", query, direct)
            return {
                "category": direct,
                "description": colors.get("description"),
                "colors": colors.get(direct),
            }

        results = self._ranker.search(
            self._color_tokens, query, SearchOptions(max_results=COLOR_LIMIT)
        )

        if not results:
            return {
                "found": False,
                "message": f'No colors matching "{query}". Categories: {", ".join(COLOR_CATEGORIES)}',
            }

        palette = []
        for c in results:
            entry = _compact(
                {
                    "name": c.name,
                    "api": c.api,
                    "light": c.light,
                    "dark": c.dark,
                    "description": c.description,
                    "subcategory": c.subcategory,
                }
            )
            if c.alias_of:
                entry["aliasOf"] = c.alias_of
            palette.append(entry)

        return {"found": True, "colors": palette}
