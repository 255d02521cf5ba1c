"""
Lookup Routes - Token, component, primitive and color lookups.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query

from lubaui_mcp.domains.lookup import LookupService
from lubaui_mcp.interfaces.api.deps import get_lookup_service

router = APIRouter()


@router.get("/tokens")
async def lookup_token(
    query: str = Query(..., description="Token name, API path, or description"),
    category: str | None = Query(
        default=None,
        description="spacing, radius, color, typography, motion or glass",
    ),
    service: LookupService = Depends(get_lookup_service),
) -> dict[str, Any]:
    """
    Look up design tokens.

    - **query**: e.g. "spacing large", "lg", "card padding"
    - **category**: Optional category filter
    """
    return service.lookup_token(query, category)


@router.get("/components")
async def lookup_component(
    query: str = Query(..., description="Component name, e.g. 'Button' or 'LubaTextField'"),
    service: LookupService = Depends(get_lookup_service),
) -> dict[str, Any]:
    """Look up a component's parameters, example and tokens."""
    return service.lookup_component(query)


@router.get("/primitives")
async def lookup_primitive(
    query: str = Query(..., description="Primitive name, e.g. 'pressable' or '.lubaGlass()'"),
    service: LookupService = Depends(get_lookup_service),
) -> dict[str, Any]:
    """Look up an interaction primitive."""
    return service.lookup_primitive(query)


@router.get("/colors")
async def get_color_palette(
    query: str = Query(..., description="Color category or search term"),
    service: LookupService = Depends(get_lookup_service),
) -> dict[str, Any]:
    """Get a color category, or search across colors."""
    return service.get_color_palette(query)
