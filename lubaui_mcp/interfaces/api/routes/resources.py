"""
Resource Routes - Read-only LubaUI documents.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from lubaui_mcp.domains.lookup import LookupService
from lubaui_mcp.domains.resources import RESOURCES, read_resource
from lubaui_mcp.interfaces.api.deps import get_lookup_service

router = APIRouter()

# Short path segment -> resource URI
RESOURCE_PATHS = {
    "tokens": "lubaui://tokens/all",
    "architecture": "lubaui://architecture",
    "components": "lubaui://components",
}


@router.get("")
async def list_resources() -> list[dict[str, str]]:
    """List readable documents."""
    return [r.model_dump() for r in RESOURCES]


@router.get("/{name}")
async def get_resource(
    name: str,
    service: LookupService = Depends(get_lookup_service),
) -> Any:
    """Read one document: tokens, architecture or components."""
    return read_resource(service.catalog, RESOURCE_PATHS.get(name, name))
