"""
Health Routes - System health and status endpoints.
"""

from typing import Any

from fastapi import APIRouter, Depends

from lubaui_mcp import __version__
from lubaui_mcp.domains.lookup import LookupService
from lubaui_mcp.interfaces.api.deps import get_lookup_service

router = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": "lubaui"}


@router.get("/api")
async def api_info(service: LookupService = Depends(get_lookup_service)) -> dict[str, Any]:
    """API info endpoint."""
    catalog = service.catalog
    return {
        "name": "LubaUI Lookup API",
        "version": __version__,
        "description": "Design token, component and primitive lookup for the LubaUI design system",
        "docs": "/docs",
        "catalog": {
            "tokens": len(catalog.flat_tokens),
            "components": len(catalog.components),
            "primitives": len(catalog.primitives),
        },
    }
