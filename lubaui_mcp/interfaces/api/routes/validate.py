"""
Validation Routes - Spacing and radius scale checks.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from lubaui_mcp.domains.validation import validate_radius, validate_spacing

router = APIRouter()


@router.get("/spacing/{value}")
async def check_spacing(value: float) -> dict[str, Any]:
    """Check a spacing value against the 4pt grid and named tokens."""
    return validate_spacing(value)


@router.get("/radius/{value}")
async def check_radius(value: float) -> dict[str, Any]:
    """Check a corner radius against the radius scale."""
    return validate_radius(value)
