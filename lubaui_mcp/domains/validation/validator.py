"""
Scale Validator - Checks spacing and radius values against LubaUI scales.

Off-scale values get the nearest named token plus the tokens that
bracket them, so callers can snap to the design system.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .models import FULL_RADIUS, GRID_UNIT, RADIUS_SCALE, SPACING_SCALE, Nearest, ScaleEntry

logger = logging.getLogger(__name__)

__all__ = [
    "find_nearest",
    "format_number",
    "validate_radius",
    "validate_spacing",
]

Number = int | float


def format_number(value: Number) -> str:
    """
    Render a number without a trailing ``.0`` for integral floats.

    Example:
        >>> format_number(20.0)
        '20'
        >>> format_number(2.5)
        '2.5'
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _normalize(value: Number) -> Number:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _describe(entry: ScaleEntry | None) -> str:
    if entry is None:
        return "none"
    return f"{entry.api} ({entry.value}pt)"


def find_nearest(value: Number, scale: Sequence[ScaleEntry]) -> Nearest:
    """
    Locate the closest scale entry and the entries bracketing ``value``.

    Ties on distance go to the earlier entry. ``below`` is the largest entry
    not above the value, ``above`` the smallest entry not below it.
    """
    closest = scale[0]
    closest_dist = abs(value - closest.value)
    for entry in scale:
        dist = abs(value - entry.value)
        if dist < closest_dist:
            closest = entry
            closest_dist = dist

    below = next((s for s in reversed(scale) if s.value <= value), None)
    above = next((s for s in scale if s.value >= value), None)

    return Nearest(closest=closest, below=below, above=above)


def validate_spacing(value: Number) -> dict[str, Any]:
    """Check a spacing value against the 4pt grid and LubaSpacing tokens."""
    shown = format_number(value)
    on_grid = value % GRID_UNIT == 0
    exact = next((s for s in SPACING_SCALE if s.value == value), None)

    if exact is not None:
        return {
            "valid": True,
            "onGrid": on_grid,
            "token": exact.model_dump(),
            "message": f"{shown}pt is {exact.api} ({exact.name})",
        }

    nearest = find_nearest(value, SPACING_SCALE)

    if on_grid:
        message = (
            f"{shown}pt is on the 4pt grid but not a named token. "
            f"Nearest: {_describe(nearest.closest)}. "
            f"Use LubaSpacing.custom({format_number(value / GRID_UNIT)}) "
            f"for grid-aligned custom values."
        )
    else:
        message = (
            f"{shown}pt is NOT on the 4pt grid. "
            f"Nearest named tokens: {_describe(nearest.below)} and {_describe(nearest.above)}."
        )

    logger.debug("Spacing %s off scale (on_grid=%s) -> %s", shown, on_grid, nearest.closest.api)

    return {
        "valid": False,
        "onGrid": on_grid,
        "value": _normalize(value),
        "suggestion": nearest.closest.model_dump(),
        "nearest": {
            "below": nearest.below.model_dump() if nearest.below else None,
            "above": nearest.above.model_dump() if nearest.above else None,
        },
        "message": message,
    }


def validate_radius(value: Number) -> dict[str, Any]:
    """Check a corner radius against the LubaRadius scale."""
    shown = format_number(value)
    exact = next((r for r in RADIUS_SCALE if r.value == value), None)

    if exact is not None:
        return {
            "valid": True,
            "token": exact.model_dump(),
            "message": f"{shown}pt is {exact.api} ({exact.name})",
        }

    nearest = find_nearest(value, [r for r in RADIUS_SCALE if r.value != FULL_RADIUS])
    valid_radii = ", ".join(f"{r.name}({r.value})" for r in RADIUS_SCALE)

    logger.debug("Radius %s off scale -> %s", shown, nearest.closest.api)

    return {
        "valid": False,
        "value": _normalize(value),
        "suggestion": nearest.closest.model_dump(),
        "nearest": {
            "below": nearest.below.model_dump() if nearest.below else None,
            "above": nearest.above.model_dump() if nearest.above else None,
        },
        "message": (
            f"{shown}pt is not on the LubaRadius scale. "
            f"Nearest: {_describe(nearest.closest)}. Valid radii: {valid_radii}."
        ),
    }
