"""
Validation Models - Named design scales.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel


class ScaleEntry(BaseModel):
    """One named step on a design scale."""

    name: str
    api: str
    value: int

    model_config = {"frozen": True}


class Nearest(NamedTuple):
    """Closest entry plus the entries bracketing a value."""

    closest: ScaleEntry
    below: ScaleEntry | None
    above: ScaleEntry | None


SPACING_SCALE: tuple[ScaleEntry, ...] = tuple(
    ScaleEntry(name=name, api=f"LubaSpacing.{name}", value=value)
    for name, value in (
        ("xs", 4),
        ("sm", 8),
        ("md", 12),
        ("lg", 16),
        ("xl", 24),
        ("xxl", 32),
        ("xxxl", 48),
        ("huge", 64),
    )
)

RADIUS_SCALE: tuple[ScaleEntry, ...] = tuple(
    ScaleEntry(name=name, api=f"LubaRadius.{name}", value=value)
    for name, value in (
        ("none", 0),
        ("xs", 4),
        ("sm", 8),
        ("md", 12),
        ("lg", 16),
        ("xl", 24),
        ("full", 9999),
    )
)

# Pill radius; never suggested as a nearest match
FULL_RADIUS = 9999

GRID_UNIT = 4
