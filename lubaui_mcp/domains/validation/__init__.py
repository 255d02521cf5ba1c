"""
Validation Domain - Spacing and radius scale checks.

This domain handles:
- 4pt grid alignment for spacing
- Exact token matches on the spacing and radius scales
- Nearest and bracketing token suggestions
"""

from .models import RADIUS_SCALE, SPACING_SCALE, Nearest, ScaleEntry
from .validator import find_nearest, format_number, validate_radius, validate_spacing

__all__ = [
    # Models
    "ScaleEntry",
    "Nearest",
    "SPACING_SCALE",
    "RADIUS_SCALE",
    # Operations
    "find_nearest",
    "format_number",
    "validate_spacing",
    "validate_radius",
]
