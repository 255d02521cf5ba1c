"""Tests for spacing and radius validation."""

import pytest

from .models import RADIUS_SCALE, SPACING_SCALE
from .validator import find_nearest, format_number, validate_radius, validate_spacing


# --- find_nearest Tests ---


def test_find_nearest_tie_goes_to_earlier_entry():
    """Test equal distances pick the smaller token."""
    nearest = find_nearest(20, SPACING_SCALE)
    assert nearest.closest.name == "lg"
    assert nearest.below.name == "lg"
    assert nearest.above.name == "xl"


def test_find_nearest_exact_value_brackets_itself():
    """Test an exact value is both below and above."""
    nearest = find_nearest(12, SPACING_SCALE)
    assert nearest.closest.name == nearest.below.name == nearest.above.name == "md"


def test_find_nearest_out_of_range():
    """Test bracketing entries can be missing at the ends."""
    assert find_nearest(1, SPACING_SCALE).below is None
    assert find_nearest(100, SPACING_SCALE).above is None
    assert find_nearest(100, SPACING_SCALE).closest.name == "huge"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(20, "20"), (20.0, "20"), (2.5, "2.5"), (0, "0"), (-4.0, "-4")],
)
def test_format_number(value, expected):
    """Test integral floats print like integers."""
    assert format_number(value) == expected


# --- validate_spacing Tests ---


def test_validate_spacing_exact_token():
    """Test a named spacing value is valid."""
    result = validate_spacing(16)

    assert result == {
        "valid": True,
        "onGrid": True,
        "token": {"name": "lg", "api": "LubaSpacing.lg", "value": 16},
        "message": "16pt is LubaSpacing.lg (lg)",
    }


def test_validate_spacing_on_grid_custom():
    """Test a grid-aligned value without a token suggests a custom multiple."""
    result = validate_spacing(20)

    assert result["valid"] is False
    assert result["onGrid"] is True
    assert result["value"] == 20
    assert result["suggestion"]["api"] == "LubaSpacing.lg"
    assert result["nearest"]["below"]["name"] == "lg"
    assert result["nearest"]["above"]["name"] == "xl"
    assert result["message"] == (
        "20pt is on the 4pt grid but not a named token. Nearest: LubaSpacing.lg (16pt). "
        "Use LubaSpacing.custom(5) for grid-aligned custom values."
    )


def test_validate_spacing_off_grid():
    """Test an off-grid value names the bracketing tokens."""
    result = validate_spacing(10)

    assert result["onGrid"] is False
    assert result["suggestion"]["name"] == "sm"
    assert result["message"] == (
        "10pt is NOT on the 4pt grid. Nearest named tokens: "
        "LubaSpacing.sm (8pt) and LubaSpacing.md (12pt)."
    )


def test_validate_spacing_below_scale():
    """Test a missing lower bracket renders as 'none'."""
    result = validate_spacing(2)

    assert result["nearest"]["below"] is None
    assert result["message"].endswith("none and LubaSpacing.xs (4pt).")


def test_validate_spacing_above_scale_on_grid():
    """Test large grid values still point at the largest token."""
    result = validate_spacing(100)

    assert result["onGrid"] is True
    assert result["nearest"]["above"] is None
    assert "LubaSpacing.custom(25)" in result["message"]


def test_validate_spacing_float_input():
    """Test float inputs render without a decimal part when integral."""
    result = validate_spacing(20.0)
    assert result["value"] == 20
    assert result["message"].startswith("20pt is on the 4pt grid")

    fractional = validate_spacing(10.5)
    assert fractional["onGrid"] is False
    assert fractional["message"].startswith("10.5pt is NOT on the 4pt grid")


def test_validate_spacing_zero_is_on_grid():
    """Test zero is grid-aligned but not a spacing token."""
    result = validate_spacing(0)
    assert result["valid"] is False
    assert result["onGrid"] is True
    assert "LubaSpacing.custom(0)" in result["message"]


# --- validate_radius Tests ---


@pytest.mark.parametrize("value", [entry.value for entry in RADIUS_SCALE])
def test_validate_radius_every_token(value):
    """Test every scale value is valid, pill included."""
    result = validate_radius(value)
    assert result["valid"] is True
    assert result["token"]["value"] == value


def test_validate_radius_invalid():
    """Test an off-scale radius lists every valid radius."""
    result = validate_radius(10)

    assert result["valid"] is False
    assert result["suggestion"]["api"] == "LubaRadius.sm"
    assert result["message"] == (
        "10pt is not on the LubaRadius scale. Nearest: LubaRadius.sm (8pt). "
        "Valid radii: none(0), xs(4), sm(8), md(12), lg(16), xl(24), full(9999)."
    )


def test_validate_radius_never_suggests_full():
    """Test the pill radius is excluded from nearest matching."""
    result = validate_radius(5000)

    assert result["suggestion"]["name"] == "xl"
    assert result["nearest"]["above"] is None
    assert "full" not in result["suggestion"]["api"]
