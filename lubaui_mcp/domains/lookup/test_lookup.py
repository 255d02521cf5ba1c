"""Tests for the lookup service."""

from unittest.mock import MagicMock

import pytest

from lubaui_mcp.config import CategoryError, ErrorCode
from lubaui_mcp.domains.catalog import PACKAGE_DATA_DIR, Catalog, load_catalog
from lubaui_mcp.domains.search import SearchOptions

from .service import LookupService


@pytest.fixture(scope="module")
def catalog() -> Catalog:
    """Bundled catalog, loaded once for the module."""
    return load_catalog(PACKAGE_DATA_DIR)


@pytest.fixture
def service(catalog: Catalog) -> LookupService:
    """Lookup service over the bundled catalog."""
    return LookupService(catalog)


# --- lookup_token Tests ---


def test_lookup_token_exact_name(service: LookupService):
    """Test an exact token name within a category."""
    result = service.lookup_token("lg", category="spacing")

    assert result["found"] is True
    assert result["count"] == 1
    token = result["tokens"][0]
    assert token["api"] == "LubaSpacing.lg"
    assert token["value"] == 16
    assert token["tier"] == 2
    assert token["category"] == "spacing"
    assert token["primitive"] == "LubaPrimitives.space16"
    assert "light" not in token
    assert "subcategory" not in token


def test_lookup_token_color_fields(service: LookupService):
    """Test color tokens carry light and dark values."""
    result = service.lookup_token("accent", category="color")

    first = result["tokens"][0]
    assert first["name"] == "accent"
    assert first["subcategory"] == "accent"
    assert first["light"] == "#5F7360"
    assert first["dark"] == "#9AB897"


def test_lookup_token_by_api_path(service: LookupService):
    """Test API paths are searchable through aliases."""
    result = service.lookup_token("LubaRadius.md")
    assert result["tokens"][0]["api"] == "LubaRadius.md"


def test_lookup_token_cap(service: LookupService):
    """Test at most eight tokens are returned."""
    result = service.lookup_token("luba")
    assert result["count"] == 8
    assert len(result["tokens"]) == 8


def test_lookup_token_invalid_category(service: LookupService):
    """Test an unknown category is rejected."""
    with pytest.raises(CategoryError) as exc_info:
        service.lookup_token("lg", category="shadow")

    assert exc_info.value.code == ErrorCode.LOOKUP_INVALID_CATEGORY
    assert "spacing" in exc_info.value.details["allowed"]


def test_lookup_token_not_found(service: LookupService):
    """Test the not-found message with and without a category."""
    assert service.lookup_token("zzzqqq") == {
        "found": False,
        "message": 'No tokens matching "zzzqqq"',
    }
    assert service.lookup_token("zzzqqq", category="radius")["message"] == (
        'No tokens matching "zzzqqq" in category "radius"'
    )


def test_lookup_token_uses_ranker(catalog: Catalog):
    """Test the injected ranker receives the token cap and category."""
    ranker = MagicMock()
    ranker.search.return_value = []

    LookupService(catalog, ranker=ranker).lookup_token("lg", category="radius")

    args = ranker.search.call_args.args
    assert args[1] == "lg"
    assert args[2] == SearchOptions(category="radius", max_results=8)


# --- lookup_component Tests ---


def test_lookup_component_short_name(service: LookupService):
    """Test the short alias puts the exact component first."""
    result = service.lookup_component("button")

    assert result["found"] is True
    assert 1 <= len(result["components"]) <= 3
    button = result["components"][0]
    assert button["name"] == "LubaButton"
    assert button["parameters"][0] == {
        "name": "title",
        "type": "String",
        "required": True,
        "description": "Button label",
    }
    assert "LubaSpacing.md" in button["tokens"]


def test_lookup_component_not_found_lists_available(service: LookupService):
    """Test the not-found message names every component."""
    result = service.lookup_component("qqqzzz")

    assert result["found"] is False
    assert result["message"].startswith('No component matching "qqqzzz". Available: LubaButton, ')
    assert "LubaSkeleton" in result["message"]


# --- lookup_primitive Tests ---


def test_lookup_primitive_by_modifier(service: LookupService):
    """Test the modifier form finds the primitive."""
    result = service.lookup_primitive(".lubaGlass()")

    glass = result["primitives"][0]
    assert glass["name"] == "lubaGlass"
    assert glass["builtInStyles"] == ["subtle", "regular", "prominent"]
    assert "hapticStyles" not in glass


def test_lookup_primitive_short_name(service: LookupService):
    """Test 'press' ranks lubaPressable above lubaLongPressable."""
    result = service.lookup_primitive("press")

    names = [p["name"] for p in result["primitives"]]
    assert names[0] == "lubaPressable"
    assert "lubaLongPressable" in names
    assert "light" in result["primitives"][0]["hapticStyles"]
    assert result["primitives"][0]["presets"]["standard"] == 0.97


def test_lookup_primitive_not_found(service: LookupService):
    """Test the not-found message names every primitive."""
    result = service.lookup_primitive("qqqzzz")
    assert result["found"] is False
    assert "lubaPressable" in result["message"]


# --- get_color_palette Tests ---


@pytest.mark.parametrize(
    ("query", "category"),
    [
        ("accent", "accent"),
        ("SEMANTIC", "semantic"),
        ("sem", "semantic"),
        ("t", "text"),
        ("", "greyscale"),
    ],
)
def test_color_palette_direct_category(service: LookupService, query: str, category: str):
    """Test category names and prefixes return the whole group."""
    result = service.get_color_palette(query)

    assert result["category"] == category
    assert result["description"].startswith("Greyscale-first palette")
    assert isinstance(result["colors"], list)
    assert result["colors"]


def test_color_palette_search(service: LookupService):
    """Test a non-category query searches across colors."""
    result = service.get_color_palette("textPrimary")

    assert result["found"] is True
    first = result["colors"][0]
    assert first["name"] == "textPrimary"
    assert first["subcategory"] == "text"
    assert first["aliasOf"] == "gray900"


def test_color_palette_description_match(service: LookupService):
    """Test color descriptions are searched."""
    result = service.get_color_palette("sage")
    assert "accent" in [c["name"] for c in result["colors"]]


def test_color_palette_not_found(service: LookupService):
    """Test the not-found message lists the categories."""
    result = service.get_color_palette("qqqzzz")
    assert result == {
        "found": False,
        "message": 'No colors matching "qqqzzz". Categories: greyscale, surfaces, accent, text, semantic, border, glass',
    }
