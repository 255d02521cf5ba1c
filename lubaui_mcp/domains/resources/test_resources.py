"""Tests for resource documents."""

import json

import pytest

from lubaui_mcp.config import ErrorCode, LubaUIError
from lubaui_mcp.domains.catalog import PACKAGE_DATA_DIR, Catalog, load_catalog

from .documents import RESOURCES, get_resource, read_resource


@pytest.fixture(scope="module")
def catalog() -> Catalog:
    """Bundled catalog, loaded once for the module."""
    return load_catalog(PACKAGE_DATA_DIR)


def test_resource_uris():
    """Test the three documents are registered."""
    assert [r.uri for r in RESOURCES] == [
        "lubaui://tokens/all",
        "lubaui://architecture",
        "lubaui://components",
    ]
    assert all(r.mime_type == "application/json" for r in RESOURCES)


def test_get_resource_by_uri_or_name():
    """Test lookup by URI and by short name."""
    assert get_resource("lubaui://architecture").name == "architecture"
    assert get_resource("tokens-all").uri == "lubaui://tokens/all"


def test_get_resource_unknown():
    """Test unknown resources raise NOT_FOUND."""
    with pytest.raises(LubaUIError) as exc_info:
        get_resource("lubaui://nope")

    assert exc_info.value.code == ErrorCode.NOT_FOUND
    assert "lubaui://components" in exc_info.value.details["available"]


def test_tokens_document_is_raw_catalog(catalog: Catalog):
    """Test the tokens document is the loaded JSON."""
    document = read_resource(catalog, "lubaui://tokens/all")
    assert document is catalog.tokens
    assert "spacing" in document


def test_architecture_document(catalog: Catalog):
    """Test the architecture overview is JSON-serialisable and complete."""
    document = read_resource(catalog, "lubaui://architecture")

    assert set(document["tokenSystem"]) == {"tier1", "tier2", "tier3"}
    assert document["radiusScale"].endswith("full(9999)")
    assert json.loads(json.dumps(document)) == document


def test_components_document_totals(catalog: Catalog):
    """Test the directory counts match the catalog."""
    document = read_resource(catalog, "components")

    assert document["total"] == {
        "components": len(catalog.components),
        "primitives": len(catalog.primitives),
    }
    assert document["primitives"][0] == {
        "name": "lubaPressable",
        "modifier": ".lubaPressable()",
        "description": catalog.primitives[0].description,
    }
