"""Tests for the MCP server handlers."""

import json
from importlib.metadata import version
from unittest.mock import patch

import pytest
from mcp.server import Server
from mcp.types import CallToolRequest, ListResourcesRequest, ListToolsRequest, ReadResourceRequest

from lubaui_mcp.config import CatalogError, ErrorCode, ToolError
from lubaui_mcp.domains.catalog import PACKAGE_DATA_DIR, load_catalog

from .server import LubaUIMCPServer, serve_mcp


@pytest.fixture(scope="module")
def mcp_server() -> LubaUIMCPServer:
    """MCP server over the bundled catalog."""
    return LubaUIMCPServer(catalog=load_catalog(PACKAGE_DATA_DIR))


async def _call(server: LubaUIMCPServer, name: str, arguments: dict) -> dict:
    content = await server.handle_tool_call(name, arguments)
    assert len(content) == 1
    assert content[0].type == "text"
    return json.loads(content[0].text)


def test_handlers_registered(mcp_server: LubaUIMCPServer):
    """Test tool and resource handlers are wired into the MCP server."""
    handlers = mcp_server.server.request_handlers
    for request_type in (ListToolsRequest, CallToolRequest, ListResourcesRequest, ReadResourceRequest):
        assert request_type in handlers


def test_list_tools(mcp_server: LubaUIMCPServer):
    """Test every tool is listed with an object schema."""
    tools = {tool.name: tool for tool in mcp_server.list_tools()}

    assert set(tools) == {
        "lookup_token",
        "lookup_component",
        "lookup_primitive",
        "validate_spacing",
        "validate_radius",
        "get_color_palette",
        "suggest_tokens",
    }
    schema = tools["lookup_token"].inputSchema
    assert schema["type"] == "object"
    assert schema["required"] == ["query"]
    assert "category" in schema["properties"]
    assert tools["validate_spacing"].inputSchema["required"] == ["value"]


async def test_call_lookup_token(mcp_server: LubaUIMCPServer):
    """Test a lookup returns the JSON payload as text."""
    result = await _call(mcp_server, "lookup_token", {"query": "lg", "category": "spacing"})

    assert result["found"] is True
    assert result["tokens"][0]["api"] == "LubaSpacing.lg"


async def test_call_validate_spacing_with_int(mcp_server: LubaUIMCPServer):
    """Test integer values validate and render without decimals."""
    result = await _call(mcp_server, "validate_spacing", {"value": 16})
    assert result["valid"] is True
    assert result["message"] == "16pt is LubaSpacing.lg (lg)"


async def test_call_validate_radius(mcp_server: LubaUIMCPServer):
    """Test radius validation through the tool."""
    result = await _call(mcp_server, "validate_radius", {"value": 10})
    assert result["valid"] is False
    assert result["suggestion"]["name"] == "sm"


async def test_call_suggest_tokens(mcp_server: LubaUIMCPServer):
    """Test suggestions through the tool."""
    result = await _call(mcp_server, "suggest_tokens", {"description": "settings page"})
    assert result["matchedPatterns"] == ["settings"]


async def test_call_color_palette(mcp_server: LubaUIMCPServer):
    """Test the palette tool."""
    result = await _call(mcp_server, "get_color_palette", {"query": "semantic"})
    assert result["category"] == "semantic"


async def test_call_component_and_primitive(mcp_server: LubaUIMCPServer):
    """Test component and primitive lookups through the tools."""
    component = await _call(mcp_server, "lookup_component", {"query": "toast"})
    primitive = await _call(mcp_server, "lookup_primitive", {"query": "swipeable"})

    assert component["components"][0]["name"] == "LubaToast"
    assert primitive["primitives"][0]["name"] == "lubaSwipeable"


async def test_call_unknown_tool(mcp_server: LubaUIMCPServer):
    """Test unknown tools raise TOOL_NOT_FOUND."""
    with pytest.raises(ToolError) as exc_info:
        await mcp_server.handle_tool_call("migrate", {})

    assert exc_info.value.code == ErrorCode.TOOL_NOT_FOUND
    assert "lookup_token" in exc_info.value.details["available"]


@pytest.mark.parametrize(
    ("name", "arguments"),
    [
        ("lookup_token", {}),
        ("lookup_token", {"query": "lg", "category": "shadow"}),
        ("validate_spacing", {"value": "wide"}),
        ("lookup_component", {"query": "button", "limit": 2}),
    ],
)
async def test_call_invalid_arguments(mcp_server: LubaUIMCPServer, name: str, arguments: dict):
    """Test argument validation failures raise VALIDATION_ERROR."""
    with pytest.raises(ToolError) as exc_info:
        await mcp_server.handle_tool_call(name, arguments)

    assert exc_info.value.code == ErrorCode.VALIDATION_ERROR
    assert exc_info.value.details["errors"]


def test_list_resources(mcp_server: LubaUIMCPServer):
    """Test the three documents are listed as JSON resources."""
    resources = mcp_server.list_resources()

    assert [str(r.uri).rstrip("/") for r in resources] == [
        "lubaui://tokens/all",
        "lubaui://architecture",
        "lubaui://components",
    ]
    assert all(r.mimeType == "application/json" for r in resources)


def test_read_resource_text(mcp_server: LubaUIMCPServer):
    """Test resource documents render as readable JSON."""
    text = mcp_server.read_resource_text("lubaui://architecture")

    assert "→" in text
    assert json.loads(text)["platforms"].startswith("iOS 16+")


def test_serve_mcp_exits_on_catalog_error():
    """Test startup failures exit with status 1."""
    with patch(
        "lubaui_mcp.interfaces.mcp.server.LubaUIMCPServer",
        side_effect=CatalogError("tokens.json missing"),
    ):
        with pytest.raises(SystemExit) as exc_info:
            serve_mcp()

    assert exc_info.value.code == 1


def test_installed_mcp_has_decorator_api():
    """Test the installed mcp release still offers the low-level decorator handlers."""
    assert int(version("mcp").split(".")[0]) < 2

    for decorator in ("list_tools", "call_tool", "list_resources", "read_resource"):
        assert callable(getattr(Server, decorator, None))
