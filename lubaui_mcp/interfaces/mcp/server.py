"""
MCP Server - LubaUI lookup tools over the Model Context Protocol.

Exposes the lookup, validation and suggestion tools plus the read-only
resource documents on a stdio transport.

Example:
    # Start over stdio (stdout carries the protocol, logs go to stderr)
    lubaui mcp
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import Resource, TextContent, Tool
from pydantic import BaseModel, ValidationError

from lubaui_mcp import __version__
from lubaui_mcp.config import ErrorCode, LubaUIError, ToolError, get_settings
from lubaui_mcp.domains.catalog import Catalog, get_catalog
from lubaui_mcp.domains.lookup import LookupService
from lubaui_mcp.domains.resources import RESOURCES, read_resource
from lubaui_mcp.domains.search import FuzzyRanker
from lubaui_mcp.domains.suggest import TokenSuggester
from lubaui_mcp.domains.validation import validate_radius, validate_spacing

from .schemas import (
    ColorQuery,
    ComponentQuery,
    PrimitiveQuery,
    RadiusValue,
    SpacingValue,
    SuggestRequest,
    TokenQuery,
)

logger = logging.getLogger(__name__)

__all__ = ["LubaUIMCPServer", "ToolSpec", "serve_mcp"]


@dataclass(frozen=True)
class ToolSpec:
    """One registered tool: its schema model and the callable behind it."""

    name: str
    description: str
    arguments: type[BaseModel]
    run: Callable[[Any], dict[str, Any]]

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.arguments.model_json_schema(),
        )


class LubaUIMCPServer:
    """
    MCP server backed by the LubaUI catalog.

    Attributes:
        catalog: Loaded catalog
        lookup: Lookup service shared by the lookup tools
        suggester: Pattern suggester
        server: Low-level MCP server instance
    """

    def __init__(self, catalog: Catalog | None = None, server_name: str | None = None) -> None:
        """
        Initialize MCP server.

        Args:
            catalog: Catalog to serve (defaults to the cached bundled catalog)
            server_name: Optional override for the MCP server name

        Raises:
            CatalogError: If the catalog cannot be loaded
        """
        settings = get_settings()

        self.catalog = catalog or get_catalog()
        ranker = FuzzyRanker(default_max_results=settings.search_default_limit)
        self.lookup = LookupService(self.catalog, ranker)
        self.suggester = TokenSuggester(self.catalog, ranker)

        name = server_name or settings.server_name
        self.server = Server(name, version=__version__)
        logger.info("Created MCP server: %s", name)

        self._tools = {spec.name: spec for spec in self._build_tools()}
        self._register_handlers()

    def _build_tools(self) -> list[ToolSpec]:
        return [
            ToolSpec(
                name="lookup_token",
                description=(
                    "Look up a LubaUI design token by name or description. "
                    "Returns token name, API, value, tier, and usage guidance."
                ),
                arguments=TokenQuery,
                run=lambda args: self.lookup.lookup_token(args.query, args.category),
            ),
            ToolSpec(
                name="lookup_component",
                description=(
                    "Look up a LubaUI component by name. "
                    "Returns init parameters, styles, code example, and related tokens."
                ),
                arguments=ComponentQuery,
                run=lambda args: self.lookup.lookup_component(args.query),
            ),
            ToolSpec(
                name="lookup_primitive",
                description=(
                    "Look up a LubaUI interaction primitive by name. "
                    "Returns modifier signature, parameters, presets, and code example."
                ),
                arguments=PrimitiveQuery,
                run=lambda args: self.lookup.lookup_primitive(args.query),
            ),
            ToolSpec(
                name="validate_spacing",
                description=(
                    "Check if a spacing value is on the LubaUI 4pt grid and maps to a named token. "
                    "Suggests nearest tokens if not."
                ),
                arguments=SpacingValue,
                run=lambda args: validate_spacing(args.value),
            ),
            ToolSpec(
                name="validate_radius",
                description=(
                    "Check if a corner radius value is on the LubaUI radius scale. "
                    "Suggests nearest token if not."
                ),
                arguments=RadiusValue,
                run=lambda args: validate_radius(args.value),
            ),
            ToolSpec(
                name="get_color_palette",
                description=(
                    "Get LubaUI colors by category or search. "
                    "Returns light/dark hex values and usage context."
                ),
                arguments=ColorQuery,
                run=lambda args: self.lookup.get_color_palette(args.query),
            ),
            ToolSpec(
                name="suggest_tokens",
                description=(
                    "Suggest LubaUI tokens, components, and primitives for a UI you're building. "
                    "Describe what you're building and get recommendations."
                ),
                arguments=SuggestRequest,
                run=lambda args: self.suggester.suggest(args.description),
            ),
        ]

    def _register_handlers(self) -> None:
        """Register MCP tool and resource handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return self.list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
            return await self.handle_tool_call(name, arguments)

        @self.server.list_resources()
        async def list_resources() -> list[Resource]:
            return self.list_resources()

        @self.server.read_resource()
        async def read(uri: Any) -> Iterable[ReadResourceContents]:
            text = self.read_resource_text(str(uri).rstrip("/"))
            return [ReadResourceContents(content=text, mime_type="application/json")]

        logger.info("Registered %d MCP tools, %d resources", len(self._tools), len(RESOURCES))

    def list_tools(self) -> list[Tool]:
        """All tools with their JSON input schemas."""
        return [spec.to_tool() for spec in self._tools.values()]

    def list_resources(self) -> list[Resource]:
        """All readable documents."""
        return [
            Resource(
                uri=r.uri,
                name=r.name,
                description=r.description,
                mimeType=r.mime_type,
            )
            for r in RESOURCES
        ]

    def read_resource_text(self, uri: str) -> str:
        """Render a resource document as indented JSON."""
        return json.dumps(read_resource(self.catalog, uri), indent=2, ensure_ascii=False)

    async def handle_tool_call(self, tool_name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """
        Validate arguments, run the tool and wrap the result as text.

        Raises:
            ToolError: Unknown tool or invalid arguments
            LubaUIError: Domain errors raised by the tool
        """
        logger.info("Tool call: %s with arguments: %s", tool_name, arguments)

        spec = self._tools.get(tool_name)
        if spec is None:
            raise ToolError(
                f"Tool '{tool_name}' not found",
                details={"available": list(self._tools)},
            )

        try:
            args = spec.arguments.model_validate(arguments or {})
        except ValidationError as e:
            raise ToolError(
                f"Invalid arguments for '{tool_name}': {e.error_count()} error(s)",
                details={"errors": e.errors(include_url=False)},
                code=ErrorCode.VALIDATION_ERROR,
            ) from e

        result = spec.run(args)
        return [TextContent(type="text", text=json.dumps(result, indent=2, ensure_ascii=False))]

    async def run(self) -> None:
        """Run the MCP server using stdio transport."""
        logger.info("Starting LubaUI MCP server")

        async with stdio_server() as (read, write):
            await self.server.run(read, write, self.server.create_initialization_options())


def serve_mcp(server_name: str | None = None) -> None:
    """
    Start the MCP server on stdio.

    Logging goes to stderr; stdout is reserved for the protocol.
    """
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        server = LubaUIMCPServer(server_name=server_name)
    except LubaUIError as e:
        logger.error("Failed to start MCP server: %s", e)
        sys.exit(1)

    asyncio.run(server.run())
