"""
MCP Interface - Model Context Protocol server over stdio.
"""

from .server import LubaUIMCPServer, serve_mcp

__all__ = ["LubaUIMCPServer", "serve_mcp"]
