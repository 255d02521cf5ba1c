"""
API Interface - FastAPI REST API.

Serves the same lookup, validation and suggestion operations as the MCP
server over HTTP, for tooling that does not speak MCP.
"""

from .main import create_app

__all__ = ["create_app"]
