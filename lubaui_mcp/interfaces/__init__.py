"""
Interfaces - User-facing applications.

- mcp: Model Context Protocol server (stdio)
- api: FastAPI REST API
- cli: Command-line interface
"""

__all__ = ["api", "cli", "mcp"]
