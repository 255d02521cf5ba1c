"""
CLI Interface - Command-line tools for LubaUI.

Provides commands for:
- Token, component, primitive and color lookups
- Spacing and radius validation
- Pattern suggestions
- Running the MCP and REST servers
"""

from .main import app, main

__all__ = ["app", "main"]
