"""
LubaUI MCP - Design system lookup for the LubaUI SwiftUI component library.

Example:
    >>> from lubaui_mcp.domains.catalog import get_catalog
    >>> from lubaui_mcp.domains.lookup import LookupService
    >>> LookupService(get_catalog()).lookup_token("lg", category="spacing")
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
