"""
Configuration - Application settings and error taxonomy.
"""

from .errors import (
    CatalogError,
    CategoryError,
    ErrorCode,
    LubaUIError,
    ToolError,
)
from .settings import Settings, get_settings

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "ErrorCode",
    "LubaUIError",
    "CatalogError",
    "CategoryError",
    "ToolError",
]
