"""
Error Taxonomy - Consistent error codes across the lookup server.

Usage:
    from lubaui_mcp.config.errors import ErrorCode, LubaUIError

    raise LubaUIError(ErrorCode.CATALOG_LOAD_FAILED, "tokens.json is missing")
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for machine-readable error responses."""

    # Catalog errors
    CATALOG_LOAD_FAILED = "CATALOG_LOAD_FAILED"
    CATALOG_INVALID = "CATALOG_INVALID"

    # Lookup errors
    LOOKUP_INVALID_CATEGORY = "LOOKUP_INVALID_CATEGORY"

    # Tool dispatch errors
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"

    # Security errors
    SECURITY_RATE_LIMITED = "SECURITY_RATE_LIMITED"

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


class LubaUIError(Exception):
    """Base exception with error code support."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(f"[{code.value}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to API-friendly dictionary."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": self.details,
        }


# Domain-specific exceptions for cleaner imports
class CatalogError(LubaUIError):
    """Catalog loading errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: ErrorCode = ErrorCode.CATALOG_LOAD_FAILED,
    ) -> None:
        super().__init__(code, message, details)


class CategoryError(LubaUIError):
    """Unknown token category passed to a lookup."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(ErrorCode.LOOKUP_INVALID_CATEGORY, message, details)


class ToolError(LubaUIError):
    """MCP tool dispatch errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        code: ErrorCode = ErrorCode.TOOL_NOT_FOUND,
    ) -> None:
        super().__init__(code, message, details)
