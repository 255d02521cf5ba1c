"""
Tool Schemas - Argument models for the MCP tools.

Each model doubles as the tool's JSON input schema via
``model_json_schema()``.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

TokenCategory = Literal["spacing", "radius", "color", "typography", "motion", "glass"]


class TokenQuery(BaseModel):
    """Arguments for lookup_token."""

    query: str = Field(
        description="Token name, API path, or description (e.g. 'spacing large', 'lg', 'card padding')"
    )
    category: TokenCategory | None = Field(default=None, description="Filter by token category")

    model_config = ConfigDict(extra="forbid")


class ComponentQuery(BaseModel):
    """Arguments for lookup_component."""

    query: str = Field(description="Component name (e.g. 'Button', 'LubaTextField', 'toast')")

    model_config = ConfigDict(extra="forbid")


class PrimitiveQuery(BaseModel):
    """Arguments for lookup_primitive."""

    query: str = Field(
        description="Primitive name (e.g. 'pressable', 'swipeable', 'glass', 'expandable')"
    )

    model_config = ConfigDict(extra="forbid")


class ColorQuery(BaseModel):
    """Arguments for get_color_palette."""

    query: str = Field(
        description=(
            "Color category (greyscale, surfaces, accent, text, semantic, border, glass) "
            "or search term (e.g. 'error', 'background')"
        )
    )

    model_config = ConfigDict(extra="forbid")


class SpacingValue(BaseModel):
    """Arguments for validate_spacing."""

    value: float = Field(description="Spacing value in points to validate")

    model_config = ConfigDict(extra="forbid")


class RadiusValue(BaseModel):
    """Arguments for validate_radius."""

    value: float = Field(description="Radius value in points to validate")

    model_config = ConfigDict(extra="forbid")


class SuggestRequest(BaseModel):
    """Arguments for suggest_tokens."""

    description: str = Field(
        description=(
            "Description of what you're building "
            "(e.g. 'notification banner', 'settings page', 'profile card')"
        )
    )

    model_config = ConfigDict(extra="forbid")
