"""
Catalog Models - Data types for the bundled LubaUI catalog.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from lubaui_mcp.domains.search import SearchableItem

PRIMITIVE_EXTRAS = ("presets", "variants", "builtInStyles", "hapticStyles")


class Parameter(BaseModel):
    """One initializer or modifier argument."""

    name: str
    type: str
    required: bool | None = None
    default: str | None = None
    options: list[str] | None = None
    description: str = ""

    model_config = {"frozen": True}


class ComponentEntry(BaseModel):
    """A LubaUI component (``LubaButton``, ``LubaCard``...)."""

    name: str
    description: str
    parameters: list[Parameter] = Field(default_factory=list)
    example: str = ""
    tokens: list[str] = Field(default_factory=list)
    notes: str | None = None

    model_config = {"frozen": True}

    def to_payload(self) -> dict[str, Any]:
        """Reference payload returned by lookups and suggestions."""
        payload: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "parameters": [p.model_dump(exclude_none=True) for p in self.parameters],
            "example": self.example,
            "tokens": self.tokens,
        }
        if self.notes is not None:
            payload["notes"] = self.notes
        return payload


class PrimitiveEntry(BaseModel):
    """
    A composable interaction primitive (``.lubaPressable()``...).

    Presets, variants and style lists differ per primitive, so they are
    optional and any further keys are kept as extra fields.
    """

    name: str
    modifier: str
    description: str
    parameters: list[Parameter] = Field(default_factory=list)
    example: str = ""
    tokens: list[str] = Field(default_factory=list)
    composability: str | None = None
    presets: dict[str, Any] | None = None
    variants: list[str] | None = None
    built_in_styles: list[str] | None = Field(default=None, alias="builtInStyles")
    haptic_styles: list[str] | None = Field(default=None, alias="hapticStyles")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    def to_payload(self, extras: Sequence[str] = PRIMITIVE_EXTRAS) -> dict[str, Any]:
        """
        Reference payload returned by lookups and suggestions.

        Args:
            extras: Optional keys (by JSON name) to include when present
        """
        payload: dict[str, Any] = {
            "name": self.name,
            "modifier": self.modifier,
            "description": self.description,
            "parameters": [p.model_dump(exclude_none=True) for p in self.parameters],
            "example": self.example,
            "tokens": self.tokens,
            "composability": self.composability,
        }
        optional = {
            "presets": self.presets,
            "variants": self.variants,
            "builtInStyles": self.built_in_styles,
            "hapticStyles": self.haptic_styles,
        }
        for key in extras:
            if optional.get(key) is not None:
                payload[key] = optional[key]
        return payload


class FlatToken(SearchableItem):
    """
    A single design token flattened out of ``tokens.json``.

    ``category`` is one of spacing, radius, color, typography, motion, glass.
    ``aliases`` always holds the token's Swift API path.
    """

    api: str
    value: Any = None
    tier: int | None = None
    subcategory: str | None = None
    light: str | None = None
    dark: str | None = None
    primitive: str | None = None
    alias_of: str | None = Field(default=None, alias="aliasOf")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class Catalog(BaseModel):
    """Everything the lookup tools read, loaded once per process."""

    tokens: dict[str, Any]
    components: list[ComponentEntry]
    primitives: list[PrimitiveEntry]
    flat_tokens: list[FlatToken]

    model_config = {"frozen": True}
