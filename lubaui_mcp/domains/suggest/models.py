"""
Suggest Models - UI pattern guidance.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class PatternSuggestion(BaseModel):
    """Token, component and primitive guidance for one UI pattern."""

    spacing: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    radius: list[str] = Field(default_factory=list)
    typography: list[str] = Field(default_factory=list)
    components: list[str] = Field(default_factory=list)
    primitives: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}
