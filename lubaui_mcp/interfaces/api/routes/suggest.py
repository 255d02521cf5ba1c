"""
Suggest Routes - Pattern-based token and component suggestions.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from lubaui_mcp.domains.suggest import TokenSuggester
from lubaui_mcp.interfaces.api.deps import get_suggester

router = APIRouter()


class SuggestBody(BaseModel):
    """Suggest request body."""

    description: str = Field(
        ...,
        max_length=2000,
        description="What you're building, e.g. 'notification banner' or 'settings page'",
    )


@router.post("")
async def suggest_tokens(
    body: SuggestBody,
    suggester: TokenSuggester = Depends(get_suggester),
) -> dict[str, Any]:
    """Suggest tokens, components and primitives for a UI description."""
    return suggester.suggest(body.description)
