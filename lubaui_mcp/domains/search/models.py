"""
Search Models - Data types for search domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class SearchableItem(BaseModel):
    """
    Candidate for fuzzy search.

    Only ``name``, ``aliases`` and ``description`` take part in scoring and
    ``category`` in filtering. Any other field is carried along untouched.
    """

    name: str
    aliases: list[str] | None = None
    category: str | None = None
    description: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class SearchOptions(BaseModel):
    """Search filters."""

    category: str | None = None
    max_results: int = Field(default=10, ge=1)

    model_config = {"frozen": True}


T = TypeVar("T", bound=SearchableItem)


@dataclass(frozen=True)
class ScoredResult(Generic[T]):
    """Item paired with the score it earned for one query."""

    item: T
    score: float
