"""Response DTOs for the interest search.

The envelope is one of two shapes: ``InterestResults`` (items, count > 0)
or ``SuggestionFallback`` (no items, count 0, suggestions). ``count`` and the
fallback's empty ``items`` are derived, so neither shape can be built with
both or neither of items and suggestions populated.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from ..domain.suggestions import MAX_SUGGESTIONS


class FormattedInterest(BaseModel):
    """A single interest category ready for display."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Upstream targeting id")
    name: str = Field(..., description="Display name")
    path: str = Field(..., description="Breadcrumb joined with ' > '")
    size: str = Field(..., min_length=1, description="Audience range (e.g. '1M–2M') or '—'")


class InterestResults(BaseModel):
    """Envelope when at least one interest survived classification."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., description="The caller's query")
    items: tuple[FormattedInterest, ...] = Field(..., min_length=1, description="Interest categories")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.items)


class SuggestionFallback(BaseModel):
    """Envelope when no interest survived; carries alternative keywords."""

    model_config = ConfigDict(frozen=True)

    query: str = Field(..., description="The caller's query")
    suggestions: tuple[str, ...] = Field(
        ...,
        min_length=1,
        max_length=MAX_SUGGESTIONS,
        description="Alternative keywords, best first",
    )

    @field_validator("suggestions")
    @classmethod
    def _distinct(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(v)) != len(v):
            raise ValueError("suggestions must be distinct")
        return v

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> Literal[0]:
        return 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def items(self) -> tuple[FormattedInterest, ...]:
        return ()


ResponseEnvelope = Union[InterestResults, SuggestionFallback]


class HealthResponse(BaseModel):
    """Liveness payload for ``GET /health``."""

    status: str = Field(default="online")
    timestamp: str = Field(..., description="ISO-8601 UTC timestamp")
