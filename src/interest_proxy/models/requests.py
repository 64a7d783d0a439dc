"""Request DTO for the interest search."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


def normalize_limit(raw: Any, default: int = 10, maximum: int = 100) -> int:
    """Coerce the caller's limit.

    Absent, non-numeric and non-positive values become ``default``; values
    above ``maximum`` are clamped to it.
    """
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return default
    if value < 1:
        return default
    return min(value, maximum)


class InterestSearchRequest(BaseModel):
    """Validated input for one upstream interest search."""

    query: str = Field(..., min_length=1, description="Free-text interest query")
    limit: int = Field(default=10, ge=1, description="Maximum number of upstream results")

    @field_validator("query")
    @classmethod
    def _strip(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("query cannot be blank")
        return v
