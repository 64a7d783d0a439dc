"""Upstream interest record as returned by the targeting search."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InterestRecord(BaseModel):
    """A single raw targeting-search result (interest, behavior or demographic)."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str = Field(default="", description="Upstream targeting id")
    name: str = Field(default="", description="Display name")
    path: Any = Field(default=None, description="Taxonomy breadcrumb: a string or a list of strings")
    audience_size_lower_bound: int | float | None = Field(default=None, description="Lower audience estimate")
    audience_size_upper_bound: int | float | None = Field(default=None, description="Upper audience estimate")

    @field_validator("audience_size_lower_bound", "audience_size_upper_bound", mode="before")
    @classmethod
    def _numeric_or_none(cls, v: Any) -> int | float | None:
        # Unparseable bounds mean "no data", not a malformed record.
        if isinstance(v, bool):
            return None
        if isinstance(v, (int, float)):
            return v
        if isinstance(v, str):
            try:
                return int(v)
            except ValueError:
                pass
            try:
                return float(v)
            except ValueError:
                return None
        return None
