"""Audience size formatting (e.g. ``1M–2M``)."""

from __future__ import annotations

import math
from typing import Any

NO_DATA = "—"
RANGE_SEPARATOR = "–"

_BILLION = 1_000_000_000
_MILLION = 1_000_000
_THOUSAND = 1_000


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _usable(n: Any) -> bool:
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        return False
    if isinstance(n, float) and math.isnan(n):
        return False
    return n > 0


def format_bound(n: int | float) -> str:
    """Format a single audience bound with a B/M/K magnitude suffix."""
    if n >= _BILLION:
        scaled = f"{_round_half_up(n * 10 / _BILLION) / 10:.1f}"
        if scaled.endswith(".0"):
            scaled = scaled[:-2]
        return f"{scaled}B"
    if n >= _MILLION:
        return f"{_round_half_up(n / _MILLION)}M"
    if n >= _THOUSAND:
        return f"{_round_half_up(n / _THOUSAND)}K"
    if isinstance(n, float) and n.is_integer():
        return str(int(n))
    return str(n)


def format_audience(lower: Any, upper: Any) -> str:
    """Render a lower/upper bound pair, or ``"—"`` when either is unusable."""
    if not (_usable(lower) and _usable(upper)):
        return NO_DATA
    return f"{format_bound(lower)}{RANGE_SEPARATOR}{format_bound(upper)}"
