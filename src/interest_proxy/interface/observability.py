"""Observability: one structured log line per search and per-surface counters.

Counters, keyed by surface ("http", "mcp"):
    searches   every completed or failed search
    fallbacks  searches answered with suggestions instead of items
    errors     failed searches
and ``error_kinds``, keyed by the error summary (e.g. "Bad Request").
"""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("interest_proxy.interface")

METRICS: dict[str, dict[str, int]] = {"searches": {}, "fallbacks": {}, "errors": {}, "error_kinds": {}}


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Install a root handler once; later calls only adjust the level."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    logging.getLogger().setLevel(level.upper())


def _bump(counter: str, key: str) -> None:
    METRICS[counter][key] = METRICS[counter].get(key, 0) + 1


def record_search(
    surface: str,
    trace_id: str | None,
    latency_ms: float,
    *,
    count: int | None = None,
    fallback: bool = False,
    error: str | None = None,
) -> None:
    """Log the outcome of one search and update the counters."""
    payload: dict[str, Any] = {
        "surface": surface,
        "trace_id": trace_id,
        "latency_ms": round(latency_ms, 2),
    }
    _bump("searches", surface)
    if error:
        payload["error"] = error
        _bump("errors", surface)
        _bump("error_kinds", error)
        _LOGGER.warning("search_failed", extra=payload)
        return
    payload["count"] = count
    payload["fallback"] = fallback
    if fallback:
        _bump("fallbacks", surface)
    _LOGGER.info("search_served", extra=payload)


def metrics_snapshot() -> dict[str, dict[str, int]]:
    """Return a copy of the current counters."""
    return {k: dict(v) for k, v in METRICS.items()}
