"""Tool registry for the MCP server.

Request shaping (limit clamping) happens in the service; tool output is the
envelope JSON, or the error body for proxy failures.
"""

from __future__ import annotations

import json
import time

from ...domain.errors import ProxyError
from ...domain.suggestions import get_suggestions
from ...models.responses import SuggestionFallback
from ..observability import metrics_snapshot, record_search

ALLOWED_TOOLS = frozenset({
    "interests_search",
    "interests_suggest",
    "interests_metrics",
})

_SURFACE = "mcp"


def _get_interest_service():
    from ...wiring import build_interest_service
    return build_interest_service()


def register_tools(mcp, service_factory=None):
    """Register the interest tools on a FastMCP server.

    Args:
        mcp: The FastMCP instance.
        service_factory: Zero-argument callable returning an
            InterestProxyService; defaults to the real wiring.
    """
    factory = service_factory or _get_interest_service

    @mcp.tool()
    async def interests_search(query: str, limit: int = 10) -> str:
        """Search ad-interest categories (behaviors and demographics excluded).

        Args:
            query: Free-text interest query (e.g. 'dota')
            limit: Maximum upstream results (1-100, default 10)

        Returns:
            JSON with query, count and items (id, name, path, size), or
            count 0 with up to 4 keyword suggestions when nothing matched
        """
        t0 = time.monotonic()
        try:
            envelope = await factory().search(query, limit)
        except ProxyError as e:
            record_search(_SURFACE, None, (time.monotonic() - t0) * 1000, error=e.error)
            return json.dumps(e.to_body())
        record_search(
            _SURFACE,
            None,
            (time.monotonic() - t0) * 1000,
            count=envelope.count,
            fallback=isinstance(envelope, SuggestionFallback),
        )
        return json.dumps(envelope.model_dump(mode="json"), indent=2, ensure_ascii=False)

    @mcp.tool()
    def interests_suggest(query: str, paths: list[str] | None = None) -> str:
        """Suggest alternative interest keywords without calling upstream.

        Args:
            query: Free-text query
            paths: Optional taxonomy paths (e.g. 'Interests > Games > MOBA') used as family hints

        Returns:
            JSON with query and 1-4 suggestions
        """
        suggestions = get_suggestions(query, paths or [])
        return json.dumps({"query": query, "suggestions": list(suggestions)}, ensure_ascii=False)

    @mcp.tool()
    def interests_metrics() -> str:
        """Per-surface search, fallback and error counters since process start."""
        return json.dumps(metrics_snapshot())
