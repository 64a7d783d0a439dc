"""Graph API adapter for the ad-interest targeting search.

One GET per call, no retries. Upstream failures are normalized into
``BadUpstreamQuery`` (upstream rejected the search) or
``UpstreamUnavailable`` (transport, timeout or parse failure).
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..config.runtime import RuntimeSettings, get_settings
from ..domain.errors import BadUpstreamQuery, UpstreamUnavailable
from ..domain.interest import InterestRecord

_LOGGER = logging.getLogger("interest_proxy.upstream")

SEARCH_TYPE = "adinterest"
SEARCH_FIELDS = "id,name,path,audience_size_lower_bound,audience_size_upper_bound"


def build_async_client(
    settings: RuntimeSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with the configured timeout."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout_seconds),
        headers={"Accept": "application/json"},
        transport=transport,
    )


class GraphInterestClient:
    """Adapter implementing InterestSearchPort against the Graph API."""

    def __init__(
        self,
        settings: RuntimeSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport

    @property
    def configured(self) -> bool:
        return self._settings.upstream_configured

    @property
    def search_url(self) -> str:
        base = self._settings.graph_base_url.rstrip("/")
        return f"{base}/act_{self._settings.fb_ad_account_id}/targetingsearch"

    def build_params(self, query: str, limit: int) -> dict[str, Any]:
        return {
            "type": SEARCH_TYPE,
            "q": query,
            "limit": limit,
            "fields": SEARCH_FIELDS,
            "access_token": self._settings.fb_access_token or "",
        }

    async def search(self, query: str, limit: int) -> list[InterestRecord]:
        """Run one targeting search and return its raw records, in upstream order."""
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(self.search_url, params=self.build_params(query, limit))
        except httpx.TimeoutException as e:
            _LOGGER.warning("upstream_timeout", extra={"query": query, "error": str(e)})
            raise UpstreamUnavailable(f"Upstream request timed out: {e}") from e
        except httpx.HTTPError as e:
            _LOGGER.warning("upstream_unreachable", extra={"query": query, "error": str(e)})
            raise UpstreamUnavailable(f"Upstream request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            _LOGGER.warning(
                "upstream_invalid_json",
                extra={"query": query, "status_code": response.status_code},
            )
            raise UpstreamUnavailable(f"Upstream returned invalid JSON (HTTP {response.status_code})") from e

        if not isinstance(payload, dict):
            raise UpstreamUnavailable(f"Upstream returned unexpected body type: {type(payload).__name__}")

        if payload.get("error"):
            _LOGGER.warning(
                "upstream_rejected",
                extra={"query": query, "status_code": response.status_code},
            )
            raise BadUpstreamQuery(payload)

        return self._parse_records(payload.get("data") or [])

    def _parse_records(self, data: Any) -> list[InterestRecord]:
        if not isinstance(data, list):
            raise UpstreamUnavailable(f"Upstream 'data' is not a list: {type(data).__name__}")
        try:
            return [InterestRecord.model_validate(item) for item in data if isinstance(item, dict)]
        except ValidationError as e:
            raise UpstreamUnavailable(f"Upstream returned malformed records: {e.error_count()} error(s)") from e
