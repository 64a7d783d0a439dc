"""InterestProxyService: orchestration of one interest search.

``handle(query, limit, authorization)`` is the full contract used by the HTTP
route: credential check, parameter check, configuration check, upstream
search, classification, then formatted items or suggestions. ``search``
skips the credential check for trusted local surfaces.
"""

from __future__ import annotations

import logging
import secrets
from typing import Any

from ..config.runtime import RuntimeSettings, get_settings
from ..domain.audience import format_audience
from ..domain.classifier import InterestClassifier
from ..domain.errors import MisconfiguredServer, MissingParameter, Unauthorized
from ..domain.interest import InterestRecord
from ..domain.paths import as_path_string
from ..domain.suggestions import get_suggestions
from ..models.requests import InterestSearchRequest, normalize_limit
from ..models.responses import FormattedInterest, InterestResults, ResponseEnvelope, SuggestionFallback
from ..ports.id_gen import RequestIdProvider, UuidRequestIdProvider
from ..ports.interest_search import InterestSearchPort

_LOGGER = logging.getLogger("interest_proxy.service")


def format_interest(record: InterestRecord) -> FormattedInterest:
    return FormattedInterest(
        id=record.id,
        name=record.name,
        path=as_path_string(record.path),
        size=format_audience(record.audience_size_lower_bound, record.audience_size_upper_bound),
    )


class InterestProxyService:
    """Orchestrates the query-to-result pipeline."""

    def __init__(
        self,
        search_port: InterestSearchPort,
        settings: RuntimeSettings | None = None,
        classifier: InterestClassifier | None = None,
        request_id_provider: RequestIdProvider | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._search = search_port
        self._settings = settings or get_settings()
        self._classifier = classifier or InterestClassifier()
        self._req_id = request_id_provider or UuidRequestIdProvider()
        self._logger = logger or _LOGGER

    def authorize(self, authorization: str | None) -> None:
        """Raise Unauthorized unless the header matches the configured secret."""
        secret = self._settings.action_secret
        if not secret:
            return
        expected = f"Bearer {secret}"
        if authorization is None or not secrets.compare_digest(authorization.encode(), expected.encode()):
            raise Unauthorized()

    async def handle(
        self,
        query: str | None,
        limit: Any = None,
        authorization: str | None = None,
        trace_id: str | None = None,
    ) -> ResponseEnvelope:
        self.authorize(authorization)
        return await self.search(query, limit, trace_id=trace_id)

    async def search(
        self,
        query: str | None,
        limit: Any = None,
        trace_id: str | None = None,
    ) -> ResponseEnvelope:
        if query is None or not query.strip():
            raise MissingParameter()
        if not self._search.configured:
            raise MisconfiguredServer()

        request = InterestSearchRequest(
            query=query,
            limit=normalize_limit(limit, self._settings.default_limit, self._settings.max_limit),
        )
        trace_id = trace_id or self._req_id.new_request_id()
        self._logger.info(
            "search_start",
            extra={"trace_id": trace_id, "query": request.query, "limit": request.limit},
        )

        records = await self._search.search(request.query, request.limit)

        if self._logger.isEnabledFor(logging.DEBUG):
            for record in records:
                self._logger.debug(
                    "classified",
                    extra={"trace_id": trace_id, "record_id": record.id, "reason": self._classifier.reason(record)},
                )
        interests = self._classifier.apply(records)

        envelope: ResponseEnvelope
        if not interests:
            envelope = SuggestionFallback(
                query=query,
                suggestions=get_suggestions(query, [r.path for r in records]),
            )
        else:
            envelope = InterestResults(query=query, items=tuple(format_interest(r) for r in interests))

        self._logger.info(
            "search_done",
            extra={
                "trace_id": trace_id,
                "upstream_count": len(records),
                "count": envelope.count,
                "fallback": isinstance(envelope, SuggestionFallback),
            },
        )
        return envelope
