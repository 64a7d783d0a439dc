"""FastAPI application factory for the HTTP surface.

Routes:
    GET /fb/interests   interest search (envelope JSON or error body)
    GET /health         liveness
    GET /               static status page

All proxy errors are mapped to their status and ``{error, details?}`` body
here; nothing else in the app builds error responses.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import FastAPI, Header, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from ...config.runtime import RuntimeSettings, get_settings
from ...domain.errors import ProxyError, UpstreamUnavailable
from ...models.responses import HealthResponse, SuggestionFallback
from ...ports.id_gen import UuidRequestIdProvider
from ...services.interest_service import InterestProxyService
from ..observability import get_logger, record_search
from .status_page import STATUS_PAGE_HTML

_SURFACE = "http"


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_app(
    service: InterestProxyService | None = None,
    settings: RuntimeSettings | None = None,
) -> FastAPI:
    """Build the FastAPI app; defaults wire the real Graph API adapter."""
    settings = settings or get_settings()
    if service is None:
        from ...wiring import build_interest_service

        service = build_interest_service(settings)

    logger = get_logger()
    request_ids = UuidRequestIdProvider()

    app = FastAPI(title="FB Interest Proxy")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(timestamp=utc_timestamp())

    @app.get("/fb/interests")
    async def fb_interests(
        q: str | None = Query(default=None),
        limit: str | None = Query(default=None),
        authorization: str | None = Header(default=None),
    ):
        t0 = time.monotonic()
        trace_id = request_ids.new_request_id()
        try:
            envelope = await service.handle(q, limit, authorization, trace_id=trace_id)
        except ProxyError as e:
            if isinstance(e, UpstreamUnavailable):
                logger.error("upstream_error", extra={"trace_id": trace_id, "details": e.details})
            record_search(_SURFACE, trace_id, (time.monotonic() - t0) * 1000, error=e.error)
            return JSONResponse(status_code=e.status_code, content=e.to_body())
        except Exception as e:
            logger.exception("unhandled_error", extra={"trace_id": trace_id})
            record_search(_SURFACE, trace_id, (time.monotonic() - t0) * 1000, error="Internal Server Error")
            return JSONResponse(
                status_code=500,
                content={"error": "Internal Server Error", "details": str(e)},
            )
        record_search(
            _SURFACE,
            trace_id,
            (time.monotonic() - t0) * 1000,
            count=envelope.count,
            fallback=isinstance(envelope, SuggestionFallback),
        )
        return envelope.model_dump(mode="json")

    @app.get("/", response_class=HTMLResponse)
    async def status_page() -> str:
        return STATUS_PAGE_HTML

    return app
