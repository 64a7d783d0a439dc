"""Error taxonomy for the interest proxy.

Every failure carries the HTTP status it maps to and an ``error`` summary;
``details`` is attached where diagnostics are available.
"""

from __future__ import annotations

from typing import Any


class ProxyError(Exception):
    """Base exception for proxy failures."""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, details: Any = None) -> None:
        self.details = details
        super().__init__(self.error if details is None else f"{self.error}: {details}")

    def to_body(self) -> dict[str, Any]:
        """JSON body for this error: ``{error}`` plus ``details`` when present."""
        body: dict[str, Any] = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class Unauthorized(ProxyError):
    """Caller credential does not match the configured shared secret."""

    status_code = 401
    error = "Unauthorized"


class MissingParameter(ProxyError):
    """The query parameter is absent or blank."""

    status_code = 400
    error = "Missing parameter 'q'"


class MisconfiguredServer(ProxyError):
    """Upstream credentials are not configured in this process."""

    status_code = 500
    error = "Server missing environment variables"


class BadUpstreamQuery(ProxyError):
    """Upstream rejected the search; ``details`` is its raw error payload."""

    status_code = 400
    error = "Bad Request"

    def __init__(self, payload: Any) -> None:
        super().__init__(payload)

    @property
    def payload(self) -> Any:
        return self.details


class UpstreamUnavailable(ProxyError):
    """Network, timeout or parse failure talking to upstream."""

    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
