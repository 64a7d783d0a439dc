"""Port: request id generation."""

from __future__ import annotations

import uuid
from typing import Protocol, runtime_checkable


@runtime_checkable
class RequestIdProvider(Protocol):
    """Generate a unique request (trace) id."""

    def new_request_id(self) -> str: ...


class UuidRequestIdProvider:
    """Uses uuid4 for request IDs."""

    def new_request_id(self) -> str:
        return str(uuid.uuid4())
