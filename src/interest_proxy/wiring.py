"""Composition root: single place where all wiring happens.

Call ``build_interest_service()`` to get a fully-constructed service with
the real Graph API adapter. No ad-hoc construction elsewhere.
"""

from __future__ import annotations

from .adapters.graph_client import GraphInterestClient
from .config.runtime import RuntimeSettings, get_settings
from .services.interest_service import InterestProxyService


def build_interest_service(settings: RuntimeSettings | None = None) -> InterestProxyService:
    """Construct an InterestProxyService with the real upstream adapter."""
    settings = settings or get_settings()
    return InterestProxyService(
        search_port=GraphInterestClient(settings),
        settings=settings,
    )
