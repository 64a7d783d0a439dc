"""Application services."""

from .interest_service import InterestProxyService, format_interest

__all__ = ["InterestProxyService", "format_interest"]
