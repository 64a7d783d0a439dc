"""Request/response models."""

from .requests import InterestSearchRequest, normalize_limit
from .responses import (
    FormattedInterest,
    HealthResponse,
    InterestResults,
    ResponseEnvelope,
    SuggestionFallback,
)

__all__ = [
    "FormattedInterest",
    "HealthResponse",
    "InterestResults",
    "InterestSearchRequest",
    "ResponseEnvelope",
    "SuggestionFallback",
    "normalize_limit",
]
