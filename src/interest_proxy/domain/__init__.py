"""Domain layer for the interest proxy."""

from .audience import NO_DATA, format_audience
from .classifier import InterestClassifier, interest_only
from .errors import (
    BadUpstreamQuery,
    MisconfiguredServer,
    MissingParameter,
    ProxyError,
    Unauthorized,
    UpstreamUnavailable,
)
from .interest import InterestRecord
from .paths import as_path_string
from .suggestions import DEFAULT_SUGGESTIONS, get_suggestions

__all__ = [
    "BadUpstreamQuery",
    "DEFAULT_SUGGESTIONS",
    "InterestClassifier",
    "InterestRecord",
    "MisconfiguredServer",
    "MissingParameter",
    "NO_DATA",
    "ProxyError",
    "Unauthorized",
    "UpstreamUnavailable",
    "as_path_string",
    "format_audience",
    "get_suggestions",
    "interest_only",
]
