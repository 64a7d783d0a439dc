"""Interest proxy application package."""

from .domain import (
    InterestClassifier,
    InterestRecord,
    as_path_string,
    format_audience,
    get_suggestions,
)
from .models import FormattedInterest, InterestResults, ResponseEnvelope, SuggestionFallback

__version__ = "0.1.0"
__all__ = [
    "FormattedInterest",
    "InterestClassifier",
    "InterestRecord",
    "InterestResults",
    "ResponseEnvelope",
    "SuggestionFallback",
    "as_path_string",
    "format_audience",
    "get_suggestions",
]
