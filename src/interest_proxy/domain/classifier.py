"""InterestClassifier: keep interest categories, drop behaviors and demographics.

The targeting search mixes three taxonomy families in one result list; only
interest categories are usable downstream.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .interest import InterestRecord
from .paths import as_path_string

_BEHAVIOR_RE = re.compile(r"^behaviou?r", re.IGNORECASE)
_DEMOGRAPHIC_RE = re.compile(r"^demographic", re.IGNORECASE)

REASON_INTEREST = "interest"
REASON_EMPTY_PATH = "denied: empty_path"
REASON_BEHAVIOR = "denied: behavior"
REASON_DEMOGRAPHIC = "denied: demographic"


class InterestClassifier:
    """Filter raw search results down to interest categories."""

    def apply(self, records: Sequence[InterestRecord]) -> list[InterestRecord]:
        """Return only interest records, in their original order."""
        return [r for r in records if self.reason(r) == REASON_INTEREST]

    def reason(self, record: InterestRecord) -> str:
        """Return audit reason for this record: 'interest' or 'denied: <family>'."""
        path = as_path_string(record.path)
        if not path:
            return REASON_EMPTY_PATH
        if _BEHAVIOR_RE.match(path):
            return REASON_BEHAVIOR
        if _DEMOGRAPHIC_RE.match(path):
            return REASON_DEMOGRAPHIC
        return REASON_INTEREST


def interest_only(records: Sequence[InterestRecord]) -> list[InterestRecord]:
    """Shortcut for ``InterestClassifier().apply(records)``."""
    return InterestClassifier().apply(records)
