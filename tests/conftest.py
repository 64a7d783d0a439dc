"""Shared fakes and fixtures.

No network or Graph API credentials required: the upstream port is faked.
"""

from __future__ import annotations

from interest_proxy.config.runtime import RuntimeSettings
from interest_proxy.domain.interest import InterestRecord
from interest_proxy.services.interest_service import InterestProxyService


class FakeInterestSearch:
    """Returns canned records; records calls for assertions."""

    def __init__(self, records=None, *, configured: bool = True, error: Exception | None = None):
        self.records = [
            r if isinstance(r, InterestRecord) else InterestRecord.model_validate(r)
            for r in (records or [])
        ]
        self._configured = configured
        self.error = error
        self.calls: list[dict] = []

    @property
    def configured(self) -> bool:
        return self._configured

    async def search(self, query: str, limit: int) -> list[InterestRecord]:
        self.calls.append({"query": query, "limit": limit})
        if self.error is not None:
            raise self.error
        return list(self.records)


class FixedRequestIdProvider:
    def new_request_id(self) -> str:
        return "trace-1"


def make_settings(**overrides) -> RuntimeSettings:
    values = {
        "fb_ad_account_id": "1234567890",
        "fb_access_token": "test-token",
        "action_secret": None,
        "_env_file": None,
    }
    values.update(overrides)
    return RuntimeSettings(**values)


def build_service(records=None, *, settings: RuntimeSettings | None = None, **fake_kwargs):
    fake = FakeInterestSearch(records, **fake_kwargs)
    svc = InterestProxyService(
        search_port=fake,
        settings=settings or make_settings(),
        request_id_provider=FixedRequestIdProvider(),
    )
    return svc, fake


DOTA_RECORD = {
    "id": "1",
    "name": "Dota 2",
    "path": ["Interests", "Games", "MOBA"],
    "audience_size_lower_bound": 1_000_000,
    "audience_size_upper_bound": 2_000_000,
}

BEHAVIOR_RECORD = {
    "id": "b1",
    "name": "Frequent travelers",
    "path": ["Behaviors", "Travel", "Frequent travelers"],
    "audience_size_lower_bound": 5_000_000,
    "audience_size_upper_bound": 6_000_000,
}

DEMOGRAPHIC_RECORD = {
    "id": "d1",
    "name": "Football fans parents",
    "path": ["Demographics", "Parents", "All parents"],
}
