"""GraphInterestClient tests with httpx.MockTransport (no network)."""

import asyncio
import json

import httpx
import pytest

from conftest import DOTA_RECORD, make_settings
from interest_proxy.adapters.graph_client import SEARCH_FIELDS, GraphInterestClient
from interest_proxy.domain.errors import BadUpstreamQuery, UpstreamUnavailable
from interest_proxy.domain.interest import InterestRecord
from interest_proxy.services.interest_service import format_interest


def _client(handler, **settings_overrides) -> GraphInterestClient:
    return GraphInterestClient(make_settings(**settings_overrides), transport=httpx.MockTransport(handler))


class TestRequestShape:

    def test_url_and_params(self):
        seen: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = request.url
            return httpx.Response(200, json={"data": []})

        client = _client(handler)
        asyncio.run(client.search("dota", 7))

        url = seen["url"]
        assert url.path == "/v24.0/act_1234567890/targetingsearch"
        assert url.params["type"] == "adinterest"
        assert url.params["q"] == "dota"
        assert url.params["limit"] == "7"
        assert url.params["fields"] == SEARCH_FIELDS
        assert url.params["access_token"] == "test-token"

    def test_configured_requires_both_credentials(self):
        assert GraphInterestClient(make_settings()).configured
        assert not GraphInterestClient(make_settings(fb_access_token=None)).configured
        assert not GraphInterestClient(make_settings(fb_ad_account_id=None)).configured


class TestResponses:

    def test_returns_records_in_order(self):
        other = {"id": 2, "name": "Dota", "path": "Interests > Games"}

        def handler(request):
            return httpx.Response(200, json={"data": [DOTA_RECORD, other, "junk"]})

        records = asyncio.run(_client(handler).search("dota", 10))
        assert [r.id for r in records] == ["1", "2"]
        assert records[0].audience_size_upper_bound == 2_000_000

    def test_non_numeric_bound_becomes_no_data(self):
        broken = {
            "id": "7",
            "name": "Chess",
            "path": ["Interests", "Games", "Chess"],
            "audience_size_lower_bound": "n/a",
            "audience_size_upper_bound": 5,
        }

        def handler(request):
            return httpx.Response(200, json={"data": [broken, DOTA_RECORD]})

        records = asyncio.run(_client(handler).search("chess", 10))
        assert [r.id for r in records] == ["7", "1"]
        assert records[0].audience_size_lower_bound is None
        assert format_interest(records[0]).size == "—"
        assert format_interest(records[1]).size == "1M–2M"

    def test_numeric_string_bound_is_parsed(self):
        record = InterestRecord.model_validate(
            {"id": "1", "audience_size_lower_bound": "1200", "audience_size_upper_bound": {"x": 1}}
        )
        assert record.audience_size_lower_bound == 1200
        assert record.audience_size_upper_bound is None

    def test_missing_data_is_empty(self):
        records = asyncio.run(_client(lambda r: httpx.Response(200, json={})).search("x", 10))
        assert records == []

    def test_error_payload_raises_bad_upstream_query(self):
        payload = {"error": {"message": "Invalid parameter", "code": 100}}

        def handler(request):
            return httpx.Response(400, json=payload)

        with pytest.raises(BadUpstreamQuery) as exc_info:
            asyncio.run(_client(handler).search("x", 10))
        assert exc_info.value.status_code == 400
        assert exc_info.value.payload == payload
        assert exc_info.value.to_body() == {"error": "Bad Request", "details": payload}

    def test_invalid_json_raises_unavailable(self):
        def handler(request):
            return httpx.Response(502, content=b"<html>bad gateway</html>")

        with pytest.raises(UpstreamUnavailable) as exc_info:
            asyncio.run(_client(handler).search("x", 10))
        assert exc_info.value.status_code == 500
        assert "invalid JSON" in exc_info.value.details

    def test_non_object_body_raises_unavailable(self):
        with pytest.raises(UpstreamUnavailable):
            asyncio.run(_client(lambda r: httpx.Response(200, content=json.dumps([1, 2]))).search("x", 10))

    def test_transport_error_raises_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(UpstreamUnavailable) as exc_info:
            asyncio.run(_client(handler).search("x", 10))
        assert "connection refused" in exc_info.value.details

    def test_timeout_raises_unavailable(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(UpstreamUnavailable) as exc_info:
            asyncio.run(_client(handler).search("x", 10))
        assert "timed out" in exc_info.value.details
