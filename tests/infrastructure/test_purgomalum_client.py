"""Tests for the PurgoMalum HTTP client, using httpx's mock transport."""

import httpx
import pytest

from kitchenpos.infrastructure.profanity.purgomalum_client import PurgomalumClient


def _client(handler) -> PurgomalumClient:
    http = httpx.Client(
        base_url="https://purgomalum.test",
        transport=httpx.MockTransport(handler),
    )
    return PurgomalumClient(client=http)


class TestPurgomalumClient:

    def test_sends_text_as_query_parameter(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="false")

        assert _client(handler).contains_profanity("fried chicken") is False
        assert seen[0].url.path == "/service/containsprofanity"
        assert seen[0].url.params["text"] == "fried chicken"

    def test_true_means_profanity(self):
        client = _client(lambda request: httpx.Response(200, text="true\n"))
        assert client.contains_profanity("bad word") is True

    def test_server_error_raises(self):
        client = _client(lambda request: httpx.Response(503, text="down"))
        with pytest.raises(httpx.HTTPStatusError):
            client.contains_profanity("fried chicken")

    def test_unexpected_body_raises(self):
        client = _client(lambda request: httpx.Response(200, text="maybe"))
        with pytest.raises(httpx.DecodingError, match="Unexpected"):
            client.contains_profanity("fried chicken")

    def test_context_manager_closes_http_client(self):
        http = httpx.Client(
            base_url="https://purgomalum.test",
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="false")),
        )
        with PurgomalumClient(client=http) as client:
            assert client.contains_profanity("fried chicken") is False
            assert not http.is_closed
        assert http.is_closed
