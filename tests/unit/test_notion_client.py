"""
Tests for the Notion content client over a mocked transport.
"""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from src.adapters.notion import NotionContentClient
from src.domain.errors import SourceUnavailable


def page(page_id: str) -> dict:
    return {"object": "page", "id": page_id, "properties": {}}


def make_client(handler) -> NotionContentClient:
    return NotionContentClient(
        token="secret_abc",
        api_version="2022-06-28",
        page_size=2,
        transport=httpx.MockTransport(handler),
    )


class TestFetchAll:
    def test_follows_cursor_until_exhausted(self) -> None:
        requests: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            body = json.loads(request.content)
            requests.append(body)
            if "start_cursor" not in body:
                return httpx.Response(
                    200,
                    json={"results": [page("a"), page("b")], "has_more": True, "next_cursor": "c2"},
                )
            return httpx.Response(
                200, json={"results": [page("c")], "has_more": False, "next_cursor": None}
            )

        records = asyncio.run(make_client(handler).fetch_all("db1"))

        assert [r["id"] for r in records] == ["a", "b", "c"]
        assert len(requests) == 2
        assert requests[0] == {"page_size": 2}
        assert requests[1] == {"page_size": 2, "start_cursor": "c2"}

    def test_sends_headers_sorts_and_filter(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"results": [], "has_more": False})

        sorts = [{"property": "Order", "direction": "ascending"}]
        flt = {"property": "Enabled", "checkbox": {"equals": True}}
        asyncio.run(make_client(handler).fetch_all("db1", sorts=sorts, filter=flt))

        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/v1/databases/db1/query"
        assert request.headers["Authorization"] == "Bearer secret_abc"
        assert request.headers["Notion-Version"] == "2022-06-28"
        body = json.loads(request.content)
        assert body["sorts"] == sorts
        assert body["filter"] == flt

    def test_skips_results_without_properties(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={"results": [page("a"), {"object": "page", "id": "b"}], "has_more": False},
            )

        records = asyncio.run(make_client(handler).fetch_all("db1"))

        assert [r["id"] for r in records] == ["a"]

    def test_has_more_without_cursor_stops(self) -> None:
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(200, json={"results": [page("a")], "has_more": True})

        asyncio.run(make_client(handler).fetch_all("db1"))

        assert len(calls) == 1

    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(401, json={"message": "unauthorized"}),
            httpx.Response(500, text="boom"),
            httpx.Response(200, text="not json"),
            httpx.Response(200, json=["a", "list"]),
            httpx.Response(200, json={"results": "nope"}),
        ],
    )
    def test_bad_responses_raise(self, response: httpx.Response) -> None:
        client = make_client(lambda request: response)

        with pytest.raises(SourceUnavailable):
            asyncio.run(client.fetch_all("db1"))

    def test_transport_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(SourceUnavailable):
            asyncio.run(make_client(handler).fetch_all("db1"))

    def test_failure_on_later_page_aborts(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if "start_cursor" in json.loads(request.content):
                return httpx.Response(502)
            return httpx.Response(
                200, json={"results": [page("a")], "has_more": True, "next_cursor": "c2"}
            )

        with pytest.raises(SourceUnavailable):
            asyncio.run(make_client(handler).fetch_all("db1"))


class TestDatabaseAndPages:
    def test_retrieve_database(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert request.url.path == "/v1/databases/cfg"
            return httpx.Response(200, json={"object": "database", "icon": {"type": "emoji"}})

        database = asyncio.run(make_client(handler).retrieve_database("cfg"))

        assert database["icon"] == {"type": "emoji"}

    def test_create_page(self) -> None:
        bodies: list[dict] = []

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v1/pages"
            bodies.append(json.loads(request.content))
            return httpx.Response(200, json={"object": "page", "id": "new"})

        props = {"URL": {"url": "https://x.io"}}
        created = asyncio.run(make_client(handler).create_page("links", props))

        assert created["id"] == "new"
        assert bodies == [{"parent": {"database_id": "links"}, "properties": props}]

    def test_create_page_rejected(self) -> None:
        client = make_client(lambda request: httpx.Response(400, json={"message": "bad"}))

        with pytest.raises(SourceUnavailable):
            asyncio.run(client.create_page("links", {}))
