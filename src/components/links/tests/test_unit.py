"""
Links component unit tests.

Tests for link validation, payload building and creation.
"""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from src.components.links import (
    CreateLinkInput,
    LinkService,
    build_link_properties,
    run_create,
    validate_link_data,
)
from src.domain.errors import SourceUnavailable

# --- Mock Sink ---


class MockLinkSink:
    """Records appended pages instead of calling the content store."""

    def __init__(self, fail: bool = False) -> None:
        self.pages: list[tuple[str, dict[str, Any]]] = []
        self._fail = fail

    async def create_page(self, database_id: str, properties: dict[str, Any]) -> dict[str, Any]:
        if self._fail:
            raise SourceUnavailable()
        self.pages.append((database_id, properties))
        return {"id": f"page-{len(self.pages)}"}


@pytest.fixture
def sink() -> MockLinkSink:
    return MockLinkSink()


@pytest.fixture
def service(sink: MockLinkSink) -> LinkService:
    return LinkService(sink=sink, database_id="links-db")


# --- Creation Tests ---


class TestCreateLink:
    """Test link creation."""

    def test_create_link_success(self, service: LinkService, sink: MockLinkSink) -> None:
        """Creates link with valid data."""
        inp = CreateLinkInput(name="Example", url="https://example.com")
        result = asyncio.run(run_create(inp, service))

        assert result.success is True
        assert result.link_id == "page-1"
        assert len(result.errors) == 0
        assert sink.pages[0][0] == "links-db"

    def test_create_link_invalid_url(self, service: LinkService, sink: MockLinkSink) -> None:
        """Rejects a URL that isn't absolute; nothing is appended."""
        inp = CreateLinkInput(name="Bad Link", url="not-a-url")
        result = asyncio.run(run_create(inp, service))

        assert result.success is False
        assert result.link_id is None
        assert result.errors[0].code == "url_invalid"
        assert sink.pages == []

    def test_create_link_missing_name(self, service: LinkService, sink: MockLinkSink) -> None:
        inp = CreateLinkInput(name="  ", url="https://example.com")
        result = asyncio.run(run_create(inp, service))

        assert result.success is False
        assert result.errors[0].code == "name_required"
        assert sink.pages == []

    def test_upstream_failure_propagates(self) -> None:
        service = LinkService(sink=MockLinkSink(fail=True), database_id="links-db")

        with pytest.raises(SourceUnavailable):
            asyncio.run(run_create(CreateLinkInput(name="x", url="https://x.io"), service))

    def test_duplicates_are_not_deduplicated(self, service: LinkService, sink: MockLinkSink) -> None:
        inp = CreateLinkInput(name="Same", url="https://same.io")
        asyncio.run(run_create(inp, service))
        asyncio.run(run_create(inp, service))

        assert len(sink.pages) == 2


# --- Validation Tests ---


class TestValidateLinkData:
    @pytest.mark.parametrize(
        ("url", "code"),
        [
            ("", "url_required"),
            ("not-a-url", "url_invalid"),
            ("/relative/path", "url_invalid"),
            ("https://", "url_invalid"),
            ("https://exa mple.com", "url_invalid"),
        ],
    )
    def test_bad_urls(self, url: str, code: str) -> None:
        errors = validate_link_data(name="x", url=url)
        assert [e.code for e in errors] == [code]

    def test_both_missing(self) -> None:
        errors = validate_link_data(name="", url="")
        assert {e.field for e in errors} == {"name", "url"}

    def test_long_name_accepted(self) -> None:
        """Page titles of any length are kept as the link name."""
        assert validate_link_data(name="x" * 250, url="https://x.io") == []


# --- Payload Tests ---


class TestBuildLinkProperties:
    def test_minimal(self) -> None:
        props = build_link_properties(CreateLinkInput(name=" Site ", url="https://site.io "))

        assert props == {
            "Name": {"title": [{"type": "text", "text": {"content": "Site"}}]},
            "URL": {"url": "https://site.io"},
            "isAdmin": {"checkbox": False},
        }

    def test_optional_fields(self) -> None:
        props = build_link_properties(
            CreateLinkInput(
                name="Site",
                url="https://site.io",
                desc="About",
                category1="Dev",
                category2="Git",
                tags=("a", " ", "b"),
                iconlink="https://site.io/icon.png",
                is_admin_only=True,
            )
        )

        assert props["desc"] == {"rich_text": [{"type": "text", "text": {"content": "About"}}]}
        assert props["category1"] == {"select": {"name": "Dev"}}
        assert props["category2"] == {"select": {"name": "Git"}}
        assert props["Tags"] == {"multi_select": [{"name": "a"}, {"name": "b"}]}
        assert props["iconlink"] == {"url": "https://site.io/icon.png"}
        assert props["isAdmin"] == {"checkbox": True}
