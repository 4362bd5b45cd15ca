from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from src.adapters.render_cache import RenderCache
from src.api.deps import (
    Settings,
    get_content_source,
    get_page_fetcher,
    get_render_cache,
    get_rules,
    get_settings,
)
from src.api.main import app
from src.domain.errors import SourceUnavailable
from src.rules.loader import load_rules

LINKS_DB = "links-db"
CATEGORIES_DB = "categories-db"
CONFIG_DB = "config-db"

ADMIN_NAME = "admin"
ADMIN_PWD = "correct-horse"

PROJECT_ROOT = Path(__file__).parent.parent


# --- Record builders (content store wire shapes) ---
def title_prop(text: str) -> dict[str, Any]:
    return {"type": "title", "title": [{"plain_text": text}]}


def rich_text_prop(text: str) -> dict[str, Any]:
    return {"type": "rich_text", "rich_text": [{"plain_text": text}]}


def link_record(
    page_id: str,
    name: str,
    url: str,
    category1: str = "Dev",
    category2: str = "Tools",
    created: str = "2024-01-01T00:00:00.000Z",
    admin_only: bool = False,
    tags: list[str] | None = None,
    desc: str = "",
) -> dict[str, Any]:
    return {
        "object": "page",
        "id": page_id,
        "properties": {
            "Name": title_prop(name),
            "URL": {"type": "url", "url": url},
            "desc": rich_text_prop(desc),
            "category1": {"type": "select", "select": {"name": category1}},
            "category2": {"type": "select", "select": {"name": category2}},
            "Tags": {"type": "multi_select", "multi_select": [{"name": t} for t in tags or []]},
            "isAdmin": {"type": "checkbox", "checkbox": admin_only},
            "Created": {"type": "created_time", "created_time": created},
        },
    }


def category_record(page_id: str, name: str, order: int) -> dict[str, Any]:
    return {
        "object": "page",
        "id": page_id,
        "properties": {
            "Name": title_prop(name),
            "IconName": rich_text_prop(f"Icon{name}"),
            "Order": {"type": "number", "number": order},
            "Enabled": {"type": "checkbox", "checkbox": True},
        },
    }


def config_record(name: str, value: str) -> dict[str, Any]:
    return {
        "object": "page",
        "id": f"cfg-{name}",
        "properties": {"Name": title_prop(name), "Value": rich_text_prop(value)},
    }


# --- Fakes ---
class FakeContentSource:
    """In-memory stand-in for the content store client."""

    def __init__(self) -> None:
        self.records: dict[str, list[dict[str, Any]]] = {
            LINKS_DB: [
                link_record("l1", "GitHub", "https://github.com", desc="Code hosting"),
                link_record(
                    "l2",
                    "Python Docs",
                    "https://docs.python.org",
                    category2="Docs",
                    created="2024-06-01T00:00:00.000Z",
                ),
                link_record(
                    "l3",
                    "Grafana",
                    "https://grafana.internal",
                    category1="Ops",
                    category2="Dashboards",
                    admin_only=True,
                ),
            ],
            CATEGORIES_DB: [
                category_record("c1", "Dev", 1),
                category_record("c2", "Ops", 2),
            ],
            CONFIG_DB: [
                config_record("site_title", "Test Hub"),
                config_record("widget_config", "clock,hot-news"),
            ],
        }
        self.database_icons: dict[str, Any] = {
            CONFIG_DB: {"type": "external", "external": {"url": "https://cdn/fav.png"}}
        }
        self.failing: set[str] = set()
        self.created: list[tuple[str, dict[str, Any]]] = []
        self.fetch_count = 0

    async def fetch_all(self, database_id, sorts=None, filter=None):
        self.fetch_count += 1
        if database_id in self.failing:
            raise SourceUnavailable()
        return list(self.records.get(database_id, []))

    async def retrieve_database(self, database_id):
        if database_id in self.failing:
            raise SourceUnavailable()
        return {"object": "database", "id": database_id, "icon": self.database_icons.get(database_id)}

    async def create_page(self, database_id, properties):
        if database_id in self.failing:
            raise SourceUnavailable()
        self.created.append((database_id, properties))
        return {"object": "page", "id": f"new-{len(self.created)}"}


class FakePageFetcher:
    def __init__(self) -> None:
        self.pages: dict[str, str] = {}

    async def fetch_html(self, url: str) -> str:
        if url not in self.pages:
            raise SourceUnavailable("Failed to fetch site information")
        return self.pages[url]


class FixedClock:
    def now_utc(self) -> datetime:
        return datetime(2025, 1, 1, 12, 0, tzinfo=UTC)


# --- Fixtures ---
@pytest.fixture
def rules():
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def settings():
    s = Settings()
    s.rules_path = PROJECT_ROOT / "rules.yaml"
    s.notion_token = "secret_test"
    s.links_db_id = LINKS_DB
    s.categories_db_id = CATEGORIES_DB
    s.config_db_id = CONFIG_DB
    s.admin_name = ADMIN_NAME
    s.admin_pwd = ADMIN_PWD
    s.secret_key = "test-secret"
    return s


@pytest.fixture
def fake_source():
    return FakeContentSource()


@pytest.fixture
def fake_fetcher():
    return FakePageFetcher()


@pytest.fixture
def render_cache(rules):
    return RenderCache(ttl_seconds=rules.catalog.cache_ttl_seconds, clock=FixedClock())


@pytest.fixture
def client(settings, rules, fake_source, fake_fetcher, render_cache):
    """TestClient with the content store, fetcher and cache swapped for fakes."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_rules] = lambda: rules
    app.dependency_overrides[get_content_source] = lambda: fake_source
    app.dependency_overrides[get_page_fetcher] = lambda: fake_fetcher
    app.dependency_overrides[get_render_cache] = lambda: render_cache
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client, rules):
    """Client already carrying a session cookie."""
    client.cookies.set(rules.auth.cookie.name, "any-session-value")
    return client
