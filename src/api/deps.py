import os
from datetime import timedelta
from functools import lru_cache
from pathlib import Path

from fastapi import Depends, Request

from src.adapters.auth.crypto import JWTAuthAdapter
from src.adapters.clock import SystemClock
from src.adapters.notion import NotionContentClient
from src.adapters.page_fetcher import HttpxPageFetcher
from src.adapters.render_cache import RenderCache

# Components are stateless; adapters and settings are injected per request.
from src.components.auth import AdminSecrets, CheckSessionInput, run_check_session
from src.components.catalog import CatalogDatabases, CatalogOptions, CatalogService
from src.components.links import LinkService
from src.domain.entities import Identity
from src.domain.errors import ServerMisconfigured, Unauthorized
from src.rules.loader import load_rules
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(os.environ.get("NAV_RULES_PATH", self.base_dir / "rules.yaml"))
        self.notion_token = os.environ.get("NOTION_TOKEN", "")
        self.links_db_id = os.environ.get("NOTION_LINKS_DB_ID") or None
        self.categories_db_id = os.environ.get("NOTION_CATEGORIES_DB_ID") or None
        self.config_db_id = os.environ.get("NOTION_WEBSITE_CONFIG_ID") or None
        self.admin_name = os.environ.get("ADMIN_NAME") or None
        self.admin_pwd = os.environ.get("ADMIN_PWD") or None
        self.secret_key = os.environ.get("NAV_SECRET_KEY", "dev-secret-unsafe")


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> Rules:
    return load_rules(settings.rules_path)


# --- Process-wide singletons ---
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


_render_cache_instance: RenderCache | None = None


def get_render_cache(
    rules: Rules = Depends(get_rules),
    clock: SystemClock = Depends(get_clock),
) -> RenderCache:
    """Get render cache singleton."""
    global _render_cache_instance
    if _render_cache_instance is None:
        _render_cache_instance = RenderCache(
            ttl_seconds=rules.catalog.cache_ttl_seconds, clock=clock
        )
    return _render_cache_instance


# --- Adapters ---
def get_content_source(
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
) -> NotionContentClient:
    return NotionContentClient(
        token=settings.notion_token,
        base_url=rules.source.api_base_url,
        api_version=rules.source.api_version,
        page_size=rules.source.page_size,
        timeout=rules.source.timeout_seconds,
    )


def get_page_fetcher(rules: Rules = Depends(get_rules)) -> HttpxPageFetcher:
    return HttpxPageFetcher(
        user_agent=rules.meta_scrape.user_agent,
        timeout=rules.meta_scrape.timeout_seconds,
    )


def get_token_adapter(settings: Settings = Depends(get_settings)) -> JWTAuthAdapter:
    return JWTAuthAdapter(secret_key=settings.secret_key)


def get_admin_secrets(settings: Settings = Depends(get_settings)) -> AdminSecrets:
    return AdminSecrets(username=settings.admin_name, password=settings.admin_pwd)


def get_session_ttl(rules: Rules = Depends(get_rules)) -> timedelta:
    return timedelta(days=rules.auth.session_ttl_days)


# --- Component Services ---
def get_catalog_service(
    source: NotionContentClient = Depends(get_content_source),
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
    cache: RenderCache = Depends(get_render_cache),
) -> CatalogService:
    """Get catalog component service."""
    return CatalogService(
        source=source,
        databases=CatalogDatabases(
            links=settings.links_db_id,
            categories=settings.categories_db_id,
            config=settings.config_db_id,
        ),
        options=CatalogOptions(
            pinned_tag=rules.catalog.pinned_tag,
            config_defaults=rules.catalog.config_defaults,
            default_favicon=rules.catalog.default_favicon,
        ),
        cache=cache,
    )


def get_link_service(
    source: NotionContentClient = Depends(get_content_source),
    settings: Settings = Depends(get_settings),
) -> LinkService:
    """Get link component service."""
    if not settings.links_db_id:
        raise ServerMisconfigured("Links database is not configured")
    return LinkService(sink=source, database_id=settings.links_db_id)


# --- Auth ---
def get_identity(
    request: Request,
    rules: Rules = Depends(get_rules),
    tokens: JWTAuthAdapter = Depends(get_token_adapter),
) -> Identity:
    credential = request.cookies.get(rules.auth.cookie.name)
    return run_check_session(
        CheckSessionInput(credential=credential),
        tokens=tokens,
        verify_tokens=rules.auth.verify_tokens,
    )


def require_admin(identity: Identity = Depends(get_identity)) -> Identity:
    if identity != "admin":
        raise Unauthorized()
    return identity
