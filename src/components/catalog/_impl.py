"""
CatalogService - Content Client -> Normalizer pipeline.

Loads links, categories and site config from the content store, normalizes
them and, for the home view, caches the joined snapshot.

Failure policy:
- links and categories are non-critical: upstream errors are logged and
  surface as an empty list so the page still renders.
- config is critical: errors propagate to the caller.
"""

from __future__ import annotations

import asyncio
import logging

from src.components.aggregate import sort_links
from src.components.normalize import (
    apply_config_defaults,
    normalize_category,
    normalize_config,
    normalize_link,
    resolve_favicon,
)
from src.domain.entities import Category, Link, Snapshot, WebsiteConfig
from src.domain.errors import ServerMisconfigured, SourceUnavailable
from src.ports.content import ContentSourcePort

from .models import CatalogDatabases, CatalogOptions
from .ports import SnapshotCachePort

logger = logging.getLogger(__name__)

SNAPSHOT_CACHE_KEY = "navigation"

LINK_SORTS = [
    {"property": "category1", "direction": "ascending"},
    {"property": "category2", "direction": "ascending"},
]
CATEGORY_FILTER = {"property": "Enabled", "checkbox": {"equals": True}}
CATEGORY_SORTS = [{"property": "Order", "direction": "ascending"}]


class CatalogService:
    def __init__(
        self,
        source: ContentSourcePort,
        databases: CatalogDatabases,
        options: CatalogOptions,
        cache: SnapshotCachePort | None = None,
    ) -> None:
        self._source = source
        self._databases = databases
        self._options = options
        self._cache = cache

    async def load_links(self) -> list[Link]:
        """All links, pinned first then newest first. Empty on upstream failure."""
        if not self._databases.links:
            logger.error("Links database id is not configured")
            return []
        try:
            records = await self._source.fetch_all(self._databases.links, sorts=LINK_SORTS)
        except SourceUnavailable as exc:
            logger.error("Error fetching links: %s", exc)
            return []
        links = [normalize_link(record) for record in records]
        return sort_links(links, self._options.pinned_tag)

    async def load_categories(self) -> list[Category]:
        """Enabled categories by order. Empty when unset or on upstream failure."""
        if not self._databases.categories:
            return []
        try:
            records = await self._source.fetch_all(
                self._databases.categories,
                sorts=CATEGORY_SORTS,
                filter=CATEGORY_FILTER,
            )
        except SourceUnavailable as exc:
            logger.error("Error fetching categories: %s", exc)
            return []
        categories = [normalize_category(record) for record in records]
        return sorted(categories, key=lambda c: c.order)

    async def load_config(self) -> WebsiteConfig:
        """
        Site config with defaults applied.

        Raises:
            ServerMisconfigured: config database id is unset.
            SourceUnavailable: the config database could not be read.
        """
        database_id = self._databases.config
        if not database_id:
            raise ServerMisconfigured("Website config database is not configured")

        records, database = await asyncio.gather(
            self._source.fetch_all(database_id),
            self._source.retrieve_database(database_id),
        )
        favicon = resolve_favicon(database.get("icon"), default=self._options.default_favicon)
        return apply_config_defaults(
            normalize_config(records), self._options.config_defaults, favicon
        )

    async def load_snapshot(self) -> Snapshot:
        """Fetch the three datasets concurrently and join them."""
        links, categories, config = await asyncio.gather(
            self.load_links(),
            self.load_categories(),
            self.load_config(),
        )
        return Snapshot(links=links, categories=categories, config=config)

    async def get_snapshot(self) -> Snapshot:
        """Cached snapshot when fresh, else a fresh load that refills the cache."""
        if self._cache is not None:
            cached = self._cache.get(SNAPSHOT_CACHE_KEY)
            if cached is not None:
                return cached

        snapshot = await self.load_snapshot()
        if self._cache is not None:
            self._cache.set(SNAPSHOT_CACHE_KEY, snapshot)
            logger.info(
                "Navigation snapshot cached: %d links, %d categories",
                len(snapshot.links),
                len(snapshot.categories),
            )
        return snapshot
