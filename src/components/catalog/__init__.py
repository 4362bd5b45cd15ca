"""
Catalog component - Fetch, normalize and cache navigation data.
"""

from ._impl import (
    CATEGORY_FILTER,
    CATEGORY_SORTS,
    LINK_SORTS,
    SNAPSHOT_CACHE_KEY,
    CatalogService,
)
from .models import CatalogDatabases, CatalogOptions
from .ports import SnapshotCachePort

__all__ = [
    "CatalogService",
    "CatalogDatabases",
    "CatalogOptions",
    "SnapshotCachePort",
    "CATEGORY_FILTER",
    "CATEGORY_SORTS",
    "LINK_SORTS",
    "SNAPSHOT_CACHE_KEY",
]
