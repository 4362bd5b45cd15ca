"""
Catalog component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CatalogDatabases:
    """Upstream database ids; any may be unset."""

    links: str | None = None
    categories: str | None = None
    config: str | None = None


@dataclass(frozen=True)
class CatalogOptions:
    pinned_tag: str
    config_defaults: dict[str, str] = field(default_factory=dict)
    default_favicon: str = "/favicon.ico"
