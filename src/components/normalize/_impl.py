"""
Record normalization - Functional Core.

Maps raw upstream records onto Link, Category and WebsiteConfig. Missing or
malformed properties fall back to the entity defaults; nothing here raises.

Property names are the column names of the three content databases:

- links: Name, desc, URL, category1, category2, iconfile, iconlink, Tags,
  isAdmin, Created
- categories: Name, IconName, Order, Enabled
- config: Name, Value
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from src.domain.entities import (
    DEFAULT_CATEGORY1,
    DEFAULT_CATEGORY2,
    Category,
    Link,
    WebsiteConfig,
)
from src.domain.properties import (
    checkbox_of,
    created_time_of,
    first_file_url_of,
    multi_select_of,
    number_of,
    parse_properties,
    rich_text_of,
    select_of,
    title_of,
    url_of,
)

DEFAULT_FAVICON = "/favicon.ico"

_EMOJI_SVG = (
    "data:image/svg+xml,<svg xmlns=%22http://www.w3.org/2000/svg%22 "
    "viewBox=%220 0 100 100%22><text y=%22.9em%22 font-size=%2290%22>"
    "{emoji}</text></svg>"
)


def _record_id(raw: Any) -> str:
    if isinstance(raw, dict):
        value = raw.get("id")
        if isinstance(value, str):
            return value
    return ""


# --- Entities ---


def normalize_link(raw: Any) -> Link:
    props = parse_properties(raw)

    created = created_time_of(props.get("Created"))
    if not created and isinstance(raw, dict) and isinstance(raw.get("created_time"), str):
        created = raw["created_time"]

    return Link(
        id=_record_id(raw),
        name=title_of(props.get("Name")),
        url=url_of(props.get("URL")) or "#",
        desc=rich_text_of(props.get("desc")),
        category1=select_of(props.get("category1")) or DEFAULT_CATEGORY1,
        category2=select_of(props.get("category2")) or DEFAULT_CATEGORY2,
        iconfile=first_file_url_of(props.get("iconfile")),
        iconlink=url_of(props.get("iconlink")),
        tags=multi_select_of(props.get("Tags")),
        created=created,
        is_admin_only=checkbox_of(props.get("isAdmin")),
    )


def normalize_category(raw: Any) -> Category:
    props = parse_properties(raw)
    return Category(
        id=_record_id(raw),
        name=title_of(props.get("Name")),
        icon_name=rich_text_of(props.get("IconName")),
        order=int(number_of(props.get("Order"), default=0)),
        enabled=checkbox_of(props.get("Enabled")),
    )


def normalize_config(records: Iterable[Any]) -> WebsiteConfig:
    """Fold Name/Value records into an uppercase-keyed map (last write wins)."""
    config: WebsiteConfig = {}
    for raw in records:
        props = parse_properties(raw)
        name = title_of(props.get("Name"))
        if name:
            config[name.upper()] = rich_text_of(props.get("Value"))
    return config


# --- Site icon ---


def resolve_favicon(icon: Any, default: str = DEFAULT_FAVICON) -> str:
    """Turn a database icon descriptor into something an <link rel=icon> accepts."""
    if not isinstance(icon, dict):
        return default

    kind = icon.get("type")
    if kind == "emoji" and isinstance(icon.get("emoji"), str) and icon["emoji"]:
        return _EMOJI_SVG.format(emoji=icon["emoji"])
    if kind in ("file", "external"):
        body = icon.get(kind)
        if isinstance(body, dict) and isinstance(body.get("url"), str) and body["url"]:
            return body["url"]
    return default


def apply_config_defaults(
    config: Mapping[str, str],
    defaults: Mapping[str, str],
    favicon: str,
) -> WebsiteConfig:
    """Fill documented defaults for missing keys and set SITE_FAVICON."""
    merged: WebsiteConfig = dict(config)
    for key, value in defaults.items():
        merged.setdefault(key, value)
    merged["SITE_FAVICON"] = favicon
    return merged


def parse_widgets(config: Mapping[str, str]) -> list[str]:
    raw = config.get("WIDGET_CONFIG") or ""
    return [name.strip() for name in raw.split(",") if name.strip()]
