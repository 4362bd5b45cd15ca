"""
Link aggregation - Functional Core.

Sorting, visibility and search filtering, and two-level grouping of links
into the render-ready navigation. Every function is pure: same inputs,
same output, inputs are never mutated.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime

from src.domain.entities import Category, Link, NavigationView, SubCategory

Grouped = dict[str, dict[str, list[Link]]]

_WHITESPACE = re.compile(r"\s+")


def _created_ts(link: Link) -> float:
    """Epoch seconds of ``link.created``; unknown timestamps rank oldest."""
    if not link.created:
        return float("-inf")
    try:
        parsed = datetime.fromisoformat(link.created.replace("Z", "+00:00"))
    except ValueError:
        return float("-inf")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.timestamp()


def is_pinned(link: Link, pinned_tag: str) -> bool:
    return pinned_tag in link.tags


def sort_links(links: Iterable[Link], pinned_tag: str) -> list[Link]:
    """Pinned first, then newest first. Stable for equal ranks."""
    return sorted(
        links,
        key=lambda link: (0 if is_pinned(link, pinned_tag) else 1, -_created_ts(link)),
    )


def filter_by_visibility(links: Iterable[Link], is_admin: bool) -> list[Link]:
    if is_admin:
        return list(links)
    return [link for link in links if not link.is_admin_only]


def filter_by_search(links: Iterable[Link], keyword: str | None) -> list[Link]:
    """Case-insensitive substring match on name, desc, url or any tag."""
    needle = (keyword or "").strip().lower()
    if not needle:
        return list(links)

    def matches(link: Link) -> bool:
        return (
            needle in link.name.lower()
            or needle in link.desc.lower()
            or needle in link.url.lower()
            or any(needle in tag.lower() for tag in link.tags)
        )

    return [link for link in links if matches(link)]


def group_by_category(links: Iterable[Link], enabled_names: set[str]) -> Grouped:
    """category1 -> category2 -> links; links outside enabled categories are dropped."""
    grouped: Grouped = {}
    for link in links:
        if link.category1 not in enabled_names:
            continue
        grouped.setdefault(link.category1, {}).setdefault(link.category2, []).append(link)
    return grouped


def sub_category_id(name: str) -> str:
    return _WHITESPACE.sub("-", name.lower())


def derive_active_categories(
    categories: Sequence[Category], grouped: Grouped
) -> list[Category]:
    """Enabled categories with at least one grouped link, ordered by ``order``."""
    active: list[Category] = []
    for category in categories:
        buckets = grouped.get(category.name) or {}
        if not category.enabled or not any(buckets.values()):
            continue
        subs = [
            SubCategory(id=sub_category_id(name), name=name)
            for name, bucket in buckets.items()
            if bucket
        ]
        active.append(category.model_copy(update={"sub_categories": subs}))
    return sorted(active, key=lambda c: c.order)


def build_view(
    links: Sequence[Link],
    categories: Sequence[Category],
    is_admin: bool,
    keyword: str | None = None,
) -> NavigationView:
    """Full render pipeline for one viewer: visibility, search, group, derive."""
    visible = filter_by_visibility(links, is_admin)
    matched = filter_by_search(visible, keyword)
    enabled_names = {c.name for c in categories if c.enabled}
    grouped = group_by_category(matched, enabled_names)
    return NavigationView(
        categories=derive_active_categories(categories, grouped),
        grouped=grouped,
        total_links=sum(len(b) for subs in grouped.values() for b in subs.values()),
    )
