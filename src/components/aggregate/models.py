"""
Aggregate component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import Category, Link, NavigationView


@dataclass(frozen=True)
class BuildViewInput:
    """Input for building the navigation for one viewer."""

    links: tuple[Link, ...]
    categories: tuple[Category, ...]
    is_admin: bool = False
    keyword: str | None = None


@dataclass(frozen=True)
class BuildViewOutput:
    view: NavigationView
    search_result_count: int
