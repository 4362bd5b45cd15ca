"""
Aggregate component - Sorting, filtering and grouping of links.
"""

from ._impl import (
    Grouped,
    build_view,
    derive_active_categories,
    filter_by_search,
    filter_by_visibility,
    group_by_category,
    is_pinned,
    sort_links,
    sub_category_id,
)
from .component import run_build_view
from .models import BuildViewInput, BuildViewOutput

__all__ = [
    # Entry points
    "run_build_view",
    # Models
    "BuildViewInput",
    "BuildViewOutput",
    # Functional core
    "Grouped",
    "build_view",
    "derive_active_categories",
    "filter_by_search",
    "filter_by_visibility",
    "group_by_category",
    "is_pinned",
    "sort_links",
    "sub_category_id",
]
