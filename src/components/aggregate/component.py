"""
Aggregate component - Shell layer entry point.
"""

from __future__ import annotations

from ._impl import build_view
from .models import BuildViewInput, BuildViewOutput


def run_build_view(inp: BuildViewInput) -> BuildViewOutput:
    view = build_view(inp.links, inp.categories, inp.is_admin, inp.keyword)
    searching = bool((inp.keyword or "").strip())
    return BuildViewOutput(
        view=view,
        search_result_count=view.total_links if searching else 0,
    )
