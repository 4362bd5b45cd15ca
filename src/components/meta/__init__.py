"""
Meta component - Title and icon discovery for a bookmarked page.
"""

from ._impl import extract_meta, find_icon_href, resolve_icon_url
from .component import run_fetch_meta
from .models import FetchMetaInput, FetchMetaOutput

__all__ = [
    # Entry points
    "run_fetch_meta",
    # Models
    "FetchMetaInput",
    "FetchMetaOutput",
    # Functional core
    "extract_meta",
    "find_icon_href",
    "resolve_icon_url",
]
