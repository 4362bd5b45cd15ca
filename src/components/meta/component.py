"""
Meta component - Shell layer for page meta discovery.

Validates the target URL, fetches it, and hands the HTML to the
functional core.
"""

from __future__ import annotations

import logging

from src.domain.errors import ValidationError
from src.domain.urls import is_absolute_url
from src.ports.content import PageFetcherPort

from ._impl import extract_meta
from .models import FetchMetaInput, FetchMetaOutput

logger = logging.getLogger(__name__)


async def run_fetch_meta(inp: FetchMetaInput, fetcher: PageFetcherPort) -> FetchMetaOutput:
    url = (inp.url or "").strip()
    if not url:
        raise ValidationError("URL is required", field="url")
    if not is_absolute_url(url):
        raise ValidationError("URL format is invalid", field="url")

    html = await fetcher.fetch_html(url)
    title, icon = extract_meta(html, url)
    logger.debug("Scraped %s: title=%r icon=%s", url, title, icon)
    return FetchMetaOutput(title=title, icon=icon)
