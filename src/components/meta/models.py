"""
Meta component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FetchMetaInput:
    """Input for scraping a page."""

    url: str


@dataclass(frozen=True)
class FetchMetaOutput:
    title: str
    icon: str
    success: bool = True
