"""Notion API adapter for the upstream content store."""

from .client import NotionContentClient

__all__ = ["NotionContentClient"]
