"""
Links component - Port interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol


class LinkSinkPort(Protocol):
    """Append-only write access to the links database."""

    async def create_page(
        self, database_id: str, properties: dict[str, Any]
    ) -> dict[str, Any]:
        """Append a record; returns the created page."""
        ...
