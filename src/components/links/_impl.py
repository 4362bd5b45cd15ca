"""
LinkService - Bookmark creation in the upstream links database.

Validates input and appends one record. Existing records are never edited
or deleted from here, and creates are not de-duplicated.

Functional Core - validation and payload building are pure.
"""

from __future__ import annotations

from typing import Any

from src.domain.urls import is_absolute_url

from .models import CreateLinkInput, LinkValidationError
from .ports import LinkSinkPort

# --- Validation Functions ---


def validate_link_data(
    name: str | None = None,
    url: str | None = None,
) -> list[LinkValidationError]:
    """Validate link data."""
    errors: list[LinkValidationError] = []

    if not name or not name.strip():
        errors.append(
            LinkValidationError(
                code="name_required",
                message="Name is required",
                field="name",
            )
        )

    if not url or not url.strip():
        errors.append(
            LinkValidationError(
                code="url_required",
                message="URL is required",
                field="url",
            )
        )
    elif not is_absolute_url(url):
        errors.append(
            LinkValidationError(
                code="url_invalid",
                message="URL format is invalid",
                field="url",
            )
        )

    return errors


# --- Payload ---


def _text(value: str) -> list[dict[str, Any]]:
    return [{"type": "text", "text": {"content": value}}]


def build_link_properties(inp: CreateLinkInput) -> dict[str, Any]:
    """Upstream property payload for a new link record."""
    properties: dict[str, Any] = {
        "Name": {"title": _text(inp.name.strip())},
        "URL": {"url": inp.url.strip()},
        "isAdmin": {"checkbox": inp.is_admin_only},
    }
    if inp.desc and inp.desc.strip():
        properties["desc"] = {"rich_text": _text(inp.desc.strip())}
    if inp.category1 and inp.category1.strip():
        properties["category1"] = {"select": {"name": inp.category1.strip()}}
    if inp.category2 and inp.category2.strip():
        properties["category2"] = {"select": {"name": inp.category2.strip()}}
    tags = [tag.strip() for tag in inp.tags if tag and tag.strip()]
    if tags:
        properties["Tags"] = {"multi_select": [{"name": tag} for tag in tags]}
    if inp.iconlink and inp.iconlink.strip():
        properties["iconlink"] = {"url": inp.iconlink.strip()}
    return properties


# --- Link Service ---


class LinkService:
    """
    Link service.

    Appends bookmarks to the links database.
    """

    def __init__(self, sink: LinkSinkPort, database_id: str) -> None:
        """Initialize service."""
        self._sink = sink
        self._database_id = database_id

    async def create(
        self, inp: CreateLinkInput
    ) -> tuple[str | None, list[LinkValidationError]]:
        """
        Create a new link.

        Returns:
            Tuple of (link id, errors). Id is None if validation fails.
        Raises:
            SourceUnavailable: if the upstream append fails.
        """
        errors = validate_link_data(name=inp.name, url=inp.url)
        if errors:
            return None, errors

        page = await self._sink.create_page(self._database_id, build_link_properties(inp))
        return str(page.get("id", "")), []
