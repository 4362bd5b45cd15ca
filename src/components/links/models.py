"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Errors ---


@dataclass(frozen=True)
class LinkValidationError:
    """Link validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class CreateLinkInput:
    """Input for creating a link."""

    name: str
    url: str
    desc: str = ""
    category1: str | None = None
    category2: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
    iconlink: str | None = None
    is_admin_only: bool = False


# --- Output Models ---


@dataclass(frozen=True)
class LinkOperationOutput:
    """Output from link operation."""

    link_id: str | None
    errors: tuple[LinkValidationError, ...]
    success: bool
