"""
Links component - Bookmark creation.

Shell Layer - runs the service and shapes its result.
"""

from __future__ import annotations

from ._impl import LinkService
from .models import CreateLinkInput, LinkOperationOutput


async def run_create(
    input_data: CreateLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Create a new link."""
    link_id, errors = await service.create(input_data)

    return LinkOperationOutput(
        link_id=link_id,
        errors=tuple(errors),
        success=link_id is not None,
    )
