"""
Links component - Bookmark creation.
"""

from ._impl import LinkService, build_link_properties, validate_link_data
from .component import run_create
from .models import (
    CreateLinkInput,
    LinkOperationOutput,
    LinkValidationError,
)
from .ports import LinkSinkPort

__all__ = [
    # Entry points
    "run_create",
    # Input models
    "CreateLinkInput",
    # Output models
    "LinkOperationOutput",
    "LinkValidationError",
    # Ports
    "LinkSinkPort",
    # Service
    "LinkService",
    "build_link_properties",
    "validate_link_data",
]
