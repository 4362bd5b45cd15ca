"""
Normalize component - Upstream records to typed entities.
"""

from ._impl import (
    DEFAULT_FAVICON,
    apply_config_defaults,
    normalize_category,
    normalize_config,
    normalize_link,
    parse_widgets,
    resolve_favicon,
)

__all__ = [
    "DEFAULT_FAVICON",
    "normalize_link",
    "normalize_category",
    "normalize_config",
    "resolve_favicon",
    "apply_config_defaults",
    "parse_widgets",
]
