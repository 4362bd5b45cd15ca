"""
Sync component - Port interfaces.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class CacheInvalidatorPort(Protocol):
    """Anything holding cached render output."""

    def invalidate(self) -> datetime:
        """Mark cached output stale; returns the invalidation time."""
        ...
