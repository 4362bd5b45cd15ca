"""
Catalog component - Port interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol


class SnapshotCachePort(Protocol):
    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, data: Any) -> None: ...
