"""
Sync component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.domain.entities import Identity


@dataclass(frozen=True)
class TriggerSyncInput:
    identity: Identity


@dataclass(frozen=True)
class TriggerSyncOutput:
    revalidated_at: datetime
    success: bool = True
