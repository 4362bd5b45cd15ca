"""
Sync component - Render cache revalidation.
"""

from .component import run_trigger_sync
from .models import TriggerSyncInput, TriggerSyncOutput
from .ports import CacheInvalidatorPort

__all__ = [
    "run_trigger_sync",
    "TriggerSyncInput",
    "TriggerSyncOutput",
    "CacheInvalidatorPort",
]
