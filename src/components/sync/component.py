"""
Sync component - On-demand revalidation.

Marks the cached render output stale so the next read refetches from the
content store. Nothing is fetched here.
"""

from __future__ import annotations

import logging

from src.domain.errors import Unauthorized

from .models import TriggerSyncInput, TriggerSyncOutput
from .ports import CacheInvalidatorPort

logger = logging.getLogger(__name__)


def run_trigger_sync(
    inp: TriggerSyncInput, cache: CacheInvalidatorPort
) -> TriggerSyncOutput:
    if inp.identity != "admin":
        raise Unauthorized()

    revalidated_at = cache.invalidate()
    logger.info("Render cache invalidated at %s", revalidated_at.isoformat())
    return TriggerSyncOutput(revalidated_at=revalidated_at)
