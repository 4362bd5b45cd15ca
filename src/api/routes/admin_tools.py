"""Admin helpers: page meta lookup and cache revalidation."""

from fastapi import APIRouter, Depends

from src.adapters.page_fetcher import HttpxPageFetcher
from src.adapters.render_cache import RenderCache
from src.api.deps import get_identity, get_page_fetcher, get_render_cache, require_admin
from src.api.schemas import FetchMetaRequest, FetchMetaResponse, RevalidateResponse
from src.components.meta import FetchMetaInput, run_fetch_meta
from src.components.sync import TriggerSyncInput, run_trigger_sync
from src.domain.entities import Identity

router = APIRouter()


@router.post("/fetch-meta", response_model=FetchMetaResponse)
async def fetch_meta(
    data: FetchMetaRequest,
    identity: Identity = Depends(require_admin),
    fetcher: HttpxPageFetcher = Depends(get_page_fetcher),
) -> FetchMetaResponse:
    """Best-effort title and icon for a URL, used to prefill the add-link form."""
    result = await run_fetch_meta(FetchMetaInput(url=data.url), fetcher)
    return FetchMetaResponse(success=result.success, title=result.title, icon=result.icon)


@router.post("/revalidate", response_model=RevalidateResponse)
def revalidate(
    identity: Identity = Depends(get_identity),
    cache: RenderCache = Depends(get_render_cache),
) -> RevalidateResponse:
    """Mark the cached navigation stale; the next read refetches."""
    result = run_trigger_sync(TriggerSyncInput(identity=identity), cache)
    return RevalidateResponse(
        success=result.success,
        message="Sync succeeded, page cache refreshed",
        revalidated_at=result.revalidated_at.isoformat(),
    )
