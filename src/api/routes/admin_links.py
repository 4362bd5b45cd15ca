"""Admin routes for adding links."""

from fastapi import APIRouter, Depends

from src.adapters.render_cache import RenderCache
from src.api.deps import get_link_service, get_render_cache, require_admin
from src.api.schemas import LinkCreateRequest, LinkCreateResponse
from src.components.links import CreateLinkInput, LinkService, run_create
from src.domain.entities import Identity
from src.domain.errors import ValidationError

router = APIRouter()


@router.post("/links", response_model=LinkCreateResponse)
async def create_link(
    data: LinkCreateRequest,
    identity: Identity = Depends(require_admin),
    service: LinkService = Depends(get_link_service),
    cache: RenderCache = Depends(get_render_cache),
) -> LinkCreateResponse:
    """Append a link to the links database."""
    input_data = CreateLinkInput(
        name=data.name,
        url=data.url,
        desc=data.desc,
        category1=data.category1,
        category2=data.category2,
        tags=tuple(data.tags),
        iconlink=data.iconlink,
        is_admin_only=data.is_admin_only,
    )

    result = await run_create(input_data, service)

    if not result.success:
        err = result.errors[0]
        raise ValidationError(err.message, field=err.field)

    assert result.link_id is not None  # Success guarantees an id
    cache.invalidate()
    return LinkCreateResponse(success=True, message="Link added", id=result.link_id)
