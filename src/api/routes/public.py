"""Public read endpoints: site config, raw links and the navigation view."""

import asyncio
from typing import Any

from fastapi import APIRouter, Depends

from src.api.deps import get_catalog_service, get_identity
from src.api.schemas import (
    CategoryResponse,
    LinkResponse,
    NavigationResponse,
)
from src.components.aggregate import BuildViewInput, run_build_view
from src.components.catalog import CatalogService
from src.components.normalize import parse_widgets
from src.domain.entities import Identity

router = APIRouter()


@router.get("/config")
async def get_config(
    catalog: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    """Site config merged with the enabled category names."""
    config, categories = await asyncio.gather(
        catalog.load_config(),
        catalog.load_categories(),
    )
    return {
        **config,
        "categories": [{"name": category.name} for category in categories],
    }


@router.get("/links", response_model=list[LinkResponse])
async def list_links(
    catalog: CatalogService = Depends(get_catalog_service),
) -> list[LinkResponse]:
    """
    Every link, pinned first then newest first.

    Admin-only links are included; visibility is applied by the navigation
    view, not here.
    """
    links = await catalog.load_links()
    return [LinkResponse.from_link(link) for link in links]


@router.get("/navigation", response_model=NavigationResponse)
async def get_navigation(
    q: str | None = None,
    identity: Identity = Depends(get_identity),
    catalog: CatalogService = Depends(get_catalog_service),
) -> NavigationResponse:
    """
    Render-ready navigation for the caller.

    Served from the render cache while fresh; admin-only links are shown to
    admins only and ``q`` narrows links by keyword.
    """
    snapshot = await catalog.get_snapshot()
    is_admin = identity == "admin"
    result = run_build_view(
        BuildViewInput(
            links=tuple(snapshot.links),
            categories=tuple(snapshot.categories),
            is_admin=is_admin,
            keyword=q,
        )
    )
    view = result.view
    return NavigationResponse(
        config=snapshot.config,
        widgets=parse_widgets(snapshot.config),
        categories=[CategoryResponse.from_category(c) for c in view.categories],
        links={
            cat1: {
                cat2: [LinkResponse.from_link(link) for link in bucket]
                for cat2, bucket in subs.items()
            }
            for cat1, subs in view.grouped.items()
        },
        is_admin=is_admin,
        search_result_count=result.search_result_count,
    )
