"""Catalog Routes — moods, categories, and pre-built/custom tags."""

from fastapi import APIRouter, Depends, status

from daybook.api.dependencies import (
    get_catalog_service, get_tag_service, require_identity,
)
from daybook.core.identity import Identity
from daybook.schemas.auth import MessageResponse
from daybook.schemas.catalog import (
    CategoryResponse, MoodResponse, TagCreate, TagResponse,
)
from daybook.services.catalog_service import CatalogService
from daybook.services.tag_service import TagService

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


@router.get("/moods", response_model=list[MoodResponse])
async def list_moods(service: CatalogService = Depends(get_catalog_service)):
    return [MoodResponse.model_validate(m) for m in await service.list_moods()]


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(service: CatalogService = Depends(get_catalog_service)):
    return [
        CategoryResponse.model_validate(c) for c in await service.list_categories()
    ]


@router.get("/tags", response_model=list[TagResponse])
async def list_tags(
    identity: Identity = Depends(require_identity),
    service: TagService = Depends(get_tag_service),
):
    return [TagResponse.model_validate(t) for t in await service.get_all_tags(identity)]


@router.get("/tags/prebuilt", response_model=list[TagResponse])
async def list_prebuilt_tags(service: TagService = Depends(get_tag_service)):
    return [TagResponse.model_validate(t) for t in await service.get_prebuilt_tags()]


@router.get("/tags/custom", response_model=list[TagResponse])
async def list_custom_tags(
    identity: Identity = Depends(require_identity),
    service: TagService = Depends(get_tag_service),
):
    return [
        TagResponse.model_validate(t) for t in await service.get_custom_tags(identity)
    ]


@router.post("/tags", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
async def create_custom_tag(
    body: TagCreate,
    identity: Identity = Depends(require_identity),
    service: TagService = Depends(get_tag_service),
):
    tag = (await service.create_custom_tag(identity, body.name)).unwrap()
    return TagResponse.model_validate(tag)


@router.delete("/tags/{tag_id}", response_model=MessageResponse)
async def delete_custom_tag(
    tag_id: int,
    identity: Identity = Depends(require_identity),
    service: TagService = Depends(get_tag_service),
):
    result = await service.delete_custom_tag(identity, tag_id)
    result.unwrap()
    return MessageResponse(message=result.message)
