"""Entry Routes — CRUD over the caller's journal entries.

Invariants:
    - Every route requires a bearer token
    - Foreign entries are indistinguishable from missing ones on reads (404)
"""

from datetime import date

from fastapi import APIRouter, Depends, status

from daybook.api.dependencies import get_entry_service, require_identity
from daybook.core.errors import NotFoundError
from daybook.core.identity import Identity
from daybook.models import JournalEntry
from daybook.schemas.auth import MessageResponse
from daybook.schemas.entry import EntryCreate, EntryResponse, EntryUpdate
from daybook.services.entry_service import EntryService

router = APIRouter(prefix="/api/v1/entries", tags=["entries"])


async def entry_responses(
    service: EntryService, entries: list[JournalEntry],
) -> list[EntryResponse]:
    """Attach mood/tag ids to each entry, preserving order."""
    described = await service.describe_entries(entries)
    return [
        EntryResponse(
            id=e.id,
            entry_date=e.entry_date,
            title=e.title,
            content=e.content,
            word_count=e.word_count,
            category_id=e.category_id,
            primary_mood_id=described[e.id].primary_mood_id,
            secondary_mood_ids=described[e.id].secondary_mood_ids,
            tag_ids=described[e.id].tag_ids,
            created_at=e.created_at,
            updated_at=e.updated_at,
        )
        for e in entries
    ]


@router.post("", response_model=EntryResponse, status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: EntryCreate,
    identity: Identity = Depends(require_identity),
    service: EntryService = Depends(get_entry_service),
):
    entry = (await service.create_entry(
        identity, body.entry_date, body.title, body.content, body.category_id,
        body.primary_mood_id, body.secondary_mood_ids, body.tag_ids,
    )).unwrap()
    return (await entry_responses(service, [entry]))[0]


@router.get("", response_model=list[EntryResponse])
async def list_entries(
    identity: Identity = Depends(require_identity),
    service: EntryService = Depends(get_entry_service),
):
    return await entry_responses(service, await service.get_all_entries(identity))


@router.get("/by-date/{entry_date}", response_model=EntryResponse)
async def get_entry_by_date(
    entry_date: date,
    identity: Identity = Depends(require_identity),
    service: EntryService = Depends(get_entry_service),
):
    entry = await service.get_entry_by_date(identity, entry_date)
    if entry is None:
        raise NotFoundError("Entry", entry_date.isoformat())
    return (await entry_responses(service, [entry]))[0]


@router.get("/{entry_id}", response_model=EntryResponse)
async def get_entry(
    entry_id: int,
    identity: Identity = Depends(require_identity),
    service: EntryService = Depends(get_entry_service),
):
    entry = await service.get_entry(identity, entry_id)
    if entry is None:
        raise NotFoundError("Entry", entry_id)
    return (await entry_responses(service, [entry]))[0]


@router.put("/{entry_id}", response_model=EntryResponse)
async def update_entry(
    entry_id: int,
    body: EntryUpdate,
    identity: Identity = Depends(require_identity),
    service: EntryService = Depends(get_entry_service),
):
    entry = (await service.update_entry(
        identity, entry_id, body.title, body.content, body.category_id,
        body.primary_mood_id, body.secondary_mood_ids, body.tag_ids,
    )).unwrap()
    return (await entry_responses(service, [entry]))[0]


@router.delete("/{entry_id}", response_model=MessageResponse)
async def delete_entry(
    entry_id: int,
    identity: Identity = Depends(require_identity),
    service: EntryService = Depends(get_entry_service),
):
    result = await service.delete_entry(identity, entry_id)
    result.unwrap()
    return MessageResponse(message=result.message)
