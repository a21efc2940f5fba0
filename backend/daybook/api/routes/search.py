"""Search Routes — text, date-range, mood, tag and combined filters."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from daybook.api.dependencies import get_entry_service, get_search_service, require_identity
from daybook.api.routes.entries import entry_responses
from daybook.core.errors import ValidationError
from daybook.core.identity import Identity
from daybook.schemas.entry import AdvancedSearch, EntryResponse
from daybook.services.entry_service import EntryService
from daybook.services.search_service import SearchService

router = APIRouter(prefix="/api/v1/search", tags=["search"])


@router.get("/text", response_model=list[EntryResponse])
async def search_by_text(
    q: str = Query(""),
    identity: Identity = Depends(require_identity),
    search: SearchService = Depends(get_search_service),
    entries: EntryService = Depends(get_entry_service),
):
    return await entry_responses(entries, await search.search_by_text(identity, q))


@router.get("/date-range", response_model=list[EntryResponse])
async def filter_by_date_range(
    start: date,
    end: date,
    identity: Identity = Depends(require_identity),
    search: SearchService = Depends(get_search_service),
    entries: EntryService = Depends(get_entry_service),
):
    if end < start:
        raise ValidationError("End date must not be before start date.", "end")
    return await entry_responses(
        entries, await search.filter_by_date_range(identity, start, end),
    )


@router.get("/moods", response_model=list[EntryResponse])
async def filter_by_moods(
    ids: list[int] = Query([]),
    identity: Identity = Depends(require_identity),
    search: SearchService = Depends(get_search_service),
    entries: EntryService = Depends(get_entry_service),
):
    return await entry_responses(entries, await search.filter_by_moods(identity, ids))


@router.get("/tags", response_model=list[EntryResponse])
async def filter_by_tags(
    ids: list[int] = Query([]),
    identity: Identity = Depends(require_identity),
    search: SearchService = Depends(get_search_service),
    entries: EntryService = Depends(get_entry_service),
):
    return await entry_responses(entries, await search.filter_by_tags(identity, ids))


@router.post("/advanced", response_model=list[EntryResponse])
async def advanced_search(
    body: AdvancedSearch,
    identity: Identity = Depends(require_identity),
    search: SearchService = Depends(get_search_service),
    entries: EntryService = Depends(get_entry_service),
):
    found = await search.advanced_search(
        identity,
        term=body.term,
        start=body.start,
        end=body.end,
        mood_ids=body.mood_ids,
        tag_ids=body.tag_ids,
    )
    return await entry_responses(entries, found)
