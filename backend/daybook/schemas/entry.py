"""Entry Schemas — journal entry payloads and search parameters.

Invariants:
    - entry_date is a calendar date; time-of-day never crosses the boundary
    - secondary_mood_ids accepted at any length; the service keeps the first two
    - EntryResponse carries mood/tag ids resolved by EntryService.describe_entries
"""

from datetime import date, datetime

from pydantic import BaseModel, Field, field_validator


class EntryWrite(BaseModel):
    """Fields shared by create and update."""
    title: str | None = Field(None, max_length=200)
    content: str
    category_id: int | None = None
    primary_mood_id: int
    secondary_mood_ids: list[int] = Field(default_factory=list)
    tag_ids: list[int] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None


class EntryCreate(EntryWrite):
    entry_date: date


class EntryUpdate(EntryWrite):
    pass


class EntryResponse(BaseModel):
    id: int
    entry_date: date
    title: str
    content: str
    word_count: int
    category_id: int | None
    primary_mood_id: int | None
    secondary_mood_ids: list[int]
    tag_ids: list[int]
    created_at: datetime
    updated_at: datetime


class AdvancedSearch(BaseModel):
    """Every field optional; provided ones are ANDed."""
    term: str | None = None
    start: date | None = None
    end: date | None = None
    mood_ids: list[int] = Field(default_factory=list)
    tag_ids: list[int] = Field(default_factory=list)


class IdList(BaseModel):
    ids: list[int] = Field(default_factory=list)
