"""Search Service — text search and compound filters over one user's entries.

Invariants:
    - Always scoped to the caller's own entries; None identity → []
    - Mood/tag filters are unions inside the filter (any match, primary or
      secondary mood), and an empty id list yields []
    - advanced_search ANDs every provided predicate; omitted ones are no-ops
    - Results newest first
"""

from datetime import date

from sqlalchemy import select

from daybook.core.entry_filters import apply_filters, is_blank, newest_first, search_text
from daybook.core.identity import Identity
from daybook.infrastructure.repositories import JournalGateway
from daybook.models import EntryMood, EntryTag, JournalEntry


def _owned_entry_ids(user_id: int):
    return select(JournalEntry.id).where(JournalEntry.user_id == user_id)


class SearchService:
    """Read-only entry queries."""

    def __init__(self, gateway: JournalGateway):
        self.gateway = gateway

    async def _user_entries(self, identity: Identity, *criteria) -> list[JournalEntry]:
        return await self.gateway.entries.find(
            JournalEntry.user_id == identity.user_id, *criteria,
        )

    async def _entry_ids_with_moods(
        self, identity: Identity, mood_ids: list[int],
    ) -> set[int]:
        links = await self.gateway.entry_moods.find(
            EntryMood.mood_id.in_(sorted(set(mood_ids))),
            EntryMood.journal_entry_id.in_(_owned_entry_ids(identity.user_id)),
        )
        return {link.journal_entry_id for link in links}

    async def _entry_ids_with_tags(
        self, identity: Identity, tag_ids: list[int],
    ) -> set[int]:
        links = await self.gateway.entry_tags.find(
            EntryTag.tag_id.in_(sorted(set(tag_ids))),
            EntryTag.journal_entry_id.in_(_owned_entry_ids(identity.user_id)),
        )
        return {link.journal_entry_id for link in links}

    async def search_by_text(
        self, identity: Identity | None, term: str | None,
    ) -> list[JournalEntry]:
        if identity is None or is_blank(term):
            return []
        return search_text(await self._user_entries(identity), term)

    async def filter_by_date_range(
        self, identity: Identity | None, start: date, end: date,
    ) -> list[JournalEntry]:
        if identity is None:
            return []
        return newest_first(await self._user_entries(
            identity,
            JournalEntry.entry_date >= start,
            JournalEntry.entry_date <= end,
        ))

    async def filter_by_moods(
        self, identity: Identity | None, mood_ids: list[int],
    ) -> list[JournalEntry]:
        if identity is None or not mood_ids:
            return []
        entry_ids = await self._entry_ids_with_moods(identity, mood_ids)
        if not entry_ids:
            return []
        return newest_first(await self._user_entries(
            identity, JournalEntry.id.in_(sorted(entry_ids)),
        ))

    async def filter_by_tags(
        self, identity: Identity | None, tag_ids: list[int],
    ) -> list[JournalEntry]:
        if identity is None or not tag_ids:
            return []
        entry_ids = await self._entry_ids_with_tags(identity, tag_ids)
        if not entry_ids:
            return []
        return newest_first(await self._user_entries(
            identity, JournalEntry.id.in_(sorted(entry_ids)),
        ))

    async def advanced_search(
        self,
        identity: Identity | None,
        term: str | None = None,
        start: date | None = None,
        end: date | None = None,
        mood_ids: list[int] | None = None,
        tag_ids: list[int] | None = None,
    ) -> list[JournalEntry]:
        """Intersection of every provided predicate over all of the user's entries."""
        if identity is None:
            return []
        entries = await self._user_entries(identity)
        mood_entry_ids = (
            await self._entry_ids_with_moods(identity, mood_ids) if mood_ids else None
        )
        tag_entry_ids = (
            await self._entry_ids_with_tags(identity, tag_ids) if tag_ids else None
        )
        return apply_filters(
            entries,
            term=term,
            start=start,
            end=end,
            mood_entry_ids=mood_entry_ids,
            tag_entry_ids=tag_entry_ids,
        )
