"""Entry Service — create/update/delete journal entries and their mood/tag links.

Invariants:
    - One entry per (user, calendar day); a duplicate fails with ConflictError
      before anything is written
    - Exactly one primary mood; secondary moods beyond two are dropped silently
    - Referenced moods, category and tags must exist (tags must be visible to the
      user), checked before the first write
    - Update fully replaces mood/tag links, keeps entry_date, leaves the streak alone
    - Create advances the streak incrementally; delete recalculates it from scratch
    - Only the owning user may update or delete an entry
    - Each operation is one transaction: commit at the end, rollback on failure
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from daybook.core.entry_rules import (
    cap_secondary_moods, count_words, mood_ids_to_check, normalize_entry_date,
)
from daybook.core.errors import (
    AuthenticationError, AuthorizationError, ConflictError, DaybookError,
    ErrorContext, NotFoundError, OperationFailedError,
)
from daybook.core.identity import Identity
from daybook.core.result import OperationResult
from daybook.infrastructure.repositories import JournalGateway
from daybook.models import EntryMood, EntryTag, JournalEntry, Mood, Tag
from daybook.services.streak_service import StreakService
from daybook.services.tag_service import visible_to

logger = logging.getLogger(__name__)


@dataclass
class EntryAssociations:
    """Mood and tag ids linked to one entry."""
    primary_mood_id: int | None = None
    secondary_mood_ids: list[int] = field(default_factory=list)
    tag_ids: list[int] = field(default_factory=list)


class EntryService:
    """Journal entry lifecycle."""

    def __init__(self, gateway: JournalGateway, streaks: StreakService | None = None):
        self.gateway = gateway
        self.streaks = streaks or StreakService(gateway)

    # ─── Mutations ──────────────────────────────────────────────

    async def create_entry(
        self,
        identity: Identity | None,
        entry_date: date | datetime,
        title: str | None,
        content: str,
        category_id: int | None,
        primary_mood_id: int,
        secondary_mood_ids: list[int] | None = None,
        tag_ids: list[int] | None = None,
    ) -> OperationResult[JournalEntry]:
        try:
            if identity is None:
                raise AuthenticationError()
            day = normalize_entry_date(entry_date)

            existing = await self.gateway.entries.first(
                JournalEntry.user_id == identity.user_id,
                JournalEntry.entry_date == day,
            )
            if existing is not None:
                raise ConflictError(
                    "An entry already exists for this date.",
                    ErrorContext(user_id=identity.user_id, entry_id=existing.id),
                )

            secondary = cap_secondary_moods(secondary_mood_ids)
            tags = list(tag_ids or [])
            await self._check_references(
                identity, category_id, primary_mood_id, secondary, tags,
            )

            now = datetime.now(timezone.utc)
            entry = await self.gateway.entries.add(JournalEntry(
                user_id=identity.user_id,
                entry_date=day,
                title=title or "",
                content=content,
                category_id=category_id,
                word_count=count_words(content),
                created_at=now,
                updated_at=now,
            ))
            await self._add_associations(entry.id, primary_mood_id, secondary, tags)
            await self.streaks.on_entry_added(identity.user_id, day)
            await self.gateway.commit()

            logger.info(
                f"Entry created for {day.isoformat()}",
                extra={"user_id": identity.user_id, "entry_id": entry.id},
            )
            return OperationResult.ok("Entry created successfully!", entry)
        except DaybookError as e:
            await self.gateway.rollback()
            return OperationResult.fail(e)
        except Exception as e:
            await self.gateway.rollback()
            logger.error(f"Failed to create entry: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError("create entry", e))

    async def update_entry(
        self,
        identity: Identity | None,
        entry_id: int,
        title: str | None,
        content: str,
        category_id: int | None,
        primary_mood_id: int,
        secondary_mood_ids: list[int] | None = None,
        tag_ids: list[int] | None = None,
    ) -> OperationResult[JournalEntry]:
        try:
            entry = await self._owned_entry(identity, entry_id)
            secondary = cap_secondary_moods(secondary_mood_ids)
            tags = list(tag_ids or [])
            await self._check_references(
                identity, category_id, primary_mood_id, secondary, tags,
            )

            entry.title = title or ""
            entry.content = content
            entry.category_id = category_id
            entry.word_count = count_words(content)
            entry.updated_at = datetime.now(timezone.utc)
            await self.gateway.entries.update(entry)

            await self._remove_associations(entry.id)
            await self._add_associations(entry.id, primary_mood_id, secondary, tags)
            await self.gateway.commit()

            logger.info(
                "Entry updated",
                extra={"user_id": identity.user_id, "entry_id": entry.id},
            )
            return OperationResult.ok("Entry updated successfully!", entry)
        except DaybookError as e:
            await self.gateway.rollback()
            return OperationResult.fail(e)
        except Exception as e:
            await self.gateway.rollback()
            logger.error(f"Failed to update entry: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError(
                "update entry", e, ErrorContext(entry_id=entry_id),
            ))

    async def delete_entry(
        self, identity: Identity | None, entry_id: int,
    ) -> OperationResult[None]:
        try:
            entry = await self._owned_entry(identity, entry_id)
            await self._remove_associations(entry.id)
            await self.gateway.entries.delete(entry)
            await self.streaks.recalculate(identity.user_id)
            await self.gateway.commit()

            logger.info(
                "Entry deleted",
                extra={"user_id": identity.user_id, "entry_id": entry_id},
            )
            return OperationResult.ok("Entry deleted successfully!")
        except DaybookError as e:
            await self.gateway.rollback()
            return OperationResult.fail(e)
        except Exception as e:
            await self.gateway.rollback()
            logger.error(f"Failed to delete entry: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError(
                "delete entry", e, ErrorContext(entry_id=entry_id),
            ))

    # ─── Reads ──────────────────────────────────────────────────

    async def get_entry_by_date(
        self, identity: Identity | None, entry_date: date | datetime,
    ) -> JournalEntry | None:
        if identity is None:
            return None
        return await self.gateway.entries.first(
            JournalEntry.user_id == identity.user_id,
            JournalEntry.entry_date == normalize_entry_date(entry_date),
        )

    async def get_entry(
        self, identity: Identity | None, entry_id: int,
    ) -> JournalEntry | None:
        if identity is None:
            return None
        entry = await self.gateway.entries.get_by_id(entry_id)
        if entry is None or entry.user_id != identity.user_id:
            return None
        return entry

    async def get_all_entries(self, identity: Identity | None) -> list[JournalEntry]:
        if identity is None:
            return []
        return await self.gateway.entries.find(
            JournalEntry.user_id == identity.user_id,
            order_by=(JournalEntry.entry_date.desc(), JournalEntry.id.desc()),
        )

    async def describe_entries(
        self, entries: list[JournalEntry],
    ) -> dict[int, EntryAssociations]:
        """Mood/tag ids for each entry, keyed by entry id."""
        ids = [e.id for e in entries]
        described = {entry_id: EntryAssociations() for entry_id in ids}
        if not ids:
            return described

        entry_moods = await self.gateway.entry_moods.find(
            EntryMood.journal_entry_id.in_(ids), order_by=(EntryMood.id,),
        )
        for link in entry_moods:
            target = described[link.journal_entry_id]
            if link.is_primary:
                target.primary_mood_id = link.mood_id
            else:
                target.secondary_mood_ids.append(link.mood_id)

        entry_tags = await self.gateway.entry_tags.find(
            EntryTag.journal_entry_id.in_(ids), order_by=(EntryTag.id,),
        )
        for link in entry_tags:
            described[link.journal_entry_id].tag_ids.append(link.tag_id)
        return described

    # ─── Helpers ────────────────────────────────────────────────

    async def _owned_entry(
        self, identity: Identity | None, entry_id: int,
    ) -> JournalEntry:
        if identity is None:
            raise AuthenticationError()
        entry = await self.gateway.entries.get_by_id(entry_id)
        if entry is None:
            raise NotFoundError("Entry", entry_id)
        if entry.user_id != identity.user_id:
            raise AuthorizationError(
                "Entry", entry_id,
                ErrorContext(user_id=identity.user_id, entry_id=entry_id),
            )
        return entry

    async def _check_references(
        self,
        identity: Identity,
        category_id: int | None,
        primary_mood_id: int,
        secondary_mood_ids: list[int],
        tag_ids: list[int],
    ) -> None:
        mood_ids = mood_ids_to_check(primary_mood_id, secondary_mood_ids)
        found_moods = {
            m.id for m in await self.gateway.moods.find(Mood.id.in_(sorted(mood_ids)))
        }
        missing_moods = sorted(mood_ids - found_moods)
        if missing_moods:
            raise NotFoundError("Mood", missing_moods[0])

        if category_id is not None:
            if await self.gateway.categories.get_by_id(category_id) is None:
                raise NotFoundError("Category", category_id)

        if tag_ids:
            wanted = set(tag_ids)
            found_tags = {
                t.id for t in await self.gateway.tags.find(
                    Tag.id.in_(sorted(wanted)), visible_to(identity.user_id),
                )
            }
            missing_tags = sorted(wanted - found_tags)
            if missing_tags:
                raise NotFoundError("Tag", missing_tags[0])

    async def _add_associations(
        self,
        entry_id: int,
        primary_mood_id: int,
        secondary_mood_ids: list[int],
        tag_ids: list[int],
    ) -> None:
        await self.gateway.entry_moods.add(EntryMood(
            journal_entry_id=entry_id, mood_id=primary_mood_id, is_primary=True,
        ))
        for mood_id in secondary_mood_ids:
            await self.gateway.entry_moods.add(EntryMood(
                journal_entry_id=entry_id, mood_id=mood_id, is_primary=False,
            ))
        for tag_id in tag_ids:
            await self.gateway.entry_tags.add(EntryTag(
                journal_entry_id=entry_id, tag_id=tag_id,
            ))

    async def _remove_associations(self, entry_id: int) -> None:
        for link in await self.gateway.entry_moods.find(
            EntryMood.journal_entry_id == entry_id,
        ):
            await self.gateway.entry_moods.delete(link)
        for link in await self.gateway.entry_tags.find(
            EntryTag.journal_entry_id == entry_id,
        ):
            await self.gateway.entry_tags.delete(link)
