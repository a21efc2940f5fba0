"""Export Service — renders a user's entries in a date range as plain text.

Invariants:
    - Owner-scoped; None identity fails with AuthenticationError
    - An empty range fails with NotFoundError (nothing to export)
    - Ids resolved to names here; core.export_format never sees ORM rows
"""

import logging
from datetime import date

from daybook.core.errors import (
    AuthenticationError, DaybookError, ErrorContext, NotFoundError,
    OperationFailedError, ValidationError,
)
from daybook.core.export_format import ExportEntry, ExportMood, render_text_export
from daybook.core.identity import Identity
from daybook.core.result import OperationResult
from daybook.infrastructure.repositories import JournalGateway
from daybook.models import Category, EntryMood, EntryTag, JournalEntry, Mood, Tag

logger = logging.getLogger(__name__)


class ExportService:
    """Plain-text journal export."""

    def __init__(self, gateway: JournalGateway):
        self.gateway = gateway

    async def export_text(
        self, identity: Identity | None, start: date, end: date,
    ) -> OperationResult[str]:
        try:
            if identity is None:
                raise AuthenticationError()
            if end < start:
                raise ValidationError("End date must not be before start date.", "end")

            entries = await self.gateway.entries.find(
                JournalEntry.user_id == identity.user_id,
                JournalEntry.entry_date >= start,
                JournalEntry.entry_date <= end,
                order_by=(JournalEntry.entry_date,),
            )
            if not entries:
                raise NotFoundError(
                    "Entries", f"{start.isoformat()}..{end.isoformat()}",
                    ErrorContext(user_id=identity.user_id),
                )

            projections = await self._project(entries)
            text = render_text_export(identity.username, start, end, projections)
            logger.info(
                f"Exported {len(entries)} entries",
                extra={"user_id": identity.user_id, "operation": "export_text"},
            )
            return OperationResult.ok("Export generated successfully!", text)
        except DaybookError as e:
            return OperationResult.fail(e)
        except Exception as e:
            logger.error(f"Failed to export entries: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError("export entries", e))

    async def _project(self, entries: list[JournalEntry]) -> list[ExportEntry]:
        ids = [e.id for e in entries]
        mood_links = await self.gateway.entry_moods.find(
            EntryMood.journal_entry_id.in_(ids),
            order_by=(EntryMood.is_primary.desc(), EntryMood.id),
        )
        tag_links = await self.gateway.entry_tags.find(
            EntryTag.journal_entry_id.in_(ids), order_by=(EntryTag.id,),
        )
        moods = {m.id: m for m in await self.gateway.moods.find()}
        tags = {t.id: t.name for t in await self.gateway.tags.find(
            Tag.id.in_(sorted({link.tag_id for link in tag_links})),
        )} if tag_links else {}
        categories = {c.id: c.name for c in await self.gateway.categories.find(
            Category.id.in_(sorted({e.category_id for e in entries if e.category_id})),
        )}

        projections = {
            e.id: ExportEntry(
                entry_date=e.entry_date,
                title=e.title,
                content=e.content,
                word_count=e.word_count,
                created_at=e.created_at,
                updated_at=e.updated_at,
                category=categories.get(e.category_id),
            )
            for e in entries
        }
        for link in mood_links:
            mood: Mood | None = moods.get(link.mood_id)
            if mood is not None:
                projections[link.journal_entry_id].moods.append(
                    ExportMood(name=mood.name, icon=mood.icon, is_primary=link.is_primary),
                )
        for link in tag_links:
            if link.tag_id in tags:
                projections[link.journal_entry_id].tags.append(tags[link.tag_id])
        return [projections[e.id] for e in entries]
