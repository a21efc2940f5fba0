"""Analytics Service — windowed aggregates over one user's entries.

Invariants:
    - Read-only; every query scoped to the caller, None identity → empty result
    - Window bounds are inclusive and optional (omitted = unbounded that side)
    - dashboard_stats.total_entries is all-time, every other field windowed
    - Mood frequency counts primary moods only; tag frequency counts every
      entry-tag link in the window
"""

from datetime import date

from sqlalchemy import select

from daybook.core import analytics
from daybook.core.domain_types import DASHBOARD_TOP_TAGS, DEFAULT_TOP_TAGS, MoodCategory
from daybook.core.identity import Identity
from daybook.infrastructure.repositories import JournalGateway
from daybook.models import EntryMood, EntryTag, JournalEntry, Mood, Tag
from daybook.services.streak_service import StreakService


def _window(user_id: int, start: date | None, end: date | None) -> list:
    criteria = [JournalEntry.user_id == user_id]
    if start is not None:
        criteria.append(JournalEntry.entry_date >= start)
    if end is not None:
        criteria.append(JournalEntry.entry_date <= end)
    return criteria


def _window_entry_ids(user_id: int, start: date | None, end: date | None):
    return select(JournalEntry.id).where(*_window(user_id, start, end))


class AnalyticsService:
    """Derived statistics for dashboards and charts."""

    def __init__(self, gateway: JournalGateway, streaks: StreakService | None = None):
        self.gateway = gateway
        self.streaks = streaks or StreakService(gateway)

    async def _entries(
        self, identity: Identity, start: date | None, end: date | None,
    ) -> list[JournalEntry]:
        return await self.gateway.entries.find(*_window(identity.user_id, start, end))

    async def _primary_moods(
        self, identity: Identity, start: date | None, end: date | None,
    ) -> list[EntryMood]:
        return await self.gateway.entry_moods.find(
            EntryMood.is_primary.is_(True),
            EntryMood.journal_entry_id.in_(
                _window_entry_ids(identity.user_id, start, end),
            ),
        )

    async def _ranked_tags(
        self, identity: Identity, start: date | None, end: date | None,
    ) -> list[tuple[Tag, int]]:
        links = await self.gateway.entry_tags.find(
            EntryTag.journal_entry_id.in_(
                _window_entry_ids(identity.user_id, start, end),
            ),
        )
        ranked = analytics.rank_by_frequency(link.tag_id for link in links)
        if not ranked:
            return []
        tags = {
            t.id: t for t in await self.gateway.tags.find(
                Tag.id.in_([tag_id for tag_id, _ in ranked]),
            )
        }
        return [(tags[tag_id], count) for tag_id, count in ranked if tag_id in tags]

    async def mood_distribution(
        self,
        identity: Identity | None,
        start: date | None = None,
        end: date | None = None,
    ) -> dict[MoodCategory, float]:
        if identity is None:
            return analytics.mood_distribution([])
        links = await self._primary_moods(identity, start, end)
        if not links:
            return analytics.mood_distribution([])
        categories = {
            m.id: m.mood_category for m in await self.gateway.moods.find(
                Mood.id.in_(sorted({link.mood_id for link in links})),
            )
        }
        return analytics.mood_distribution(
            categories[link.mood_id] for link in links if link.mood_id in categories
        )

    async def most_frequent_mood(
        self,
        identity: Identity | None,
        start: date | None = None,
        end: date | None = None,
    ) -> tuple[Mood, int] | None:
        if identity is None:
            return None
        links = await self._primary_moods(identity, start, end)
        ranked = analytics.rank_by_frequency(link.mood_id for link in links)
        if not ranked:
            return None
        mood_id, count = ranked[0]
        mood = await self.gateway.moods.get_by_id(mood_id)
        return (mood, count) if mood is not None else None

    async def most_used_tags(
        self,
        identity: Identity | None,
        start: date | None = None,
        end: date | None = None,
        top_n: int = DEFAULT_TOP_TAGS,
    ) -> list[tuple[Tag, int]]:
        if identity is None or top_n <= 0:
            return []
        return (await self._ranked_tags(identity, start, end))[:top_n]

    async def tag_breakdown(
        self,
        identity: Identity | None,
        start: date | None = None,
        end: date | None = None,
    ) -> dict[str, float]:
        if identity is None:
            return {}
        total = await self.gateway.entries.count(*_window(identity.user_id, start, end))
        ranked = await self._ranked_tags(identity, start, end)
        return analytics.tag_breakdown(
            [(tag.name, count) for tag, count in ranked], total,
        )

    async def average_word_count(
        self,
        identity: Identity | None,
        start: date | None = None,
        end: date | None = None,
    ) -> float:
        if identity is None:
            return 0.0
        return analytics.average_word_count(await self._entries(identity, start, end))

    async def word_count_trend(
        self,
        identity: Identity | None,
        start: date | None = None,
        end: date | None = None,
    ) -> dict[date, int]:
        if identity is None:
            return {}
        return analytics.word_count_trend(await self._entries(identity, start, end))

    async def recent_word_count_trend(
        self, identity: Identity | None, last_n: int = 30,
    ) -> dict[date, int]:
        """Word counts of the `last_n` most recent entries, ascending by date."""
        if identity is None:
            return {}
        return analytics.recent_word_count_trend(
            await self._entries(identity, None, None), last_n,
        )

    async def dashboard_stats(
        self,
        identity: Identity | None,
        start: date | None = None,
        end: date | None = None,
    ) -> analytics.JournalStats:
        if identity is None:
            return analytics.JournalStats(
                mood_distribution={
                    c.label: share for c, share in analytics.mood_distribution([]).items()
                },
            )

        total = await self.gateway.entries.count(JournalEntry.user_id == identity.user_id)
        streak = await self.streaks.get_streak(identity.user_id)
        top_mood = await self.most_frequent_mood(identity, start, end)
        distribution = await self.mood_distribution(identity, start, end)
        top_tags = await self.most_used_tags(identity, start, end, DASHBOARD_TOP_TAGS)

        return analytics.JournalStats(
            total_entries=total,
            current_streak=streak.current_streak if streak else 0,
            longest_streak=streak.longest_streak if streak else 0,
            most_frequent_mood=top_mood[0].name if top_mood else None,
            mood_distribution={c.label: share for c, share in distribution.items()},
            top_tags={tag.name: count for tag, count in top_tags},
        )
