"""Streak Service — loads/stores Streak rows around the pure streak rules.

Invariants:
    - on_entry_added is O(1) for in-order dates; a backdated date triggers recalculate()
    - recalculate() overwrites both counters from the surviving entries
    - Neither method commits; the calling operation owns the transaction

Design Decisions:
    - `clock` injectable so the lapse rule ("today") is testable
"""

import logging
from datetime import date, datetime, timezone
from typing import Callable

from daybook.core.streak_rules import (
    StreakSnapshot, advance_streak, compute_streak, find_missed_days, is_backdated,
)
from daybook.infrastructure.repositories import JournalGateway
from daybook.models import JournalEntry, Streak

logger = logging.getLogger(__name__)


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def _snapshot(streak: Streak) -> StreakSnapshot:
    return StreakSnapshot(
        current=streak.current_streak,
        longest=streak.longest_streak,
        last_entry_date=streak.last_entry_date,
    )


def _apply(streak: Streak, snapshot: StreakSnapshot) -> None:
    streak.current_streak = snapshot.current
    streak.longest_streak = snapshot.longest
    streak.last_entry_date = snapshot.last_entry_date
    streak.updated_at = datetime.now(timezone.utc)


class StreakService:
    """Per-user streak maintenance."""

    def __init__(
        self, gateway: JournalGateway, clock: Callable[[], date] = utc_today,
    ):
        self.gateway = gateway
        self.clock = clock

    async def _load_or_create(self, user_id: int) -> Streak:
        streak = await self.gateway.streaks.first(Streak.user_id == user_id)
        if streak is None:
            streak = await self.gateway.streaks.add(
                Streak(user_id=user_id, current_streak=0, longest_streak=0),
            )
        return streak

    async def on_entry_added(self, user_id: int, entry_date: date) -> Streak:
        """Incremental update after an entry is created."""
        streak = await self._load_or_create(user_id)
        snapshot = _snapshot(streak)
        if is_backdated(snapshot, entry_date):
            logger.info(
                "Backdated entry, recalculating streak",
                extra={"user_id": user_id, "operation": "streak_update"},
            )
            return await self.recalculate(user_id)

        _apply(streak, advance_streak(snapshot, entry_date))
        await self.gateway.streaks.update(streak)
        return streak

    async def recalculate(self, user_id: int) -> Streak:
        """Recompute the streak from every surviving entry of the user."""
        entries = await self.gateway.entries.find(
            JournalEntry.user_id == user_id,
            order_by=(JournalEntry.entry_date,),
        )
        streak = await self._load_or_create(user_id)
        _apply(streak, compute_streak((e.entry_date for e in entries), self.clock()))
        await self.gateway.streaks.update(streak)
        logger.debug(
            f"Streak recalculated: current={streak.current_streak} "
            f"longest={streak.longest_streak}",
            extra={"user_id": user_id, "operation": "streak_recalculate"},
        )
        return streak

    async def get_streak(self, user_id: int) -> Streak | None:
        return await self.gateway.streaks.first(Streak.user_id == user_id)

    async def get_missed_days(
        self, user_id: int, start: date, end: date,
    ) -> list[date]:
        """Days in [start, end] without an entry, ascending."""
        if end < start:
            return []
        entries = await self.gateway.entries.find(
            JournalEntry.user_id == user_id,
            JournalEntry.entry_date >= start,
            JournalEntry.entry_date <= end,
        )
        return find_missed_days((e.entry_date for e in entries), start, end)
