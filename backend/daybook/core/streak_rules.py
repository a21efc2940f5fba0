"""Streak Rules — pure streak state transitions driven by entry dates.

Invariants:
    - current <= longest in every snapshot this module returns
    - advance_streak assumes non-decreasing dates; callers detect backdating
      with is_backdated() and fall back to compute_streak()
    - compute_streak is authoritative: longest is derived from the dates alone,
      never merged with a previous value
    - A streak whose last entry is more than one day before `today` has lapsed
      (current = 0), applied only by compute_streak

Design Decisions:
    - StreakSnapshot is a frozen value; the shell copies it onto the ORM row
    - `today` is a parameter so recomputation is deterministic under test
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable


@dataclass(frozen=True)
class StreakSnapshot:
    """Streak counters for one user."""
    current: int = 0
    longest: int = 0
    last_entry_date: date | None = None


def day_gap(later: date, earlier: date) -> int:
    """Whole days from `earlier` to `later` (negative if `later` is before)."""
    return (later - earlier).days


def is_backdated(snapshot: StreakSnapshot, entry_date: date) -> bool:
    """True when an entry lands before the last recorded entry date."""
    return (
        snapshot.last_entry_date is not None
        and day_gap(entry_date, snapshot.last_entry_date) < 0
    )


def advance_streak(snapshot: StreakSnapshot, entry_date: date) -> StreakSnapshot:
    """Incremental update for a newly added entry on `entry_date`."""
    if snapshot.last_entry_date is None:
        return StreakSnapshot(
            current=1, longest=max(snapshot.longest, 1), last_entry_date=entry_date,
        )

    gap = day_gap(entry_date, snapshot.last_entry_date)
    if gap == 1:
        current = snapshot.current + 1
        return StreakSnapshot(
            current=current,
            longest=max(snapshot.longest, current),
            last_entry_date=entry_date,
        )
    if gap > 1:
        return StreakSnapshot(
            current=1,
            longest=max(snapshot.longest, 1),
            last_entry_date=entry_date,
        )
    # same-day re-entry
    return snapshot


def compute_streak(entry_dates: Iterable[date], today: date) -> StreakSnapshot:
    """Recompute streak counters from the full set of surviving entry dates."""
    dates = sorted(set(entry_dates))
    if not dates:
        return StreakSnapshot()

    current = 1
    longest = 1
    for previous, following in zip(dates, dates[1:]):
        if day_gap(following, previous) == 1:
            current += 1
            longest = max(longest, current)
        else:
            current = 1

    last = dates[-1]
    if day_gap(today, last) > 1:
        current = 0

    return StreakSnapshot(current=current, longest=longest, last_entry_date=last)


def find_missed_days(
    entry_dates: Iterable[date], start: date, end: date,
) -> list[date]:
    """Every day in [start, end] without an entry, ascending."""
    written = set(entry_dates)
    missed = []
    day = start
    while day <= end:
        if day not in written:
            missed.append(day)
        day += timedelta(days=1)
    return missed
