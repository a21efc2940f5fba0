"""Analytics — pure aggregation over a window of journal entries.

Invariants:
    - mood_distribution always has all three MoodCategory keys; values sum to
      100 when there is data, all zero otherwise
    - Only primary moods feed mood_distribution / most frequent mood
    - Frequency ties break by lowest id (deterministic across databases)
    - tag_breakdown divides by total entries in window, not total tag uses,
      so values need not sum to 100
    - Never raises: empty inputs produce zeros / empty collections
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Sequence

from daybook.core.domain_types import MoodCategory
from daybook.core.repository_protocols import EntryLike


@dataclass
class JournalStats:
    """Dashboard statistics. total_entries is all-time; the rest are windowed."""
    total_entries: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    most_frequent_mood: str | None = None
    mood_distribution: dict[str, float] = field(default_factory=dict)
    top_tags: dict[str, int] = field(default_factory=dict)


def mood_distribution(
    primary_categories: Iterable[MoodCategory],
) -> dict[MoodCategory, float]:
    """Percentage share of each category among primary moods."""
    counts = Counter(primary_categories)
    total = sum(counts.values())
    return {
        category: (counts[category] / total * 100) if total else 0.0
        for category in MoodCategory
    }


def rank_by_frequency(ids: Iterable[int]) -> list[tuple[int, int]]:
    """(id, count) pairs, most frequent first, ties by lowest id."""
    counts = Counter(ids)
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


def tag_breakdown(
    tag_counts: Sequence[tuple[str, int]], total_entries: int,
) -> dict[str, float]:
    """Share of in-window entries carrying each tag, in percent."""
    if total_entries <= 0:
        return {}
    return {name: count / total_entries * 100 for name, count in tag_counts}


def average_word_count(entries: Sequence[EntryLike]) -> float:
    if not entries:
        return 0.0
    return sum(e.word_count for e in entries) / len(entries)


def word_count_trend(entries: Iterable[EntryLike]) -> dict[date, int]:
    """Word count per entry date, ascending."""
    return {
        e.entry_date: e.word_count
        for e in sorted(entries, key=lambda e: e.entry_date)
    }


def recent_word_count_trend(
    entries: Iterable[EntryLike], last_n: int,
) -> dict[date, int]:
    """Word count trend restricted to the `last_n` most recent entries."""
    if last_n <= 0:
        return {}
    latest = sorted(entries, key=lambda e: e.entry_date, reverse=True)[:last_n]
    return word_count_trend(latest)
