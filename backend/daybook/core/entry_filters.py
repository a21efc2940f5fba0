"""Entry Filters — pure predicates and ordering for search results.

Invariants:
    - Text match is a case-insensitive substring test on title OR content
    - A blank term never means "match everything" in search_by_text
    - Date bounds are inclusive; an omitted bound is unbounded on that side
    - Results are ordered newest first (date desc, then id desc)
"""

from datetime import date
from typing import Iterable, Sequence, TypeVar

from daybook.core.repository_protocols import EntryLike

E = TypeVar("E", bound=EntryLike)


def is_blank(term: str | None) -> bool:
    return term is None or not term.strip()


def matches_text(entry: EntryLike, term: str) -> bool:
    """Case-insensitive substring match on title or content."""
    needle = term.casefold()
    return (
        needle in (entry.title or "").casefold()
        or needle in (entry.content or "").casefold()
    )


def within_range(
    entry: EntryLike, start: date | None = None, end: date | None = None,
) -> bool:
    if start is not None and entry.entry_date < start:
        return False
    if end is not None and entry.entry_date > end:
        return False
    return True


def newest_first(entries: Iterable[E]) -> list[E]:
    return sorted(entries, key=lambda e: (e.entry_date, e.id), reverse=True)


def search_text(entries: Iterable[E], term: str | None) -> list[E]:
    """Text search; blank term yields nothing."""
    if is_blank(term):
        return []
    return newest_first(e for e in entries if matches_text(e, term))


def apply_filters(
    entries: Sequence[E],
    term: str | None = None,
    start: date | None = None,
    end: date | None = None,
    mood_entry_ids: set[int] | None = None,
    tag_entry_ids: set[int] | None = None,
) -> list[E]:
    """AND every provided predicate; None means the predicate was omitted.

    mood_entry_ids / tag_entry_ids are the ids of entries that carry at least
    one of the requested moods / tags (union semantics inside each filter).
    """
    result = list(entries)
    if not is_blank(term):
        result = [e for e in result if matches_text(e, term)]
    if start is not None or end is not None:
        result = [e for e in result if within_range(e, start, end)]
    if mood_entry_ids is not None:
        result = [e for e in result if e.id in mood_entry_ids]
    if tag_entry_ids is not None:
        result = [e for e in result if e.id in tag_entry_ids]
    return newest_first(result)
