"""Entry Rules — word counting, date normalization and mood-selection limits.

Invariants:
    - Word count = whitespace-delimited (space, tab, LF, CR) non-empty tokens
    - Entry dates carry no time-of-day; no timezone conversion happens here
    - At most MAX_SECONDARY_MOODS secondary moods survive; extras are dropped, not rejected
"""

import re
from datetime import date, datetime

from daybook.core.domain_types import MAX_SECONDARY_MOODS

_WORD_SEPARATORS = re.compile(r"[ \t\n\r]+")


def count_words(content: str | None) -> int:
    """Count space/tab/newline/carriage-return delimited tokens."""
    if not content or not content.strip():
        return 0
    return sum(1 for token in _WORD_SEPARATORS.split(content) if token)


def normalize_entry_date(value: date | datetime) -> date:
    """Truncate a date-time to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def cap_secondary_moods(mood_ids: list[int] | None) -> list[int]:
    """Keep the first MAX_SECONDARY_MOODS secondary mood ids in caller order."""
    if not mood_ids:
        return []
    return list(mood_ids[:MAX_SECONDARY_MOODS])


def mood_ids_to_check(primary_mood_id: int, secondary_mood_ids: list[int]) -> set[int]:
    """All mood ids an entry write will reference."""
    return {primary_mood_id, *secondary_mood_ids}
