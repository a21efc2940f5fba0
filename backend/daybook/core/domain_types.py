"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int so user ids never mix with entity ids
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Limits ──────────────────────────────────────────────────────

MIN_USERNAME_LENGTH: int = 3
MIN_PASSWORD_LENGTH: int = 6
PIN_LENGTH: int = 4
MAX_SECONDARY_MOODS: int = 2
DASHBOARD_TOP_TAGS: int = 5
DEFAULT_TOP_TAGS: int = 10


# ─── Enums ───────────────────────────────────────────────────────

class MoodCategory(str, Enum):
    """Mood polarity, maps to DB `moods.category`."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"

    @property
    def label(self) -> str:
        return self.value.capitalize()
