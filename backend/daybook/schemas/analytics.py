"""Analytics & Streak Schemas — read-only derived views.

Invariants:
    - Percentages are 0-100 floats, never fractions
    - Trend maps are keyed by ISO date, ascending
"""

from datetime import date

from pydantic import BaseModel, ConfigDict

from daybook.schemas.catalog import MoodResponse, TagResponse


class StreakResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    current_streak: int = 0
    longest_streak: int = 0
    last_entry_date: date | None = None


class MissedDaysResponse(BaseModel):
    start: date
    end: date
    missed_days: list[date]


class MoodCount(BaseModel):
    mood: MoodResponse
    count: int


class TagCount(BaseModel):
    tag: TagResponse
    count: int


class AverageWordCount(BaseModel):
    average_word_count: float


class StatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_entries: int
    current_streak: int
    longest_streak: int
    most_frequent_mood: str | None
    mood_distribution: dict[str, float]
    top_tags: dict[str, int]
