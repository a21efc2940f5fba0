"""Seed Catalogue — reference data loaded once into an empty database.

Invariants:
    - 15 moods, 5 per MoodCategory
    - 31 pre-built (non-custom, ownerless) tags with unique names
    - 5 categories
    - Order is significant: a fresh database numbers rows 1..N in this order
"""

from typing import NamedTuple

from daybook.core.domain_types import MoodCategory


class MoodSeed(NamedTuple):
    name: str
    category: MoodCategory
    color: str
    icon: str


class CategorySeed(NamedTuple):
    name: str
    description: str
    color: str


MOODS: tuple[MoodSeed, ...] = (
    MoodSeed("Happy", MoodCategory.POSITIVE, "#FFD700", "😊"),
    MoodSeed("Excited", MoodCategory.POSITIVE, "#FF6B6B", "🤩"),
    MoodSeed("Relaxed", MoodCategory.POSITIVE, "#4ECDC4", "😌"),
    MoodSeed("Grateful", MoodCategory.POSITIVE, "#95E1D3", "🙏"),
    MoodSeed("Confident", MoodCategory.POSITIVE, "#F38181", "💪"),
    MoodSeed("Calm", MoodCategory.NEUTRAL, "#A8E6CF", "😐"),
    MoodSeed("Thoughtful", MoodCategory.NEUTRAL, "#DCEDC1", "🤔"),
    MoodSeed("Curious", MoodCategory.NEUTRAL, "#FFD3B6", "🧐"),
    MoodSeed("Nostalgic", MoodCategory.NEUTRAL, "#FFAAA5", "😌"),
    MoodSeed("Bored", MoodCategory.NEUTRAL, "#C7CEEA", "😑"),
    MoodSeed("Sad", MoodCategory.NEGATIVE, "#6C5CE7", "😢"),
    MoodSeed("Angry", MoodCategory.NEGATIVE, "#E74C3C", "😠"),
    MoodSeed("Stressed", MoodCategory.NEGATIVE, "#E67E22", "😰"),
    MoodSeed("Lonely", MoodCategory.NEGATIVE, "#95A5A6", "😔"),
    MoodSeed("Anxious", MoodCategory.NEGATIVE, "#9B59B6", "😟"),
)

PREBUILT_TAGS: tuple[str, ...] = (
    "Work", "Career", "Studies", "Family", "Friends", "Relationships",
    "Health", "Fitness", "Personal Growth", "Self-care", "Hobbies", "Travel",
    "Nature", "Finance", "Spirituality", "Birthday", "Holiday", "Vacation",
    "Celebration", "Exercise", "Reading", "Writing", "Cooking", "Meditation",
    "Yoga", "Music", "Shopping", "Parenting", "Projects", "Planning",
    "Reflection",
)

CATEGORIES: tuple[CategorySeed, ...] = (
    CategorySeed("Personal", "Personal thoughts and reflections", "#3498DB"),
    CategorySeed("Professional", "Work and career related", "#2ECC71"),
    CategorySeed("Health & Wellness", "Physical and mental health", "#E74C3C"),
    CategorySeed("Relationships", "Family, friends, and relationships", "#F39C12"),
    CategorySeed("Goals & Dreams", "Aspirations and achievements", "#9B59B6"),
)
