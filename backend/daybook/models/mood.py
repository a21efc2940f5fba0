"""Mood ORM — immutable catalogue entry (name, polarity, color, icon).

Invariants:
    - category is a MoodCategory value
    - Not user-owned; seeded once by seed_reference_data
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from daybook.core.domain_types import MoodCategory
from daybook.db.base import Base


class Mood(Base):
    """Mood entity (reference data)."""
    __tablename__ = "moods"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    category: Mapped[str] = mapped_column(String(20), nullable=False)
    color: Mapped[str] = mapped_column(String(7), nullable=False, default="")
    icon: Mapped[str] = mapped_column(String(16), nullable=False, default="")

    @property
    def mood_category(self) -> MoodCategory:
        return MoodCategory(self.category)
