"""Streak ORM — per-user running and longest journaling streak.

Invariants:
    - Exactly one row per user (unique user_id), created at registration
    - current_streak <= longest_streak
    - last_entry_date NULL iff the user has no counted entries
"""

from datetime import date, datetime, timezone

from sqlalchemy import Integer, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from daybook.db.base import Base


class Streak(Base):
    """Streak entity, derived state maintained by StreakService."""
    __tablename__ = "streaks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    current_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    longest_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_entry_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
