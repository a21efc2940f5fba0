"""EntryMood ORM — links an entry to a catalogue mood.

Invariants:
    - Exactly one is_primary row per entry
    - At most two non-primary rows per entry
"""

from sqlalchemy import Integer, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from daybook.db.base import Base


class EntryMood(Base):
    __tablename__ = "entry_moods"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    journal_entry_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("journal_entries.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    mood_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("moods.id"), nullable=False,
    )
    is_primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
