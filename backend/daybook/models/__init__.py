"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root for entries, custom tags and the streak
    - Entities store foreign keys only, no relationship() back-pointers

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
"""

from daybook.models.user import User  # noqa: F401
from daybook.models.streak import Streak  # noqa: F401
from daybook.models.category import Category  # noqa: F401
from daybook.models.mood import Mood  # noqa: F401
from daybook.models.tag import Tag  # noqa: F401
from daybook.models.journal_entry import JournalEntry  # noqa: F401
from daybook.models.entry_mood import EntryMood  # noqa: F401
from daybook.models.entry_tag import EntryTag  # noqa: F401
