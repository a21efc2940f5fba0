"""Tag ORM — pre-built (shared) or custom (owned by one user).

Invariants:
    - is_custom False ⇔ user_id NULL
    - Names unique, case-insensitively, within one user's visible scope
      (pre-built ∪ own custom); enforced by TagService
"""

from sqlalchemy import Integer, String, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from daybook.db.base import Base


class Tag(Base):
    """Tag entity."""
    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    is_custom: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=True,
    )
