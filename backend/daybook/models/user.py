"""User ORM — account credentials and optional quick-unlock PIN.

Invariants:
    - username_key = casefolded username; unique, and the only column
      lookups compare on
    - password_hash/salt are base64 PBKDF2 output, never plaintext
    - pin_hash/pin_salt are both set or both NULL
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from daybook.db.base import Base


class User(Base):
    """User entity: owns entries, custom tags and exactly one streak."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    username_key: Mapped[str] = mapped_column(String(150), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)
    salt: Mapped[str] = mapped_column(String(128), nullable=False)
    pin_hash: Mapped[str | None] = mapped_column(String(128), nullable=True)
    pin_salt: Mapped[str | None] = mapped_column(String(128), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    @property
    def has_pin(self) -> bool:
        return self.pin_hash is not None
