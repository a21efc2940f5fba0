"""Category ORM — shared reference data; entries optionally point at one."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from daybook.db.base import Base


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    color: Mapped[str] = mapped_column(String(7), nullable=False, default="")
