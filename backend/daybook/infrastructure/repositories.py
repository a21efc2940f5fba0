"""SQL Repositories — SQLAlchemy implementation of the Repository[T] gateway.

Invariants:
    - One AsyncSession shared by every repository of a JournalGateway, so a
      single commit() covers entry + associations + streak writes
    - add/update/delete flush immediately (ids assigned, read-your-writes)
      but never commit; commit() and rollback() are explicit
    - find() criteria are SQLAlchemy column expressions

Design Decisions:
    - Generic SqlRepository over one class per entity: the gateway contract is
      identical for every table
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from daybook.core.repository_protocols import Repository
from daybook.models import (
    User, Streak, Category, Mood, Tag, JournalEntry, EntryMood, EntryTag,
)

T = TypeVar("T")


class SqlRepository(Generic[T]):
    """Repository[T] backed by an AsyncSession."""

    def __init__(self, db: AsyncSession, model: type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: int) -> T | None:
        return await self.db.get(self.model, entity_id)

    async def find(self, *criteria: Any, order_by: Sequence[Any] = ()) -> list[T]:
        query = select(self.model)
        if criteria:
            query = query.where(*criteria)
        if order_by:
            query = query.order_by(*order_by)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def first(self, *criteria: Any) -> T | None:
        result = await self.db.execute(select(self.model).where(*criteria).limit(1))
        return result.scalar_one_or_none()

    async def count(self, *criteria: Any) -> int:
        query = select(func.count()).select_from(self.model)
        if criteria:
            query = query.where(*criteria)
        result = await self.db.execute(query)
        return int(result.scalar_one())

    async def add(self, entity: T) -> T:
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def add_all(self, entities: Sequence[T]) -> list[T]:
        self.db.add_all(list(entities))
        await self.db.flush()
        return list(entities)

    async def update(self, entity: T) -> None:
        self.db.add(entity)
        await self.db.flush()

    async def delete(self, entity: T) -> None:
        await self.db.delete(entity)
        await self.db.flush()

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()


class JournalGateway:
    """All repositories for one logical session (one AsyncSession)."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users: Repository[User] = SqlRepository(db, User)
        self.streaks: Repository[Streak] = SqlRepository(db, Streak)
        self.categories: Repository[Category] = SqlRepository(db, Category)
        self.moods: Repository[Mood] = SqlRepository(db, Mood)
        self.tags: Repository[Tag] = SqlRepository(db, Tag)
        self.entries: Repository[JournalEntry] = SqlRepository(db, JournalEntry)
        self.entry_moods: Repository[EntryMood] = SqlRepository(db, EntryMood)
        self.entry_tags: Repository[EntryTag] = SqlRepository(db, EntryTag)

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()
