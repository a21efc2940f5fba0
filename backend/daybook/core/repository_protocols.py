"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Persistence is reached only through Repository[T]
    - Entities hold foreign keys only; lookups go through find()

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; pure core functions never await
"""

from datetime import date, datetime
from typing import Any, Protocol, Sequence, TypeVar

T = TypeVar("T")


class Repository(Protocol[T]):
    """Generic persistence gateway for one entity type, implemented by shell."""
    async def get_by_id(self, entity_id: int) -> T | None: ...
    async def find(self, *criteria: Any, order_by: Sequence[Any] = ()) -> list[T]: ...
    async def first(self, *criteria: Any) -> T | None: ...
    async def count(self, *criteria: Any) -> int: ...
    async def add(self, entity: T) -> T: ...
    async def add_all(self, entities: Sequence[T]) -> list[T]: ...
    async def update(self, entity: T) -> None: ...
    async def delete(self, entity: T) -> None: ...
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...


class EntryLike(Protocol):
    """Structural contract for journal entries handed to pure core functions."""
    id: int
    user_id: int
    entry_date: date
    title: str
    content: str
    word_count: int
    category_id: int | None
    created_at: datetime
    updated_at: datetime
