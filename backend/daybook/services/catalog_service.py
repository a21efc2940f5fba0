"""Catalog Service — read access to reference data and one-time seeding.

Invariants:
    - seed_reference_data is a no-op once the mood table has rows
    - Rows inserted in core.seed_catalog order, so a fresh database numbers
      them 1..N
"""

import logging

from daybook.core.seed_catalog import CATEGORIES, MOODS, PREBUILT_TAGS
from daybook.infrastructure.repositories import JournalGateway
from daybook.models import Category, Mood, Tag

logger = logging.getLogger(__name__)


async def seed_reference_data(gateway: JournalGateway) -> bool:
    """Load moods, pre-built tags and categories into an empty database.

    Returns True when data was inserted.
    """
    if await gateway.moods.count() > 0:
        return False

    await gateway.moods.add_all([
        Mood(name=m.name, category=m.category.value, color=m.color, icon=m.icon)
        for m in MOODS
    ])
    await gateway.tags.add_all([
        Tag(name=name, is_custom=False, user_id=None)
        for name in PREBUILT_TAGS
    ])
    await gateway.categories.add_all([
        Category(name=c.name, description=c.description, color=c.color)
        for c in CATEGORIES
    ])
    await gateway.commit()
    logger.info(
        f"Seeded {len(MOODS)} moods, {len(PREBUILT_TAGS)} tags, "
        f"{len(CATEGORIES)} categories",
    )
    return True


class CatalogService:
    """Moods and categories (tags live in TagService)."""

    def __init__(self, gateway: JournalGateway):
        self.gateway = gateway

    async def list_moods(self) -> list[Mood]:
        return await self.gateway.moods.find(order_by=(Mood.id,))

    async def list_categories(self) -> list[Category]:
        return await self.gateway.categories.find(order_by=(Category.id,))
