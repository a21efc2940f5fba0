"""Tag Service — pre-built and custom tags visible to a user.

Invariants:
    - A user sees every pre-built tag plus only their own custom tags
    - Custom tag names are unique case-insensitively within that visible scope,
      compared by str.casefold() over the visible tags
    - Pre-built tags cannot be deleted; custom tags only by their owner
    - Deleting a custom tag removes its entry links in the same transaction
"""

import logging

from sqlalchemy import or_

from daybook.core.errors import (
    AuthenticationError, AuthorizationError, ConflictError, DaybookError,
    ErrorContext, NotFoundError, OperationFailedError, ValidationError,
)
from daybook.core.identity import Identity
from daybook.core.result import OperationResult
from daybook.infrastructure.repositories import JournalGateway
from daybook.models import EntryTag, Tag

logger = logging.getLogger(__name__)

MAX_TAG_NAME_LENGTH = 50


def visible_to(user_id: int):
    """SQL criterion: pre-built tags or custom tags owned by `user_id`."""
    return or_(Tag.is_custom.is_(False), Tag.user_id == user_id)


class TagService:
    """Tag catalogue management."""

    def __init__(self, gateway: JournalGateway):
        self.gateway = gateway

    async def get_all_tags(self, identity: Identity | None) -> list[Tag]:
        if identity is None:
            return []
        return await self.gateway.tags.find(
            visible_to(identity.user_id), order_by=(Tag.name,),
        )

    async def get_prebuilt_tags(self) -> list[Tag]:
        return await self.gateway.tags.find(
            Tag.is_custom.is_(False), order_by=(Tag.name,),
        )

    async def get_custom_tags(self, identity: Identity | None) -> list[Tag]:
        if identity is None:
            return []
        return await self.gateway.tags.find(
            Tag.is_custom.is_(True), Tag.user_id == identity.user_id,
            order_by=(Tag.name,),
        )

    async def create_custom_tag(
        self, identity: Identity | None, name: str,
    ) -> OperationResult[Tag]:
        try:
            if identity is None:
                raise AuthenticationError()
            if not name or not name.strip():
                raise ValidationError("Tag name cannot be empty.", "name")
            name = name.strip()
            if len(name) > MAX_TAG_NAME_LENGTH:
                raise ValidationError(
                    f"Tag name must be at most {MAX_TAG_NAME_LENGTH} characters.", "name",
                )

            key = name.casefold()
            visible = await self.gateway.tags.find(visible_to(identity.user_id))
            if any(t.name.casefold() == key for t in visible):
                raise ConflictError("A tag with this name already exists.")

            tag = await self.gateway.tags.add(
                Tag(name=name, is_custom=True, user_id=identity.user_id),
            )
            await self.gateway.commit()
            logger.info(f"Custom tag '{name}' created", extra={"user_id": identity.user_id})
            return OperationResult.ok("Tag created successfully!", tag)
        except DaybookError as e:
            await self.gateway.rollback()
            return OperationResult.fail(e)
        except Exception as e:
            await self.gateway.rollback()
            logger.error(f"Failed to create tag: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError("create tag", e))

    async def delete_custom_tag(
        self, identity: Identity | None, tag_id: int,
    ) -> OperationResult[None]:
        try:
            if identity is None:
                raise AuthenticationError()
            tag = await self.gateway.tags.get_by_id(tag_id)
            if tag is None:
                raise NotFoundError("Tag", tag_id)
            if not tag.is_custom or tag.user_id != identity.user_id:
                raise AuthorizationError(
                    "Tag", tag_id, ErrorContext(user_id=identity.user_id),
                )

            for link in await self.gateway.entry_tags.find(EntryTag.tag_id == tag_id):
                await self.gateway.entry_tags.delete(link)
            await self.gateway.tags.delete(tag)
            await self.gateway.commit()
            logger.info(f"Custom tag {tag_id} deleted", extra={"user_id": identity.user_id})
            return OperationResult.ok("Tag deleted successfully!")
        except DaybookError as e:
            await self.gateway.rollback()
            return OperationResult.fail(e)
        except Exception as e:
            await self.gateway.rollback()
            logger.error(f"Failed to delete tag: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError("delete tag", e))
