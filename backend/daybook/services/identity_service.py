"""Identity Service — registration, login/logout and the PIN quick-unlock gate.

Invariants:
    - Usernames unique by casefolded username_key; login looks up the same key
    - Registration creates the user and its zero-valued Streak in one commit
    - Unknown username and wrong password produce the same AuthenticationError
    - PIN is a secondary gate on an existing session, never a login

Design Decisions:
    - Sessions live in a SessionRegistry handed in by the caller; login returns
      the bearer token inside ActiveSession
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError

from daybook.core.credentials import (
    MIN_ITERATIONS, DEFAULT_SALT_BYTES,
    generate_salt, hash_secret, username_key, validate_pin, validate_registration,
    verify_secret,
)
from daybook.core.domain_types import UserId
from daybook.core.errors import (
    AuthenticationError, ConflictError, DaybookError, ErrorContext,
    NotFoundError, OperationFailedError,
)
from daybook.core.identity import Identity, SessionRegistry
from daybook.core.result import OperationResult
from daybook.infrastructure.repositories import JournalGateway
from daybook.models import Streak, User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password."
USERNAME_TAKEN = "Username already exists."


@dataclass(frozen=True)
class ActiveSession:
    """Result of a successful login."""
    token: str
    identity: Identity
    user: User


class IdentityService:
    """Authentication and credential management."""

    def __init__(
        self,
        gateway: JournalGateway,
        sessions: SessionRegistry,
        iterations: int = MIN_ITERATIONS,
        salt_bytes: int = DEFAULT_SALT_BYTES,
    ):
        self.gateway = gateway
        self.sessions = sessions
        self.iterations = iterations
        self.salt_bytes = salt_bytes

    async def _find_user(self, username: str) -> User | None:
        return await self.gateway.users.first(
            User.username_key == username_key(username),
        )

    async def register(self, username: str, password: str) -> OperationResult[User]:
        try:
            validate_registration(username, password)
            username = username.strip()
            if await self._find_user(username) is not None:
                raise ConflictError(USERNAME_TAKEN)

            salt = generate_salt(self.salt_bytes)
            user = await self.gateway.users.add(User(
                username=username,
                username_key=username_key(username),
                password_hash=hash_secret(password, salt, self.iterations),
                salt=salt,
            ))
            await self.gateway.streaks.add(
                Streak(user_id=user.id, current_streak=0, longest_streak=0),
            )
            await self.gateway.commit()
            logger.info("User registered", extra={"user_id": user.id})
            return OperationResult.ok("Registration successful!", user)
        except DaybookError as e:
            await self.gateway.rollback()
            return OperationResult.fail(e)
        except IntegrityError:
            # a concurrent registration won the username_key unique index
            await self.gateway.rollback()
            return OperationResult.fail(ConflictError(USERNAME_TAKEN))
        except Exception as e:
            await self.gateway.rollback()
            logger.error(f"Registration failed: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError("register", e))

    async def login(self, username: str, password: str) -> OperationResult[ActiveSession]:
        try:
            user = await self._find_user(username or "")
            if user is None or not verify_secret(
                password or "", user.salt, user.password_hash, self.iterations,
            ):
                raise AuthenticationError(INVALID_CREDENTIALS)

            identity = Identity(user_id=UserId(user.id), username=user.username)
            token = self.sessions.open(identity)
            logger.info("User logged in", extra={"user_id": user.id})
            return OperationResult.ok(
                "Login successful!", ActiveSession(token=token, identity=identity, user=user),
            )
        except DaybookError as e:
            return OperationResult.fail(e)
        except Exception as e:
            logger.error(f"Login failed: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError("log in", e))

    def logout(self, token: str | None) -> None:
        self.sessions.close(token)

    def resolve(self, token: str | None) -> Identity | None:
        return self.sessions.resolve(token)

    async def get_user(self, identity: Identity | None) -> User | None:
        if identity is None:
            return None
        return await self.gateway.users.get_by_id(identity.user_id)

    async def set_pin(self, identity: Identity | None, pin: str) -> OperationResult[None]:
        try:
            if identity is None:
                raise AuthenticationError()
            validate_pin(pin)
            user = await self.gateway.users.get_by_id(identity.user_id)
            if user is None:
                raise NotFoundError("User", identity.user_id)

            salt = generate_salt(self.salt_bytes)
            user.pin_salt = salt
            user.pin_hash = hash_secret(pin, salt, self.iterations)
            await self.gateway.users.update(user)
            await self.gateway.commit()
            logger.info("PIN set", extra={"user_id": user.id})
            return OperationResult.ok("PIN set successfully!")
        except DaybookError as e:
            await self.gateway.rollback()
            return OperationResult.fail(e)
        except Exception as e:
            await self.gateway.rollback()
            logger.error(f"Setting PIN failed: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError(
                "set PIN", e, ErrorContext(user_id=identity.user_id if identity else None),
            ))

    async def verify_pin(self, identity: Identity | None, pin: str) -> OperationResult[bool]:
        try:
            if identity is None:
                raise AuthenticationError()
            user = await self.gateway.users.get_by_id(identity.user_id)
            if user is None:
                raise NotFoundError("User", identity.user_id)
            if not user.has_pin:
                raise AuthenticationError("No PIN has been set.")
            if not verify_secret(pin or "", user.pin_salt, user.pin_hash, self.iterations):
                raise AuthenticationError("Invalid PIN.")
            return OperationResult.ok("PIN verified.", True)
        except DaybookError as e:
            return OperationResult.fail(e)
        except Exception as e:
            logger.error(f"PIN verification failed: {e}", exc_info=True)
            return OperationResult.fail(OperationFailedError("verify PIN", e))
