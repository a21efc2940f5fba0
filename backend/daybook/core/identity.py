"""Identity & Session Registry — explicit acting-user context.

Invariants:
    - Services receive an Identity (or None) as an argument; there is no
      process-wide "current user"
    - A bearer token maps to exactly one Identity until closed
    - close() is idempotent

Design Decisions:
    - In-memory registry, not DB: single-process, single-user-at-a-time
      deployment; sessions are lost on restart
"""

import secrets
from dataclasses import dataclass, field

from daybook.core.domain_types import UserId


@dataclass(frozen=True)
class Identity:
    """The authenticated user an operation acts for."""
    user_id: UserId
    username: str


@dataclass
class SessionRegistry:
    """Bearer token → Identity map."""
    token_bytes: int = 32
    _sessions: dict[str, Identity] = field(default_factory=dict)

    def open(self, identity: Identity) -> str:
        token = secrets.token_urlsafe(self.token_bytes)
        self._sessions[token] = identity
        return token

    def resolve(self, token: str | None) -> Identity | None:
        if not token:
            return None
        return self._sessions.get(token)

    def close(self, token: str | None) -> None:
        if token:
            self._sessions.pop(token, None)

    def __len__(self) -> int:
        return len(self._sessions)
