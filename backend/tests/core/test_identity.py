"""Tests for the in-memory SessionRegistry."""

from daybook.core.domain_types import UserId
from daybook.core.identity import Identity, SessionRegistry


def test_open_resolve_close():
    registry = SessionRegistry()
    alice = Identity(UserId(1), "alice")
    token = registry.open(alice)
    assert registry.resolve(token) == alice
    registry.close(token)
    assert registry.resolve(token) is None


def test_close_is_idempotent_and_ignores_none():
    registry = SessionRegistry()
    token = registry.open(Identity(UserId(1), "alice"))
    registry.close(token)
    registry.close(token)
    registry.close(None)
    assert len(registry) == 0


def test_resolve_unknown_or_missing_token():
    registry = SessionRegistry()
    assert registry.resolve(None) is None
    assert registry.resolve("nope") is None


def test_tokens_are_unique_per_open():
    registry = SessionRegistry()
    alice = Identity(UserId(1), "alice")
    assert registry.open(alice) != registry.open(alice)
    assert len(registry) == 2

