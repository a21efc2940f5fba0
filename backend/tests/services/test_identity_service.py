"""Identity Service — registration, login/logout, PIN gate.

Invariants:
    - A failed registration leaves the user table untouched
    - Unknown user and wrong password are indistinguishable to the caller
"""

from unittest.mock import AsyncMock

from daybook.core.errors import AuthenticationError, ConflictError, ValidationError
from daybook.models import Streak, User
from daybook.services.identity_service import INVALID_CREDENTIALS


async def test_register_creates_user_with_zero_streak(identity_service, gateway):
    result = await identity_service.register("  carol  ", "secret99")
    assert result.success
    user = result.value
    assert user.username == "carol"
    assert user.password_hash != "secret99"

    streak = await gateway.streaks.first(Streak.user_id == user.id)
    assert (streak.current_streak, streak.longest_streak) == (0, 0)
    assert streak.last_entry_date is None


async def test_register_rejects_short_username(identity_service, gateway):
    result = await identity_service.register("ab", "secret99")
    assert isinstance(result.error, ValidationError)
    assert await gateway.users.count() == 0


async def test_register_rejects_short_password(identity_service):
    result = await identity_service.register("carol", "12345")
    assert isinstance(result.error, ValidationError)
    assert result.error.field == "password"


async def test_duplicate_username_is_case_insensitive_conflict(
    identity_service, gateway, alice,
):
    result = await identity_service.register("ALICE", "another1")
    assert isinstance(result.error, ConflictError)
    assert await gateway.users.count(User.username == "ALICE") == 0
    assert await gateway.users.count() == 1


async def test_non_ascii_username_matches_itself_and_its_case_variants(
    identity_service, gateway,
):
    assert (await identity_service.register("Émile", "password1")).success

    for spelling in ("Émile", "émile", "ÉMILE"):
        login = await identity_service.login(spelling, "password1")
        assert login.success, spelling
        assert login.value.identity.username == "Émile"

    duplicate = await identity_service.register("ÉMILE", "password2")
    assert isinstance(duplicate.error, ConflictError)
    assert await gateway.users.count() == 1


async def test_unique_index_violation_reported_as_conflict(
    identity_service, gateway, alice, monkeypatch,
):
    # lookup misses, so the insert itself trips the username_key index
    monkeypatch.setattr(identity_service, "_find_user", AsyncMock(return_value=None))

    result = await identity_service.register("alice", "another1")
    assert isinstance(result.error, ConflictError)
    assert result.error.http_status == 409
    assert await gateway.users.count() == 1


async def test_login_opens_a_resolvable_session(identity_service, alice):
    result = await identity_service.login("Alice", "password1")
    assert result.success
    session = result.value
    assert session.identity == alice
    assert identity_service.resolve(session.token) == alice


async def test_login_failures_share_one_message(identity_service, alice):
    wrong_password = await identity_service.login("alice", "nope-nope")
    unknown_user = await identity_service.login("nobody", "password1")
    for result in (wrong_password, unknown_user):
        assert isinstance(result.error, AuthenticationError)
        assert result.message == INVALID_CREDENTIALS


async def test_logout_closes_session_and_is_idempotent(identity_service, alice):
    token = (await identity_service.login("alice", "password1")).value.token
    identity_service.logout(token)
    identity_service.logout(token)
    assert identity_service.resolve(token) is None


async def test_pin_set_and_verify(identity_service, alice):
    assert (await identity_service.set_pin(alice, "1234")).success
    assert (await identity_service.verify_pin(alice, "1234")).value is True

    wrong = await identity_service.verify_pin(alice, "4321")
    assert isinstance(wrong.error, AuthenticationError)
    assert wrong.message == "Invalid PIN."


async def test_verify_pin_without_pin_set(identity_service, alice):
    result = await identity_service.verify_pin(alice, "1234")
    assert result.message == "No PIN has been set."


async def test_set_pin_rejects_bad_format(identity_service, alice):
    result = await identity_service.set_pin(alice, "12a4")
    assert isinstance(result.error, ValidationError)
    assert result.error.field == "pin"


async def test_pin_requires_identity(identity_service):
    assert isinstance((await identity_service.set_pin(None, "1234")).error, AuthenticationError)
    assert isinstance((await identity_service.verify_pin(None, "1234")).error, AuthenticationError)


async def test_get_user(identity_service, alice):
    user = await identity_service.get_user(alice)
    assert user.username == "alice"
    assert not user.has_pin
    assert await identity_service.get_user(None) is None
