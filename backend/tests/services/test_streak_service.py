"""Streak Service — incremental updates, recalculation and missed days."""

from datetime import date

from daybook.models import Streak


async def _streak(gateway, identity) -> tuple[int, int]:
    streak = await gateway.streaks.first(Streak.user_id == identity.user_id)
    return streak.current_streak, streak.longest_streak


async def test_consecutive_entries_increment(gateway, alice, write_entry):
    for day in (1, 2, 3):
        await write_entry(alice, date(2024, 1, day))
    assert await _streak(gateway, alice) == (3, 3)


async def test_gap_resets_current_keeps_longest(gateway, alice, write_entry):
    for day in (1, 2, 3, 6):
        await write_entry(alice, date(2024, 1, day))
    assert await _streak(gateway, alice) == (1, 3)


async def test_same_day_update_is_no_op(streak_service, gateway, alice, write_entry):
    await write_entry(alice, date(2024, 1, 1))
    await streak_service.on_entry_added(alice.user_id, date(2024, 1, 1))
    assert await _streak(gateway, alice) == (1, 1)


async def test_backdated_entry_triggers_recalculation(
    gateway, clock, alice, write_entry,
):
    clock.today = date(2024, 1, 5)
    await write_entry(alice, date(2024, 1, 5))
    await write_entry(alice, date(2024, 1, 3))
    await write_entry(alice, date(2024, 1, 4))
    assert await _streak(gateway, alice) == (3, 3)
    streak = await gateway.streaks.first(Streak.user_id == alice.user_id)
    assert streak.last_entry_date == date(2024, 1, 5)


async def test_recalculate_applies_lapse_rule(
    streak_service, clock, alice, write_entry,
):
    for day in (1, 2, 3):
        await write_entry(alice, date(2024, 1, day))
    clock.today = date(2024, 1, 10)
    streak = await streak_service.recalculate(alice.user_id)
    assert (streak.current_streak, streak.longest_streak) == (0, 3)


async def test_recalculate_with_no_entries_resets(streak_service, alice):
    streak = await streak_service.recalculate(alice.user_id)
    assert (streak.current_streak, streak.longest_streak) == (0, 0)
    assert streak.last_entry_date is None


async def test_get_streak_unknown_user(streak_service):
    assert await streak_service.get_streak(999) is None


async def test_missed_days(streak_service, alice, bob, write_entry):
    await write_entry(alice, date(2024, 1, 1))
    await write_entry(alice, date(2024, 1, 4))
    await write_entry(bob, date(2024, 1, 2))
    missed = await streak_service.get_missed_days(
        alice.user_id, date(2024, 1, 1), date(2024, 1, 5),
    )
    assert missed == [date(2024, 1, 2), date(2024, 1, 3), date(2024, 1, 5)]


async def test_missed_days_inverted_range_is_empty(streak_service, alice):
    assert await streak_service.get_missed_days(
        alice.user_id, date(2024, 1, 5), date(2024, 1, 1),
    ) == []
