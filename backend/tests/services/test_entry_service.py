"""Entry Service — one entry per day, mood/tag links, streak side effects.

Invariants:
    - A rejected write leaves entries, links and streak unchanged
    - Update replaces links wholesale and never moves the entry date
"""

from datetime import date, datetime

from daybook.core.errors import (
    AuthenticationError, AuthorizationError, ConflictError, NotFoundError,
)
from daybook.models import EntryMood, EntryTag, JournalEntry, Streak


async def test_create_entry_persists_entry_links_and_streak(
    entry_service, gateway, alice, moods, tags,
):
    result = await entry_service.create_entry(
        alice, date(2024, 1, 1), "First", "Hello there\tnew\nyear", None,
        moods["Happy"], [moods["Calm"]], [tags["Work"]],
    )
    assert result.success
    assert result.message == "Entry created successfully!"
    entry = result.value
    assert entry.word_count == 4
    assert entry.entry_date == date(2024, 1, 1)

    described = (await entry_service.describe_entries([entry]))[entry.id]
    assert described.primary_mood_id == moods["Happy"]
    assert described.secondary_mood_ids == [moods["Calm"]]
    assert described.tag_ids == [tags["Work"]]

    streak = await gateway.streaks.first(Streak.user_id == alice.user_id)
    assert (streak.current_streak, streak.longest_streak) == (1, 1)
    assert streak.last_entry_date == date(2024, 1, 1)


async def test_create_entry_truncates_datetime_to_day(entry_service, alice, moods):
    result = await entry_service.create_entry(
        alice, datetime(2024, 2, 3, 22, 15), None, "late night", None, moods["Calm"],
    )
    assert result.value.entry_date == date(2024, 2, 3)
    assert result.value.title == ""


async def test_second_entry_same_day_conflicts_without_side_effects(
    entry_service, gateway, alice, moods, write_entry,
):
    await write_entry(alice, date(2024, 1, 1))

    result = await entry_service.create_entry(
        alice, date(2024, 1, 1), "Again", "other words", None, moods["Sad"],
    )
    assert isinstance(result.error, ConflictError)
    assert result.message == "An entry already exists for this date."
    assert await gateway.entries.count(JournalEntry.user_id == alice.user_id) == 1
    assert await gateway.entry_moods.count() == 1
    streak = await gateway.streaks.first(Streak.user_id == alice.user_id)
    assert streak.current_streak == 1


async def test_same_day_allowed_for_different_users(alice, bob, write_entry):
    await write_entry(alice, date(2024, 1, 1))
    await write_entry(bob, date(2024, 1, 1))


async def test_secondary_moods_capped_at_two(entry_service, alice, moods, write_entry):
    entry_id = await write_entry(
        alice, date(2024, 1, 1), secondary=("Calm", "Sad", "Angry", "Bored"),
    )
    entry = await entry_service.get_entry(alice, entry_id)
    described = (await entry_service.describe_entries([entry]))[entry_id]
    assert described.secondary_mood_ids == [moods["Calm"], moods["Sad"]]


async def test_unknown_mood_rejected_before_any_write(entry_service, gateway, alice):
    result = await entry_service.create_entry(
        alice, date(2024, 1, 1), None, "words", None, 999,
    )
    assert isinstance(result.error, NotFoundError)
    assert await gateway.entries.count() == 0
    assert await gateway.entry_moods.count() == 0


async def test_unknown_category_rejected(entry_service, gateway, alice, moods):
    result = await entry_service.create_entry(
        alice, date(2024, 1, 1), None, "words", 999, moods["Happy"],
    )
    assert isinstance(result.error, NotFoundError)
    assert await gateway.entries.count() == 0


async def test_create_requires_identity(entry_service, moods):
    result = await entry_service.create_entry(
        None, date(2024, 1, 1), None, "words", None, moods["Happy"],
    )
    assert isinstance(result.error, AuthenticationError)


async def test_update_replaces_links_and_keeps_date(
    entry_service, gateway, alice, moods, tags, write_entry,
):
    entry_id = await write_entry(
        alice, date(2024, 1, 1), secondary=("Calm",), tag_ids=(tags["Work"],),
    )
    result = await entry_service.update_entry(
        alice, entry_id, "Edited", "just three words", None,
        moods["Sad"], [moods["Lonely"], moods["Anxious"], moods["Angry"]],
        [tags["Family"], tags["Travel"]],
    )
    assert result.success
    entry = result.value
    assert entry.title == "Edited"
    assert entry.word_count == 3
    assert entry.entry_date == date(2024, 1, 1)

    described = (await entry_service.describe_entries([entry]))[entry_id]
    assert described.primary_mood_id == moods["Sad"]
    assert described.secondary_mood_ids == [moods["Lonely"], moods["Anxious"]]
    assert sorted(described.tag_ids) == sorted([tags["Family"], tags["Travel"]])
    assert await gateway.entry_moods.count(EntryMood.journal_entry_id == entry_id) == 3
    assert await gateway.entry_tags.count(EntryTag.journal_entry_id == entry_id) == 2


async def test_update_by_another_user_is_unauthorized(
    entry_service, alice, bob, moods, write_entry,
):
    entry_id = await write_entry(alice, date(2024, 1, 1), content="private")
    result = await entry_service.update_entry(
        bob, entry_id, None, "hijacked", None, moods["Happy"],
    )
    assert isinstance(result.error, AuthorizationError)
    entry = await entry_service.get_entry(alice, entry_id)
    assert entry.content == "private"


async def test_update_missing_entry_not_found(entry_service, alice, moods):
    result = await entry_service.update_entry(
        alice, 12345, None, "words", None, moods["Happy"],
    )
    assert isinstance(result.error, NotFoundError)


async def test_delete_removes_links_and_recalculates_streak(
    entry_service, gateway, clock, alice, tags, write_entry,
):
    clock.today = date(2024, 1, 5)
    ids = {}
    for day in range(1, 6):
        ids[day] = await write_entry(alice, date(2024, 1, day), tag_ids=(tags["Work"],))

    streak = await gateway.streaks.first(Streak.user_id == alice.user_id)
    assert (streak.current_streak, streak.longest_streak) == (5, 5)

    result = await entry_service.delete_entry(alice, ids[3])
    assert result.success
    assert await gateway.entry_moods.count(EntryMood.journal_entry_id == ids[3]) == 0
    assert await gateway.entry_tags.count(EntryTag.journal_entry_id == ids[3]) == 0

    streak = await gateway.streaks.first(Streak.user_id == alice.user_id)
    assert (streak.current_streak, streak.longest_streak) == (2, 2)


async def test_delete_by_another_user_is_unauthorized(
    entry_service, gateway, alice, bob, write_entry,
):
    entry_id = await write_entry(alice, date(2024, 1, 1))
    result = await entry_service.delete_entry(bob, entry_id)
    assert isinstance(result.error, AuthorizationError)
    assert await gateway.entries.count() == 1


async def test_reads_are_owner_scoped_and_newest_first(
    entry_service, alice, bob, write_entry,
):
    first = await write_entry(alice, date(2024, 1, 1))
    second = await write_entry(alice, date(2024, 1, 3))
    foreign = await write_entry(bob, date(2024, 1, 2))

    assert [e.id for e in await entry_service.get_all_entries(alice)] == [second, first]
    assert await entry_service.get_entry(alice, foreign) is None
    found = await entry_service.get_entry_by_date(alice, datetime(2024, 1, 3, 8, 0))
    assert found.id == second
    assert await entry_service.get_entry_by_date(alice, date(2024, 1, 2)) is None
    assert await entry_service.get_all_entries(None) == []
