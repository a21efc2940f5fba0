"""Search Service — owner-scoped text, date, mood, tag and combined filters."""

from datetime import date

import pytest

from daybook.services.search_service import SearchService


@pytest.fixture
def search(gateway):
    return SearchService(gateway)


@pytest.fixture
async def journal(alice, bob, tags, write_entry):
    """Three entries for alice and one for bob; returns alice's ids by day."""
    ids = {
        1: await write_entry(
            alice, date(2024, 1, 1), content="Coffee with friends",
            primary="Happy", tag_ids=(tags["Work"],),
        ),
        2: await write_entry(
            alice, date(2024, 1, 2), title="Walk", content="A long walk in the park",
            primary="Sad", secondary=("Happy",), tag_ids=(tags["Family"],),
        ),
        3: await write_entry(
            alice, date(2024, 1, 3), title="Park day", content="More coffee",
            primary="Calm", tag_ids=(tags["Work"], tags["Family"]),
        ),
    }
    await write_entry(bob, date(2024, 1, 1), content="coffee coffee", tag_ids=(tags["Work"],))
    return ids


def _ids(entries):
    return [e.id for e in entries]


async def test_search_by_text_is_case_insensitive_and_scoped(search, alice, journal):
    assert _ids(await search.search_by_text(alice, "COFFEE")) == [journal[3], journal[1]]


async def test_search_by_text_matches_title(search, alice, journal):
    assert _ids(await search.search_by_text(alice, "walk")) == [journal[2]]


async def test_search_by_text_blank_term_returns_nothing(search, alice, journal):
    assert await search.search_by_text(alice, "") == []
    assert await search.search_by_text(alice, "   ") == []


async def test_no_identity_returns_nothing(search, journal):
    assert await search.search_by_text(None, "coffee") == []
    assert await search.filter_by_date_range(None, date(2024, 1, 1), date(2024, 1, 3)) == []
    assert await search.advanced_search(None) == []


async def test_filter_by_date_range_inclusive(search, alice, journal):
    found = await search.filter_by_date_range(alice, date(2024, 1, 2), date(2024, 1, 3))
    assert _ids(found) == [journal[3], journal[2]]


async def test_filter_by_moods_matches_primary_or_secondary(search, alice, moods, journal):
    found = await search.filter_by_moods(alice, [moods["Happy"]])
    assert _ids(found) == [journal[2], journal[1]]


async def test_filter_by_moods_is_a_union(search, alice, moods, journal):
    found = await search.filter_by_moods(alice, [moods["Calm"], moods["Sad"]])
    assert _ids(found) == [journal[3], journal[2]]


async def test_filter_by_empty_lists_returns_nothing(search, alice, journal):
    assert await search.filter_by_moods(alice, []) == []
    assert await search.filter_by_tags(alice, []) == []


async def test_filter_by_tags_scoped_to_owner(search, alice, tags, journal):
    found = await search.filter_by_tags(alice, [tags["Work"]])
    assert _ids(found) == [journal[3], journal[1]]


async def test_advanced_search_without_predicates_returns_all(search, alice, journal):
    assert _ids(await search.advanced_search(alice)) == [journal[3], journal[2], journal[1]]


async def test_advanced_search_intersects_predicates(search, alice, moods, tags, journal):
    found = await search.advanced_search(
        alice, term="park", mood_ids=[moods["Calm"], moods["Sad"]], tag_ids=[tags["Work"]],
    )
    assert _ids(found) == [journal[3]]


async def test_advanced_search_blank_term_is_ignored(search, alice, journal):
    found = await search.advanced_search(alice, term="  ", start=date(2024, 1, 2))
    assert _ids(found) == [journal[3], journal[2]]
