"""Export Service — plain-text export of a date range."""

from datetime import date

import pytest

from daybook.core.errors import AuthenticationError, NotFoundError, ValidationError
from daybook.services.export_service import ExportService


@pytest.fixture
def exporter(gateway):
    return ExportService(gateway)


async def test_export_renders_resolved_names_in_date_order(
    exporter, gateway, alice, bob, tags, write_entry,
):
    personal = (await gateway.categories.find())[0]
    await write_entry(
        alice, date(2024, 1, 2), title="Second", content="Later day",
        primary="Calm", tag_ids=(tags["Travel"],),
    )
    await write_entry(
        alice, date(2024, 1, 1), title="First", content="Early day",
        primary="Happy", secondary=("Grateful",), category_id=personal.id,
    )
    await write_entry(bob, date(2024, 1, 1), content="bob secret")

    result = await exporter.export_text(alice, date(2024, 1, 1), date(2024, 1, 31))
    assert result.success
    text = result.value
    assert text.startswith("Journal Entries - alice\n")
    assert "Moods: 😊 Happy (Primary), 🙏 Grateful" in text
    assert f"Category: {personal.name}" in text
    assert "Tags: Travel" in text
    assert text.index("Early day") < text.index("Later day")
    assert "bob secret" not in text


async def test_export_empty_range_not_found(exporter, alice, write_entry):
    await write_entry(alice, date(2024, 1, 1))
    result = await exporter.export_text(alice, date(2024, 2, 1), date(2024, 2, 28))
    assert isinstance(result.error, NotFoundError)


async def test_export_requires_identity_and_ordered_range(exporter, alice):
    assert isinstance(
        (await exporter.export_text(None, date(2024, 1, 1), date(2024, 1, 2))).error,
        AuthenticationError,
    )
    assert isinstance(
        (await exporter.export_text(alice, date(2024, 1, 2), date(2024, 1, 1))).error,
        ValidationError,
    )
