"""Export Format — plain-text rendering of a date-ordered entry projection.

Invariants:
    - Entries rendered in ascending date order
    - Only resolved names reach this module (no ids, no ORM objects)
    - Primary mood is marked "(Primary)"; unresolved moods/tags are skipped
"""

from dataclasses import dataclass, field
from datetime import date, datetime

RULE_WIDTH = 80


@dataclass(frozen=True)
class ExportMood:
    name: str
    icon: str
    is_primary: bool


@dataclass
class ExportEntry:
    """Read-only projection of one entry with resolved names."""
    entry_date: date
    title: str
    content: str
    word_count: int
    created_at: datetime
    updated_at: datetime
    category: str | None = None
    moods: list[ExportMood] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)


def _format_mood(mood: ExportMood) -> str:
    label = f"{mood.icon} {mood.name}".strip()
    return f"{label} (Primary)" if mood.is_primary else label


def _format_timestamp(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M")


def render_entry(entry: ExportEntry) -> list[str]:
    lines = [f"Date: {entry.entry_date.strftime('%A, %B %d, %Y')}"]
    if entry.title:
        lines.append(f"Title: {entry.title}")
    if entry.moods:
        lines.append("Moods: " + ", ".join(_format_mood(m) for m in entry.moods))
    if entry.category:
        lines.append(f"Category: {entry.category}")
    if entry.tags:
        lines.append("Tags: " + ", ".join(entry.tags))
    lines += [
        "",
        entry.content,
        "",
        (
            f"Word Count: {entry.word_count} | "
            f"Created: {_format_timestamp(entry.created_at)} | "
            f"Updated: {_format_timestamp(entry.updated_at)}"
        ),
        "-" * RULE_WIDTH,
        "",
    ]
    return lines


def render_text_export(
    username: str, start: date, end: date, entries: list[ExportEntry],
) -> str:
    """Render the full export document."""
    lines = [
        f"Journal Entries - {username}",
        f"Date Range: {start.strftime('%B %d, %Y')} - {end.strftime('%B %d, %Y')}",
        "=" * RULE_WIDTH,
        "",
    ]
    for entry in sorted(entries, key=lambda e: e.entry_date):
        lines.extend(render_entry(entry))
    return "\n".join(lines)
