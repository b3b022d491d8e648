"""Event search index for timeline tables.

This module builds searchable entries from raw records and resolves a
picked entry back to an event of an assembled document.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from core.constants import HEADLINE_COLUMN, SEARCH_SNIPPET_LENGTH, TEXT_COLUMN, YEAR_COLUMN
from core.types import RawRecord, SearchEntry, TimelineDocument, TimelineEvent
from transforms.record_fields import parse_integer, raw_value, trimmed_value
from transforms.row_transform import build_event_id


def build_search_entries(records: Iterable[RawRecord]) -> list[SearchEntry]:
    """Build search entries sorted by numeric year.

    Args:
        records: Raw table records.

    Returns:
        One entry per record; records with unparseable years sort last.
    """
    entries = [_build_entry(record) for record in records]
    return sorted(entries, key=_year_sort_key)


def search_entries(entries: Sequence[SearchEntry], query: str) -> list[SearchEntry]:
    """Return entries whose label, headline, or text contains the query.

    Matching is case-insensitive; an empty query matches everything.
    """
    needle = query.lower()
    return [
        entry
        for entry in entries
        if needle in entry.label.lower()
        or needle in entry.headline.lower()
        or needle in entry.text.lower()
    ]


def find_event_for_entry(document: TimelineDocument, entry: SearchEntry) -> TimelineEvent | None:
    """Resolve a search entry to a document event.

    Args:
        document: Assembled timeline document.
        entry: Picked search entry.

    Returns:
        The event with the entry's id, else the first event with the same
        headline and start year, else None.
    """
    for event in document.events:
        if event.unique_id == entry.unique_id:
            return event
    entry_year = parse_integer(entry.year)
    for event in document.events:
        if event.text.headline == entry.headline and event.start_date.year == entry_year:
            return event
    return None


def _build_entry(record: RawRecord) -> SearchEntry:
    year = trimmed_value(record, YEAR_COLUMN) or ""
    headline = raw_value(record, HEADLINE_COLUMN) or ""
    text = raw_value(record, TEXT_COLUMN) or ""
    return SearchEntry(
        unique_id=build_event_id(year, headline) or f"event-{year}-",
        label=f"{year} - {headline}{_snippet(text)}",
        year=year,
        headline=headline,
        text=text,
    )


def _snippet(text: str) -> str:
    if not text:
        return ""
    suffix = "..." if len(text) > SEARCH_SNIPPET_LENGTH else ""
    return f": {text[:SEARCH_SNIPPET_LENGTH]}{suffix}"


def _year_sort_key(entry: SearchEntry) -> tuple[int, int]:
    year = parse_integer(entry.year)
    if year is None:
        return (1, 0)
    return (0, year)
