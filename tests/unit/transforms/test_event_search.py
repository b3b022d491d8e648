"""Unit tests for the event search index."""

from __future__ import annotations

from core.types import SearchEntry
from transforms.document_assembly import assemble_document, require_document
from transforms.event_search import build_search_entries, find_event_for_entry, search_entries


def test_build_search_entries_sorts_by_numeric_year() -> None:
    """Entries should be ordered by year with unparseable years last."""
    records = [
        {"Year": "1989", "Headline": "Wall"},
        {"Year": "", "Headline": "Undated"},
        {"Year": "-44", "Headline": "Caesar"},
        {"Year": "312", "Headline": "Milvian Bridge"},
    ]

    entries = build_search_entries(records)

    assert [entry.headline for entry in entries] == ["Caesar", "Milvian Bridge", "Wall", "Undated"]


def test_build_search_entries_truncates_long_text_in_label() -> None:
    """Labels should include at most sixty characters of text."""
    long_text = "x" * 75

    entry = build_search_entries([{"Year": "1947", "Headline": "Independence", "Text": long_text}])[0]

    assert entry.label == f"1947 - Independence: {'x' * 60}..."
    assert entry.unique_id == "event-1947-Independence"


def test_search_entries_matches_case_insensitively() -> None:
    """Search should match headline or text regardless of case."""
    entries = build_search_entries(
        [
            {"Year": "1969", "Headline": "Moon Landing", "Text": "Apollo 11"},
            {"Year": "1989", "Headline": "Wall", "Text": "Berlin opens"},
        ]
    )

    assert [entry.headline for entry in search_entries(entries, "APOLLO")] == ["Moon Landing"]
    assert [entry.headline for entry in search_entries(entries, "berlin")] == ["Wall"]


def test_find_event_for_entry_falls_back_to_headline_and_year() -> None:
    """Entries whose id differs should resolve by headline and start year."""
    document = require_document(
        assemble_document([{"Year": "1969", "Headline": "Moon Landing", "Unique ID": "apollo-11"}])
    )
    entry = SearchEntry(
        unique_id="event-1969-Moon-Landing",
        label="1969 - Moon Landing",
        year="1969",
        headline="Moon Landing",
        text="",
    )

    event = find_event_for_entry(document, entry)

    assert event is not None and event.unique_id == "apollo-11"


def test_find_event_for_entry_returns_none_without_match() -> None:
    """Unknown entries should not resolve to an event."""
    document = require_document(assemble_document([{"Year": "1969", "Headline": "Moon Landing"}]))
    entry = SearchEntry(unique_id="nope", label="", year="2000", headline="Other", text="")

    assert find_event_for_entry(document, entry) is None
