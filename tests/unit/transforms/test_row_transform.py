"""Unit tests for the row transformer."""

from __future__ import annotations

import random

import pytest

from core.types import BackgroundBlock, DatePart, MediaBlock
from transforms.row_transform import build_event_id, generate_fallback_token, transform_row


@pytest.mark.parametrize("year_text", ["1947", " 1947 ", "1947\t"])
def test_transform_row_reads_trimmed_year(year_text: str) -> None:
    """Start year should equal the parsed integer of the trimmed Year cell."""
    event = transform_row({"Year": year_text})

    assert event is not None and event.start_date == DatePart(year=1947)


def test_transform_row_accepts_negative_years() -> None:
    """Ancient tables use negative years for BCE dates."""
    event = transform_row({"Year": "-500", "Headline": "Battle"})

    assert event is not None and event.start_date.year == -500


@pytest.mark.parametrize(
    "record",
    [
        {},
        {"Year": ""},
        {"Year": "   "},
        {"Year": "abc"},
        {"Year": None},
        {"Year": "\u0661\u0669\u0664\u0667"},
    ],
)
def test_transform_row_rejects_missing_or_invalid_year(record: dict[str, str | None]) -> None:
    """Rows without a parseable year should be unusable."""
    assert transform_row(record) is None


def test_transform_row_builds_identity_fields() -> None:
    """Scenario A: headline slug and trimmed group should populate identity fields."""
    event = transform_row({"Year": "1947", "Headline": "Independence", "Group": " Politics "})

    assert event is not None
    assert event.group == "Politics"
    assert event.unique_id == "event-1947-Independence"


def test_transform_row_prefers_explicit_unique_id() -> None:
    """A non-empty Unique ID should be used verbatim."""
    event = transform_row({"Year": "1969", "Headline": "Moon Landing", "Unique ID": "apollo-11"})

    assert event is not None and event.unique_id == "apollo-11"


def test_transform_row_collapses_headline_whitespace_runs() -> None:
    """Every whitespace run in the headline should become one hyphen."""
    event = transform_row({"Year": "1989", "Headline": "Fall  of\tthe Wall"})

    assert event is not None and event.unique_id == "event-1989-Fall-of-the-Wall"


def test_transform_row_uses_seeded_fallback_id_without_headline(seeded_rng: random.Random) -> None:
    """Rows without id or headline should get a reproducible random token."""
    expected_token = generate_fallback_token(random.Random(1234))

    event = transform_row({"Year": "2000"}, seeded_rng)

    assert event is not None and event.unique_id == f"event-2000-{expected_token}"


def test_generate_fallback_token_is_seven_base36_characters() -> None:
    """Fallback tokens should be fixed-length lowercase base-36."""
    token = generate_fallback_token(random.Random(7))

    assert len(token) == 7 and all(character in "0123456789abcdefghijklmnopqrstuvwxyz" for character in token)


def test_build_event_id_returns_none_for_empty_headline() -> None:
    """An empty headline has no derived id."""
    assert build_event_id(2000, "") is None


def test_transform_row_defaults_text_fields_to_empty_strings() -> None:
    """Missing headline, text, and group should read as empty strings."""
    event = transform_row({"Year": "2000"}, random.Random(0))

    assert event is not None
    assert (event.text.headline, event.text.text, event.group) == ("", "", "")


def test_transform_row_refines_start_date() -> None:
    """Month, day, and time columns should refine the start date."""
    event = transform_row(
        {"Year": "1969", "Month": "7", "Day": "20", "Time": "20:17:40", "Headline": "Landing"}
    )

    assert event is not None
    assert event.start_date == DatePart(year=1969, month=7, day=20, hour=20, minute=17, second=40)


@pytest.mark.parametrize(
    ("column", "value", "expected"),
    [
        ("Month", "0", DatePart(year=2000, day=5)),
        ("Month", "13", DatePart(year=2000, day=5)),
        ("Day", "0", DatePart(year=2000, month=3)),
        ("Day", "32", DatePart(year=2000, month=3)),
    ],
)
def test_transform_row_omits_out_of_range_month_and_day(
    column: str,
    value: str,
    expected: DatePart,
) -> None:
    """Out-of-range month or day should be dropped while other fields stay."""
    record = {"Year": "2000", "Month": "3", "Day": "5", "Headline": "x", column: value}

    event = transform_row(record)

    assert event is not None and event.start_date == expected


@pytest.mark.parametrize(
    ("time_value", "expected"),
    [
        ("24:30", DatePart(year=2000, minute=30)),
        ("10:60", DatePart(year=2000, hour=10)),
        ("10:30:60", DatePart(year=2000, hour=10, minute=30)),
        ("xx:30:15", DatePart(year=2000, minute=30, second=15)),
        ("1030", DatePart(year=2000)),
    ],
)
def test_transform_row_checks_time_parts_independently(time_value: str, expected: DatePart) -> None:
    """Each time component should be range-checked on its own."""
    event = transform_row({"Year": "2000", "Time": time_value, "Headline": "x"})

    assert event is not None and event.start_date == expected


def test_transform_row_keeps_impossible_calendar_dates() -> None:
    """Day 31 in February should pass through without calendar checks."""
    event = transform_row({"Year": "2001", "Month": "2", "Day": "31", "Headline": "x"})

    assert event is not None and event.start_date == DatePart(year=2001, month=2, day=31)


def test_transform_row_builds_end_date() -> None:
    """End columns should build an end date with the same rules."""
    event = transform_row(
        {
            "Year": "1939",
            "Headline": "War",
            "End Year": "1945",
            "End Month": "9",
            "End Day": "2",
            "End Time": "09:04",
        }
    )

    assert event is not None
    assert event.end_date == DatePart(year=1945, month=9, day=2, hour=9, minute=4)


@pytest.mark.parametrize("end_year", [None, "", "soon"])
def test_transform_row_drops_end_fields_without_end_year(end_year: str | None) -> None:
    """End month without a valid end year should not produce an end date."""
    record = {"Year": "2000", "Headline": "x", "End Month": "6"}
    if end_year is not None:
        record["End Year"] = end_year

    event = transform_row(record)

    assert event is not None and event.end_date is None and event.start_date.month is None


def test_transform_row_trims_display_date() -> None:
    """Display date should be trimmed and omitted when blank."""
    event = transform_row({"Year": "1500", "Headline": "x", "Display Date": " c. 1500 "})
    blank_event = transform_row({"Year": "1500", "Headline": "x", "Display Date": "  "})

    assert event is not None and event.display_date == "c. 1500"
    assert blank_event is not None and blank_event.display_date is None


def test_transform_row_builds_media_block() -> None:
    """Media URL is trimmed while the other media fields are copied verbatim."""
    event = transform_row(
        {
            "Year": "1969",
            "Headline": "x",
            "Media": " http://example.com/moon.jpg ",
            "Media Caption": " Eagle ",
            "Media Credit": "NASA",
            "Thumbnail": "http://example.com/thumb.jpg",
            "Alt": "Lunar module",
            "Title": "Landing",
            "Link": "http://example.com",
            "Link Target": "_blank",
        }
    )

    assert event is not None
    assert event.media == MediaBlock(
        url="http://example.com/moon.jpg",
        caption=" Eagle ",
        credit="NASA",
        thumbnail="http://example.com/thumb.jpg",
        alt="Lunar module",
        title="Landing",
        link="http://example.com",
        link_target="_blank",
    )


def test_transform_row_skips_media_without_url() -> None:
    """Media fields without a Media URL should not build a block."""
    event = transform_row({"Year": "1969", "Headline": "x", "Media": " ", "Media Caption": "c"})

    assert event is not None and event.media is None


def test_transform_row_builds_background_from_either_column() -> None:
    """Background url and color should be set independently."""
    color_event = transform_row({"Year": "1", "Headline": "x", "Background Color": " #000 "})
    url_event = transform_row({"Year": "1", "Headline": "x", "Background": "http://bg"})
    none_event = transform_row({"Year": "1", "Headline": "x", "Background": " "})

    assert color_event is not None and color_event.background == BackgroundBlock(color="#000")
    assert url_event is not None and url_event.background == BackgroundBlock(url="http://bg")
    assert none_event is not None and none_event.background is None


@pytest.mark.parametrize(("value", "expected"), [("FALSE", False), ("false", None), ("TRUE", None), ("", None)])
def test_transform_row_only_disables_autolink_for_exact_false(value: str, expected: bool | None) -> None:
    """Scenario C: only the literal FALSE should disable autolinking."""
    event = transform_row({"Year": "2000", "Headline": "x", "Autolink": value})

    assert event is not None and event.autolink is expected


def test_transform_row_ignores_non_ascii_digits_in_refinements() -> None:
    """Month digits outside ASCII should not parse into a date part."""
    event = transform_row({"Year": "1947", "Month": "\u0668", "Headline": "x"})

    assert event is not None and event.start_date == DatePart(year=1947)
