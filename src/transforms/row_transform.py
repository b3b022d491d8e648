"""Row transformer for timeline events.

This module converts one raw table record into a TimelineEvent. Rows
without a parseable year are unusable: they are logged and skipped
rather than raised, so one bad row never aborts a whole table.
"""

from __future__ import annotations

import random
import re
from typing import Literal

from core.constants import (
    AUTOLINK_COLUMN,
    AUTOLINK_DISABLED_VALUE,
    DAY_COLUMN,
    DISPLAY_DATE_COLUMN,
    END_DAY_COLUMN,
    END_MONTH_COLUMN,
    END_TIME_COLUMN,
    END_YEAR_COLUMN,
    EVENT_BACKGROUND_COLUMNS,
    EVENT_MEDIA_COLUMNS,
    FALLBACK_ID_ALPHABET,
    FALLBACK_ID_LENGTH,
    GROUP_COLUMN,
    HEADLINE_COLUMN,
    MONTH_COLUMN,
    TEXT_COLUMN,
    TIME_COLUMN,
    UNIQUE_ID_COLUMN,
    YEAR_COLUMN,
)
from core.logging_config import get_logger
from core.types import DatePart, EventText, RawRecord, TimelineEvent
from transforms.date_parts import DateColumns, build_date_part
from transforms.media_blocks import build_background_block, build_media_block
from transforms.record_fields import integer_value, raw_value, trimmed_value

START_DATE_COLUMNS = DateColumns(month=MONTH_COLUMN, day=DAY_COLUMN, time=TIME_COLUMN)
END_DATE_COLUMNS = DateColumns(month=END_MONTH_COLUMN, day=END_DAY_COLUMN, time=END_TIME_COLUMN)

_WHITESPACE_RUN = re.compile(r"\s+")

_LOGGER = get_logger(__name__)


def transform_row(record: RawRecord, rng: random.Random | None = None) -> TimelineEvent | None:
    """Convert one raw record into a timeline event.

    Args:
        record: Raw table record keyed by header name.
        rng: Optional random source for fallback ids; the process-level
            generator is used when omitted.

    Returns:
        The event, or None when the row has no parseable year.
    """
    year = integer_value(record, YEAR_COLUMN)
    if year is None:
        _LOGGER.warning(
            "row_rejected_invalid_year",
            year=record.get(YEAR_COLUMN),
            headline=record.get(HEADLINE_COLUMN),
        )
        return None
    headline = raw_value(record, HEADLINE_COLUMN)
    return TimelineEvent(
        start_date=build_date_part(year, record, START_DATE_COLUMNS),
        end_date=_build_end_date(record),
        text=EventText(headline=headline or "", text=raw_value(record, TEXT_COLUMN) or ""),
        group=trimmed_value(record, GROUP_COLUMN) or "",
        unique_id=_resolve_unique_id(record, year, headline, rng),
        display_date=trimmed_value(record, DISPLAY_DATE_COLUMN),
        media=build_media_block(record, EVENT_MEDIA_COLUMNS),
        background=build_background_block(record, EVENT_BACKGROUND_COLUMNS),
        autolink=_resolve_autolink(record),
    )


def build_event_id(year: object, headline: str | None) -> str | None:
    """Build the derived ``event-<year>-<slug>`` id for a headline.

    Args:
        year: Year value rendered into the id.
        headline: Headline to slug; whitespace runs become one hyphen.

    Returns:
        Derived id, or None when the headline is missing or empty.
    """
    if not headline:
        return None
    return f"event-{year}-{_WHITESPACE_RUN.sub('-', headline)}"


def generate_fallback_token(rng: random.Random | None = None) -> str:
    """Return a random base-36 token for rows without id or headline.

    Uniqueness is best-effort only; callers needing strict uniqueness
    should supply ``Unique ID`` values.
    """
    source = rng if rng is not None else random
    return "".join(source.choice(FALLBACK_ID_ALPHABET) for _ in range(FALLBACK_ID_LENGTH))


def _resolve_unique_id(
    record: RawRecord,
    year: int,
    headline: str | None,
    rng: random.Random | None,
) -> str:
    explicit_id = raw_value(record, UNIQUE_ID_COLUMN)
    if explicit_id is not None:
        return explicit_id
    derived_id = build_event_id(year, headline)
    if derived_id is not None:
        return derived_id
    return f"event-{year}-{generate_fallback_token(rng)}"


def _build_end_date(record: RawRecord) -> DatePart | None:
    end_year = integer_value(record, END_YEAR_COLUMN)
    if end_year is None:
        return None
    return build_date_part(end_year, record, END_DATE_COLUMNS)


def _resolve_autolink(record: RawRecord) -> Literal[False] | None:
    if record.get(AUTOLINK_COLUMN) == AUTOLINK_DISABLED_VALUE:
        return False
    return None
