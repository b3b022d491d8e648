"""Date part extraction for event boundaries.

This module refines a year into a full DatePart from month, day, and
time columns. Each component is range-checked on its own; there is no
calendar cross-check, so February 30 passes through unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

from core.types import DatePart, RawRecord
from transforms.record_fields import integer_value, parse_integer, raw_value


@dataclass(frozen=True)
class DateColumns:
    """Column names that describe one event boundary."""

    month: str
    day: str
    time: str


def build_date_part(year: int, record: RawRecord, columns: DateColumns) -> DatePart:
    """Build a DatePart from a year and the optional refinement columns.

    Args:
        year: Already validated year.
        record: Raw table record.
        columns: Month, day, and time column names.

    Returns:
        Date part with every in-range component set.
    """
    hour, minute, second = _parse_time(raw_value(record, columns.time))
    return DatePart(
        year=year,
        month=_in_range(integer_value(record, columns.month), 1, 12),
        day=_in_range(integer_value(record, columns.day), 1, 31),
        hour=hour,
        minute=minute,
        second=second,
    )


def _parse_time(time_value: str | None) -> tuple[int | None, int | None, int | None]:
    """Split an ``H:M[:S]`` value into range-checked components."""
    if time_value is None or ":" not in time_value:
        return None, None, None
    time_parts = time_value.split(":")
    hour = _in_range(parse_integer(time_parts[0]), 0, 23)
    minute = _in_range(parse_integer(time_parts[1]), 0, 59)
    second = None
    if len(time_parts) > 2:
        second = _in_range(parse_integer(time_parts[2]), 0, 59)
    return hour, minute, second


def _in_range(value: int | None, lower: int, upper: int) -> int | None:
    if value is None or value < lower or value > upper:
        return None
    return value
