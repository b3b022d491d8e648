"""Field accessors for raw table records.

This module reads optional string cells from raw records. Absent cells,
``None`` values, and blank-after-trim values all read as not provided.
"""

from __future__ import annotations

import re

from core.types import RawRecord

_LEADING_INTEGER = re.compile(r"[+-]?[0-9]+")


def raw_value(record: RawRecord, column: str) -> str | None:
    """Return the untrimmed cell value when it is a non-empty string."""
    value = record.get(column)
    if not isinstance(value, str) or value == "":
        return None
    return value


def trimmed_value(record: RawRecord, column: str) -> str | None:
    """Return the trimmed cell value when it is not blank."""
    value = raw_value(record, column)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def parse_integer(text: str) -> int | None:
    """Parse a leading base-10 integer the way spreadsheet exports expect.

    Leading whitespace is ignored and trailing non-digit characters are
    dropped, so ``"1947 "`` and ``"12th"`` both parse.

    Args:
        text: Raw cell text.

    Returns:
        Parsed integer, or None when the text has no leading integer.
    """
    match = _LEADING_INTEGER.match(text.strip())
    if match is None:
        return None
    return int(match.group(0))


def integer_value(record: RawRecord, column: str) -> int | None:
    """Return the parsed integer of a non-blank cell."""
    value = trimmed_value(record, column)
    if value is None:
        return None
    return parse_integer(value)
