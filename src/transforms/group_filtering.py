"""Group selection helpers for timeline tables.

This module lists the groups present in a table and narrows records to
the active groups before assembly. Persisting selections is left to the
caller.
"""

from __future__ import annotations

from typing import Collection, Iterable, Sequence

from core.constants import GROUP_COLUMN
from core.types import RawRecord
from transforms.record_fields import trimmed_value


def collect_unique_groups(records: Iterable[RawRecord]) -> list[str]:
    """Return sorted distinct non-blank group labels.

    Args:
        records: Raw table records.

    Returns:
        Trimmed group labels in sorted order.
    """
    groups = {trimmed_value(record, GROUP_COLUMN) for record in records}
    return sorted(group for group in groups if group)


def filter_records_by_groups(
    records: Iterable[RawRecord],
    active_groups: Collection[str],
) -> list[RawRecord]:
    """Keep records whose group is active, preserving table order.

    Ungrouped records match the empty label ``""``.
    """
    return [
        record
        for record in records
        if (trimmed_value(record, GROUP_COLUMN) or "") in active_groups
    ]


def reconcile_active_groups(
    saved_groups: Sequence[str],
    available_groups: Sequence[str],
) -> list[str]:
    """Restore a saved group selection against the groups now available.

    Args:
        saved_groups: Previously active groups, possibly stale.
        available_groups: Groups present in the current table.

    Returns:
        Saved groups that still exist, or every available group when none do.
    """
    available = set(available_groups)
    still_valid = [group for group in saved_groups if group in available]
    if still_valid:
        return still_valid
    return list(available_groups)
