"""Media and background block builders.

This module builds the optional media and background blocks shared by
event slides and the title slide. Column names are passed in so the same
rules apply to ``Media``/``Background`` and ``Title Media``/``Title Background``.
"""

from __future__ import annotations

from typing import Sequence

from core.types import BackgroundBlock, MediaBlock, RawRecord
from transforms.record_fields import raw_value, trimmed_value


def build_media_block(record: RawRecord, columns: Sequence[str]) -> MediaBlock | None:
    """Build a media block when the URL column is not blank.

    Args:
        record: Raw table record.
        columns: Eight column names in order url, caption, credit,
            thumbnail, alt, title, link, link target.

    Returns:
        Media block with a trimmed URL and verbatim optional fields,
        or None when no URL is given.
    """
    (
        url_column,
        caption_column,
        credit_column,
        thumbnail_column,
        alt_column,
        title_column,
        link_column,
        link_target_column,
    ) = columns
    url = trimmed_value(record, url_column)
    if url is None:
        return None
    return MediaBlock(
        url=url,
        caption=raw_value(record, caption_column),
        credit=raw_value(record, credit_column),
        thumbnail=raw_value(record, thumbnail_column),
        alt=raw_value(record, alt_column),
        title=raw_value(record, title_column),
        link=raw_value(record, link_column),
        link_target=raw_value(record, link_target_column),
    )


def build_background_block(record: RawRecord, columns: Sequence[str]) -> BackgroundBlock | None:
    """Build a background block when an image URL or color is given.

    Args:
        record: Raw table record.
        columns: Image URL column and color column names.

    Returns:
        Background block with trimmed values, or None when both are blank.
    """
    url_column, color_column = columns
    url = trimmed_value(record, url_column)
    color = trimmed_value(record, color_column)
    if url is None and color is None:
        return None
    return BackgroundBlock(url=url, color=color)
