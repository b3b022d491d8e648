"""Document assembler for timeline tables.

This module maps raw table records through the row transformer and wraps
the surviving events with a title slide. Document-level problems are
returned as typed failures instead of raised, so callers can show the
message or fall back to a demo timeline.
"""

from __future__ import annotations

import random
from typing import Sequence

from core.config import ChronolineConfig
from core.constants import (
    CONVERSION_ERROR_PREFIX,
    EMPTY_INPUT_MESSAGE,
    NO_CANDIDATE_ROWS_MESSAGE,
    NO_SURVIVING_EVENTS_MESSAGE,
    TITLE_BACKGROUND_COLUMNS,
    TITLE_MEDIA_COLUMNS,
    YEAR_COLUMN,
)
from core.errors import ChronolineConversionError
from core.logging_config import get_logger
from core.types import (
    ConversionFailure,
    ConversionFailureKind,
    ConversionResult,
    RawRecord,
    TimelineDocument,
    TimelineEvent,
    TitleBlock,
    TitleText,
)
from transforms.media_blocks import build_background_block, build_media_block
from transforms.record_fields import trimmed_value
from transforms.row_transform import transform_row

_LOGGER = get_logger(__name__)


def assemble_document(
    records: Sequence[RawRecord],
    config: ChronolineConfig | None = None,
    rng: random.Random | None = None,
) -> ConversionResult:
    """Assemble a timeline document from raw table records.

    Args:
        records: Raw records in table order.
        config: Runtime config providing the title headline; defaults apply
            when omitted.
        rng: Optional random source for fallback event ids.

    Returns:
        Result holding either the document or a typed failure.
    """
    if not records:
        return _failure("empty_input", EMPTY_INPUT_MESSAGE)
    candidates = [record for record in records if trimmed_value(record, YEAR_COLUMN)]
    if not candidates:
        return _failure("no_candidate_rows", NO_CANDIDATE_ROWS_MESSAGE)
    active_config = config or ChronolineConfig()
    try:
        events = _transform_candidates(candidates, rng)
        if not events:
            return _failure("no_surviving_events", NO_SURVIVING_EVENTS_MESSAGE)
        title = _build_title_block(records[0], active_config.title_headline)
    except Exception as error:
        _LOGGER.error("document_conversion_failed", error=str(error))
        return _failure("conversion_error", f"{CONVERSION_ERROR_PREFIX}{error}")
    _LOGGER.info(
        "document_assembled",
        event_count=len(events),
        dropped_rows=len(records) - len(events),
    )
    return ConversionResult(document=TimelineDocument(events=events, title=title))


def require_document(result: ConversionResult) -> TimelineDocument:
    """Return the document of a result or raise its failure.

    Args:
        result: Assembler result.

    Returns:
        The assembled document.

    Raises:
        ChronolineConversionError: If the result carries a failure.
    """
    if result.document is not None:
        return result.document
    message = result.failure.message if result.failure else "Unknown conversion failure."
    raise ChronolineConversionError(message)


def _transform_candidates(
    candidates: Sequence[RawRecord],
    rng: random.Random | None,
) -> tuple[TimelineEvent, ...]:
    events: list[TimelineEvent] = []
    for record in candidates:
        event = transform_row(record, rng)
        if event is not None:
            events.append(event)
    return tuple(events)


def _build_title_block(first_record: RawRecord, headline: str) -> TitleBlock:
    """Build the title slide from the first record of the unfiltered table."""
    return TitleBlock(
        text=TitleText(headline=headline),
        media=build_media_block(first_record, TITLE_MEDIA_COLUMNS),
        background=build_background_block(first_record, TITLE_BACKGROUND_COLUMNS),
    )


def _failure(kind: ConversionFailureKind, message: str) -> ConversionResult:
    return ConversionResult(failure=ConversionFailure(kind=kind, message=message))
