"""JSON serialization for timeline documents.

This module renders TimelineDocument objects into the nested JSON shape
the timeline widget reads. Unset optional fields are omitted, never
written as null.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.errors import ChronolineConversionError
from core.types import BackgroundBlock, DatePart, MediaBlock, TimelineDocument, TimelineEvent, TitleBlock

_DATE_FIELDS = ("year", "month", "day", "hour", "minute", "second")
_MEDIA_FIELDS = ("url", "caption", "credit", "thumbnail", "alt", "title", "link", "link_target")


def document_to_payload(document: TimelineDocument) -> dict[str, object]:
    """Serialize a document into a JSON-safe payload.

    Args:
        document: Timeline document.

    Returns:
        Dictionary with ``events`` and ``title`` keys.
    """
    return {
        "events": [event_to_payload(event) for event in document.events],
        "title": _title_to_payload(document.title),
    }


def event_to_payload(event: TimelineEvent) -> dict[str, object]:
    """Serialize one event slide."""
    payload: dict[str, object] = {
        "start_date": _date_to_payload(event.start_date),
        "text": {"headline": event.text.headline, "text": event.text.text},
        "group": event.group,
        "unique_id": event.unique_id,
    }
    if event.end_date is not None:
        payload["end_date"] = _date_to_payload(event.end_date)
    if event.display_date is not None:
        payload["display_date"] = event.display_date
    if event.media is not None:
        payload["media"] = _media_to_payload(event.media)
    if event.background is not None:
        payload["background"] = _background_to_payload(event.background)
    if event.autolink is not None:
        payload["autolink"] = event.autolink
    return payload


def write_document_json(output_path: Path, document: TimelineDocument) -> None:
    """Write a document as indented JSON.

    Args:
        output_path: Destination file path; parent directories are created.
        document: Timeline document.

    Raises:
        ChronolineConversionError: If the file cannot be written.
    """
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(render_document_json(document) + "\n", encoding="utf-8")
    except OSError as error:
        raise ChronolineConversionError(
            f"Failed to write timeline JSON at {output_path}: {error}. "
            "Check the output directory and retry."
        ) from error


def render_document_json(document: TimelineDocument) -> str:
    """Render a document as an indented JSON string."""
    return json.dumps(document_to_payload(document), indent=2, ensure_ascii=False)


def _title_to_payload(title: TitleBlock) -> dict[str, object]:
    text_payload: dict[str, object] = {"headline": title.text.headline}
    if title.text.text is not None:
        text_payload["text"] = title.text.text
    payload: dict[str, object] = {"text": text_payload}
    if title.media is not None:
        payload["media"] = _media_to_payload(title.media)
    if title.background is not None:
        payload["background"] = _background_to_payload(title.background)
    return payload


def _date_to_payload(date_part: DatePart) -> dict[str, object]:
    return _drop_unset({name: getattr(date_part, name) for name in _DATE_FIELDS})


def _media_to_payload(media: MediaBlock) -> dict[str, object]:
    return _drop_unset({name: getattr(media, name) for name in _MEDIA_FIELDS})


def _background_to_payload(background: BackgroundBlock) -> dict[str, object]:
    return _drop_unset({"url": background.url, "color": background.color})


def _drop_unset(values: dict[str, object]) -> dict[str, object]:
    return {key: value for key, value in values.items() if value is not None}
