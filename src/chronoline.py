"""Public SDK surface for Chronoline.

This module provides a stable import path for library users.
It re-exports the conversion entry points and typed models.
"""

from __future__ import annotations

from core.config import ChronolineConfig
from core.errors import ChronolineConversionError, ChronolineError
from core.timeline_options import TimelineOptions, build_timeline_options, load_timeline_options
from core.types import (
    ConversionFailure,
    ConversionResult,
    DatePart,
    TimelineDocument,
    TimelineEvent,
)
from ingest.table_reader import read_table_records
from store.document_payload import document_to_payload
from transforms.document_assembly import assemble_document, require_document
from transforms.fallback_timeline import create_fallback_timeline
from transforms.row_transform import transform_row

__all__ = [
    "ChronolineConfig",
    "ChronolineConversionError",
    "ChronolineError",
    "ConversionFailure",
    "ConversionResult",
    "DatePart",
    "TimelineDocument",
    "TimelineEvent",
    "TimelineOptions",
    "assemble_document",
    "build_timeline_options",
    "create_fallback_timeline",
    "document_to_payload",
    "load_timeline_options",
    "read_table_records",
    "require_document",
    "transform_row",
]
