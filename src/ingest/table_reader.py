"""Delimited table reader for timeline sources.

This module loads a local delimited file with a header row into raw
records keyed by column name. Every cell is kept as a string so the
row transformer alone decides what a value means.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from core.constants import DEFAULT_DELIMITER
from core.errors import ChronolineIngestError
from core.logging_config import get_logger
from core.types import RawRecord

_LOGGER = get_logger(__name__)


def read_table_records(source_path: str, delimiter: str = DEFAULT_DELIMITER) -> list[RawRecord]:
    """Load raw records from a delimited file.

    Args:
        source_path: Local path to the table file.
        delimiter: Single-character column delimiter.

    Returns:
        Records in file order; blank lines are skipped and missing cells
        read as empty strings. A trailing delimiter on data rows never shifts
        columns. An empty or header-only file yields no records.

    Raises:
        ChronolineIngestError: If the file is missing or cannot be parsed.
    """
    table_path = Path(source_path).expanduser()
    if not table_path.is_file():
        raise ChronolineIngestError(
            f"Failed to read table at {table_path}: file does not exist. "
            "Provide an existing delimited file."
        )
    try:
        frame = pd.read_csv(
            table_path,
            sep=delimiter,
            index_col=False,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding="utf-8",
        )
    except pd.errors.EmptyDataError:
        _LOGGER.warning("table_empty", source=str(table_path))
        return []
    except (pd.errors.ParserError, UnicodeDecodeError) as error:
        raise ChronolineIngestError(
            f"Failed to parse table at {table_path}: {error}. "
            f"Check that columns are separated by '{delimiter}' and retry."
        ) from error
    records: list[RawRecord] = frame.fillna("").to_dict(orient="records")
    _LOGGER.info("table_read", source=str(table_path), record_count=len(records))
    return records
