"""Convert command wiring for Chronoline CLI."""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path
import sys
from typing import Any

from core.config import ChronolineConfig, parse_delimiter
from core.constants import NO_MATCHING_GROUPS_MESSAGE
from core.types import TimelineDocument
from ingest.table_reader import read_table_records
from store.document_payload import render_document_json, write_document_json
from transforms.document_assembly import assemble_document
from transforms.fallback_timeline import create_fallback_timeline
from transforms.group_filtering import filter_records_by_groups


def add_convert_command(subparsers: Any) -> None:
    """Register convert subcommand."""
    parser = subparsers.add_parser(
        "convert",
        help="Convert a delimited event table into timeline JSON",
    )
    parser.add_argument("source", help="Delimited table file with a header row")
    parser.add_argument("--output", help="Output JSON path; stdout when omitted")
    parser.add_argument("--title", help="Override CHRONOLINE_TITLE_HEADLINE")
    parser.add_argument("--delimiter", help="Override CHRONOLINE_DELIMITER")
    parser.add_argument("--seed", type=int, help="Seed for generated fallback event ids")
    parser.add_argument(
        "--groups",
        nargs="+",
        help="Only keep rows whose Group is one of these labels",
    )
    parser.add_argument(
        "--fallback-on-error",
        action="store_true",
        help="Emit the demo timeline when the table has no usable rows",
    )


def run_convert_command(config: ChronolineConfig, args: argparse.Namespace) -> int:
    """Read, assemble, and write a timeline document."""
    config = _apply_overrides(config, args)
    records = read_table_records(args.source, config.delimiter)
    if records and args.groups:
        records = filter_records_by_groups(records, set(args.groups))
        if not records:
            return _report_failure(
                f"{NO_MATCHING_GROUPS_MESSAGE} {', '.join(args.groups)}",
                args,
            )
    result = assemble_document(records, config, config.build_random_source())
    if result.document is None:
        message = result.failure.message if result.failure else "Unknown conversion failure."
        return _report_failure(message, args)
    _emit_document(result.document, args)
    return 0


def _report_failure(message: str, args: argparse.Namespace) -> int:
    """Print a conversion failure and emit the demo timeline when requested."""
    print(f"conversion_error={message}", file=sys.stderr)
    if not args.fallback_on_error:
        return 1
    _emit_document(create_fallback_timeline(), args)
    return 0


def _emit_document(document: TimelineDocument, args: argparse.Namespace) -> None:
    if args.output:
        output_path = Path(args.output).expanduser().resolve()
        write_document_json(output_path, document)
        print(output_path)
    else:
        print(render_document_json(document))


def _apply_overrides(config: ChronolineConfig, args: argparse.Namespace) -> ChronolineConfig:
    if args.title:
        config = replace(config, title_headline=args.title)
    if args.delimiter:
        config = replace(config, delimiter=parse_delimiter(args.delimiter, "--delimiter"))
    if args.seed is not None:
        config = replace(config, random_seed=args.seed)
    return config
