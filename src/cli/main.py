"""Chronoline CLI entry points.
This module exposes commands for converting event tables and inspecting them.
It maps argparse commands onto transform and ingest calls.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys
from typing import Any, Sequence

from cli.convert_command import add_convert_command, run_convert_command
from core.config import ChronolineConfig, parse_delimiter
from core.constants import SUPPORTED_TIMELINE_TYPES
from core.errors import ChronolineError
from core.timeline_options import (
    build_timeline_options,
    load_timeline_options,
    timeline_options_to_payload,
)
from ingest.table_reader import read_table_records
from store.document_payload import render_document_json, write_document_json
from transforms.event_search import build_search_entries, search_entries
from transforms.fallback_timeline import create_fallback_timeline
from transforms.group_filtering import collect_unique_groups


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="chronoline",
        description="Convert event tables into timeline documents",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_convert_command(subparsers)
    _add_groups_command(subparsers)
    _add_search_command(subparsers)
    _add_options_command(subparsers)
    _add_example_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Chronoline CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = ChronolineConfig.from_env()
        return _dispatch(parser, config, args)
    except ChronolineError as error:
        print(f"error={error}", file=sys.stderr)
        return 1


def _dispatch(
    parser: argparse.ArgumentParser,
    config: ChronolineConfig,
    args: argparse.Namespace,
) -> int:
    if args.command == "convert":
        return run_convert_command(config, args)
    if args.command == "groups":
        return _run_groups_command(config, args)
    if args.command == "search":
        return _run_search_command(config, args)
    if args.command == "options":
        return _run_options_command(config, args)
    if args.command == "example":
        return _run_example_command(args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _resolve_delimiter(config: ChronolineConfig, args: argparse.Namespace) -> str:
    """Return the validated --delimiter override, or the configured delimiter."""
    if args.delimiter:
        return parse_delimiter(args.delimiter, "--delimiter")
    return config.delimiter


def _run_groups_command(config: ChronolineConfig, args: argparse.Namespace) -> int:
    """Handle groups command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    records = read_table_records(args.source, _resolve_delimiter(config, args))
    for group in collect_unique_groups(records):
        print(group)
    return 0


def _run_search_command(config: ChronolineConfig, args: argparse.Namespace) -> int:
    """Handle search command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code, 1 when nothing matched.
    """
    records = read_table_records(args.source, _resolve_delimiter(config, args))
    matches = search_entries(build_search_entries(records), args.query)
    for entry in matches:
        print(f"{entry.unique_id}\t{entry.label}")
    return 0 if matches else 1


def _run_options_command(config: ChronolineConfig, args: argparse.Namespace) -> int:
    """Handle options command.

    Args:
        config: Runtime config.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    timeline_type = args.timeline_type or config.timeline_type
    if args.options_file:
        options = load_timeline_options(args.options_file, timeline_type)
    else:
        options = build_timeline_options(timeline_type)
    print(json.dumps(timeline_options_to_payload(options), indent=2))
    return 0


def _run_example_command(args: argparse.Namespace) -> int:
    """Handle example command."""
    document = create_fallback_timeline()
    if args.output:
        output_path = Path(args.output).expanduser().resolve()
        write_document_json(output_path, document)
        print(output_path)
    else:
        print(render_document_json(document))
    return 0


def _add_groups_command(subparsers: Any) -> None:
    """Register groups subcommand."""
    parser = subparsers.add_parser("groups", help="List distinct groups in a table")
    parser.add_argument("source", help="Delimited table file with a header row")
    parser.add_argument("--delimiter", help="Override CHRONOLINE_DELIMITER")


def _add_search_command(subparsers: Any) -> None:
    """Register search subcommand."""
    parser = subparsers.add_parser("search", help="Search events by headline or text")
    parser.add_argument("source", help="Delimited table file with a header row")
    parser.add_argument("query", help="Case-insensitive search text")
    parser.add_argument("--delimiter", help="Override CHRONOLINE_DELIMITER")


def _add_options_command(subparsers: Any) -> None:
    """Register options subcommand."""
    parser = subparsers.add_parser("options", help="Print timeline widget options")
    parser.add_argument(
        "--timeline-type",
        choices=SUPPORTED_TIMELINE_TYPES,
        help="Override CHRONOLINE_TIMELINE_TYPE",
    )
    parser.add_argument("--options-file", help="YAML file with option overrides")


def _add_example_command(subparsers: Any) -> None:
    """Register example subcommand."""
    parser = subparsers.add_parser("example", help="Write the built-in demo timeline")
    parser.add_argument("--output", help="Output JSON path; stdout when omitted")
