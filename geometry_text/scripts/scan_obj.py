#!/usr/bin/env python3
"""CLI entrypoint for scanning Wavefront-style text files."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

from geometry_text.obj_scanner import numeric
from geometry_text.obj_scanner.session import ScannedRecord, ScanSession

logger = logging.getLogger("geometry_text.obj_scanner.cli")


@dataclass
class FileStats:
    """Per-file totals gathered by the ``stats`` command."""

    file: str
    lines: int = 0
    records: Counter[str] = field(default_factory=Counter)
    numeric_fields: Counter[str] = field(default_factory=Counter)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )


def resolve_input(path: str) -> Path:
    resolved = Path(path).expanduser().resolve()
    if not resolved.is_file():
        raise SystemExit(f"Input file not found: {resolved}")
    return resolved


def load_session(path: Path) -> ScanSession:
    # latin-1 maps every byte to exactly one character
    text = path.read_bytes().decode("latin-1")
    return ScanSession.from_text(text)


def iter_content_records(session: ScanSession) -> Iterable[ScannedRecord]:
    for record in session.iter_records():
        if not record.is_blank:
            yield record


def collect_stats(path: Path) -> FileStats:
    session = load_session(path)
    stats = FileStats(file=str(path))
    for record in iter_content_records(session):
        stats.records[record.keyword] += 1
        stats.numeric_fields[record.keyword] += sum(
            1 for value in record.fields if numeric.is_real(value)
        )
    stats.lines = session.lines.value
    return stats


def command_tokens(args: argparse.Namespace) -> None:
    path = resolve_input(args.file)
    logger.info("Scanning %s", path)
    session = load_session(path)
    records = [record.to_dict() for record in iter_content_records(session)]
    if args.output:
        output = Path(args.output).expanduser().resolve()
        write_jsonl(output, records)
        logger.info("Wrote %d records to %s", len(records), output)
    else:
        dump_jsonl(sys.stdout, records)


def command_stats(args: argparse.Namespace) -> None:
    results = [collect_stats(resolve_input(file)) for file in args.files]
    print_stats_table(results)


def dump_jsonl(fh: TextIO, items: Iterable[dict[str, Any]]) -> None:
    for item in items:
        fh.write(json.dumps(item, ensure_ascii=False))
        fh.write("\n")


def write_jsonl(path: Path, items: Iterable[dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        dump_jsonl(fh, items)


def print_stats_table(results: list[FileStats]) -> None:
    print("File".ljust(50), "Keyword".ljust(12), "Records".ljust(10), "Numeric")
    print("-" * 85)
    for stats in results:
        for keyword, count in sorted(stats.records.items()):
            print(
                stats.file.ljust(50),
                keyword.ljust(12),
                str(count).ljust(10),
                str(stats.numeric_fields[keyword]),
            )
        print(stats.file.ljust(50), "(lines)".ljust(12), str(stats.lines))


def build_parser() -> argparse.ArgumentParser:
    parser_obj = argparse.ArgumentParser(description="Scan Wavefront-style text files")
    parser_obj.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser_obj.add_subparsers(dest="command")

    tokens_parser = subparsers.add_parser("tokens", help="Dump keyword and fields per line")
    tokens_parser.add_argument("file", help="File to scan")
    tokens_parser.add_argument("--output", help="Write JSON Lines here instead of stdout")
    tokens_parser.set_defaults(func=command_tokens)

    stats_parser = subparsers.add_parser("stats", help="Count records per keyword")
    stats_parser.add_argument("files", nargs="+", help="Files to scan")
    stats_parser.set_defaults(func=command_stats)

    return parser_obj


def main(argv: list[str] | None = None) -> None:
    parser_obj = build_parser()
    args = parser_obj.parse_args(argv)
    if not getattr(args, "command", None):
        parser_obj.print_help()
        return
    configure_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
