"""Command-line interface for URL Dissector."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from . import __version__
from .constants import EXPORT_KEYS
from .exporter import EXPORT_FORMATS, render_export, write_export
from .logging_config import configure_logging, get_logger
from .models import ParsedUrl
from .parser import parse

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="url-dissector", description="Split URLs into their parts")
    parser.add_argument("urls", nargs="*", help="URLs to parse")
    parser.add_argument(
        "--input",
        "-i",
        type=str,
        help="Read URLs one per line from a file ('-' for stdin)",
    )
    parser.add_argument(
        "--format",
        choices=("table",) + EXPORT_FORMATS,
        default="table",
        help="Output format",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write output to a file instead of stdout (table format is not supported)",
    )
    parser.add_argument(
        "--include-url",
        action="store_true",
        help="Include the original input string in exported records",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    parser.add_argument(
        "--log-format",
        choices=("json", "console"),
        help="Log output format",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level, log_format=args.log_format)

    urls = list(args.urls)
    if args.input:
        try:
            urls.extend(_read_urls(args.input))
        except OSError as exc:
            logger.exception("Failed to read URL list", extra={"input_path": args.input})
            print(f"ERROR: could not read {args.input}: {exc}", file=sys.stderr)
            return 1

    if not urls:
        print("ERROR: no URLs given", file=sys.stderr)
        return 1

    results = [parse(url) for url in urls]
    logger.info("Parsed URLs", extra={"url_count": len(results)})

    if args.format == "table":
        if args.output:
            print("ERROR: --output requires a non-table --format", file=sys.stderr)
            return 1
        _render_table(results)
        return 0

    if args.output:
        try:
            write_export(results, args.output, args.format, include_url=args.include_url)
        except (OSError, ValueError) as exc:
            logger.error(
                "Export failed",
                extra={"export_path": str(args.output), "export_format": args.format, "error": str(exc)},
            )
            print(f"ERROR: export failed: {exc}", file=sys.stderr)
            return 1
        print(f"URL Dissector exported {len(results)} record(s) to {args.output}")
        return 0

    sys.stdout.write(render_export(results, args.format, include_url=args.include_url))
    return 0


def _read_urls(source: str) -> List[str]:
    if source == "-":
        lines = sys.stdin.read().splitlines()
    else:
        lines = Path(source).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def _render_table(results: Sequence[ParsedUrl]) -> None:
    width = max(len(key) for key in EXPORT_KEYS)
    for parsed in results:
        print("-" * 80)
        print(f"{'url'.ljust(width)} : {parsed.url}")
        for key, value in parsed.to_dict().items():
            if key == "queryParams":
                value = json.dumps(value, ensure_ascii=False) if value else None
            print(f"{key.ljust(width)} : {'' if value is None else value}")


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
