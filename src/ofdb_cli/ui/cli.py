from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from ofdb_cli.adapters.report_writer import write_report
from ofdb_cli.app import (
    UnsupportedSourceError,
    import_places,
    patch_places_from_file,
    read_catalog_places,
    review_places_from_file,
    update_places_from_file,
)
from ofdb_cli.config import ConfigurationError, configure_logging

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ofdb", description="CLI for OpenFairDB")
    parser.add_argument(
        "--api-url",
        type=str,
        help="The URL of the JSON API (defaults to $OFDB_API_URL)",
    )
    parser.add_argument(
        "--report",
        type=Path,
        help="Write the JSON report to this file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_cmd = subparsers.add_parser("import", help="Import new entries")
    import_cmd.add_argument("file", type=Path, help="CSV or JSON file with new places")

    update_cmd = subparsers.add_parser("update", help="Update entries")
    update_cmd.add_argument("file", type=Path, help="CSV or JSON file with full places")

    patch_cmd = subparsers.add_parser("patch", help="Patch entries field by field")
    patch_cmd.add_argument("file", type=Path, help="CSV file with patch directives")

    review_cmd = subparsers.add_parser("review", help="Review entries")
    review_cmd.add_argument("file", type=Path, help="CSV file with id, status and comment")

    read_cmd = subparsers.add_parser("read", help="Read entries")
    read_cmd.add_argument("ids", nargs="+", help="Place IDs")

    return parser.parse_args(list(argv))


def _run(args: argparse.Namespace) -> object:
    if args.command == "import":
        return import_places(args.file, api_url=args.api_url)
    if args.command == "update":
        return update_places_from_file(args.file, api_url=args.api_url)
    if args.command == "patch":
        return patch_places_from_file(args.file, api_url=args.api_url)
    if args.command == "review":
        return review_places_from_file(args.file, api_url=args.api_url)
    if args.command == "read":
        return read_catalog_places(args.ids, api_url=args.api_url)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    if parsed_args.verbose:
        configure_logging(level=logging.DEBUG, force=True)

    try:
        result = _run(parsed_args)
    except (ConfigurationError, UnsupportedSourceError):
        log.exception("Invalid configuration or input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)

    write_report(result, parsed_args.report)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
