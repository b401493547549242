from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from fmgsync.app import import_map_file, inspect_map_file
from fmgsync.config import ConfigurationError, configure_logging, get_city_generator_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

EXIT_INTEGRITY_WARNINGS = 3


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Import Fantasy Map Generator exports")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_cmd = subparsers.add_parser("import", help="Import a .map export into the store")
    import_cmd.add_argument("map_path", type=Path, metavar="MAP", help="Path to the .map file")
    import_cmd.add_argument(
        "--recreate",
        action="store_true",
        help="Drop previously imported collections and create them afresh",
    )
    import_cmd.add_argument(
        "--generator-url",
        type=str,
        help="Base URL of the city generator (defaults to config)",
    )

    inspect_cmd = subparsers.add_parser("inspect", help="Show header and record counts")
    inspect_cmd.add_argument("map_path", type=Path, metavar="MAP", help="Path to the .map file")

    return parser.parse_args(list(argv))


def _validate(args: argparse.Namespace) -> None:
    if not args.map_path.is_file():
        raise ValueError(f"Map export not found: {args.map_path}")
    if args.command == "import" and args.generator_url is not None:
        try:
            get_city_generator_config(base_url=args.generator_url)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc


def _run_import(args: argparse.Namespace) -> int:
    result = import_map_file(
        args.map_path,
        recreate=args.recreate,
        generator_url=args.generator_url,
    )
    for warning in result.warnings:
        log.warning("Integrity warning: %s", warning.message)
    if result.warnings:
        log.warning("Re-run with --recreate to rebuild the refused collections")
        return EXIT_INTEGRITY_WARNINGS
    return 0


def _run_inspect(args: argparse.Namespace) -> int:
    summary = inspect_map_file(args.map_path)
    header = summary.header
    print(f"version: {header.version}")  # noqa: T201
    print(f"seed: {header.seed}")  # noqa: T201
    print(f"size: {header.width}x{header.height}")  # noqa: T201
    for kind, count in sorted(summary.counts.items()):
        print(f"{kind}: {count}")  # noqa: T201
    if summary.duplicates:
        print(f"duplicate lines: {', '.join(summary.duplicates)}")  # noqa: T201
    print(f"skipped lines: {summary.skipped_lines}")  # noqa: T201
    return 0


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args: argparse.Namespace
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)
        _validate(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "import":
            status = _run_import(parsed_args)
        elif parsed_args.command == "inspect":
            status = _run_inspect(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error during import")
        sys.exit(1)

    if status:
        sys.exit(status)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
