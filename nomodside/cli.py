#!/usr/bin/env python3
"""
nomodside CLI

Thin wrapper over the orchestrator.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from nomodside.orchestrator import check_changed, check_paths
from nomodside.reporting import FORMATTERS

logger = logging.getLogger(__name__)

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nomodside",
        description="Report JavaScript statements that run when a module is loaded.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nomodside check src/
  nomodside check lib/index.js lib/util.cjs
  nomodside check . --changed-since origin/main
  nomodside check tree.estree.json --format json
        """,
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        metavar="{check}",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Check files or directories",
    )
    check_parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="Files or directories to check (default: current directory)",
    )
    check_parser.add_argument(
        "--changed-since",
        metavar="REV",
        help="Only check files changed since this git revision",
    )
    check_parser.add_argument(
        "--format",
        choices=sorted(FORMATTERS),
        default="text",
        help="Output format (default: text)",
    )
    check_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress and error details to stderr",
    )

    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "check":
        _configure_logging(args.verbose)
        paths = [Path(p).resolve() for p in args.paths]

        if args.changed_since and len(paths) != 1:
            print("Error: --changed-since takes a single repository path", file=sys.stderr)
            return EXIT_ERROR

        try:
            if args.changed_since:
                findings = check_changed(paths[0], args.changed_since)
            else:
                findings = check_paths(paths)
        except (ValueError, RuntimeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_ERROR
        except Exception:
            logger.debug("Unhandled error", exc_info=True)
            print("Internal error while checking files.", file=sys.stderr)
            print("Run with --verbose for details.", file=sys.stderr)
            return EXIT_ERROR

        print(FORMATTERS[args.format](findings))
        return EXIT_FINDINGS if findings else EXIT_CLEAN

    # This should never happen because argparse enforces commands
    parser.error(f"Unknown command: {args.command}")
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
