"""Command-line front door for dirpeek.

Parses CLI options, validates the line budget before touching the filesystem,
then prints the directory preview. Failures exit through ``SystemExit``.
"""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Sequence

from . import __version__
from .preview import DEFAULT_MAX_LINES, run_preview

DEBUG_ENV_VAR = "DIRPEEK_DEBUG"
MAX_LINES_ERROR = "Error: `max_lines` must be greater than 0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirpeek",
        description="Show a preview of the directory contents.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to list. Defaults to the current directory.",
    )
    parser.add_argument(
        "-l",
        "--max-lines",
        type=int,
        default=DEFAULT_MAX_LINES,
        help=f"Maximum number of lines to display (default: {DEFAULT_MAX_LINES}).",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Log scan and layout decisions to stderr (same as setting {DEBUG_ENV_VAR}).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(debug: bool) -> None:
    """Enable debug logging on stderr when requested; stay silent otherwise."""
    if debug or os.environ.get(DEBUG_ENV_VAR):
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(levelname)s] %(name)s: %(message)s",
        )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print a preview of the requested directory.

    ``argv`` defaults to ``sys.argv[1:]``. Exits with status 1 and a message
    on stderr when ``--max-lines`` is not positive or the directory cannot be
    read.
    """
    args = build_parser().parse_args(argv)
    if args.max_lines <= 0:
        raise SystemExit(MAX_LINES_ERROR)

    configure_logging(args.debug)

    try:
        run_preview(args.directory, args.max_lines)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise SystemExit(f"Error: {args.directory}: {reason}") from exc


if __name__ == "__main__":
    main()
