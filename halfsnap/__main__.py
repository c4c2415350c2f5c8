"""
HalfSnap - Entry point.

Run with:  python -m halfsnap left|right
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from halfsnap.config.settings import (
    EDGE_TOLERANCE,
    EXIT_FAILURE,
    EXIT_OK,
    LOG_DATEFMT,
    LOG_FORMAT,
    USAGE,
)
from halfsnap.core.errors import HalfSnapError
from halfsnap.core.manager import snap_active_window
from halfsnap.core.xlib import open_display
from halfsnap.tiling.directional import Direction

log = logging.getLogger("halfsnap")


class SafeStreamHandler(logging.StreamHandler):
    """Handler that replaces unencodable characters instead of crashing."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            enc = getattr(self.stream, "encoding", "utf-8") or "utf-8"
            safe = msg.encode(enc, errors="replace").decode(enc, errors="replace")
            self.stream.write(safe + self.terminator)
            self.flush()
        except Exception:
            self.handleError(record)


def setup_logging(verbosity: int = 0) -> None:
    """Configure logging to stderr; -v selects INFO, -vv DEBUG."""
    handler = SafeStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))

    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


class UsageError(Exception):
    """Raised instead of argparse's exit(2) on malformed options."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="halfsnap",
        description=(
            "Snap the focused window to the left or right half of its "
            "monitor, hopping to the next monitor when it already "
            "touches that edge."
        ),
        usage=USAGE.removeprefix("Usage: "),
    )
    # Validated by hand: an invalid direction prints usage and exits 0
    parser.add_argument("direction", nargs="?", help="left or right")
    parser.add_argument(
        "--tolerance",
        type=int,
        default=EDGE_TOLERANCE,
        metavar="PX",
        help=f"edge slack in pixels (default: {EDGE_TOLERANCE})",
    )
    parser.add_argument("--display", default=None, metavar="NAME", help="X display to use")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="print the target rectangle without moving the window",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="more logging (-v info, -vv debug)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Extra arguments are ignored; malformed options only print usage
    try:
        args, extra = build_parser().parse_known_args(argv)
    except UsageError:
        print(USAGE)
        return EXIT_OK
    setup_logging(args.verbose)
    if extra:
        log.debug("Ignoring extra arguments: %s", extra)

    direction = Direction.parse(args.direction)
    if direction is None:
        print(USAGE)
        return EXIT_OK

    try:
        with open_display(args.display) as display:
            result = snap_active_window(
                display,
                direction,
                tolerance=args.tolerance,
                dry_run=args.dry_run,
            )
    except HalfSnapError as exc:
        log.error("%s", exc)
        return EXIT_FAILURE

    if args.dry_run:
        print(result.as_rect())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
