"""Multipager CLI entry point.

Allows running via `python -m multipager` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import logging
import sys
import termios
from typing import Optional, Sequence

from .constants import PagerConstants
from .loader import clamp_initial_offset, has_piped_input, load_buffers
from .model import DisplayFlags
from .settings import load_settings
from .version import get_version_string


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="multipager",
        description="View one or more text files (or piped input) in the terminal.",
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="files to display")
    parser.add_argument("-o", "--offset", type=int, default=None, help="initial view offset")
    parser.add_argument("-v", "--version", action="store_true", help="show version number")
    parser.add_argument("-n", "--numbers", action="store_true", default=None, help="show line numbers")
    parser.add_argument("-r", "--relative", action="store_true", default=None,
                        help="show relative line numbers")
    parser.add_argument("-q", "--quit", action="store_true", default=None, dest="quit_at_eof",
                        help="quit when EOF is reached")
    parser.add_argument("--config", default=None, help="read defaults from this config file")
    parser.add_argument("--log-file", default=None, help="write debug log to this file")
    return parser


def _configure_logging(log_file: Optional[str]) -> None:
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


def _pick(flag: Optional[bool], default: bool) -> bool:
    return default if flag is None else flag


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(get_version_string())
        return 0

    _configure_logging(args.log_file)
    settings = load_settings(args.config)

    stdin_piped = has_piped_input(sys.stdin)
    buffers = load_buffers(args.files, stdin=sys.stdin)
    if not buffers:
        print(PagerConstants.NOTHING_TO_DISPLAY_MESSAGE)
        parser.print_usage()
        return 1

    offset = args.offset if args.offset is not None else settings.offset
    offset = clamp_initial_offset(offset, buffers)
    flags = DisplayFlags(
        show_numbers=_pick(args.numbers, settings.numbers),
        relative_numbers=_pick(args.relative, settings.relative),
        quit_at_eof=_pick(args.quit_at_eof, settings.quit_at_eof),
    )

    # Lazy import to avoid importing terminal deps for error paths
    from .pager import Pager
    from .terminal import reattach_tty

    try:
        if stdin_piped:
            reattach_tty()
        Pager(buffers, initial_offset=offset, flags=flags).run()
    except (OSError, termios.error) as e:
        print(PagerConstants.TERMINAL_ERROR_MESSAGE.format(e))
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
