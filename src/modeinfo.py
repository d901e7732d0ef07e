#!/usr/bin/env python3
"""Entry script for modeinfo: decodes mode numbers, or the modes of files."""

import argparse
import logging
import os
import sys
from typing import Final, Iterable, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table
from rich.text import Text

from color_logger import make_color_stream_handler
from file_mode import Mode, mode, to_full_octal_string

ROOT_LOGGER: Final = logging.getLogger()
LOGGER: Final = logging.getLogger(__name__)


def check_mode(arg: str) -> int:
    """Parses a mode number.

    ``0o``/``0x``/``0b`` prefixes are honoured, ``d:`` marks a decimal number,
    and anything else is octal, as `chmod` takes it.
    """
    text = arg.strip()
    try:
        if text[:2].lower() == "d:":
            return int(text[2:], 10)
        if text.lstrip("+-")[:2].lower() in ("0o", "0x", "0b"):
            return int(text, 0)
        return int(text, 8)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a mode number: {arg}") from None


def stat_mode(path: str, follow_symlinks: bool = False) -> int:
    """Fetches ``st_mode`` for ``path``; raises ``OSError`` when `stat` fails."""
    st = os.stat(path) if follow_symlinks else os.lstat(path)
    LOGGER.debug("stat_mode: %s mode: %#08o", path, st.st_mode)
    return st.st_mode


def make_parser():
    """Makes Parser ready to parse args passed to script."""
    parser = argparse.ArgumentParser(
        prog='modeinfo',
        description='Decodes POSIX file mode numbers into file type, special bits and permissions.',
    )
    parser.add_argument(
        "values", nargs="+", metavar="MODE_OR_PATH",
        help="Mode numbers (octal by default, `0x`/`0o`/`0b` prefixes or `d:` for decimal), "
             "or file paths with `--path`."
    )
    parser.add_argument("--path", "-p", action='store_true',
                        help="Treat the arguments as paths and decode their `lstat` mode.")
    parser.add_argument("--follow", "-L", action='store_true',
                        help="With `--path`, use `stat` so sym-links are followed.")
    parser.add_argument("--full-octal", action='store_true',
                        help="Show the file type digits in the octal column as well.")
    parser.add_argument("--verbose", "-v", action='store_true', help="Enables DEBUG level tracing")
    parser.add_argument("--quiet", "-q", action='store_true', help="Drops to WARNING level tracing")

    return parser


def setup_loggers():
    """Setup loggers."""
    for h in list(ROOT_LOGGER.handlers):
        ROOT_LOGGER.removeHandler(h)
    ROOT_LOGGER.addHandler(make_color_stream_handler(level=logging.DEBUG))
    ROOT_LOGGER.setLevel(logging.INFO)


def setup_log_levels(args: argparse.Namespace):
    """Setup logging levels per arguments."""
    log_level: Final = (
        logging.DEBUG if args.verbose
        else logging.WARNING if args.quiet
        else logging.INFO
    )
    ROOT_LOGGER.setLevel(log_level)


def make_table(title: str, decoded: Mode, full_octal: bool = False) -> Table:
    """Lays out the formatted fields of ``decoded`` as a two column table."""
    table = Table(title=Text(title), show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    for key, value in decoded.items_formatted():
        if key == "octal" and full_octal:
            value = to_full_octal_string(decoded.raw)
        table.add_row(key, Text(value))
    return table


def collect_modes(
        parser: argparse.ArgumentParser,
        args: argparse.Namespace,
) -> Tuple[List[Tuple[str, int]], int]:
    """Turns the positional arguments into ``(title, raw mode)`` pairs.

    Returns:
        The pairs, plus the exit status so far: 1 when any path failed to `stat`.
    """
    modes: List[Tuple[str, int]] = []
    status = 0
    for value in args.values:
        if not args.path:
            try:
                modes.append((value, check_mode(value)))
            except argparse.ArgumentTypeError as e:
                parser.error(str(e))
            continue
        try:
            modes.append((value, stat_mode(value, follow_symlinks=args.follow)))
        except OSError as e:
            LOGGER.warning("`stat` failed -> %s", e)
            status = 1
    return modes, status


def render(modes: Iterable[Tuple[str, int]], console: Console, full_octal: bool = False):
    for title, raw in modes:
        console.print(make_table(title, mode(raw), full_octal=full_octal))


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    """Main."""
    setup_loggers()
    parser = make_parser()
    args = parser.parse_args(argv)
    setup_log_levels(args)
    if args.follow and not args.path:
        LOGGER.warning("`--follow` only applies with `--path`; ignored")
    modes, status = collect_modes(parser, args)
    render(modes, console or Console(), full_octal=args.full_octal)
    return status


if __name__ == '__main__':
    sys.exit(main())
