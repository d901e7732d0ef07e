"""Defines a ColourFormatter for logging to a terminal (stderr by default)."""
import logging
import sys
from typing import Final, Optional, TextIO


class ColourFormatter(logging.Formatter):
    """Picks an ANSI colour per log level, plain text when not on a tty."""

    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    yellow = "\x1b[33;20m"
    blue = "\x1b[34;20m"
    cyan = "\x1b[36;20m"
    reset = "\x1b[0m"
    format_template = '%(levelname)s - %(name)s - %(message)s'
    debug_template = format_template + ' - (%(pathname)s:%(lineno)d)'

    COLOURS: Final[tuple[tuple[int, str], ...]] = (
        (logging.DEBUG, blue),
        (logging.INFO, cyan),
        (logging.WARNING, yellow),
        (logging.ERROR, red),
        (logging.CRITICAL, bold_red),
    )

    def __init__(self, use_colour: bool = True):
        super().__init__()
        self.use_colour = use_colour
        self._formatters: tuple[tuple[int, logging.Formatter], ...] = tuple(
            (level, logging.Formatter(self._template(level, colour)))
            for level, colour in ColourFormatter.COLOURS
        )

    def _template(self, level: int, colour: str) -> str:
        template = self.debug_template if level <= logging.DEBUG else self.format_template
        if not self.use_colour:
            return template
        return colour + template + self.reset

    def __get_formatter(self, level: int) -> logging.Formatter:
        for lvl, formatter in self._formatters:
            if level <= lvl:
                return formatter
        return self._formatters[-1][1]

    def format(self, record):
        return self.__get_formatter(record.levelno).format(record)


def make_color_stream_handler(stream: Optional[TextIO] = None, level=logging.DEBUG):
    """Makes a stream handler with colour formatter, colour only for a tty."""
    if stream is None:
        stream = sys.stderr
    h = logging.StreamHandler(stream)
    h.setLevel(level)
    is_tty = getattr(stream, "isatty", None)
    h.setFormatter(ColourFormatter(use_colour=bool(is_tty and is_tty())))
    return h
