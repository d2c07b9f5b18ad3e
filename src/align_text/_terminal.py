"""Terminal helpers.

Provides terminal width detection and line-oriented reading and writing
of text streams.
"""

from __future__ import annotations

from os import environ, get_terminal_size
import sys
from typing import Iterable, TextIO


class TerminalWidthError(RuntimeError):
    __slots__ = ()

    pass


def _size_of(
    stream: TextIO | None,
    /,
) -> int:
    """Return the columns of the terminal behind ``stream``, or 0."""

    if stream is None:
        return 0
    try:
        return get_terminal_size(stream.fileno()).columns
    except (AttributeError, OSError, ValueError):
        return 0


def get_terminal_width(
    stream: TextIO | None = None,
    /,
) -> int:
    """Return the width of the terminal in columns.

    Parameters
    ----------
    stream
        Stream attached to the terminal. Defaults to standard output.

    Notes
    -----
    A positive integer in the ``COLUMNS`` environment variable wins over
    the size reported by the terminal. When ``stream`` is not a terminal,
    standard input and then standard error are asked, so the width is
    still known when output is piped.

    Raises
    ------
    TerminalWidthError
        If neither ``COLUMNS`` nor any of the streams provides a width.

    Returns
    -------
    int
        The number of columns.
    """

    raw: str | None = environ.get("COLUMNS")
    if raw:
        try:
            columns = int(raw)
        except ValueError:
            columns = 0
        if columns > 0:
            return columns

    for candidate in (stream or sys.stdout, sys.stdin, sys.stderr):
        columns = _size_of(candidate)
        if columns > 0:
            return columns

    raise TerminalWidthError("couldn't get terminal width")


def read_lines(
    stream: TextIO,
    /,
) -> list[str]:
    """Read all lines from ``stream`` without their line terminators.

    Only ``\\n`` ends a line; one ``\\r\\n`` or ``\\n`` terminator is removed
    from each line and any other ``\\r`` is kept as text.
    """

    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        # text files split on a lone "\r" unless told otherwise
        reconfigure(newline="\n")

    lines: list[str] = []
    for line in stream:
        if line.endswith("\r\n"):
            line = line[:-2]
        elif line.endswith("\n"):
            line = line[:-1]
        lines.append(line)
    return lines


def write_lines(
    lines: Iterable[str],
    stream: TextIO,
    /,
) -> None:
    for line in lines:
        stream.write(line)
        stream.write("\n")
