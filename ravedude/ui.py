"""Cargo-style status, warning and error output."""

from __future__ import annotations

import os
import sys
from typing import Iterator, Optional, Sequence, TextIO

from termcolor import colored


def _wants_color(stream: TextIO) -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        return False


def _paint(
    text: str,
    stream: TextIO,
    color: Optional[str] = None,
    attrs: Sequence[str] = ("bold",),
) -> str:
    if not _wants_color(stream):
        return text
    return colored(text, color, attrs=list(attrs), force_color=True)


def task_message(verb: str, text: str, stream: Optional[TextIO] = None) -> None:
    """Print a right-aligned green verb followed by a message."""
    out = sys.stderr if stream is None else stream
    out.write(f"{_paint(f'{verb:>12}', out, 'green')} {text}\n")
    out.flush()


def warning(text: str, stream: Optional[TextIO] = None) -> None:
    """Print a yellow warning line."""
    out = sys.stderr if stream is None else stream
    out.write(
        _paint("Warning", out, "yellow") + _paint(": ", out) + _paint(text, out) + "\n"
    )
    out.flush()


def _causes(error: BaseException) -> Iterator[BaseException]:
    seen = {id(error)}
    current = error
    while True:
        nxt = current.__cause__
        if nxt is None and not current.__suppress_context__:
            nxt = current.__context__
        if nxt is None or id(nxt) in seen:
            return
        seen.add(id(nxt))
        yield nxt
        current = nxt


def print_error(error: BaseException, stream: Optional[TextIO] = None) -> None:
    """Print an error and the chain of exceptions that caused it."""
    out = sys.stderr if stream is None else stream
    out.write(
        _paint("Error", out, "red") + _paint(": ", out) + _paint(str(error), out) + "\n"
    )
    out.write("\n")
    for cause in _causes(error):
        out.write(
            _paint("Caused by", out, "yellow")
            + _paint(": ", out)
            + _paint(str(cause), out)
            + "\n"
        )
    out.flush()