"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string as it is."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, not {type(text).__name__}")
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    put_str(text, stream)
    _target(stream).write("\n")


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, not {type(number).__name__}")
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    _target(stream).write(str(number))