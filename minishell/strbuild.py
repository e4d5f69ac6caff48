"""Building new strings: number conversion, slicing, joining, trimming,
splitting and per-character mapping.

Strings are read the way a NUL-terminated string is: anything from the first
``"\\0"`` on is ignored.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Union

from minishell.output import INT_MAX, INT_MIN
from minishell.strsearch import strcpy

CharLike = Union[int, str]

_WHITESPACE = " \n\t\v\f\r"
_DIGITS = "0123456789"
_INT_RANGE = 2**32


def _wrap_int32(value: int) -> int:
    """Reduce *value* to a 32-bit signed integer, wrapping around on overflow."""
    value %= _INT_RANGE
    return value - _INT_RANGE if value > INT_MAX else value


def _separator(sep: CharLike) -> str:
    if isinstance(sep, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(sep, int):
        return chr(sep)
    if isinstance(sep, str):
        if len(sep) != 1:
            raise ValueError(f"expected a single character, got {len(sep)} characters")
        return sep
    raise TypeError(f"expected a character or an integer code, not {type(sep).__name__}")


def _check_not_negative(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative: {value}")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional sign, then as many digits
    as follow. Anything after them is ignored; no digits give 0. The result
    wraps around like a 32-bit signed integer.
    """
    s = strcpy(text).lstrip(_WHITESPACE)
    negative = s.startswith("-")
    if s[:1] in ("-", "+"):
        s = s[1:]
    digits = []
    for ch in s:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    value = int("".join(digits)) if digits else 0
    return _wrap_int32(-value if negative else value)


def itoa(number: int) -> str:
    """Return the decimal form of a 32-bit signed integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, not {type(number).__name__}")
    if not INT_MIN <= number <= INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)


def substr(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* starting at *start*.

    A start at or past the end gives an empty string.
    """
    _check_not_negative(start, "start")
    _check_not_negative(length, "length")
    s = strcpy(text)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    return strcpy(first) + strcpy(second)


def strtrim(text: str, charset: str) -> str:
    """Remove every character found in *charset* from both ends of *text*."""
    return strcpy(text).strip(strcpy(charset))


def split(text: str, sep: CharLike) -> List[str]:
    """Split *text* on *sep*, dropping the empty pieces that runs of *sep* leave."""
    s = strcpy(text)
    return [word for word in s.split(_separator(sep)) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of *text*.

    A NUL produced by *func* ends the result there.
    """
    return strcpy("".join(func(index, ch) for index, ch in enumerate(strcpy(text))))


def striteri(chars: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of *chars* in place with ``func(index, char)``.

    Processing stops at the first NUL element.
    """
    for index, ch in enumerate(chars):
        if ch == "\0":
            break
        chars[index] = func(index, ch)