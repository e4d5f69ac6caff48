"""String length, search, comparison and bounded copy helpers.

Strings are treated the way a NUL-terminated string is: anything from the
first ``"\\0"`` on is ignored. Search functions return an index into the
string, or ``None`` when nothing is found.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Optional, Tuple, Union

CharLike = Union[int, str]

NUL = "\0"


def _cstr(text: str) -> str:
    """Return *text* cut at its first NUL character."""
    if not isinstance(text, str):
        raise TypeError(f"expected a string, not {type(text).__name__}")
    end = text.find(NUL)
    return text if end < 0 else text[:end]


def _char(char: CharLike) -> str:
    """Return *char*, a single character or an integer code, as a character."""
    if isinstance(char, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(char, int):
        return chr(char)
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {len(char)} characters")
        return char
    raise TypeError(f"expected a character or an integer code, not {type(char).__name__}")


def _check_size(value: int, what: str) -> None:
    if value < 0:
        raise ValueError(f"{what} must not be negative: {value}")


def _compare(first: str, second: str) -> int:
    for a, b in zip_longest(map(ord, first), map(ord, second), fillvalue=0):
        if a != b:
            return a - b
    return 0


def strlen(text: str) -> int:
    """Return the number of characters before the first NUL."""
    return len(_cstr(text))


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the first *char* in *text*, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    s = _cstr(text)
    c = _char(char)
    if c == NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Return the index of the last *char* in *text*, or None.

    Searching for NUL finds the terminator, at index ``strlen(text)``.
    """
    s = _cstr(text)
    c = _char(char)
    if c == NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most *length* characters; return the code difference at the first mismatch."""
    _check_size(length, "length")
    if length == 0:
        return 0
    return _compare(_cstr(first)[:length], _cstr(second)[:length])


def strcmp(first: str, second: str) -> int:
    """Compare two strings; return the code difference at the first mismatch, else 0."""
    return _compare(_cstr(first), _cstr(second))


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return the index of *needle* lying wholly within the first *length* characters, or None.

    An empty needle is found at index 0.
    """
    _check_size(length, "length")
    big = _cstr(haystack)
    little = _cstr(needle)
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the copied text and the full length of *src*; a total not below
    *size* means the copy was truncated.
    """
    _check_size(size, "size")
    s = _cstr(src)
    copied = s[: size - 1] if size > 0 else ""
    return copied, len(s)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters, terminator included.

    Returns the resulting text and the length it would have had without a
    size limit. When *size* is not larger than *dst*, *dst* is returned
    unchanged together with ``size + strlen(src)``.
    """
    _check_size(size, "size")
    d = _cstr(dst)
    s = _cstr(src)
    if size <= len(d):
        return d, size + len(s)
    room = size - len(d) - 1
    return d + s[:room], len(d) + len(s)


def strcpy(src: str) -> str:
    """Return a copy of *src* up to its terminator."""
    return _cstr(src)


def strdup(text: str) -> str:
    """Return a new copy of *text* up to its terminator."""
    return "".join(_cstr(text))