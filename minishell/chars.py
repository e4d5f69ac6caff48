"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. The predicates return booleans. The case converters return a value
of the same kind as their argument.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGIT = range(ord("0"), ord("9") + 1)
_CASE_OFFSET = ord("a") - ord("A")


def _code(c: CharLike) -> int:
    """Return the integer code of *c*, which is a code or a single character."""
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code, not bool")
    if isinstance(c, int):
        return c
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    raise TypeError(f"expected a character or an integer code, not {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def isdigit(c: CharLike) -> bool:
    """True for an ASCII decimal digit."""
    return _code(c) in _DIGIT


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or decimal digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if code in _UPPER:
        return _same_kind(c, code + _CASE_OFFSET)
    return c


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if code in _LOWER:
        return _same_kind(c, code - _CASE_OFFSET)
    return c