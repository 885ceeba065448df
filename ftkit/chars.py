"""Character classification and case conversion on single characters.

Every function accepts either a one-character string or an integer code
point. The conversions return a value of the same kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return 48 <= _code(c) <= 57


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code point in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def is_whitespace(c: Char) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return 8 < code < 14 or code == 32


def is_hex(c: Char) -> bool:
    """True for a hexadecimal digit in either case."""
    code = _code(c)
    return is_digit(code) or 97 <= code <= 102 or 65 <= code <= 70


def _convert(c: Char, low: int, high: int, delta: int) -> Char:
    code = _code(c)
    if low <= code <= high:
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    return _convert(c, 65, 90, 32)


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    return _convert(c, 97, 122, -32)