"""Lenient number parsing and integer formatting."""

from __future__ import annotations

from .chars import is_digit, is_whitespace

_DIGITS = "0123456789"


def _skip_space(text: str, pos: int, spaces: str) -> int:
    while pos < len(text) and text[pos] in spaces:
        pos += 1
    return pos


def _read_sign(text: str, pos: int) -> tuple[int, int]:
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def parse_int(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are skipped; parsing stops at
    the first non-digit. A string with no digits after that yields 0.
    """
    pos = _skip_space(text, 0, " \t\n\v\f\r")
    sign, pos = _read_sign(text, pos)
    value = 0
    found = False
    while pos < len(text) and text[pos] in _DIGITS:
        value = value * 10 + (ord(text[pos]) - 48)
        pos += 1
        found = True
    return sign * value if found else 0


def parse_float(text: str) -> float:
    """Parse a leading decimal number with an optional fractional part.

    Leading whitespace and one optional sign are skipped. The number ends at
    the first character that is not a digit or at a second decimal point.
    A string that starts with neither a digit nor a point yields 0.0.
    """
    pos = 0
    while pos < len(text) and is_whitespace(text[pos]):
        pos += 1
    sign, pos = _read_sign(text, pos)
    if pos >= len(text) or not (is_digit(text[pos]) or text[pos] == "."):
        return 0.0
    value = 0.0
    scale = 0.0
    for ch in text[pos:]:
        if ch == "." and not scale:
            scale = 0.1
        elif not is_digit(ch):
            break
        elif not scale:
            value = value * 10 + (ord(ch) - 48)
        else:
            value += (ord(ch) - 48) * scale
            scale *= 0.1
    return value * sign


def int_to_str(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)