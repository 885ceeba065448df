"""A small printf: the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Iterator, Optional, TextIO

_DIRECTIVE = re.compile(r"%([cspdiuxX%])")
_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    return operator.index(value)


def _int32(value: Any) -> int:
    n = _as_int(value) & _UINT32
    return n - (1 << 32) if n & 0x80000000 else n


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _format_pointer(value: Any) -> str:
    if value is None or _as_int(value) == 0:
        return "(nil)"
    return "0x" + format(_as_int(value) & _UINT64, "x")


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    value = _next_arg(values)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _format_pointer(value)
    if spec in "di":
        return str(_int32(value))
    if spec == "u":
        return str(_as_int(value) & _UINT32)
    return format(_as_int(value) & _UINT32, spec)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text.

    Unknown directives and a trailing ``%`` are copied literally. Integer
    conversions wrap to 32 bits as a C ``int`` would; ``%p`` prints an
    address in hexadecimal with a ``0x`` prefix, or ``(nil)`` for zero.
    Surplus arguments are ignored; too few raise TypeError.
    """
    values = iter(args)
    return _DIRECTIVE.sub(lambda m: _convert(m.group(1), values), fmt)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)