"""String utilities: searching, comparing, splitting, trimming and mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def _check_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def _check_count(n: int, what: str) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{what} must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")
    return n


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty fields."""
    _check_char(sep)
    return [field for field in s.split(sep) if field]


def strchr(s: str, c: str) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def _code_at(s: str, i: int) -> int:
    return ord(s[i]) if i < len(s) else 0


def strcmp(s1: Optional[str], s2: Optional[str]) -> int:
    """Compare two strings.

    Returns the code-point difference at the first mismatch (the end of a
    string counts as 0), 0 for equal strings, 0 when both are None and 42
    when exactly one is None.
    """
    if s1 is None and s2 is None:
        return 0
    if s1 is None or s2 is None:
        return 42
    for i in range(max(len(s1), len(s2)) + 1):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(s1: Optional[str], s2: Optional[str], n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns 0 when ``n`` is 0 or either string is None.
    """
    _check_count(n, "n")
    if n == 0 or s1 is None or s2 is None:
        return 0
    for i in range(n):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, n: int) -> Optional[int]:
    """Find ``little`` wholly within the first ``n`` characters of ``big``.

    Returns its index, 0 for an empty needle, or None when absent.
    """
    _check_count(n, "n")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters (terminator included).

    Returns the copied text and the full length of ``src``.
    """
    _check_count(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had; when ``size`` does not exceed ``len(dst)`` nothing is appended and
    the length reported is ``size + len(src)``.
    """
    _check_count(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start``.

    A start at or past the end yields an empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings; None counts as empty."""
    return (s1 or "") + (s2 or "")


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    if not charset:
        return s
    return s.strip(charset)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string of ``f(index, char)`` for every character."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(
    s: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` on each character of ``s`` in place.

    A non-None return value replaces the character. Nothing happens when
    either argument is None.
    """
    if s is None or f is None:
        return
    for i, ch in enumerate(list(s)):
        result = f(i, ch)
        if result is not None:
            s[i] = result