"""String helpers: searching, comparing, splitting, copying and mapping text."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Any

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def index_of(s: str | None, c: str) -> int:
    """Index of the first occurrence of *c* in *s*, or -1 (also -1 when *s* is None)."""
    _check_char(c)
    if s is None:
        return -1
    return s.find(c)


def split(s: str, sep: str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty words."""
    _check_char(sep)
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: str) -> int | None:
    """Index of the first *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of *needle* wholly within the first *length* characters of *haystack*.

    An empty needle matches at 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; the code difference of the first mismatch, else 0."""
    if n <= 0:
        return 0
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of *src*, so truncation shows as a length greater than the copy.
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* within a buffer of *size* characters.

    Returns the resulting text and the length the result tried to reach.
    When *size* leaves no room after *dst*, *dst* is returned unchanged
    together with ``len(src) + size`` (or ``len(src)`` when *size* is 0).
    """
    if size < 0:
        raise ValueError(f"negative size {size}")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent, both missing gives None."""
    if s1 is None and s2 is None:
        return None
    return (s1 or "") + (s2 or "")


def strtrim(s: str | None, chars: str | None) -> str | None:
    """Skip leading characters found in *chars*, then keep text up to the next one.

    The result is the first run of characters not in *chars*. With *chars*
    None the string is returned whole; with *s* None the result is None.
    """
    if s is None:
        return None
    if chars is None:
        return s
    start = 0
    while start < len(s) and s[start] in chars:
        start += 1
    end = start
    while end < len(s) and s[end] not in chars:
        end += 1
    return s[start:end]


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from *start*; empty when *start* is past the end."""
    if start < 0 or length < 0:
        raise ValueError(f"negative start or length: {start}, {length}")
    if start > len(s):
        return ""
    return s[start:start + length]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character of *s*."""
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(buf: MutableSequence[Any], f: Callable[[int, Any], Any]) -> None:
    """Call ``f(index, item)`` for each item of *buf*, in place.

    A result other than None replaces the item.
    """
    for index, item in enumerate(buf):
        result = f(index, item)
        if result is not None:
            buf[index] = result