"""Write characters, strings and integers straight to a file descriptor."""

from __future__ import annotations

import os

from sshkvm.chars import itoa


def _write(text: str, fd: int) -> None:
    data = text.encode("utf-8")
    while data:
        written = os.write(fd, data)
        data = data[written:]


def putchar_fd(c: str, fd: int) -> None:
    """Write the single character *c* to *fd*; a negative *fd* is ignored."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if fd < 0:
        return
    _write(c, fd)


def putstr_fd(s: str | None, fd: int) -> None:
    """Write *s* to *fd*; nothing happens when *s* is None or *fd* is negative."""
    if s is None or fd < 0:
        return
    _write(s, fd)


def putendl_fd(s: str | None, fd: int) -> None:
    """Write *s* followed by a newline; nothing when *s* is None or *fd* is negative."""
    if s is None or fd < 0:
        return
    _write(s + "\n", fd)


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of *n* to *fd*; a negative *fd* is ignored."""
    if fd < 0:
        return
    _write(itoa(n), fd)