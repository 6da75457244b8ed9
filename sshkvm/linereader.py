"""Line-by-line reading from a file descriptor or a binary stream."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from typing import BinaryIO

BUFFER_SIZE = 1024
FD_MAX = 1048575
_NEWLINE = b"\n"


class LineReader:
    """Read newline-terminated lines, keeping any surplus for the next call.

    *source* is either an open file descriptor or a binary object with a
    ``read(n)`` method. Lines are returned with their trailing newline.
    """

    def __init__(
        self,
        source: int | BinaryIO,
        buffer_size: int = BUFFER_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        if isinstance(source, int):
            if source < 0 or source > FD_MAX:
                raise ValueError(f"invalid file descriptor {source}")
            fd = source
            self._read: Callable[[int], bytes] = lambda n: os.read(fd, n)
        else:
            self._read = source.read
        self.buffer_size = buffer_size
        self.encoding = encoding
        self._stash = b""

    def _decode(self, data: bytes) -> str:
        return data.decode(self.encoding, errors="replace")

    def read_line(self) -> str | None:
        """Return the next line, or None once the input is exhausted.

        A final line without a newline is returned as it is.
        """
        while True:
            index = self._stash.find(_NEWLINE)
            if index >= 0:
                line = self._stash[: index + 1]
                self._stash = self._stash[index + 1:]
                return self._decode(line)
            chunk = self._read(self.buffer_size)
            if not chunk:
                break
            self._stash += chunk
        if self._stash:
            line, self._stash = self._stash, b""
            return self._decode(line)
        return None

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line