"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 10000
MAX_FD = 1024


def _check_fd(fd: int) -> int:
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"file descriptor must be an int, got {type(fd).__name__}")
    if not 0 <= fd < MAX_FD:
        raise ValueError(f"file descriptor out of range: {fd}")
    return fd


class LineReader:
    """Buffered line reader over a raw file descriptor.

    Lines are returned as bytes and keep their trailing newline; the last
    line of the input may lack one.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        _check_fd(fd)
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer size must be an int")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._stash = bytearray()

    def _fill(self) -> None:
        if b"\n" in self._stash:
            return
        while True:
            try:
                chunk = os.read(self.fd, self.buffer_size)
            except OSError:
                self._stash.clear()
                raise
            if not chunk:
                return
            self._stash += chunk
            if b"\n" in chunk:
                return

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or None once the input is exhausted."""
        self._fill()
        if not self._stash:
            return None
        end = self._stash.find(b"\n")
        end = len(self._stash) if end < 0 else end + 1
        line = bytes(self._stash[:end])
        del self._stash[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line from ``fd``, keeping separate state per descriptor.

    Returns None when the descriptor has no more data.
    """
    _check_fd(fd)
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    try:
        line = reader.read_line()
    except OSError:
        _readers.pop(fd, None)
        raise
    if line is None:
        _readers.pop(fd, None)
    return line