"""Incremental line reading from a stream with a fixed chunk size."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 100


class LineReader(Generic[AnyStr]):
    """Read a stream chunk by chunk and hand out one line at a time.

    Each returned line keeps its trailing newline; the last line of a stream
    that does not end with one is returned as is. Text and binary streams are
    both accepted.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def _read_until_newline(self) -> Optional[AnyStr]:
        collected = self._pending
        self._pending = None
        while True:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                raise
            if not chunk:
                return collected
            collected = chunk if collected is None else collected + chunk
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
            if newline in chunk:
                return collected

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        data = self._read_until_newline()
        if not data:
            return None
        newline = b"\n" if isinstance(data, bytes) else "\n"
        index = data.find(newline)
        if index == -1:
            return data
        rest = data[index + 1:]
        self._pending = rest if rest else None
        return data[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line