"""Buffered reading of a stream one line at a time."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import IO, AnyStr, Generic

__all__ = ["BUFFER_SIZE", "LineReader", "read_lines"]

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Read a text or binary stream in fixed-size chunks and hand out lines.

    Each line keeps its trailing newline; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return "\n" if isinstance(data, str) else b"\n"  # type: ignore[return-value]

    def readline(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        pending = self._pending
        while pending is None or self._newline(pending) not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._newline(pending))
        if cut == -1:
            self._pending = None
            return pending
        self._pending = pending[cut + 1:] or None
        return pending[:cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        return self

    def __next__(self) -> AnyStr:
        line = self.readline()
        if line is None:
            raise StopIteration
        return line


def read_lines(path: str | PathLike[str]) -> list[str]:
    """Read every line of a text file, newlines included."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(LineReader(handle))