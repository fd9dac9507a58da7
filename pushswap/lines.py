"""Reading a stream one line at a time, in chunks of a fixed size."""

from __future__ import annotations

import weakref
from typing import Any, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 10

_readers: "weakref.WeakKeyDictionary[Any, LineReader[Any]]" = weakref.WeakKeyDictionary()


class LineReader(Generic[AnyStr]):
    """Splits a text or binary stream into lines, reading ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past a newline is kept for the next call.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._eof = False

    def _newline(self) -> AnyStr:
        return b"\n" if isinstance(self._pending, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        """Read chunks until the pending data holds a newline or the stream ends."""
        while not self._eof:
            if self._pending is not None and self._newline() in self._pending:
                return
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                self._eof = True
            elif self._pending is None:
                self._pending = chunk
            else:
                self._pending += chunk

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is exhausted."""
        try:
            self._fill()
        except Exception:
            self._pending = None
            raise
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        end = pending.find(self._newline())
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def get_next_line(stream: Any, buffer_size: int = BUFFER_SIZE) -> Optional[Any]:
    """The next line of ``stream``, or None at its end.

    Leftover data is remembered for each stream separately, so several
    streams can be read in turns. The memory of a stream is dropped when
    it ends or when reading it fails.
    """
    if buffer_size <= 0:
        _readers.pop(stream, None)
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")
    reader = _readers.get(stream)
    if reader is None:
        reader = LineReader(stream, buffer_size)
        _readers[stream] = reader
    else:
        reader.buffer_size = buffer_size
    try:
        line = reader.read_line()
    except Exception:
        _readers.pop(stream, None)
        raise
    if line is None:
        _readers.pop(stream, None)
    return line