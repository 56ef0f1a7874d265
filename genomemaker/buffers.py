"""Double buffer over consecutive chunks of a genome file."""

import typing

from .errors import BufferTooSmall, OutOfRange


class ChunkSource(typing.Protocol):
    def read(self, n: int) -> bytes: ...


class Buffers:
    """Two adjacent windows of a genome, 'current' and 'next'.

    Reads start inside 'current' but may run into 'next', so positions
    are always given relative to the start of 'current'. The windows are
    kept in a pair of slots and swapping them just flips which slot is
    which; nothing is copied until the end of the file, where the short
    last chunk is merged onto the one before it.
    """

    _slots: list[bytes]
    _sizes: list[int]
    _current: int

    def __init__(self) -> None:
        self._slots = [b"", b""]
        self._sizes = [0, 0]
        self._current = 0

    @property
    def _next(self) -> int:
        return 1 - self._current

    @property
    def current(self) -> bytes:
        return self._slots[self._current]

    @property
    def next(self) -> bytes:
        return self._slots[self._next]

    @property
    def current_size(self) -> int:
        return self._sizes[self._current]

    @property
    def next_size(self) -> int:
        return self._sizes[self._next]

    @property
    def size(self) -> int:
        """Total number of bytes available to reads."""
        return self.current_size + self.next_size

    def _fill(self, slot: int, source: ChunkSource, chunk_size: int) -> int:
        data = source.read(chunk_size)
        self._slots[slot] = data
        self._sizes[slot] = len(data)
        return len(data)

    def fill_current(self, source: ChunkSource, chunk_size: int) -> int:
        return self._fill(self._current, source, chunk_size)

    def fill_next(self, source: ChunkSource, chunk_size: int) -> int:
        return self._fill(self._next, source, chunk_size)

    def swap(self) -> None:
        self._current = self._next

    def merge(self) -> None:
        """Append 'next' to 'current' and leave 'next' empty."""
        cur, nxt = self._current, self._next
        self._slots[cur] = self._slots[cur] + self._slots[nxt]
        self._sizes[cur] += self._sizes[nxt]
        self._slots[nxt] = b""
        self._sizes[nxt] = 0

    def byte_at(self, start_offset: int, index: int) -> int:
        """Byte at index in a read starting at start_offset."""
        pos = start_offset + index
        if pos < 0 or pos >= self.size:
            raise OutOfRange(
                f"Position {pos} is outside the buffered {self.size} bytes."
            )
        if pos < self.current_size:
            return self.current[pos]
        return self.next[pos - self.current_size]

    def span(self, start_offset: int, length: int) -> bytes:
        """All the bytes of a read, crossing into 'next' if needed."""
        end = start_offset + length
        if start_offset < 0 or end > self.size:
            raise OutOfRange(
                f"Read [{start_offset}, {end}) is outside the "
                f"buffered {self.size} bytes."
            )
        cur = self.current_size
        if end <= cur:
            return self.current[start_offset:end]
        if start_offset >= cur:
            return self.next[start_offset - cur:end - cur]
        return self.current[start_offset:cur] + self.next[:end - cur]

    def max_start_index(self, read_length: int) -> int:
        """Largest start offset that still fits a whole read."""
        cur, nxt = self.current_size, self.next_size
        if read_length > cur:
            raise BufferTooSmall(
                f"Buffer of {cur} bytes is too small "
                f"for reads of length {read_length}."
            )
        if nxt >= read_length - 1:
            return cur - 1 if cur > 0 else 0
        return cur - read_length + nxt
