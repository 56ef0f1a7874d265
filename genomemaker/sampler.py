from .buffers import Buffers
from .errors import InvariantViolation, OutOfRange
from .randomiser import Randomiser


class ReadSampler:
    """Picks where reads start in the buffered genome and pulls them out."""

    _randomiser: Randomiser

    def __init__(self, randomiser: Randomiser) -> None:
        self._randomiser = randomiser

    def set_window(self, buffer: Buffers, read_length: int) -> int:
        """Restrict start positions to where a full read fits.

        Returns the largest start offset.
        """
        max_start = buffer.max_start_index(read_length)
        self._randomiser.set_range(0, max_start)
        return max_start

    def next_start(self) -> int:
        return self._randomiser.next()

    def draw(self, buffer: Buffers, read_length: int) -> int:
        self.set_window(buffer, read_length)
        return self.next_start()

    def extract(self, buffer: Buffers,
                start_offset: int, read_length: int) -> bytes:
        try:
            return buffer.span(start_offset, read_length)
        except OutOfRange as e:
            raise InvariantViolation(
                f"Read at offset {start_offset} of length {read_length} "
                f"doesn't fit in the buffer: {e}"
            ) from e
