import math
import typing

from .errors import ConfigurationError
from .randomiser import Randomiser


def error_budget(reads_total: int, error_rate: float) -> int:
    """Number of reads that should carry an error."""
    if error_rate <= 0:
        return 0
    # Rounded first so that e.g. 100 * 0.07 gives 7, not 8.
    return math.ceil(round(reads_total * error_rate, 9))


def _distinct_indices(n: int, k: int,
                      randomiser: Randomiser) -> set[int]:
    randomiser.set_range(1, n)
    picked: set[int] = set()
    while len(picked) < k:
        picked.add(randomiser.next())
    return picked


class ErrorSchedule:
    """The global read indices (1-based) that get an injected error.

    Indices are kept sorted in descending order so the next one due is
    at the end of the list and can be popped off as the reads go by.
    """

    _indices: list[int]

    def __init__(self, indices: typing.Iterable[int] = ()) -> None:
        self._indices = sorted(set(indices), reverse=True)

    @classmethod
    def build(cls, reads_total: int, error_count: int,
              randomiser: Randomiser) -> 'ErrorSchedule':
        """Pick error_count distinct reads out of 1..reads_total."""
        if error_count < 0 or error_count > reads_total:
            raise ConfigurationError(
                f"Can't put {error_count} errors in {reads_total} reads."
            )
        if error_count == 0:
            return cls()
        # When most reads get errors it is quicker to draw the ones
        # that don't.
        if 2 * error_count > reads_total:
            spared = _distinct_indices(
                reads_total, reads_total - error_count, randomiser
            )
            return cls(i for i in range(1, reads_total + 1)
                       if i not in spared)
        return cls(_distinct_indices(reads_total, error_count, randomiser))

    def peek_matches(self, index: int) -> bool:
        """True, and consume the index, if read number index is due."""
        if self._indices and self._indices[-1] == index:
            self._indices.pop()
            return True
        return False

    @property
    def remaining(self) -> list[int]:
        """The indices still to come, in the order they are due."""
        return self._indices[::-1]

    def __len__(self) -> int:
        return len(self._indices)
