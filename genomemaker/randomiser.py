import random
import typing

from .errors import InvalidRange


class Randomiser:
    """Uniform integers from an inclusive range that can be moved around.

    The generator is seeded once, when the randomiser is created. Setting
    a new range changes where numbers land but continues the same stream,
    so successive windows of a genome don't see the same sequence of draws.
    """

    _rng: random.Random
    _low: int
    _high: int

    def __init__(self, low: int = 0, high: int = 1,
                 seed: typing.Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self.set_range(low, high)

    def set_range(self, low: int, high: int, min_span: int = 0) -> None:
        """Set the range to [low, high].

        With min_span > 0 the range must cover at least min_span + 1
        values, which is what you need when drawing an alternative to
        a value you already have.
        """
        if high < low or high - low < min_span:
            raise InvalidRange(
                f"Range [{low}, {high}] is too small "
                f"(needs a span of at least {min_span})."
            )
        self._low = low
        self._high = high

    @property
    def low(self) -> int:
        return self._low

    @property
    def high(self) -> int:
        return self._high

    def next(self) -> int:
        return self._rng.randint(self._low, self._high)
