import sys
import typing

from . import cols


class Progress(typing.Protocol):
    def advance(self, n: int) -> None: ...


class ProgressBar:
    """A one-line progress bar, redrawn in place as work is done.

    [=============>                    ]  37%
    """

    total: int
    done: int
    width: int
    out: typing.TextIO

    def __init__(self, total: int, width: int = 70,
                 out: typing.TextIO = sys.stderr) -> None:
        self.total = max(total, 1)
        self.done = 0
        self.width = width
        self.out = out
        self._drawn = -1

    @property
    def finished(self) -> bool:
        return self.done >= self.total

    def _position(self) -> int:
        return self.width * self.done // self.total

    def _percentage(self) -> int:
        return 100 * self.done // self.total

    def __str__(self) -> str:
        pos = self._position()
        bar = '=' * pos
        if pos < self.width:
            bar += '>' + ' ' * (self.width - pos - 1)
        if self.finished:
            bar = cols.green(bar)
        return f"[{bar}] {self._percentage():3d}%"

    def advance(self, n: int = 1) -> None:
        self.done = min(self.done + n, self.total)
        # Only redraw when something visible changed.
        if self._percentage() != self._drawn:
            self._drawn = self._percentage()
            print(f"\r{self}", end='', file=self.out, flush=True)

    def close(self) -> None:
        print(file=self.out)
