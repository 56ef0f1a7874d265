"""Sequential readers and writers for genome and read files."""

from __future__ import annotations

import os
import typing

from .errors import SequencerIOError

# Genome bytes are written back out one character per byte.
ENCODING = 'latin-1'


class GenomeReader:
    """Reads a genome file front to back, a chunk at a time."""

    name: str
    _f: typing.Optional[typing.BinaryIO]
    _size: typing.Optional[int]
    _eof: bool

    def __init__(self, name: str) -> None:
        self.name = name
        self._f = None
        self._size = None
        self._eof = False

    @property
    def is_open(self) -> bool:
        return self._f is not None

    @property
    def eof(self) -> bool:
        return self._eof

    @property
    def size(self) -> int:
        """Size of the genome in bytes."""
        if self._size is None:
            try:
                self._size = os.path.getsize(self.name)
            except OSError as e:
                raise SequencerIOError(
                    f"Can't get the size of genome file '{self.name}': {e}"
                ) from e
        return self._size

    def open(self) -> None:
        try:
            self._f = open(self.name, 'rb')
        except OSError as e:
            raise SequencerIOError(
                f"Can't open genome file '{self.name}': {e}"
            ) from e
        self._eof = False

    def read(self, n: int) -> bytes:
        """Read up to n bytes; fewer means we hit the end of the file."""
        if self._f is None:
            raise SequencerIOError(f"Genome file '{self.name}' isn't open.")
        try:
            data = self._f.read(n)
        except OSError as e:
            raise SequencerIOError(
                f"Error reading genome file '{self.name}': {e}"
            ) from e
        if len(data) < n:
            self._eof = True
        return data

    def close(self) -> None:
        if self._f is not None:
            self._f.close()
            self._f = None

    def __enter__(self) -> GenomeReader:
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, *exc: typing.Any) -> None:
        self.close()


class SequenceWriter:
    """Writes the simulated reads, either to a fresh file or appending."""

    name: str
    append: bool
    _f: typing.Optional[typing.TextIO]

    def __init__(self, name: str, append: bool = False) -> None:
        self.name = name
        self.append = append
        self._f = None

    @property
    def is_open(self) -> bool:
        return self._f is not None

    def open(self) -> None:
        mode = 'a' if self.append else 'w'
        try:
            self._f = open(self.name, mode, encoding=ENCODING, newline='\n')
        except OSError as e:
            raise SequencerIOError(
                f"Can't create sequencer file '{self.name}': {e}"
            ) from e

    def write(self, text: str) -> None:
        if self._f is None:
            raise SequencerIOError(
                f"Sequencer file '{self.name}' isn't open.")
        try:
            self._f.write(text)
        except OSError as e:
            raise SequencerIOError(
                f"Error writing to sequencer file '{self.name}': {e}"
            ) from e

    def flush(self) -> None:
        if self._f is None:
            return
        try:
            self._f.flush()
        except OSError as e:
            raise SequencerIOError(
                f"Error writing to sequencer file '{self.name}': {e}"
            ) from e

    def close(self) -> None:
        if self._f is None:
            return
        # Anything still buffered is written out here
        f, self._f = self._f, None
        try:
            f.close()
        except OSError as e:
            raise SequencerIOError(
                f"Error closing sequencer file '{self.name}': {e}"
            ) from e

    def __enter__(self) -> SequenceWriter:
        if not self.is_open:
            self.open()
        return self

    def __exit__(self, *exc: typing.Any) -> None:
        self.close()
