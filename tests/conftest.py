import random
import typing

import pytest

from genomemaker.fasta import scan_records
from genomemaker.files import GenomeReader, SequenceWriter
from genomemaker.sequencer import RunState, Sequencer


def random_genome(n: int, letters: str = "CGAT", seed: int = 0) -> str:
    return ''.join(random.Random(seed).choices(letters, k=n))


@pytest.fixture
def genome_file(tmp_path):
    """Factory writing a random genome of the given size to a file."""
    def make(n: int, letters: str = "CGAT", seed: int = 0,
             name: str = "test.genome") -> tuple[str, str]:
        genome = random_genome(n, letters, seed)
        path = tmp_path / name
        path.write_text(genome)
        return str(path), genome
    return make


def read_records(fname: str) -> list[tuple[str, str]]:
    with open(fname) as f:
        return list(scan_records(f))


@pytest.fixture
def sequence(tmp_path):
    """Factory running the sequencer over a genome file."""
    def run(genome: str, read_length: int, read_depth: int,
            error_rate: float = 0.0,
            out: str = "reads.fasta",
            **kwargs: typing.Any) -> tuple[RunState, list[tuple[str, str]]]:
        fname = str(tmp_path / out)
        sequencer = Sequencer(
            GenomeReader(genome), SequenceWriter(fname),
            read_length, read_depth, error_rate, **kwargs
        )
        state = sequencer.start()
        return state, read_records(fname)
    return run


@pytest.fixture
def records():
    return read_records
