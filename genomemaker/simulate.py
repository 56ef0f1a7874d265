import random
import typing

from .errors import ConfigurationError
from .vis.progress import Progress

DNA = "CGAT"
RNA = "GUAC"

LETTER_SETS = {
    'DNA': DNA,
    'RNA': RNA,
}

# Genomes are written in blocks of this many letters.
BLOCK_SIZE = 1 << 16


def letter_set(name: str) -> str:
    """The letters for a named set (DNA/RNA) or a custom set of letters."""
    letters = LETTER_SETS.get(name.upper(), name)
    if len(set(letters)) < 2:
        raise ConfigurationError(
            f"Letter set '{name}' needs at least two different letters.")
    return letters


def simulate_genome_string(n: int, letters: str,
                           rng: random.Random) -> str:
    return ''.join(rng.choices(letters, k=n))


def write_genome(f: typing.TextIO, size: int,
                 letters: str = DNA,
                 seed: typing.Optional[int] = None,
                 progress: typing.Optional[Progress] = None) -> None:
    """Write size random letters to f, with no header or line breaks.

    The sequencer reads the genome as a raw stream of bytes, not FASTA.
    """
    if size < 1:
        raise ConfigurationError(f"Invalid genome size of '{size}'.")
    rng = random.Random(seed)
    for i in range(0, size, BLOCK_SIZE):
        n = min(BLOCK_SIZE, size - i)
        f.write(simulate_genome_string(n, letters, rng))
        if progress is not None:
            progress.advance(n)
