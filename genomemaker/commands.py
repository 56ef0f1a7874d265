import typing

from . import simulate
from .errors import SequencerIOError
from .files import ENCODING, GenomeReader, SequenceWriter
from .sequencer import RunState, Sequencer, read_count, validate
from .vis import ProgressBar


def simulate_genome(size: int, fname: str,
                    letters: str = simulate.DNA,
                    seed: typing.Optional[int] = None,
                    show_progress: bool = False
                    ) -> None:
    progress = ProgressBar(size) if show_progress else None
    try:
        with open(fname, 'w', encoding=ENCODING, newline='') as f:
            simulate.write_genome(f, size, letters, seed, progress)
    except OSError as e:
        raise SequencerIOError(
            f"Can't write genome file '{fname}': {e}") from e
    finally:
        if progress is not None:
            progress.close()


def simulate_reads(genome: str, fname: str,
                   read_length: int, read_depth: int, error_rate: float,
                   letters: str = simulate.DNA,
                   seed: typing.Optional[int] = None,
                   show_progress: bool = False,
                   verbose: bool = False
                   ) -> RunState:
    validate(read_length, read_depth, error_rate, letters)
    reader = GenomeReader(genome)
    progress = None
    if show_progress:
        progress = ProgressBar(
            read_count(reader.size, read_length, read_depth))
    sequencer = Sequencer(
        reader, SequenceWriter(fname),
        read_length, read_depth, error_rate,
        seed=seed, letters=letters,
        progress=progress, verbose=verbose
    )
    try:
        return sequencer.start()
    finally:
        if progress is not None:
            progress.close()
