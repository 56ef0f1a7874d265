"""Simulated sequencer: samples reads from a genome file into FASTA.

The genome is streamed in chunks of four read lengths. Each chunk is held
together with the chunk after it, so reads starting near the end of a
chunk can run on into the next one, and every chunk gets its share of the
total number of reads. A few reads, picked before the run starts, get a
single base substituted.
"""

from __future__ import annotations

import os
import typing

from . import messages
from .buffers import Buffers
from .errors import (
    BufferTooSmall, ConfigurationError, InsufficientReads
)
from .fasta import write_record
from .files import ENCODING, GenomeReader, SequenceWriter
from .randomiser import Randomiser
from .sampler import ReadSampler
from .schedule import ErrorSchedule, error_budget
from .simulate import DNA
from .vis.progress import Progress

MIN_READ_LENGTH = 1
MAX_READ_LENGTH = 1000
DEFAULT_READ_LENGTH = 260
CHUNK_READS = 4


class RunPlan(typing.NamedTuple):
    genome_size: int
    reads_total: int
    error_count: int
    chunk_size: int
    genome_chunks: int
    reads_per_chunk: int
    # Quota of the chunk the run ends on (merged with the tail of the file)
    final_quota: int

    @property
    def chunks(self) -> int:
        """Number of chunks the run sequences, the last one included."""
        return max(self.genome_chunks, 1)


class RunState:
    """Counters for the reads written so far in a run."""

    reads_completed: int
    errors_injected: int

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.reads_completed = 0
        self.errors_injected = 0

    def __repr__(self) -> str:
        return (f"RunState(reads_completed={self.reads_completed}, "
                f"errors_injected={self.errors_injected})")


def read_count(genome_size: int, read_length: int, read_depth: int) -> int:
    # depth = reads * read_length / genome_size
    return read_depth * genome_size // read_length


def chunk_quota(size: int, genome_size: int,
                reads_total: int, genome_chunks: int) -> int:
    """Number of reads to take from a chunk of the given size.

    Reads are shared out in proportion to how much of the genome the chunk
    covers, in whole percent. For genomes of more than a hundred chunks
    that rounds to nothing and the reads are split evenly over the chunks
    instead.
    """
    quota = (size * 100 // genome_size) * reads_total // 100
    if quota == 0 and genome_chunks > 0:
        quota = reads_total // genome_chunks
    if quota == 0:
        raise InsufficientReads(
            f"{reads_total} reads is not enough to cover a genome of "
            f"{genome_size} bytes with at least one read per chunk."
        )
    return quota


def plan_run(genome_size: int, read_length: int,
             read_depth: int, error_rate: float) -> RunPlan:
    if genome_size < read_length:
        raise BufferTooSmall(
            f"Genome of {genome_size} bytes is shorter than "
            f"the read length {read_length}."
        )
    reads_total = read_count(genome_size, read_length, read_depth)
    if reads_total < 1:
        raise InsufficientReads(
            f"Read depth {read_depth} gives no reads of length "
            f"{read_length} on a genome of {genome_size} bytes."
        )
    chunk_size = read_length * CHUNK_READS
    genome_chunks = genome_size // chunk_size
    reads_per_chunk = chunk_quota(
        chunk_size, genome_size, reads_total, genome_chunks
    )
    if genome_chunks > 0:
        final_quota = chunk_quota(
            chunk_size + genome_size % chunk_size,
            genome_size, reads_total, genome_chunks
        )
    else:
        # The whole genome fits in one short chunk
        final_quota = reads_per_chunk
    return RunPlan(
        genome_size=genome_size,
        reads_total=reads_total,
        error_count=error_budget(reads_total, error_rate),
        chunk_size=chunk_size,
        genome_chunks=genome_chunks,
        reads_per_chunk=reads_per_chunk,
        final_quota=final_quota,
    )


def reads_due(plan: RunPlan, chunk: int) -> int:
    """Number of reads that should be written once chunk number chunk
    (counting from 1) has been sequenced.

    The chunk quotas round down to whole percent, so together they can
    fall well short of reads_total. The shortfall is spread evenly over
    all the chunks, and the last chunk brings the count up to exactly
    reads_total.
    """
    if chunk >= plan.chunks:
        return plan.reads_total
    planned = (plan.chunks - 1) * plan.reads_per_chunk + plan.final_quota
    shortfall = plan.reads_total - planned
    due = chunk * plan.reads_per_chunk + shortfall * chunk // plan.chunks
    return max(0, min(due, plan.reads_total))


def validate(read_length: int, read_depth: int, error_rate: float,
             letters: str = DNA) -> None:
    if not MIN_READ_LENGTH <= read_length <= MAX_READ_LENGTH:
        raise ConfigurationError(
            f"Invalid read length of '{read_length}' "
            f"(must be {MIN_READ_LENGTH}-{MAX_READ_LENGTH})."
        )
    if read_depth < 1:
        raise ConfigurationError(f"Invalid read depth of '{read_depth}'.")
    if not 0.0 <= error_rate <= 1.0:
        raise ConfigurationError(
            f"Invalid error rate of '{error_rate}' (must be 0-1).")
    if len(set(letters)) < 2:
        raise ConfigurationError(
            f"Letter set '{letters}' needs at least two different letters "
            "to substitute errors.")


def same_file(a: str, b: str) -> bool:
    return os.path.realpath(a) == os.path.realpath(b)


class Sequencer:
    """Runs a sequencer simulation from a genome file to a FASTA file."""

    _reader: GenomeReader
    _writer: SequenceWriter
    _read_length: int
    _read_depth: int
    _error_rate: float
    _seed: typing.Optional[int]
    _letters: str
    _progress: typing.Optional[Progress]
    verbose: bool

    _plan: typing.Optional[RunPlan]
    _state: RunState
    _sampler: ReadSampler
    _error_randomiser: Randomiser

    def __init__(self,
                 reader: GenomeReader,
                 writer: SequenceWriter,
                 read_length: int,
                 read_depth: int,
                 error_rate: float,
                 seed: typing.Optional[int] = None,
                 letters: str = DNA,
                 progress: typing.Optional[Progress] = None,
                 verbose: bool = False) -> None:
        self._reader = reader
        self._writer = writer
        self._read_length = read_length
        self._read_depth = read_depth
        self._error_rate = error_rate
        self._seed = seed
        self._letters = letters
        self._progress = progress
        self.verbose = verbose
        self._plan = None
        self._state = RunState()

    @property
    def read_length(self) -> int:
        return self._read_length

    @property
    def read_depth(self) -> int:
        return self._read_depth

    @property
    def error_rate(self) -> float:
        return self._error_rate

    @property
    def read_count(self) -> int:
        """Total number of reads for the run (0 before it has started)."""
        return self._plan.reads_total if self._plan else 0

    @property
    def plan(self) -> typing.Optional[RunPlan]:
        return self._plan

    @property
    def state(self) -> RunState:
        return self._state

    def _log(self, *args: typing.Any) -> None:
        if self.verbose:
            messages.message(*args)

    def _reset(self) -> None:
        self._state.reset()
        # Seeded once per run. Read positions and errors use separate streams.
        self._sampler = ReadSampler(Randomiser(seed=self._seed))
        self._error_randomiser = Randomiser(
            seed=None if self._seed is None else self._seed + 1
        )

    def start(self) -> RunState:
        """Run the simulation and return the final counters."""
        validate(self._read_length, self._read_depth,
                 self._error_rate, self._letters)
        if same_file(self._reader.name, self._writer.name):
            raise ConfigurationError(
                f"Input and output files are the same "
                f"('{self._reader.name}')!")
        self._reset()

        opened_reader = not self._reader.is_open
        if opened_reader:
            self._reader.open()
        try:
            plan = plan_run(self._reader.size, self._read_length,
                            self._read_depth, self._error_rate)
            self._plan = plan
            self._log(f"Reading from file: '{self._reader.name}'")
            self._log(f"Genome size......: {plan.genome_size}")
            self._log(f"Read length......: {self._read_length}")
            self._log(f"Read depth.......: {self._read_depth}")
            self._log(f"Error rate.......: {self._error_rate}")
            self._log(f"Calculated #reads: {plan.reads_total}")
            self._log(f"Erroneous reads..: {plan.error_count}")
            self._log(f"Chunk size.......: {plan.chunk_size}")
            self._log(f"Whole chunks.....: {plan.genome_chunks}")
            self._log(f"Reads per chunk..: {plan.reads_per_chunk}")
            self._log(f"Last chunk reads.: {plan.final_quota}")
            self._log(f"Writing to file..: '{self._writer.name}'")

            schedule = ErrorSchedule.build(
                plan.reads_total, plan.error_count, self._error_randomiser
            )

            opened_writer = not self._writer.is_open
            if opened_writer:
                self._writer.open()
            try:
                self._sequence_genome(plan, schedule)
                self._writer.flush()
            finally:
                if opened_writer:
                    self._writer.close()
        finally:
            if opened_reader:
                self._reader.close()
        return self._state

    def _sequence_genome(self, plan: RunPlan,
                         schedule: ErrorSchedule) -> None:
        buffer = Buffers()
        chunk_size = plan.chunk_size
        chunk = 0

        buffer.fill_current(self._reader, chunk_size)
        while buffer.current_size >= max(self._read_length, 1):
            chunk += 1
            self._log(f"Processing chunk #{chunk}/{plan.chunks}")
            buffer.fill_next(self._reader, chunk_size)

            if buffer.current_size < chunk_size:
                # The file ended while filling 'current'
                self._sequence_chunk(buffer, plan.final_quota,
                                     schedule, chunk, final=True)
                break

            if buffer.next_size < chunk_size:
                # The file ended while filling 'next'
                self._log("EOF reached whilst caching 'next' buffer. "
                          "Merging buffers...")
                buffer.merge()
                self._sequence_chunk(buffer, plan.final_quota,
                                     schedule, chunk, final=True)
                break

            self._sequence_chunk(buffer, plan.reads_per_chunk,
                                 schedule, chunk)
            buffer.swap()

    def _sequence_chunk(self, buffer: Buffers, quota: int,
                        schedule: ErrorSchedule, chunk: int,
                        final: bool = False) -> int:
        assert self._plan is not None
        plan = self._plan
        state = self._state
        due = plan.reads_total if final else reads_due(plan, chunk)
        count = max(0, due - state.reads_completed)
        if count != quota:
            self._log(f"Chunk quota adjusted from {quota} to {count} reads.")

        max_start = self._sampler.set_window(buffer, self._read_length)
        self._log(f"Current buffer size: {buffer.current_size}")
        self._log(f"Next buffer size...: {buffer.next_size}")
        self._log(f"Reads to do........: {count}")
        self._log(f"Start range........: 0-{max_start}")

        for _ in range(count):
            state.reads_completed += 1
            index = state.reads_completed
            erroneous = schedule.peek_matches(index)
            start = self._sampler.next_start()
            read = self._sampler.extract(
                buffer, start, self._read_length
            ).decode(ENCODING)
            if erroneous:
                read = self._inject_error(index, read)
            write_record(self._writer, index, read)

        if self._progress is not None:
            self._progress.advance(count)
        return count

    def _inject_error(self, index: int, read: str) -> str:
        """Substitute one letter of the read with a different one."""
        rnd = self._error_randomiser
        rnd.set_range(0, len(read) - 1)
        pos = rnd.next()
        rnd.set_range(0, len(self._letters) - 1, min_span=1)
        for _ in range(len(read)):
            letter = self._letters[rnd.next()]
            if letter != read[pos]:
                self._state.errors_injected += 1
                return read[:pos] + letter + read[pos+1:]
        messages.warning(
            f"Couldn't find a substitute for '{read[pos]}' in read #{index}; "
            "leaving it unchanged.")
        return read
