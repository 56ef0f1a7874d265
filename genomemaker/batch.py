"""Running several simulations from a YAML configuration file.

    directory: data
    seed: 1
    genomes:
      size: [10000, 50000]
      letters: DNA
    reads:
      length: [100, 150]
      depth: 10
      error-rate: [0.0, 0.01]

Each genome is simulated once and every read configuration is run
against every genome.
"""

import itertools
import os.path
import typing

from . import commands
from . import messages
from . import simulate
from . import utils
from .errors import ConfigurationError
from .sequencer import DEFAULT_READ_LENGTH

T = typing.TypeVar('T')


def _values(d: dict[str, typing.Any], name: str,
            kind: typing.Callable[[typing.Any], T],
            default: typing.Any = None) -> list[T]:
    """The values of a YAML field, converted to numbers of the given kind."""
    values = utils.get_yaml_list(d, name, default)
    try:
        return [kind(v) for v in values]
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"Invalid {name} in configuration file: {values}") from None


def _positive(values: list[int], name: str) -> list[int]:
    if any(v < 1 for v in values):
        raise ConfigurationError(
            f"Invalid {name} in configuration file: {values} "
            "(must be at least 1)")
    return values


class batch_config:

    directory: str
    seed: typing.Optional[int]
    genomes: list[tuple[int, str]]
    reads: list[tuple[int, int, float]]
    genomes_reads: list[tuple[tuple[int, str], tuple[int, int, float]]]

    def __init__(self, config: typing.Any) -> None:
        if not isinstance(config, dict):
            raise ConfigurationError(
                "Configuration file must hold a YAML mapping")

        self.directory = str(config.get('directory', '.'))
        seed = config.get('seed')
        try:
            self.seed = None if seed is None else int(seed)
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Invalid seed in configuration file: {seed}") from None

        genomes = config['genomes'] if 'genomes' in config else None
        if not genomes:
            raise ConfigurationError(
                "No genomes specification in configuration file")

        reads = config['reads'] if 'reads' in config else None
        if not reads:
            raise ConfigurationError(
                "No reads specification in configuration file")

        genomes_n = _positive(_values(genomes, 'size', int), 'size')
        if not genomes_n:
            raise ConfigurationError("No genome sizes in configuration file")
        genomes_l: list[str] = [
            simulate.letter_set(str(letters)) for letters in
            utils.get_yaml_list(genomes, 'letters', 'DNA')
        ]
        self.genomes = list(itertools.product(genomes_n, genomes_l))

        reads_n = _positive(
            _values(reads, 'length', int, DEFAULT_READ_LENGTH), 'length')
        reads_d = _positive(_values(reads, 'depth', int, 1), 'depth')
        reads_e = _values(reads, 'error-rate', float, 0.0)
        self.reads = list(itertools.product(reads_n, reads_d, reads_e))

        self.genomes_reads = list(
            itertools.product(self.genomes, self.reads)
        )

    def genome_file(self, size: int, letters: str) -> str:
        return os.path.join(self.directory, utils.genome_name(size, letters))

    def reads_file(self, size: int, letters: str,
                   length: int, depth: int, error_rate: float) -> str:
        return os.path.join(
            self.directory,
            utils.reads_name(size, letters, length, depth, error_rate)
        )


def batch_genomes(config: batch_config, verbose: bool) -> None:
    utils.check_make_dir(config.directory, verbose)
    for n, letters in config.genomes:
        fname = config.genome_file(n, letters)
        if verbose:
            messages.message(f"Simulating genome: {fname}")
        commands.simulate_genome(n, fname, letters, config.seed)


def batch_reads(config: batch_config, verbose: bool) -> None:
    for (n, letters), (length, depth, e) in config.genomes_reads:
        genome = config.genome_file(n, letters)
        if not os.path.isfile(genome):
            raise ConfigurationError(f"Genome file {genome} not found")
        fname = config.reads_file(n, letters, length, depth, e)
        if verbose:
            messages.message(f"Simulating reads: {fname}")
        state = commands.simulate_reads(
            genome, fname, length, depth, e,
            letters=letters, seed=config.seed
        )
        if verbose:
            messages.message(
                f"{state.reads_completed} reads, "
                f"{state.errors_injected} with errors")
