from __future__ import annotations

import typing
import argparse
import yaml
import sys

from .args import command, argument, ARGS_ROOT, LETTERS, SEED, FORCE
from .args import positive_int, rate
from .batch import batch_config, batch_genomes, batch_reads
from . import commands
from . import messages
from . import utils
from .errors import GenomeMakerError
from .sequencer import DEFAULT_READ_LENGTH, RunState


def _show_progress() -> bool:
    return sys.stderr.isatty()


def _report(state: RunState, fname: str) -> None:
    messages.done(
        f"Sequencer reads file '{fname}' created "
        f"({state.reads_completed} reads, "
        f"{state.errors_injected} with errors).")


LENGTH = argument(
    "-l", "--length", dest="read_length", type=positive_int,
    default=DEFAULT_READ_LENGTH,
    help=f"Character length of each read, 1-1000 "
         f"(default {DEFAULT_READ_LENGTH})."
)
DEPTH = argument(
    "-d", "--depth", dest="read_depth", type=positive_int, default=1,
    help="Average read depth (coverage) over the genome (default 1)."
)
ERROR = argument(
    "-e", "--error", dest="error_rate", type=rate, default=0.0,
    help="Fraction of reads with a substitution error, 0-1 (default 0)."
)


@command()
def simulate(args: argparse.Namespace) -> None:
    """Simulates data for genome assembly.

    Choose a sub-command to specify which type of data.
    """
    # This is a menu point. There's not any action in it.
    # If called, we just inform the user to pick a sub-command.
    simulate.parser.print_usage()


@command(
    argument("size", help="Size of the genome in bytes.", type=positive_int),
    argument("-o", "--out", required=True,
             help="File to write the genome to."),
    LETTERS, SEED, FORCE,
    parent=simulate.subparsers
)
def genome(args: argparse.Namespace) -> None:
    """Simulates a genome as a raw stream of letters."""
    utils.check_new_file(args.out, args.force)
    commands.simulate_genome(args.size, args.out, args.letters,
                             args.seed, _show_progress())
    messages.done(f"Genome '{args.out}' created.")


@command(
    argument("genome", help="Genome file to sample reads from.", type=str),
    argument("-o", "--out",
             help="FASTA file to write the reads to "
                  "(default GENOME.fasta)."),
    LENGTH, DEPTH, ERROR, LETTERS, SEED, FORCE,
    parent=simulate.subparsers
)
def reads(args: argparse.Namespace) -> None:
    """Simulates sequencer reads from a genome."""
    out = args.out if args.out else f"{args.genome}.fasta"
    utils.check_genome_file(args.genome)
    utils.check_new_file(out, args.force)
    state = commands.simulate_reads(
        args.genome, out,
        args.read_length, args.read_depth, args.error_rate,
        letters=args.letters, seed=args.seed,
        show_progress=_show_progress(), verbose=args.verbose
    )
    _report(state, out)


@command(
    argument("name", help="Base name for NAME.genome and NAME.fasta."),
    argument("size", help="Size of the genome in bytes.", type=positive_int),
    LENGTH, DEPTH, ERROR, LETTERS, SEED, FORCE,
)
def pipeline(args: argparse.Namespace) -> None:
    """Creates both a genome and the sequencer reads from it."""
    genome_file = f"{args.name}.genome"
    fasta_file = f"{args.name}.fasta"
    utils.check_new_file(genome_file, args.force)
    utils.check_new_file(fasta_file, args.force)

    commands.simulate_genome(args.size, genome_file, args.letters,
                             args.seed, _show_progress())
    messages.done(f"Genome '{genome_file}' created.")
    state = commands.simulate_reads(
        genome_file, fasta_file,
        args.read_length, args.read_depth, args.error_rate,
        letters=args.letters, seed=args.seed,
        show_progress=_show_progress(), verbose=args.verbose
    )
    _report(state, fasta_file)


@command(
    argument('config',
             help="Configuration file",
             type=argparse.FileType('r')),
)
def batch(args: argparse.Namespace) -> None:
    """Simulates the genomes and reads specified in a configuration file."""
    config = batch_config(
        yaml.load(args.config.read(), Loader=yaml.SafeLoader)
    )
    batch_genomes(config, args.verbose)
    batch_reads(config, args.verbose)
    messages.done("Finished.")


def main(argv: typing.Optional[list[str]] = None) -> None:
    args = ARGS_ROOT.parse_args(argv)
    if 'command' not in args:
        print("Select a command to run.")
        ARGS_ROOT.print_help()
        return
    try:
        args.command(args)
    except GenomeMakerError as e:
        messages.error(e)
    except yaml.YAMLError as e:
        messages.error(f"Can't parse configuration file: {e}")
