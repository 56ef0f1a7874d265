from __future__ import annotations

import argparse
import typing

from . import simulate
from .errors import ConfigurationError

ARGS_ROOT = argparse.ArgumentParser(
    prog='genomemaker',
    description='''
        Creates synthetic genome data and simulated sequencer reads
        (FASTA) from it, for testing de novo genome assembly on
        data sets of any size.
        '''
)
ARGS_ROOT.add_argument(
    '-v', '--verbose',
    help="Verbose output",
    action='store_true',
    default=False
)
SUBCOMMANDS = ARGS_ROOT.add_subparsers()


CommandHandler = typing.Callable[[argparse.Namespace], None]


def positive_int(x: str) -> int:
    try:
        n = int(x)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{x}' is not an integer")
    if n < 1:
        raise argparse.ArgumentTypeError(f"'{x}' must be at least 1")
    return n


def rate(x: str) -> float:
    try:
        r = float(x)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{x}' is not a number")
    if not 0.0 <= r <= 1.0:
        raise argparse.ArgumentTypeError(f"'{x}' must be between 0 and 1")
    return r


def letters(x: str) -> str:
    try:
        return simulate.letter_set(x)
    except ConfigurationError as e:
        raise argparse.ArgumentTypeError(str(e))


class argument:
    flags: tuple[str, ...]
    options: dict[str, typing.Any]

    def __init__(self, *flags: str, **options: typing.Any) -> None:
        self.flags = flags
        self.options = options


# Options shared by the commands that write files.
LETTERS = argument(
    "-t", "--type", dest="letters", type=letters, default=simulate.DNA,
    help="Letter set: DNA, RNA or the letters themselves (default DNA)."
)
SEED = argument(
    "--seed", type=int, default=None,
    help="Seed for the random number generators (default random)."
)
FORCE = argument(
    "--force", action='store_true', default=False,
    help="Overwrite existing output files."
)


class command:
    _args: tuple[argument, ...]
    _parent: argparse._SubParsersAction

    _parser: typing.Optional[argparse.ArgumentParser]
    _subparsers: typing.Optional[argparse._SubParsersAction]

    _cmd: typing.Optional[typing.Callable[[argparse.Namespace], None]]

    def __init__(self,
                 *args: argument,
                 parent: argparse._SubParsersAction = SUBCOMMANDS
                 ) -> None:
        self._args = args
        self._parent = parent
        self._parser = None
        self._subparsers = None
        self._cmd = None

    def __call__(self, cmd: CommandHandler) -> command:
        self._cmd = cmd
        summary = (cmd.__doc__ or '').strip().split('\n')[0]
        self._parser = self._parent.add_parser(
            cmd.__name__, help=summary, description=cmd.__doc__
        )
        assert self._parser is not None
        for arg in self._args:
            self._parser.add_argument(*arg.flags, **arg.options)
        self._parser.set_defaults(command=cmd)
        return self

    @property
    def parser(self) -> argparse.ArgumentParser:
        assert self._parser is not None
        return self._parser

    @property
    def subparsers(self) -> argparse._SubParsersAction:
        assert self._parser is not None
        if self._subparsers is None:
            self._subparsers = self._parser.add_subparsers()
        return self._subparsers

    @property
    def cmd(self) -> typing.Callable[[argparse.Namespace], None]:
        assert self._cmd is not None
        return self._cmd
