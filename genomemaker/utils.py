import typing
import urllib.parse
import os.path

from . import messages


def get_yaml_list(d: dict[str, typing.Any], name: str,
                  default: typing.Any = None) -> list[typing.Any]:
    if name not in d:
        if default is None:
            messages.warning(f"missing yaml field {name}")
            return []
        messages.warning(f"missing yaml field {name}, using {default}")
        return [default]
    if isinstance(d[name], list):
        # I don't know why the cast is necessary. It should be
        # obvious from the isinstance check. But mypy wants it.
        return typing.cast(list[typing.Any], d[name])
    else:
        return [d[name]]


def check_make_dir(dirname: str, verbose: bool) -> None:
    if os.path.isfile(dirname):
        messages.error(f"File '{dirname}' exists and isn't a directory")
    if not os.path.isdir(dirname):
        if verbose:
            messages.message(f"Creating directory '{dirname}'")
        os.makedirs(dirname)


def check_new_file(fname: str, force: bool) -> None:
    """Refuse to clobber an existing file unless forced to."""
    if os.path.exists(fname) and not force:
        messages.error(
            f"File '{fname}' already exists (use --force to overwrite it).")


def check_genome_file(fname: str) -> None:
    if not os.access(fname, os.R_OK):
        messages.error(
            f"Can't open genome file '{fname}'. "
            "Cannot simulate sequencer on nothing!")


def letters_tag(letters: str) -> str:
    return urllib.parse.quote_plus(letters)


def genome_name(size: int, letters: str) -> str:
    return f"genome-{size}-{letters_tag(letters)}.genome"


def reads_name(size: int, letters: str,
               read_length: int, depth: int, error_rate: float) -> str:
    genome = genome_name(size, letters)
    return f"{genome}-reads-{read_length}-{depth}-{error_rate}.fasta"
