import typing

# Reads are wrapped at this width in the simulated sequencer output.
LINE_WIDTH = 71


def break_lines(x: str, linewidth: int = LINE_WIDTH) -> typing.Iterator[str]:
    for i in range(0, len(x), linewidth):
        yield x[i:i+linewidth]


def fasta_record(index: int, seq: str) -> str:
    """A read as a FASTA record, followed by a blank line."""
    lines = '\n'.join(break_lines(seq))
    return f">read#{index}\n{lines}\n\n"


class TextSink(typing.Protocol):
    def write(self, text: str) -> typing.Any: ...


def write_record(f: TextSink, index: int, seq: str) -> None:
    f.write(fasta_record(index, seq))


def scan_records(f: typing.TextIO) -> typing.Iterator[tuple[str, str]]:
    """Name and sequence of each record in a FASTA file."""
    # Records are split on '>', so this only works as long as the
    # sequences themselves don't contain one.
    for record in f.read().split('>')[1:]:
        name, *seq = record.split('\n')
        yield name.strip(), ''.join(line.strip() for line in seq)
