import io

from genomemaker.fasta import (
    LINE_WIDTH, break_lines, fasta_record, scan_records, write_record
)


def test_break_lines():
    assert list(break_lines("ACGTACG", 3)) == ["ACG", "TAC", "G"]
    assert list(break_lines("", 3)) == []


def test_short_record():
    assert fasta_record(1, "ACGT") == ">read#1\nACGT\n\n"


def test_record_of_one_line_width():
    seq = "A" * LINE_WIDTH
    assert fasta_record(12, seq) == f">read#12\n{seq}\n\n"


def test_record_is_wrapped_every_71_characters():
    seq = "C" * 71 + "G" * 71 + "T" * 8
    assert fasta_record(3, seq) == (
        ">read#3\n" + "C" * 71 + "\n" + "G" * 71 + "\n" + "T" * 8 + "\n\n"
    )


def test_write_and_scan_records():
    out = io.StringIO()
    write_record(out, 1, "A" * 100)
    write_record(out, 2, "ACGT")
    out.seek(0)
    assert list(scan_records(out)) == [
        ("read#1", "A" * 100),
        ("read#2", "ACGT"),
    ]
