import errno
import io
import os

import pytest

from genomemaker.errors import SequencerIOError
from genomemaker.files import GenomeReader, SequenceWriter


def test_reader_reads_in_chunks(tmp_path):
    path = tmp_path / "g.genome"
    path.write_bytes(b"ACGTACGTAC")
    reader = GenomeReader(str(path))
    assert reader.size == 10
    assert not reader.is_open
    with reader:
        assert reader.read(4) == b"ACGT"
        assert not reader.eof
        assert reader.read(4) == b"ACGT"
        assert reader.read(4) == b"AC"
        assert reader.eof
        assert reader.read(4) == b""
    assert not reader.is_open


def test_reader_missing_file(tmp_path):
    reader = GenomeReader(str(tmp_path / "nope"))
    with pytest.raises(SequencerIOError):
        reader.open()
    with pytest.raises(SequencerIOError):
        reader.size


def test_read_before_open(tmp_path):
    with pytest.raises(SequencerIOError):
        GenomeReader(str(tmp_path / "g")).read(1)


def test_writer_truncates_or_appends(tmp_path):
    path = tmp_path / "out.fasta"
    path.write_text("old\n")
    with SequenceWriter(str(path)) as writer:
        writer.write("new\n")
    assert path.read_text() == "new\n"
    with SequenceWriter(str(path), append=True) as writer:
        writer.write("more\n")
    assert path.read_text() == "new\nmore\n"


def test_writer_not_open(tmp_path):
    with pytest.raises(SequencerIOError):
        SequenceWriter(str(tmp_path / "out")).write("x")


def test_writer_bad_directory(tmp_path):
    writer = SequenceWriter(str(tmp_path / "missing" / "out.fasta"))
    with pytest.raises(SequencerIOError):
        writer.open()


class FullFile(io.StringIO):
    """A text file on a device with no space left."""

    def flush(self) -> None:
        raise OSError(errno.ENOSPC, "No space left on device")

    def close(self) -> None:
        try:
            self.flush()
        finally:
            super().close()


class FullDiskWriter(SequenceWriter):
    def open(self) -> None:
        self._f = FullFile()


def test_writer_flush_failure():
    writer = FullDiskWriter("full.fasta")
    writer.open()
    writer.write(">read#1\nACGT\n\n")
    with pytest.raises(SequencerIOError):
        writer.flush()
    with pytest.raises(SequencerIOError):
        writer.close()


def test_writer_close_failure():
    writer = FullDiskWriter("full.fasta")
    writer.open()
    with pytest.raises(SequencerIOError):
        writer.close()
    assert not writer.is_open
    writer.close()


@pytest.mark.skipif(not os.path.exists("/dev/full"),
                    reason="needs /dev/full")
def test_writer_on_full_device():
    writer = SequenceWriter("/dev/full")
    writer.open()
    writer.write(">read#1\nACGT\n\n")
    with pytest.raises(SequencerIOError):
        writer.close()
    assert not writer.is_open
