import io

import pytest

from genomemaker.buffers import Buffers
from genomemaker.errors import BufferTooSmall, InvariantViolation
from genomemaker.randomiser import Randomiser
from genomemaker.sampler import ReadSampler


def filled(current: bytes, next: bytes) -> Buffers:
    buffer = Buffers()
    buffer.fill_current(io.BytesIO(current), len(current))
    buffer.fill_next(io.BytesIO(next), len(next))
    return buffer


def test_draws_stay_in_window():
    buffer = filled(b"ACGTACGTAC", b"GG")
    sampler = ReadSampler(Randomiser(seed=1))
    assert sampler.set_window(buffer, 5) == 7
    starts = {sampler.next_start() for _ in range(500)}
    assert starts == set(range(8))
    for start in starts:
        assert len(sampler.extract(buffer, start, 5)) == 5


def test_draw_sets_window():
    buffer = filled(b"ACGT", b"")
    sampler = ReadSampler(Randomiser(seed=1))
    assert sampler.draw(buffer, 4) == 0
    assert sampler.extract(buffer, 0, 4) == b"ACGT"


def test_extract_across_boundary():
    buffer = filled(b"AAAACCCC", b"GGGGTTTT")
    sampler = ReadSampler(Randomiser(seed=1))
    assert sampler.extract(buffer, 6, 4) == b"CCGG"


def test_draw_buffer_too_small():
    sampler = ReadSampler(Randomiser(seed=1))
    with pytest.raises(BufferTooSmall):
        sampler.draw(filled(b"ACG", b"TTTT"), 4)


def test_extract_out_of_range_is_an_internal_error():
    buffer = filled(b"ACGT", b"AC")
    sampler = ReadSampler(Randomiser(seed=1))
    with pytest.raises(InvariantViolation):
        sampler.extract(buffer, 3, 4)
