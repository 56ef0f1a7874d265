import pytest

from genomemaker.errors import ConfigurationError
from genomemaker.randomiser import Randomiser
from genomemaker.schedule import ErrorSchedule, error_budget


def test_error_budget():
    assert error_budget(100, 0.0) == 0
    assert error_budget(100, 0.1) == 10
    assert error_budget(3, 0.5) == 2
    assert error_budget(100, 0.07) == 7
    assert error_budget(7, 0.01) == 1
    assert error_budget(10, 1.0) == 10


def test_empty_schedule():
    schedule = ErrorSchedule.build(100, 0, Randomiser(seed=1))
    assert len(schedule) == 0
    assert not any(schedule.peek_matches(i) for i in range(1, 101))


def test_build_picks_distinct_indices():
    schedule = ErrorSchedule.build(100, 10, Randomiser(seed=1))
    indices = schedule.remaining
    assert len(indices) == 10
    assert len(set(indices)) == 10
    assert indices == sorted(indices)
    assert all(1 <= i <= 100 for i in indices)


def test_build_most_reads():
    schedule = ErrorSchedule.build(50, 40, Randomiser(seed=1))
    indices = schedule.remaining
    assert len(set(indices)) == 40
    assert all(1 <= i <= 50 for i in indices)


def test_build_every_read():
    schedule = ErrorSchedule.build(10, 10, Randomiser(seed=1))
    assert schedule.remaining == list(range(1, 11))


def test_build_single_read():
    schedule = ErrorSchedule.build(1, 1, Randomiser(seed=1))
    assert schedule.remaining == [1]


def test_build_too_many_errors():
    with pytest.raises(ConfigurationError):
        ErrorSchedule.build(10, 11, Randomiser(seed=1))


def test_build_is_reproducible():
    a = ErrorSchedule.build(1000, 25, Randomiser(seed=3))
    b = ErrorSchedule.build(1000, 25, Randomiser(seed=3))
    assert a.remaining == b.remaining


def test_peek_matches_consumes_in_order():
    schedule = ErrorSchedule([7, 3, 1])
    assert schedule.remaining == [1, 3, 7]
    assert schedule.peek_matches(1)
    assert not schedule.peek_matches(1)
    assert not schedule.peek_matches(2)
    assert len(schedule) == 2
    assert schedule.peek_matches(3)
    assert not schedule.peek_matches(4)
    assert schedule.peek_matches(7)
    assert len(schedule) == 0


def test_walking_all_reads_drains_schedule():
    schedule = ErrorSchedule.build(500, 50, Randomiser(seed=9))
    hits = [i for i in range(1, 501) if schedule.peek_matches(i)]
    assert len(hits) == 50
    assert len(schedule) == 0
