"""Tests for the Job record."""

import pytest

from models.job import Job


def test_new_job_has_not_run():
    job = Job(pid=1, name="A", remaining_time=3, arrival_time=2)

    assert not job.has_run
    assert job.first_run_tick is None
    assert job.burst_time == 3


def test_run_one_tick_decrements_until_complete():
    job = Job(pid=1, name="A", remaining_time=2, arrival_time=0)
    job.run_one_tick()
    job.run_one_tick()

    assert job.is_complete()
    with pytest.raises(ValueError):
        job.run_one_tick()
    assert job.remaining_time == 0


def test_arrival_is_strict():
    job = Job(pid=1, name="A", remaining_time=1, arrival_time=3)

    assert not job.has_arrived_before(3)
    assert job.has_arrived_before(4)


@pytest.mark.parametrize("remaining, arrival", [(-1, 0), (0, 0), (1, -1)])
def test_empty_or_negative_times_are_rejected(remaining, arrival):
    with pytest.raises(ValueError):
        Job(pid=1, name="A", remaining_time=remaining, arrival_time=arrival)


def test_jobs_compare_by_identity():
    a = Job(pid=1, name="A", remaining_time=1, arrival_time=0)
    b = Job(pid=1, name="A", remaining_time=1, arrival_time=0)

    assert a != b
