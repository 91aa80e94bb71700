"""
Tests for the STCF policy.

STCF re-checks every tick: a ready job with strictly less remaining time
takes the CPU from the running job.
"""

import pytest

from cli.render import format_trace
from models.enums import SchedulingPolicy
from scheduler.engine import run_simulation
from scheduler.feed import AdmissionFeed
from scheduler.stcf import STCFScheduler
from workload.generator import random_workload


class CheckedSTCF(STCFScheduler):
    """STCF that asserts the head invariant right after every preemption check."""

    def before_run(self, tick: int) -> None:
        super().before_run(tick)
        head = self.ready.peek_head()
        if self.current is not None and head is not None:
            assert self.current.remaining_time <= head.remaining_time


def test_two_job_example(make_job):
    """B (2 ticks) preempts A (4 ticks) as soon as it is admitted, and finishes first."""
    result = run_simulation([make_job("A", 4, 0), make_job("B", 2, 1)], SchedulingPolicy.STCF)

    assert format_trace(result.trace) == [
        "1:A:empty:",
        "2:B:A(3),:",
        "3:B:A(3),:",
        "4:A:empty:",
        "5:A:empty:",
        "6:A:empty:",
    ]
    outcomes = {job.name: job for job in result.jobs}
    assert outcomes["B"].completion_tick == 3
    assert outcomes["A"].completion_tick == 6
    assert result.metrics.avg_turnaround == pytest.approx((2 + 6) / 2)
    assert result.metrics.avg_response == pytest.approx(1.0)
    assert result.metrics.throughput == pytest.approx(2 / 6)


def test_equal_remaining_time_does_not_preempt(make_job):
    jobs = [make_job("A", 5, 0), make_job("B", 2, 2), make_job("C", 1, 3)]
    result = run_simulation(jobs, SchedulingPolicy.STCF)

    assert format_trace(result.trace) == [
        "1:A:empty:",
        "2:A:empty:",
        "3:B:A(3),:",
        "4:B:C(1),A(3),:",   # C has 1 left, so does B: B keeps the CPU
        "5:C:A(3),:",
        "6:A:empty:",
        "7:A:empty:",
        "8:A:empty:",
    ]
    assert result.metrics.avg_turnaround == pytest.approx((2 + 2 + 8) / 3)
    assert result.metrics.avg_response == pytest.approx((1 + 1 + 2) / 3)
    assert result.metrics.num_processes == 3


def test_ready_queue_is_shown_sorted(make_job):
    jobs = [make_job("A", 9, 0), make_job("B", 8, 0), make_job("C", 7, 0)]
    result = run_simulation(jobs, SchedulingPolicy.STCF)

    # C preempts A on tick 1, B and A wait longest-last
    assert format_trace(result.trace)[0] == "1:C:B(8),A(9),:"


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_running_job_is_never_longer_than_ready_head(seed):
    scheduler = CheckedSTCF(AdmissionFeed(random_workload(15, seed=seed, max_burst=8, max_arrival=10)))
    scheduler.run()

    assert scheduler.finished
    assert scheduler.metrics.num_processes == 15


def test_policy():
    assert STCFScheduler(AdmissionFeed([])).policy == SchedulingPolicy.STCF
