"""
Metrics recorder — accumulates the inputs of the final report during a run.

    throughput     = num_processes / (final_tick - first_arrival)
    avg_turnaround = sum(completion_tick - arrival_time) / num_processes
    avg_response   = sum(max(0, first_run_tick - arrival_time)) / num_processes

Degenerate runs report 0.0 instead of dividing by zero:
- throughput is 0.0 when final_tick - first_arrival <= 0
  (only an empty workload gets there; every job needs at least one tick)
- both averages are 0.0 when no job was ever admitted
"""

from typing import Iterable

from models.job import Job
from models.result import JobOutcome, MetricsReport


class MetricsRecorder:

    def __init__(self, first_arrival: int = 0):
        self.first_arrival = first_arrival
        self.num_processes = 0
        self.response_total = 0
        self.turnaround_total = 0

    def record_admitted(self, count: int = 1) -> None:
        self.num_processes += count

    def record_first_run(self, job: Job, tick: int) -> None:
        self.response_total += job.mark_first_run(tick)

    def record_completion(self, job: Job, tick: int) -> None:
        job.completion_tick = tick
        self.turnaround_total += tick - job.arrival_time

    def report(self, final_tick: int) -> MetricsReport:
        elapsed = final_tick - self.first_arrival
        throughput = self.num_processes / elapsed if elapsed > 0 else 0.0
        if self.num_processes:
            avg_turnaround = self.turnaround_total / self.num_processes
            avg_response = self.response_total / self.num_processes
        else:
            avg_turnaround = avg_response = 0.0

        return MetricsReport(
            num_processes=self.num_processes,
            first_arrival=self.first_arrival,
            final_tick=final_tick,
            turnaround_total=self.turnaround_total,
            response_total=self.response_total,
            throughput=throughput,
            avg_turnaround=avg_turnaround,
            avg_response=avg_response,
        )


def job_outcomes(jobs: Iterable[Job]) -> list[JobOutcome]:
    """Per-job breakdown, in the order given."""
    outcomes = []
    for job in jobs:
        turnaround = None
        if job.completion_tick is not None:
            turnaround = job.completion_tick - job.arrival_time
        response = None
        if job.first_run_tick is not None:
            response = max(0, job.first_run_tick - job.arrival_time)
        outcomes.append(JobOutcome(
            name=job.name,
            pid=job.pid,
            arrival_time=job.arrival_time,
            burst_time=job.burst_time,
            first_run_tick=job.first_run_tick,
            completion_tick=job.completion_tick,
            turnaround_time=turnaround,
            response_time=response,
        ))
    return outcomes
