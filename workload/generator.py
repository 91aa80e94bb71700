"""
Random workload generator for demos and benchmarks.

Same seed → same jobs, so benchmark numbers are reproducible.
"""

from random import Random
from typing import Iterable, Optional

from config.settings import settings
from models.enums import SchedulingPolicy
from models.job import Job


def random_workload(
    count: int,
    *,
    seed: Optional[int] = None,
    max_burst: int = 10,
    max_arrival: int = 20,
    prefix: str = "P",
) -> list[Job]:
    """Jobs P0..P{count-1} with bursts in [1, max_burst] and arrivals in [0, max_arrival]."""
    if count < 0:
        raise ValueError("count cannot be negative")
    if max_burst < 1:
        raise ValueError("max_burst must be at least 1")
    if max_arrival < 0:
        raise ValueError("max_arrival cannot be negative")

    rng = Random(seed)
    return [
        Job(
            pid=i + 1,
            name=f"{prefix}{i}",
            remaining_time=rng.randint(1, max_burst),
            arrival_time=rng.randint(0, max_arrival),
        )
        for i in range(count)
    ]


def format_workload(policy: SchedulingPolicy, jobs: Iterable[Job], delimiter: Optional[str] = None) -> str:
    """Render jobs in the text format read by workload.parser."""
    delimiter = delimiter or settings.JOB_FIELD_DELIMITER
    jobs = list(jobs)
    lines = [str(len(jobs)), policy.value]
    for job in jobs:
        fields = (job.name, job.pid, job.remaining_time, job.arrival_time)
        lines.append(delimiter.join(str(value) for value in fields))
    return "\n".join(lines) + "\n"
