"""
Admission feed — jobs that have not become eligible to run yet.

The feed is sorted by arrival time once, when it is built. Every tick the
policy engine calls admit(), which moves each head job whose arrival_time
is strictly less than the current tick into the ready queue.

Strict "<" means a job arriving at tick 3 is admitted on tick 4, not 3.
Every trace line depends on this, so it must not become "<=".
"""

import logging
from typing import Iterable, Optional

from models.job import Job
from scheduler.queue import JobQueue

logger = logging.getLogger(__name__)


class AdmissionFeed:

    def __init__(self, jobs: Iterable[Job]):
        self._backlog = JobQueue(jobs)
        self._backlog.reorder_by_arrival_time()

    def take_initial(self) -> Job:
        """Remove the earliest-arriving job; it becomes the first running job."""
        return self._backlog.pop_head()

    def admit(self, tick: int, ready: JobQueue) -> list[Job]:
        """Move every job that arrived before `tick` to the tail of `ready`."""
        admitted = []
        while (head := self._backlog.peek_head()) is not None and head.has_arrived_before(tick):
            job = self._backlog.pop_head()
            ready.push_tail(job)
            admitted.append(job)

        if admitted:
            logger.debug(f"tick {tick}: admitted {', '.join(job.name for job in admitted)}")
        return admitted

    def next_arrival(self) -> Optional[int]:
        head = self._backlog.peek_head()
        return head.arrival_time if head is not None else None

    def is_exhausted(self) -> bool:
        return self._backlog.is_empty()

    def __contains__(self, job: Job) -> bool:
        return job in self._backlog

    def __len__(self) -> int:
        return len(self._backlog)
