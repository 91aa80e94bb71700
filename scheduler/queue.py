"""
Ordered job queue used for both the ready queue and the admission backlog.

Data structure: collections.deque plus a membership index
- push_tail: append to right  → O(1)
- pop_head:  pop from left    → O(1)
- reorder_*: full stable re-sort → O(n log n)

Reordering always re-sorts the whole queue. Python's sort is stable, so
jobs with equal keys keep the relative order they already had in the
queue, and sorting an already sorted queue changes nothing.

The membership index (ids of held jobs) lets push_tail refuse a job the
queue already owns in O(1).
"""

from collections import deque
from typing import Iterable, Iterator, Optional

from models.job import Job
from scheduler.errors import QueueConsistencyError


class JobQueue:

    def __init__(self, jobs: Iterable[Job] = ()):
        self._queue: deque[Job] = deque()
        self._members: set[int] = set()
        for job in jobs:
            self.push_tail(job)

    def push_tail(self, job: Job) -> None:
        if id(job) in self._members:
            raise QueueConsistencyError(f"{job.name} is already queued")
        self._queue.append(job)
        self._members.add(id(job))

    def pop_head(self) -> Job:
        """Remove and return the head job. Popping an empty queue is a bug in the caller."""
        if self.is_empty():
            raise QueueConsistencyError("pop_head() on an empty queue")
        job = self._queue.popleft()
        self._members.discard(id(job))
        return job

    def peek_head(self) -> Optional[Job]:
        return self._queue[0] if not self.is_empty() else None

    def is_empty(self) -> bool:
        if len(self._queue) != len(self._members):
            raise QueueConsistencyError(
                f"queue holds {len(self._queue)} jobs but indexes {len(self._members)}"
            )
        return not self._queue

    def reorder_by_remaining_time(self) -> None:
        self._queue = deque(sorted(self._queue, key=lambda job: job.remaining_time))

    def reorder_by_arrival_time(self) -> None:
        self._queue = deque(sorted(self._queue, key=lambda job: job.arrival_time))

    def snapshot(self) -> tuple[Job, ...]:
        """Current contents head-first, without removing anything."""
        return tuple(self._queue)

    def __contains__(self, job: Job) -> bool:
        return id(job) in self._members

    def __iter__(self) -> Iterator[Job]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._queue)
