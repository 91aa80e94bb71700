"""
Shortest Job First (SJF) policy, non-preemptive.

Whenever jobs are admitted, the ready queue is re-sorted by remaining time
(shortest first, ties keep queue order). The running job is never
interrupted; when it completes, the head of the ready queue (the job that
was shortest at the last admission) runs next.

Waiting jobs don't execute, so their remaining times don't change between
admissions and the queue stays sorted without re-sorting at dispatch.

Downside: starvation. A long job may never run if short jobs keep arriving.
"""

from models.enums import SchedulingPolicy
from models.job import Job
from scheduler.base import AbstractScheduler


class SJFScheduler(AbstractScheduler):

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.SJF

    def on_admit(self, admitted: list[Job]) -> None:
        self.ready.reorder_by_remaining_time()
