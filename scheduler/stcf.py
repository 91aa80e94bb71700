"""
Shortest Time-to-Completion First (STCF) policy, preemptive.

Also known as Shortest Remaining Time First. Every tick, before the
running job executes:

    1. re-sort the ready queue by remaining time
    2. if the ready head has STRICTLY less remaining time than the running
       job, the running job goes to the tail and the head takes the CPU
    3. re-sort again so the trace shows the queue in order

Equal remaining times never preempt, so the running job keeps the CPU on a
tie. After the check, the running job is never longer than the ready head.
"""

import logging

from models.enums import SchedulingPolicy
from models.job import Job
from scheduler.base import AbstractScheduler

logger = logging.getLogger(__name__)


class STCFScheduler(AbstractScheduler):

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.STCF

    def on_admit(self, admitted: list[Job]) -> None:
        self.ready.reorder_by_remaining_time()

    def before_run(self, tick: int) -> None:
        self.ready.reorder_by_remaining_time()

        head = self.ready.peek_head()
        running = self.current
        if running is not None and head is not None and head.remaining_time < running.remaining_time:
            self.ready.push_tail(running)
            self.current = self.ready.pop_head()
            logger.debug(f"tick {tick}: {self.current.name} preempts {running.name}")

        self.ready.reorder_by_remaining_time()
