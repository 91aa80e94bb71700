"""
First In First Out (FIFO) policy.

The simplest policy: jobs run in the order they arrive, each to completion.
The ready queue is never re-sorted: admitted jobs are appended to the tail
and the head runs next when the current job finishes.

Downside: a long-running job blocks everything behind it
(the "convoy effect").
"""

from models.enums import SchedulingPolicy
from scheduler.base import AbstractScheduler


class FIFOScheduler(AbstractScheduler):

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.FIFO
