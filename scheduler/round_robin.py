"""
Round Robin (RR) policy.

Each job runs for at most `time_quantum` consecutive ticks. When the
quantum is used up and the job isn't finished, it goes to the back of the
ready queue and the head runs next. With an empty ready queue the same job
is picked straight back up.

Only ticks the job actually executes count toward the quantum; idle ticks
don't. A completing job resets the count for its successor.

The quantum defaults to 1 tick (settings.ROUND_ROBIN_TIME_QUANTUM):
- Small quantum (1): very fair, a rotation every tick
- Large quantum: less switching, approaches FIFO behavior
"""

import logging
from typing import Optional

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.base import AbstractScheduler
from scheduler.feed import AdmissionFeed

logger = logging.getLogger(__name__)


class RoundRobinScheduler(AbstractScheduler):

    def __init__(self, feed: AdmissionFeed, time_quantum: Optional[int] = None):
        if time_quantum is None:
            time_quantum = settings.ROUND_ROBIN_TIME_QUANTUM
        if time_quantum < 1:
            raise ValueError("time_quantum must be at least 1 tick")
        super().__init__(feed)
        self.time_quantum = time_quantum
        self.slice_used = 0

    @property
    def policy(self) -> SchedulingPolicy:
        return SchedulingPolicy.RR

    def after_run(self, tick: int, ran: bool, completed: bool) -> None:
        if completed:
            self.slice_used = 0
            return
        if ran:
            self.slice_used += 1

        if self.slice_used == self.time_quantum:
            self.requeue(tick)

    def requeue(self, tick: int) -> None:
        """Send the running job to the back of the line and run the new head."""
        expired = self.current
        self.ready.push_tail(expired)
        self.current = self.ready.pop_head()
        self.slice_used = 0
        if self.current is not expired:
            logger.debug(f"tick {tick}: {expired.name} rotated out for {self.current.name}")
