"""
Abstract base class for all policy engines (Template Method pattern).

Every policy runs the same tick loop. The base class owns the loop and the
state it touches:

- clock:   the current tick, advanced by advance_clock()
- current: the running slot (one job, or None)
- ready:   the ready queue (admitted jobs waiting for the CPU)
- feed:    the admission feed (jobs not admitted yet)
- metrics: throughput / turnaround / response accumulators

One call to step() is one tick:

    1. advance the clock
    2. stop if the feed and ready queue are empty and the running job is done
    3. admit arrived jobs                        → on_admit() hook
    4. fill an empty running slot from the ready head
    5. policy decision before execution          → before_run() hook
    6. first-run bookkeeping (response time)
    7. run the job for one tick if it arrived before this tick, else idle
    8. record a TickTrace
    9. on completion: turnaround bookkeeping, promote the ready head
   10. policy decision after execution           → after_run() hook

Subclasses only override the hooks they need. To add a new policy:
1. Create a class that inherits AbstractScheduler
2. Implement `policy` and whichever hooks it needs
3. Register it in scheduler/registry.py
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from models.enums import SchedulingPolicy
from models.job import Job
from models.result import MetricsReport, QueueEntry, TickTrace
from scheduler.errors import QueueConsistencyError
from scheduler.feed import AdmissionFeed
from scheduler.metrics import MetricsRecorder
from scheduler.queue import JobQueue

logger = logging.getLogger(__name__)


class AbstractScheduler(ABC):

    def __init__(self, feed: AdmissionFeed):
        self.feed = feed
        self.ready = JobQueue()
        self.clock = 0
        self.finished = False
        self.trace: list[TickTrace] = []
        self.current: Optional[Job] = None

        first_arrival = 0
        if not feed.is_exhausted():
            self.current = feed.take_initial()
            first_arrival = self.current.arrival_time
        self.metrics = MetricsRecorder(first_arrival=first_arrival)
        if self.current is not None:
            self.metrics.record_admitted()

    @property
    @abstractmethod
    def policy(self) -> SchedulingPolicy:
        """The policy this engine implements."""
        ...

    # ── Hooks ───────────────────────────────────────────────────

    def on_admit(self, admitted: list[Job]) -> None:
        """Called after jobs moved from the feed to the ready queue."""

    def before_run(self, tick: int) -> None:
        """Called once the running slot is settled, before the job executes."""

    def after_run(self, tick: int, ran: bool, completed: bool) -> None:
        """Called at the end of every tick."""

    # ── Tick loop ───────────────────────────────────────────────

    def advance_clock(self) -> int:
        self.clock += 1
        return self.clock

    def is_terminal(self) -> bool:
        return (
            self.feed.is_exhausted()
            and self.ready.is_empty()
            and (self.current is None or self.current.is_complete())
        )

    def step(self) -> Optional[TickTrace]:
        """Simulate one tick. Returns None once the run is over."""
        if self.finished:
            return None

        tick = self.advance_clock()
        if self.is_terminal():
            self.finished = True
            logger.debug(f"{self.policy.value}: terminal at tick {tick}")
            return None

        admitted = self.feed.admit(tick, self.ready)
        if admitted:
            self.metrics.record_admitted(len(admitted))
            self.on_admit(admitted)

        if self.current is None and not self.ready.is_empty():
            self.current = self.ready.pop_head()

        self.before_run(tick)

        job = self.current
        ran = False
        if job is not None:
            if not job.has_run:
                self.metrics.record_first_run(job, tick)
            if job.has_arrived_before(tick) and not job.is_complete():
                job.run_one_tick()
                ran = True

        event = TickTrace(
            tick=tick,
            running=job.name if ran else None,
            ready=tuple(QueueEntry(queued.name, queued.remaining_time) for queued in self.ready),
        )
        self.trace.append(event)

        completed = False
        if job is not None and job.is_complete() and job.has_arrived_before(tick):
            self.metrics.record_completion(job, tick)
            logger.debug(f"tick {tick}: {job.name} completed")
            self.current = self.ready.pop_head() if not self.ready.is_empty() else None
            completed = True

        self.after_run(tick, ran, completed)

        if logger.isEnabledFor(logging.DEBUG):
            self.check_consistency()
        return event

    def run(self) -> list[TickTrace]:
        while self.step() is not None:
            pass
        return self.trace

    def report(self) -> MetricsReport:
        """Final metrics. The last traced tick is one before the terminal tick."""
        if not self.finished:
            raise RuntimeError("report() called before the simulation finished")
        return self.metrics.report(final_tick=self.clock - 1)

    def check_consistency(self) -> None:
        """Raise QueueConsistencyError if a job is held by more than one place."""
        if self.current is not None and (self.current in self.ready or self.current in self.feed):
            raise QueueConsistencyError(f"running job {self.current.name} is also queued")
        for job in self.ready:
            if job in self.feed:
                raise QueueConsistencyError(f"{job.name} is in both the ready queue and the feed")
