"""
Job record — one schedulable unit of work inside a simulation.

A Job is created once from input and lives for the whole run. At any
moment it sits in exactly one place:

    Admission feed  ──admit──>  Ready queue  ──dispatch──>  Running slot
                                     ^                           │
                                     └──── preempt / rotate ─────┘

Only the running job's remaining_time changes, one unit per executed tick.
arrival_time never changes after construction.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Job:
    pid: int
    name: str
    remaining_time: int        # work units left, at least 1 on creation; 0 means finished
    arrival_time: int          # tick at which the job was submitted
    has_run: bool = False      # flips the first time the job holds the CPU
    first_run_tick: Optional[int] = None
    completion_tick: Optional[int] = None
    burst_time: int = field(init=False)

    def __post_init__(self) -> None:
        if self.remaining_time < 1:
            raise ValueError(f"Job {self.name}: remaining_time must be at least 1")
        if self.arrival_time < 0:
            raise ValueError(f"Job {self.name}: arrival_time cannot be negative")
        self.burst_time = self.remaining_time

    def has_arrived_before(self, tick: int) -> bool:
        """A job may execute on `tick` only if it arrived strictly earlier."""
        return self.arrival_time < tick

    def mark_first_run(self, tick: int) -> int:
        """
        Record the first time this job holds the CPU.

        Returns the response time contribution, floored at zero (the initial
        job can be marked on an idle tick before it has arrived).
        """
        self.has_run = True
        self.first_run_tick = tick
        return max(0, tick - self.arrival_time)

    def run_one_tick(self) -> None:
        if self.remaining_time <= 0:
            raise ValueError(f"Job {self.name} has no work left to run")
        self.remaining_time -= 1

    def is_complete(self) -> bool:
        return self.remaining_time == 0

    def __repr__(self) -> str:
        return f"Job({self.name}, pid={self.pid}, left={self.remaining_time}, arrival={self.arrival_time})"
