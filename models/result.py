"""
Records produced by a simulation run.

These are plain dataclasses, not API schemas. The API layer converts them
with pydantic's from_attributes, the CLI renders them as text.

- QueueEntry: one waiting job as shown in a trace line
- TickTrace: what happened on one tick
- MetricsReport: the final throughput / turnaround / response figures
- JobOutcome: per-job breakdown of the same figures
- SimulationResult: everything above for one policy run
"""

from dataclasses import dataclass, field
from typing import Optional

from models.enums import SchedulingPolicy


@dataclass(frozen=True)
class QueueEntry:
    name: str
    remaining_time: int


@dataclass(frozen=True)
class TickTrace:
    tick: int
    running: Optional[str]           # None when the CPU was idle this tick
    ready: tuple[QueueEntry, ...] = ()

    @property
    def idle(self) -> bool:
        return self.running is None


@dataclass(frozen=True)
class MetricsReport:
    num_processes: int
    first_arrival: int
    final_tick: int
    turnaround_total: int
    response_total: int
    throughput: float
    avg_turnaround: float
    avg_response: float


@dataclass(frozen=True)
class JobOutcome:
    name: str
    pid: int
    arrival_time: int
    burst_time: int
    first_run_tick: Optional[int]
    completion_tick: Optional[int]
    turnaround_time: Optional[int]
    response_time: Optional[int]


@dataclass
class SimulationResult:
    policy: SchedulingPolicy
    metrics: MetricsReport
    trace: list[TickTrace] = field(default_factory=list)
    jobs: list[JobOutcome] = field(default_factory=list)
