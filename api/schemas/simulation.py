"""
Pydantic schemas for the /simulations endpoints.

These are NOT the core's records. They define the HTTP API contract:
- JobIn: one job in a simulation request
- SimulationRequest / CompareRequest: request bodies
- TickTraceOut, MetricsOut, JobOutcomeOut: read straight from the core's
  dataclasses via from_attributes
- SimulationResponse / PolicySummary / PoliciesResponse: response bodies

FastAPI validates incoming data against these automatically.
If someone sends remaining_time=-1, FastAPI returns a 422 error before our code even runs.
"""

from typing import Optional

from pydantic import BaseModel, Field

from config.settings import settings
from models.enums import SchedulingPolicy


class JobIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=64, examples=["A"])
    pid: int = Field(..., ge=0)
    remaining_time: int = Field(..., ge=1, description="Work units the job needs")
    arrival_time: int = Field(default=0, ge=0, description="Tick at which the job arrives")


class SimulationRequest(BaseModel):
    """Request body for POST /simulations."""

    policy: SchedulingPolicy = Field(
        default_factory=lambda: SchedulingPolicy.parse(settings.DEFAULT_SCHEDULING_POLICY),
    )
    time_quantum: Optional[int] = Field(
        default=None,
        ge=1,
        description="Round Robin quantum in ticks (ignored by other policies)",
    )
    jobs: list[JobIn] = Field(..., min_length=1)   # upper bound enforced by the router


class CompareRequest(BaseModel):
    """Request body for POST /simulations/compare."""

    policies: list[SchedulingPolicy] = Field(default_factory=lambda: list(SchedulingPolicy))
    time_quantum: Optional[int] = Field(default=None, ge=1)
    jobs: list[JobIn] = Field(..., min_length=1)   # upper bound enforced by the router


class QueueEntryOut(BaseModel):
    name: str
    remaining_time: int

    model_config = {"from_attributes": True}


class TickTraceOut(BaseModel):
    tick: int
    running: Optional[str] = None   # null when the CPU was idle
    ready: list[QueueEntryOut]

    model_config = {"from_attributes": True}


class MetricsOut(BaseModel):
    num_processes: int
    first_arrival: int
    final_tick: int
    turnaround_total: int
    response_total: int
    throughput: float
    avg_turnaround: float
    avg_response: float

    model_config = {"from_attributes": True}


class JobOutcomeOut(BaseModel):
    name: str
    pid: int
    arrival_time: int
    burst_time: int
    first_run_tick: Optional[int] = None
    completion_tick: Optional[int] = None
    turnaround_time: Optional[int] = None
    response_time: Optional[int] = None

    model_config = {"from_attributes": True}


class SimulationResponse(BaseModel):
    """Response body for POST /simulations and POST /simulations/text."""

    policy: SchedulingPolicy
    metrics: MetricsOut
    trace: list[TickTraceOut]
    trace_lines: list[str]   # the same trace rendered like the CLI prints it
    jobs: list[JobOutcomeOut]


class PolicySummary(BaseModel):
    """One row of POST /simulations/compare."""

    policy: SchedulingPolicy
    ticks: int
    throughput: float
    avg_turnaround: float
    avg_response: float


class PoliciesResponse(BaseModel):
    """Response body for GET /policies."""

    policies: list[SchedulingPolicy]
    default_policy: SchedulingPolicy
    round_robin_time_quantum: int
