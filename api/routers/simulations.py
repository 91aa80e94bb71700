"""
Simulation endpoints.

POST /simulations         → run one policy over a JSON job list
POST /simulations/text    → same, but the body is the plain-text workload format
POST /simulations/compare → run several policies over the same jobs

Every request runs its own simulation from scratch and returns the result;
nothing is stored between requests.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from api.dependencies import get_settings
from api.schemas.simulation import (
    CompareRequest,
    JobIn,
    JobOutcomeOut,
    MetricsOut,
    PolicySummary,
    SimulationRequest,
    SimulationResponse,
    TickTraceOut,
)
from cli.render import format_trace
from config.settings import Settings
from models.job import Job
from models.result import SimulationResult
from scheduler.engine import compare_policies, run_simulation
from scheduler.errors import UnknownPolicyError
from workload.parser import WorkloadFormatError, parse_workload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/simulations", tags=["simulations"])


def _to_jobs(jobs_in: list[JobIn]) -> list[Job]:
    return [
        Job(
            pid=job.pid,
            name=job.name,
            remaining_time=job.remaining_time,
            arrival_time=job.arrival_time,
        )
        for job in jobs_in
    ]


def _quantum(requested: Optional[int], config: Settings) -> int:
    return requested if requested is not None else config.ROUND_ROBIN_TIME_QUANTUM


def _check_job_limit(count: int, config: Settings) -> None:
    if count > config.MAX_JOBS_PER_REQUEST:
        raise HTTPException(
            status_code=400,
            detail=f"At most {config.MAX_JOBS_PER_REQUEST} jobs per request",
        )


def _to_response(result: SimulationResult) -> SimulationResponse:
    return SimulationResponse(
        policy=result.policy,
        metrics=MetricsOut.model_validate(result.metrics),
        trace=[TickTraceOut.model_validate(event) for event in result.trace],
        trace_lines=format_trace(result.trace),
        jobs=[JobOutcomeOut.model_validate(outcome) for outcome in result.jobs],
    )


@router.post("", response_model=SimulationResponse)
async def create_simulation(
    request: SimulationRequest,
    config: Settings = Depends(get_settings),
) -> SimulationResponse:
    """Run one policy and return its full trace and metrics."""
    _check_job_limit(len(request.jobs), config)
    result = run_simulation(
        _to_jobs(request.jobs),
        request.policy,
        time_quantum=_quantum(request.time_quantum, config),
    )
    return _to_response(result)


@router.post("/text", response_model=SimulationResponse)
async def create_simulation_from_text(
    request: Request,
    config: Settings = Depends(get_settings),
) -> SimulationResponse:
    """
    Run a workload written in the CLI input format:

        2
        FIFO
        A:1:4:0
        B:2:2:1
    """
    body = await request.body()
    try:
        parsed = parse_workload(body.decode("utf-8"), delimiter=config.JOB_FIELD_DELIMITER)
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Workload must be UTF-8 text")
    except (WorkloadFormatError, UnknownPolicyError) as e:
        logger.warning(f"Rejected text workload: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    _check_job_limit(len(parsed.jobs), config)

    result = run_simulation(
        parsed.jobs,
        parsed.policy,
        time_quantum=config.ROUND_ROBIN_TIME_QUANTUM,
    )
    return _to_response(result)


@router.post("/compare", response_model=list[PolicySummary])
async def compare_simulations(
    request: CompareRequest,
    config: Settings = Depends(get_settings),
) -> list[PolicySummary]:
    """Run every requested policy over the same jobs, one summary row each."""
    _check_job_limit(len(request.jobs), config)
    results = compare_policies(
        _to_jobs(request.jobs),
        request.policies,
        time_quantum=_quantum(request.time_quantum, config),
    )
    return [
        PolicySummary(
            policy=result.policy,
            ticks=result.metrics.final_tick,
            throughput=result.metrics.throughput,
            avg_turnaround=result.metrics.avg_turnaround,
            avg_response=result.metrics.avg_response,
        )
        for result in results
    ]
