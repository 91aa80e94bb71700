"""
Simulation engine — the entry point into the core.

It takes the raw job list and a policy, and wires the pieces together:

       job list            Admission feed         Policy engine           Result
    ┌────────────┐ sort  ┌────────────────┐     ┌─────────────────┐     ┌──────────┐
    │ Job, Job.. │──────>│ by arrival time│────>│ FIFO/SJF/STCF/RR│────>│ trace +  │
    └────────────┘       └────────────────┘tick │ tick loop       │     │ metrics  │
                                                 └─────────────────┘     └──────────┘

The engine doesn't decide anything itself; the policy engine does. It
only builds the feed, drives the loop to its terminal tick and packages
the result.
"""

import copy
import logging
from typing import Optional, Sequence, Union

from models.enums import SchedulingPolicy
from models.job import Job
from models.result import SimulationResult
from scheduler.feed import AdmissionFeed
from scheduler.metrics import job_outcomes
from scheduler.registry import available_policies, create_scheduler, resolve_policy

logger = logging.getLogger(__name__)


class SimulationEngine:

    def __init__(
        self,
        jobs: Sequence[Job],
        policy: Union[SchedulingPolicy, str],
        time_quantum: Optional[int] = None,
    ):
        self.policy = resolve_policy(policy)
        self.jobs = list(jobs)
        kwargs = {}
        if self.policy == SchedulingPolicy.RR and time_quantum is not None:
            kwargs["time_quantum"] = time_quantum
        self.scheduler = create_scheduler(self.policy, AdmissionFeed(self.jobs), **kwargs)

    def run(self) -> SimulationResult:
        logger.info(f"Simulating {len(self.jobs)} jobs under {self.policy.value}")
        trace = self.scheduler.run()
        metrics = self.scheduler.report()
        logger.info(
            f"{self.policy.value} finished at tick {metrics.final_tick}: "
            f"throughput={metrics.throughput:.3f} "
            f"turnaround={metrics.avg_turnaround:.3f} response={metrics.avg_response:.3f}"
        )
        return SimulationResult(
            policy=self.policy,
            metrics=metrics,
            trace=list(trace),
            jobs=job_outcomes(self.jobs),
        )


def run_simulation(
    jobs: Sequence[Job],
    policy: Union[SchedulingPolicy, str],
    time_quantum: Optional[int] = None,
) -> SimulationResult:
    """Run one policy over `jobs`. The Job objects are consumed (mutated) by the run."""
    return SimulationEngine(jobs, policy, time_quantum=time_quantum).run()


def compare_policies(
    jobs: Sequence[Job],
    policies: Optional[Sequence[Union[SchedulingPolicy, str]]] = None,
    time_quantum: Optional[int] = None,
) -> list[SimulationResult]:
    """
    Run several policies over the same workload.

    Each run gets its own deep copy of `jobs`, so the caller's jobs stay
    untouched and every policy starts from identical state.
    """
    if not policies:
        policies = available_policies()
    return [
        run_simulation(copy.deepcopy(list(jobs)), policy, time_quantum=time_quantum)
        for policy in policies
    ]
