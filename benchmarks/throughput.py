"""
Policy benchmark — runs every policy over one generated workload.

How it works:
1. Generate N jobs from a fixed seed (same jobs for every policy)
2. Run each policy, either in-process or against a running API
3. Collect: final tick, throughput, average turnaround, average response

In-process mode calls the simulation engine directly. Remote mode (base_url
set) posts the same jobs to POST /simulations on a running API server.
"""

import copy
import logging
from typing import Optional

import httpx

from models.enums import SchedulingPolicy
from models.job import Job
from scheduler.engine import run_simulation
from workload.generator import random_workload

logger = logging.getLogger(__name__)


class PolicyBenchmark:

    def __init__(
        self,
        num_jobs: int = 100,
        seed: int = 42,
        max_burst: int = 10,
        max_arrival: int = 50,
        time_quantum: Optional[int] = None,
        base_url: Optional[str] = None,
    ):
        self.num_jobs = num_jobs
        self.time_quantum = time_quantum
        self.base_url = base_url
        self.jobs: list[Job] = random_workload(
            num_jobs, seed=seed, max_burst=max_burst, max_arrival=max_arrival
        )
        self.client = httpx.Client(base_url=base_url, timeout=30.0) if base_url else None

    def _run_local(self, policy: SchedulingPolicy) -> dict:
        result = run_simulation(copy.deepcopy(self.jobs), policy, time_quantum=self.time_quantum)
        metrics = result.metrics
        return {
            "final_tick": metrics.final_tick,
            "throughput": metrics.throughput,
            "avg_turnaround": metrics.avg_turnaround,
            "avg_response": metrics.avg_response,
        }

    def _run_remote(self, policy: SchedulingPolicy) -> dict:
        body = {
            "policy": policy.value,
            "jobs": [
                {
                    "name": job.name,
                    "pid": job.pid,
                    "remaining_time": job.remaining_time,
                    "arrival_time": job.arrival_time,
                }
                for job in self.jobs
            ],
        }
        if self.time_quantum is not None:
            body["time_quantum"] = self.time_quantum
        resp = self.client.post("/simulations", json=body)
        resp.raise_for_status()
        metrics = resp.json()["metrics"]
        return {key: metrics[key] for key in ("final_tick", "throughput", "avg_turnaround", "avg_response")}

    def run(self, policy: SchedulingPolicy) -> dict:
        """Run the benchmark for a single policy."""
        metrics = self._run_remote(policy) if self.client else self._run_local(policy)
        return {
            "policy": policy.value,
            "num_jobs": self.num_jobs,
            "final_tick": metrics["final_tick"],
            "throughput": round(metrics["throughput"], 3),
            "avg_turnaround": round(metrics["avg_turnaround"], 3),
            "avg_response": round(metrics["avg_response"], 3),
        }

    def run_all_policies(self) -> list[dict]:
        """Benchmark all 4 policies on the same jobs."""
        results = []
        for policy in SchedulingPolicy:
            logger.info(f"Benchmarking {policy.value}")
            results.append(self.run(policy))
        return results

    def close(self) -> None:
        if self.client is not None:
            self.client.close()
