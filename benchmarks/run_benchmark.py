"""
CLI entry point for running policy benchmarks.

Usage:
    python -m benchmarks.run_benchmark                          # all policies, 100 jobs
    python -m benchmarks.run_benchmark --policy STCF            # single policy
    python -m benchmarks.run_benchmark --num-jobs 500 --seed 7  # bigger workload
    python -m benchmarks.run_benchmark --base-url http://localhost:8000   # via the API
"""

import argparse
import json
import logging

from benchmarks.throughput import PolicyBenchmark
from config.settings import settings
from models.enums import SchedulingPolicy


def main(argv=None):
    parser = argparse.ArgumentParser(description="Scheduling policy benchmark")
    parser.add_argument(
        "--num-jobs", type=int, default=100,
        help="Number of jobs to generate (default: 100)",
    )
    parser.add_argument(
        "--seed", type=int, default=42,
        help="Random seed for the workload (default: 42)",
    )
    parser.add_argument(
        "--policy", type=str, default="all",
        choices=[policy.value for policy in SchedulingPolicy] + ["all"],
        help="Which policy to benchmark (default: all)",
    )
    parser.add_argument(
        "--quantum", type=int, default=None,
        help="Round Robin time quantum in ticks",
    )
    parser.add_argument(
        "--base-url", type=str, default=None,
        help="Run against a live API instead of in-process (e.g. http://localhost:8000)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    print(f"=== Scheduling Policy Benchmark ===")
    print(f"Jobs: {args.num_jobs} | Seed: {args.seed} | Policy: {args.policy}\n")

    bench = PolicyBenchmark(
        num_jobs=args.num_jobs,
        seed=args.seed,
        time_quantum=args.quantum,
        base_url=args.base_url,
    )
    try:
        if args.policy == "all":
            results = bench.run_all_policies()
        else:
            results = [bench.run(SchedulingPolicy(args.policy))]
    finally:
        bench.close()

    print("\n=== RESULTS ===")
    print(json.dumps(results, indent=2))

    # Summary table
    print("\n{:<8} {:>8} {:>12} {:>12} {:>12}".format(
        "Policy", "Ticks", "Throughput", "Turnaround", "Response"
    ))
    print("-" * 56)
    for r in results:
        print("{:<8} {:>8} {:>12.3f} {:>12.3f} {:>12.3f}".format(
            r["policy"], r["final_tick"], r["throughput"], r["avg_turnaround"], r["avg_response"]
        ))


if __name__ == "__main__":
    main()
