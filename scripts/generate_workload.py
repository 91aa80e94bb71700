"""
Workload script — writes a random workload in the CLI input format.

Usage:
    python -m scripts.generate_workload --count 5 --policy RR > workload.txt
    python -m scripts.generate_workload --count 20 --seed 7 --output jobs.txt

Then feed it to the simulator:
    python -m cli.main --input workload.txt
"""

import argparse
import sys

from models.enums import SchedulingPolicy
from workload.generator import format_workload, random_workload


def generate(argv=None) -> str:
    parser = argparse.ArgumentParser(description="Generate a random scheduling workload")
    parser.add_argument("--count", type=int, default=5, help="Number of jobs (default: 5)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--max-burst", type=int, default=10, help="Largest job length in ticks")
    parser.add_argument("--max-arrival", type=int, default=20, help="Latest arrival tick")
    parser.add_argument(
        "--policy", type=str, default=SchedulingPolicy.FIFO.value,
        choices=[policy.value for policy in SchedulingPolicy],
    )
    parser.add_argument("--output", type=str, default=None, help="File to write (default: stdout)")
    args = parser.parse_args(argv)

    jobs = random_workload(
        args.count, seed=args.seed, max_burst=args.max_burst, max_arrival=args.max_arrival
    )
    text = format_workload(SchedulingPolicy(args.policy), jobs)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text)
        print(f"Wrote {len(jobs)} jobs to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(text)
    return text


if __name__ == "__main__":
    generate()
