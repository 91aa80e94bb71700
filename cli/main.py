"""
Command-line entry point.

Reads a workload (job count, policy, job descriptors) from stdin or a file,
runs the simulation, and prints one trace line per tick followed by the
metrics report.

To run:
    python -m cli.main < workload.txt
    python -m cli.main --input workload.txt --policy RR --quantum 2 --summary

Installed as the `sched-sim` console script.

Exit status is 1 when the workload is malformed or names an unknown
policy; nothing is simulated in that case. Diagnostics go to stderr
through logging, the trace goes to stdout.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from config.settings import settings
from models.enums import SchedulingPolicy
from scheduler.engine import run_simulation
from scheduler.errors import UnknownPolicyError
from cli.render import format_job_table, format_metrics, format_trace
from workload.parser import WorkloadFormatError, read_workload

logger = logging.getLogger(__name__)


def _policy_argument(token: str) -> SchedulingPolicy:
    try:
        return SchedulingPolicy.parse(token)
    except ValueError:
        choices = ", ".join(policy.value for policy in SchedulingPolicy)
        raise argparse.ArgumentTypeError(f"unknown policy '{token}' (choose from {choices}, any case)") from None


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tick-based CPU scheduling simulator")
    parser.add_argument(
        "--input", type=str, default=None,
        help="Workload file (default: read stdin)",
    )
    parser.add_argument(
        "--policy", type=_policy_argument, default=None,
        help="Override the policy named in the workload (FIFO, SJF, STCF or RR, any case)",
    )
    parser.add_argument(
        "--quantum", type=int, default=None,
        help=f"Round Robin time quantum in ticks (default: {settings.ROUND_ROBIN_TIME_QUANTUM})",
    )
    parser.add_argument(
        "--summary", action="store_true",
        help="Also print a per-job table after the metrics",
    )
    parser.add_argument(
        "--log-level", type=str, default=settings.LOG_LEVEL,
        help=f"Logging level for diagnostics on stderr (default: {settings.LOG_LEVEL})",
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO) -> int:
    try:
        if args.input:
            with open(args.input, encoding="utf-8") as stream:
                workload = read_workload(stream)
        else:
            workload = read_workload(stdin)
    except (WorkloadFormatError, UnknownPolicyError) as e:
        logger.error(f"Error: {e}")
        return 1
    except OSError as e:
        logger.error(f"Error: cannot read workload: {e}")
        return 1

    policy = args.policy if args.policy is not None else workload.policy
    try:
        result = run_simulation(workload.jobs, policy, time_quantum=args.quantum)
    except ValueError as e:
        logger.error(f"Error: {e}")
        return 1

    lines = format_trace(result.trace) + format_metrics(result.metrics)
    if args.summary:
        lines += [""] + format_job_table(result.jobs)
    stdout.write("\n".join(lines) + "\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(run(args, sys.stdin, sys.stdout))


if __name__ == "__main__":
    main()
