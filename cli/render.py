"""
Text rendering of simulation results.

Trace lines look like `<tick>:<job or idle>:<ready queue or empty>:`
where every queued job is written as `name(remaining),`:

    1:A:empty:
    2:A:B(2),:
    5:idle:empty:

followed by the three metric lines, each to 3 decimal places.
"""

from typing import Iterable

from models.result import JobOutcome, MetricsReport, TickTrace


def format_tick(event: TickTrace) -> str:
    running = event.running if event.running is not None else "idle"
    if event.ready:
        queue = "".join(f"{entry.name}({entry.remaining_time})," for entry in event.ready)
    else:
        queue = "empty"
    return f"{event.tick}:{running}:{queue}:"


def format_trace(trace: Iterable[TickTrace]) -> list[str]:
    return [format_tick(event) for event in trace]


def format_metrics(metrics: MetricsReport) -> list[str]:
    return [
        f"Throughput = {metrics.throughput:.3f}",
        f"Average turnaround time = {metrics.avg_turnaround:.3f}",
        f"Average response time = {metrics.avg_response:.3f}",
    ]


def _cell(value) -> str:
    return "-" if value is None else str(value)


def format_job_table(outcomes: Iterable[JobOutcome]) -> list[str]:
    """Per-job summary table (printed with --summary)."""
    row = "{:<10} {:>5} {:>8} {:>6} {:>10} {:>10} {:>11} {:>9}"
    lines = [
        row.format("Job", "PID", "Arrival", "Burst", "FirstRun", "Complete", "Turnaround", "Response"),
        "-" * 76,
    ]
    for job in outcomes:
        lines.append(row.format(
            job.name,
            job.pid,
            job.arrival_time,
            job.burst_time,
            _cell(job.first_run_tick),
            _cell(job.completion_tick),
            _cell(job.turnaround_time),
            _cell(job.response_time),
        ))
    return lines
