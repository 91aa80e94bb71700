"""
Workload reader — turns the text input format into Job records.

Input is a stream of whitespace-separated tokens:

    3
    FIFO
    A:1:4:0
    B:2:2:1
    C:3:1:5

- the job count N
- the policy name (FIFO, SJF, STCF or RR, any case)
- N job descriptors, name:pid:remaining:arrival (remaining is at least 1)

Anything malformed fails before a simulation starts: a WorkloadFormatError
for bad counts, missing/extra fields or bad numbers, an UnknownPolicyError
for a policy that doesn't exist.
"""

from dataclasses import dataclass
from typing import Optional, TextIO

from config.settings import settings
from models.enums import SchedulingPolicy
from models.job import Job
from scheduler.registry import resolve_policy

_FIELDS = ("pname", "pid", "duration", "arrival time")


class WorkloadFormatError(ValueError):
    """The workload text is malformed or incomplete."""


@dataclass
class Workload:
    policy: SchedulingPolicy
    jobs: list[Job]


def _parse_number(token: str, field_name: str, line: str, minimum: int = 0) -> int:
    try:
        value = int(token)
    except ValueError:
        raise WorkloadFormatError(f"Expecting integer {field_name} in '{line}', got '{token}'") from None
    if value < 0:
        raise WorkloadFormatError(f"{field_name} cannot be negative in '{line}'")
    if value < minimum:
        raise WorkloadFormatError(f"{field_name} must be at least {minimum} in '{line}'")
    return value


def parse_job_line(line: str, delimiter: Optional[str] = None) -> Job:
    """Parse one `name:pid:remaining:arrival` descriptor."""
    delimiter = delimiter or settings.JOB_FIELD_DELIMITER
    stripped = line.strip()
    tokens = [token for token in stripped.split(delimiter) if token]

    if len(tokens) < len(_FIELDS):
        raise WorkloadFormatError(f"Expecting token {_FIELDS[len(tokens)]} in '{stripped}'")
    if len(tokens) > len(_FIELDS):
        raise WorkloadFormatError(f"Unexpected trailing field '{tokens[len(_FIELDS)]}' in '{stripped}'")

    name, pid, duration, arrival = tokens
    return Job(
        pid=_parse_number(pid, "pid", stripped),
        name=name,
        remaining_time=_parse_number(duration, "duration", stripped, minimum=1),
        arrival_time=_parse_number(arrival, "arrival time", stripped),
    )


def parse_workload(text: str, delimiter: Optional[str] = None) -> Workload:
    tokens = text.split()
    if not tokens:
        raise WorkloadFormatError("Empty input: expecting the number of jobs")

    try:
        count = int(tokens[0])
    except ValueError:
        raise WorkloadFormatError(f"Expecting the number of jobs, got '{tokens[0]}'") from None
    if count < 0:
        raise WorkloadFormatError("The number of jobs cannot be negative")

    if len(tokens) < 2:
        raise WorkloadFormatError("Expecting a scheduling policy after the job count")
    policy = resolve_policy(tokens[1])

    descriptors = tokens[2:]
    if len(descriptors) < count:
        raise WorkloadFormatError(f"Expecting {count} jobs, got {len(descriptors)}")
    if len(descriptors) > count:
        raise WorkloadFormatError(f"Unexpected input after {count} jobs: '{descriptors[count]}'")

    jobs = [parse_job_line(descriptor, delimiter) for descriptor in descriptors]
    return Workload(policy=policy, jobs=jobs)


def read_workload(stream: TextIO, delimiter: Optional[str] = None) -> Workload:
    return parse_workload(stream.read(), delimiter)
