"""
Tests for the workload reader.

Malformed input must fail before any simulation runs.
"""

import io

import pytest

from models.enums import SchedulingPolicy
from scheduler.errors import UnknownPolicyError
from workload.parser import WorkloadFormatError, parse_job_line, parse_workload, read_workload


def test_parse_job_line():
    job = parse_job_line("A:1:4:0\n")

    assert job.name == "A"
    assert job.pid == 1
    assert job.remaining_time == 4
    assert job.arrival_time == 0
    assert not job.has_run


def test_parse_workload():
    workload = parse_workload("2\nFIFO\nA:1:4:0\nB:2:2:1\n")

    assert workload.policy == SchedulingPolicy.FIFO
    assert [job.name for job in workload.jobs] == ["A", "B"]


def test_policy_is_case_insensitive():
    assert parse_workload("1 rr A:1:1:0").policy == SchedulingPolicy.RR


def test_read_workload_from_stream():
    workload = read_workload(io.StringIO("1\nSTCF\nX:9:3:2\n"))

    assert workload.policy == SchedulingPolicy.STCF
    assert workload.jobs[0].pid == 9


def test_zero_jobs():
    assert parse_workload("0\nSJF\n").jobs == []


@pytest.mark.parametrize("line, message", [
    ("A", "pid"),
    ("A:1", "duration"),
    ("A:1:4", "arrival time"),
])
def test_missing_field(line, message):
    with pytest.raises(WorkloadFormatError, match=message):
        parse_job_line(line)


def test_trailing_field():
    with pytest.raises(WorkloadFormatError, match="trailing"):
        parse_job_line("A:1:4:0:extra")


@pytest.mark.parametrize("line", ["A:x:4:0", "A:1:four:0", "A:1:4:0.5", "A:1:-4:0"])
def test_bad_numbers(line):
    with pytest.raises(WorkloadFormatError):
        parse_job_line(line)


def test_custom_delimiter():
    job = parse_job_line("A,1,4,0", delimiter=",")
    assert job.remaining_time == 4


def test_unknown_policy():
    with pytest.raises(UnknownPolicyError):
        parse_workload("1\nLOTTERY\nA:1:4:0\n")


def test_unknown_policy_is_reported_before_job_errors():
    with pytest.raises(UnknownPolicyError):
        parse_workload("1\nLOTTERY\nnot-a-job\n")


@pytest.mark.parametrize("text", [
    "",
    "two\nFIFO\n",
    "-1\nFIFO\n",
    "1\n",
    "2\nFIFO\nA:1:4:0\n",
    "1\nFIFO\nA:1:4:0\nB:2:2:1\n",
])
def test_malformed_workload(text):
    with pytest.raises(WorkloadFormatError):
        parse_workload(text)


def test_zero_duration_is_rejected():
    """A job with no work would hold the CPU for an idle tick; refuse it up front."""
    with pytest.raises(WorkloadFormatError, match="duration must be at least 1"):
        parse_job_line("Z:2:0:0")


def test_zero_duration_rejects_the_whole_workload():
    with pytest.raises(WorkloadFormatError):
        parse_workload("3\nFIFO\nA:1:2:0\nZ:2:0:0\nB:3:1:0\n")


def test_zero_arrival_is_still_fine():
    assert parse_job_line("A:1:1:0").arrival_time == 0
