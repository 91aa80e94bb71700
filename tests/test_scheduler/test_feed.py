"""
Tests for the admission feed.

The feed releases a job only on a tick strictly after its arrival time.
"""

from scheduler.feed import AdmissionFeed
from scheduler.queue import JobQueue


def test_feed_is_sorted_by_arrival(make_job):
    feed = AdmissionFeed([make_job("c", 1, 5), make_job("a", 1, 0), make_job("b", 1, 2)])

    assert feed.take_initial().name == "a"
    assert feed.next_arrival() == 2
    assert len(feed) == 2


def test_equal_arrivals_keep_input_order(make_job):
    feed = AdmissionFeed([make_job("first", 3, 1), make_job("second", 1, 1), make_job("zero", 2, 0)])
    ready = JobQueue()

    assert feed.take_initial().name == "zero"
    feed.admit(2, ready)
    assert [job.name for job in ready] == ["first", "second"]


def test_job_is_not_admitted_on_its_arrival_tick(make_job):
    feed = AdmissionFeed([make_job("a", 1, 3)])
    ready = JobQueue()

    assert feed.admit(3, ready) == []
    assert ready.is_empty()

    admitted = feed.admit(4, ready)
    assert [job.name for job in admitted] == ["a"]
    assert feed.is_exhausted()


def test_admit_moves_every_eligible_job(make_job):
    feed = AdmissionFeed([make_job("a", 1, 0), make_job("b", 1, 1), make_job("c", 1, 2), make_job("d", 1, 9)])
    ready = JobQueue()

    admitted = feed.admit(3, ready)

    assert [job.name for job in admitted] == ["a", "b", "c"]
    assert [job.name for job in ready] == ["a", "b", "c"]
    assert feed.next_arrival() == 9


def test_admitted_job_leaves_the_feed(make_job):
    job = make_job("a", 1, 0)
    feed = AdmissionFeed([job])
    ready = JobQueue()
    feed.admit(1, ready)

    assert job not in feed
    assert job in ready


def test_empty_feed():
    feed = AdmissionFeed([])

    assert feed.is_exhausted()
    assert feed.next_arrival() is None
    assert feed.admit(10, JobQueue()) == []
