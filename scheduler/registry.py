"""
Scheduler factory — maps policy names to policy engine classes.

One place knows how to create every policy engine; callers pass a policy
(enum or name) and the admission feed.
"""

from typing import Union

from models.enums import SchedulingPolicy
from scheduler.base import AbstractScheduler
from scheduler.errors import UnknownPolicyError
from scheduler.feed import AdmissionFeed
from scheduler.fifo import FIFOScheduler
from scheduler.round_robin import RoundRobinScheduler
from scheduler.sjf import SJFScheduler
from scheduler.stcf import STCFScheduler


_REGISTRY: dict[SchedulingPolicy, type[AbstractScheduler]] = {
    SchedulingPolicy.FIFO: FIFOScheduler,
    SchedulingPolicy.SJF: SJFScheduler,
    SchedulingPolicy.STCF: STCFScheduler,
    SchedulingPolicy.RR: RoundRobinScheduler,
}


def resolve_policy(policy: Union[SchedulingPolicy, str]) -> SchedulingPolicy:
    """Turn a policy token into the enum. Raises UnknownPolicyError if unknown."""
    if isinstance(policy, SchedulingPolicy):
        return policy
    try:
        return SchedulingPolicy.parse(policy)
    except ValueError:
        raise UnknownPolicyError(policy) from None


def create_scheduler(
    policy: Union[SchedulingPolicy, str], feed: AdmissionFeed, **kwargs
) -> AbstractScheduler:
    """
    Create a policy engine bound to `feed`.

    For Round Robin, you can pass time_quantum as a kwarg:
        create_scheduler(SchedulingPolicy.RR, feed, time_quantum=2)

    For all others, no kwargs needed.
    """
    policy = resolve_policy(policy)
    cls = _REGISTRY[policy]

    if policy == SchedulingPolicy.RR:
        return cls(feed, **kwargs)
    return cls(feed)


def available_policies() -> list[SchedulingPolicy]:
    return list(_REGISTRY)
