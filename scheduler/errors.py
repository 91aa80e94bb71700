"""
Exceptions raised by the simulation core.

QueueConsistencyError means an internal invariant broke (a job held by two
containers, a pop from an empty queue). Nothing in the core catches it; a
run that raises it is aborted.
"""


class SchedulerError(Exception):
    """Base class for all simulator errors."""


class QueueConsistencyError(SchedulerError):
    """A job queue or the running slot is in an impossible state."""


class UnknownPolicyError(SchedulerError, ValueError):
    """The requested scheduling policy does not exist."""

    def __init__(self, policy: str):
        self.policy = policy
        super().__init__(f"Unknown scheduling policy: '{policy}'")
