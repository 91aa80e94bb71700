"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("FIFO", not "SchedulingPolicy.FIFO")
- They work as FastAPI request fields and CLI choices
- Typos become immediate errors instead of silent bugs
"""

import enum
from typing import Optional


class SchedulingPolicy(str, enum.Enum):
    FIFO = "FIFO"    # First In First Out: pure arrival order
    SJF = "SJF"      # Shortest Job First: non-preemptive, shortest remaining at admission
    STCF = "STCF"    # Shortest Time-to-Completion First: preemptive every tick
    RR = "RR"        # Round Robin: rotate after every quantum

    @classmethod
    def _missing_(cls, value) -> Optional["SchedulingPolicy"]:
        # "rr", " Stcf " and friends
        if isinstance(value, str):
            normalized = value.strip().upper()
            for member in cls:
                if member.value == normalized:
                    return member
        return None

    @classmethod
    def parse(cls, token: str) -> "SchedulingPolicy":
        """Look up a policy by name, ignoring case. Raises ValueError if unknown."""
        return cls(token)
