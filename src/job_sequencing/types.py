"""Shared types: Job, slots, ScheduleResult and the error taxonomy."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union


def is_finite_number(value: object) -> bool:
    """True for an int or float that converts to a finite float.

    Ints too large for a float count as not finite.
    """
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


@dataclass(frozen=True)
class Job:
    """A revenue-generating task that occupies exactly one slot.

    deadline is 1-based: a job with deadline 3 may run in slot 1, 2 or 3.
    Deadlines beyond the slot count are clamped; deadlines below 1 make
    the job ineligible.
    """

    job_id: str
    title: str
    deadline: int
    revenue: float


@dataclass(frozen=True)
class EmptySlot:
    """A period with nothing placed in it."""

    index: int

    @property
    def day(self) -> int:
        """1-based slot number."""
        return self.index + 1

    @property
    def is_empty(self) -> bool:
        return True


@dataclass(frozen=True)
class AssignedSlot:
    """A period holding exactly one job."""

    index: int
    job: Job

    @property
    def day(self) -> int:
        """1-based slot number."""
        return self.index + 1

    @property
    def is_empty(self) -> bool:
        return False


Slot = Union[EmptySlot, AssignedSlot]


@dataclass(frozen=True)
class ScheduleResult:
    """Outcome of one scheduling run. Immutable.

    Invariants:
        - len(slots) == slot_count and slots[i].index == i
        - No job appears in more than one slot
        - An AssignedSlot at index i holds a job with i + 1 <= min(deadline, slot_count)
        - unscheduled is in rejection order
    """

    slots: tuple[Slot, ...]
    unscheduled: tuple[Job, ...]

    @property
    def slot_count(self) -> int:
        return len(self.slots)

    @property
    def scheduled_jobs(self) -> tuple[Job, ...]:
        """Placed jobs in slot order."""
        return tuple(s.job for s in self.slots if isinstance(s, AssignedSlot))

    @property
    def scheduled_revenue(self) -> float:
        """Revenue captured by the placed jobs."""
        return sum(job.revenue for job in self.scheduled_jobs)

    @property
    def unscheduled_revenue(self) -> float:
        """Revenue lost to jobs that could not be placed.

        Revenues that are not finite numbers are left out of the total.
        """
        return sum(
            job.revenue for job in self.unscheduled if is_finite_number(job.revenue)
        )

    def slot_of(self, job_id: str) -> int | None:
        """0-based slot index holding job_id, or None if it was not placed."""
        for s in self.slots:
            if isinstance(s, AssignedSlot) and s.job.job_id == job_id:
                return s.index
        return None


class InvalidConfigurationError(Exception):
    """Raised when the slot count cannot describe a schedule."""

    def __init__(self, slot_count: object, reason: str) -> None:
        self.slot_count = slot_count
        self.reason = reason
        super().__init__(
            f"Invalid configuration: slot_count={slot_count!r} ({reason})"
        )


class InvalidJobError(Exception):
    """Raised when a job fails validation under the active policy."""

    def __init__(self, job_id: object, reasons: list[str]) -> None:
        self.job_id = job_id
        self.reasons = list(reasons)
        super().__init__(
            f"Invalid job {job_id!r}: " + "; ".join(self.reasons)
        )
