"""Boundary: WorkWeek maps 1-based deadlines and day labels to 0-based slot indices."""

from __future__ import annotations

from dataclasses import dataclass


def latest_slot_index(deadline: int, slot_count: int) -> int:
    """Last 0-based slot a job may occupy: clamp(deadline, slot_count) - 1.

    Returns -1 when the deadline is below 1 (no slot is eligible).
    """
    if deadline < 1:
        return -1
    return min(deadline, slot_count) - 1


@dataclass(frozen=True)
class WorkWeek:
    """Named sequence of periods. Immutable.

    Deadlines and day numbers are 1-based for people, slot indices are
    0-based for the engine. The conversion lives here and nowhere else.
    """

    labels: tuple[str, ...]

    @property
    def slot_count(self) -> int:
        return len(self.labels)

    def label(self, index: int) -> str:
        """Display label of a 0-based slot index.

        Indices past the named days fall back to "Slot N" (1-based).
        Raises IndexError for negative indices.
        """
        if index < 0:
            raise IndexError(f"slot index must be >= 0, got {index}")
        if index < len(self.labels):
            return self.labels[index]
        return f"Slot {index + 1}"

    def latest_slot(self, deadline: int) -> int:
        """latest_slot_index() against this week's slot count."""
        return latest_slot_index(deadline, self.slot_count)


WORK_WEEK = WorkWeek(("Monday", "Tuesday", "Wednesday", "Thursday", "Friday"))
DEFAULT_SLOT_COUNT = WORK_WEEK.slot_count
