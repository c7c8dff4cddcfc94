"""The Scheduler: deadline-constrained greedy job sequencing.

Jobs are taken most valuable first. Each one goes into the latest free slot
inside its own deadline window, which leaves earlier slots open for the
tighter-deadline jobs that come later in the order. For unit-length jobs this
yields the maximum total revenue any deadline-respecting assignment can reach.

The module is stateless: every call rebuilds the schedule from the job list it
is given and never mutates or keeps that list.
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from job_sequencing.schema import ValidationPolicy, structural_errors, validate_job
from job_sequencing.types import (
    AssignedSlot,
    EmptySlot,
    InvalidConfigurationError,
    InvalidJobError,
    Job,
    ScheduleResult,
    Slot,
)
from job_sequencing.week import DEFAULT_SLOT_COUNT, latest_slot_index

logger = logging.getLogger(__name__)


class JobSource(Protocol):
    """Anything that can hand out a read-only snapshot of jobs."""

    def list_jobs(self) -> list[Job]: ...


def _check_slot_count(slot_count: object) -> None:
    if not isinstance(slot_count, int) or isinstance(slot_count, bool):
        raise InvalidConfigurationError(slot_count, "slot_count must be an integer")
    if slot_count < 1:
        raise InvalidConfigurationError(slot_count, "slot_count must be >= 1")


def _screen(
    jobs: Iterable[Job],
    policy: ValidationPolicy,
) -> tuple[list[Job], list[Job]]:
    """Split jobs into (eligible, excluded), both in input order.

    Raises InvalidJobError under STRICT, and under any policy for jobs whose
    deadline or revenue cannot be ordered.
    """
    eligible: list[Job] = []
    excluded: list[Job] = []
    seen_ids: set[str] = set()

    for job in jobs:
        if policy is ValidationPolicy.PERMISSIVE:
            errors = structural_errors(job)
            if errors:
                raise InvalidJobError(job.job_id, errors)
        else:
            errors = validate_job(job)
            if not errors and job.job_id in seen_ids:
                errors.append(f"duplicate job_id {job.job_id!r}")
            if errors:
                if policy is ValidationPolicy.STRICT:
                    raise InvalidJobError(job.job_id, errors)
                logger.warning(
                    "Skipping invalid job %r: %s", job.job_id, "; ".join(errors)
                )
                excluded.append(job)
                continue
            seen_ids.add(job.job_id)

        if job.deadline < 1:
            logger.debug("Job %r is ineligible (deadline=%d)", job.job_id, job.deadline)
            excluded.append(job)
            continue
        eligible.append(job)

    return eligible, excluded


def _find_free_slot(free: bytearray, latest: int) -> int | None:
    """Walk backward from latest to 0 and return the first free index."""
    for index in range(latest, -1, -1):
        if free[index]:
            return index
    return None


def schedule(
    jobs: Iterable[Job],
    slot_count: int = DEFAULT_SLOT_COUNT,
    policy: ValidationPolicy = ValidationPolicy.PERMISSIVE,
) -> ScheduleResult:
    """Assign jobs to slot_count unit slots, maximizing captured revenue.

    Jobs are ranked by revenue, highest first. Python's sort is stable, so
    equal-revenue jobs keep their input order. Each job is placed in the
    latest free slot no later than min(deadline, slot_count); jobs with no
    such slot are unscheduled.

    Args:
        jobs: Jobs to place. Not mutated. May be empty.
        slot_count: Number of periods, >= 1. Defaults to a five-day week.
        policy: What to do with jobs that fail validation.

    Returns:
        ScheduleResult with slot_count slots in index order. unscheduled lists
        jobs excluded before placement (input order) followed by jobs that
        found no free slot (revenue-descending order).

    Raises:
        InvalidConfigurationError: If slot_count is not an integer >= 1.
        InvalidJobError: Under STRICT for any invalid or duplicated job, and
            under every policy for a non-integer deadline or a non-finite
            revenue.
    """
    _check_slot_count(slot_count)
    eligible, excluded = _screen(jobs, policy)

    ranked = sorted(eligible, key=lambda job: job.revenue, reverse=True)

    # free[i] = 1 → slot i is still open
    free = bytearray(b"\x01") * slot_count
    placed: dict[int, Job] = {}
    unscheduled: list[Job] = list(excluded)

    for job in ranked:
        latest = latest_slot_index(job.deadline, slot_count)
        index = _find_free_slot(free, latest)
        if index is None:
            logger.debug("Job %r unscheduled: slots 0..%d taken", job.job_id, latest)
            unscheduled.append(job)
            continue
        free[index] = 0
        placed[index] = job
        logger.debug("Job %r placed in slot %d (latest %d)", job.job_id, index, latest)

    slots: tuple[Slot, ...] = tuple(
        AssignedSlot(i, placed[i]) if i in placed else EmptySlot(i)
        for i in range(slot_count)
    )
    result = ScheduleResult(slots=slots, unscheduled=tuple(unscheduled))

    logger.info(
        "Scheduled %d of %d jobs into %d slots (captured %.2f, missed %.2f)",
        len(placed),
        len(eligible) + len(excluded),
        slot_count,
        result.scheduled_revenue,
        result.unscheduled_revenue,
    )
    return result


def schedule_store(
    store: JobSource,
    slot_count: int = DEFAULT_SLOT_COUNT,
    policy: ValidationPolicy = ValidationPolicy.PERMISSIVE,
) -> ScheduleResult:
    """Schedule one snapshot of the jobs held by an explicit store."""
    return schedule(store.list_jobs(), slot_count=slot_count, policy=policy)
