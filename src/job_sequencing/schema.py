"""Input validation for jobs and raw job records."""

from __future__ import annotations

from enum import Enum

from job_sequencing.types import Job, is_finite_number

_RECORD_KEYS = ("id", "title", "deadline", "revenue")


class ValidationPolicy(Enum):
    """How the scheduler treats jobs that fail validation.

    PERMISSIVE: no validation; negative revenue simply ranks last. Only
        deadlines and revenues that cannot be ordered or placed are rejected.
    STRICT: the first invalid or duplicated job rejects the whole batch.
    SKIP: invalid and duplicated jobs are left unplaced and reported as
        unscheduled.
    """

    PERMISSIVE = "permissive"
    STRICT = "strict"
    SKIP = "skip"


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def structural_errors(job: Job) -> list[str]:
    """Problems that leave a job without a defined place in the ordering.

    Checked under every policy.
    """
    errors: list[str] = []
    if not _is_integer(job.deadline):
        errors.append(f"deadline must be an integer, got {job.deadline!r}")
    if not _is_number(job.revenue):
        errors.append(f"revenue must be a number, got {job.revenue!r}")
    elif not is_finite_number(job.revenue):
        errors.append(f"revenue must be finite, got {job.revenue!r}")
    return errors


def validate_job(job: Job) -> list[str]:
    """Validate one job. Returns list of error messages (empty = valid).

    Checks:
    - job_id and title are non-empty strings
    - deadline is an integer (bool is rejected)
    - revenue is a finite, non-negative number

    A deadline below 1 is not an error: such a job is ineligible and is
    reported as unscheduled.
    """
    errors: list[str] = []

    if not isinstance(job.job_id, str) or not job.job_id.strip():
        errors.append("job_id must be a non-empty string")
    if not isinstance(job.title, str) or not job.title.strip():
        errors.append("title must be a non-empty string")

    errors.extend(structural_errors(job))
    if is_finite_number(job.revenue) and job.revenue < 0:
        errors.append(f"revenue must be >= 0, got {job.revenue!r}")

    return errors


def validate_job_record(record: object) -> list[str]:
    """Validate a raw {"id", "title", "deadline", "revenue"} mapping.

    Returns list of error messages. Used before a Job is built from
    external data.
    """
    if not isinstance(record, dict):
        return [f"expected an object, got {type(record).__name__}"]

    errors: list[str] = []
    missing = [k for k in _RECORD_KEYS if k not in record]
    for key in missing:
        errors.append(f"missing '{key}'")
    if missing:
        return errors

    if not isinstance(record["id"], str) or not record["id"].strip():
        errors.append(f"'id' must be a non-empty string, got {record['id']!r}")
    if not isinstance(record["title"], str) or not record["title"].strip():
        errors.append(
            f"'title' must be a non-empty string, got {record['title']!r}"
        )
    if not _is_integer(record["deadline"]):
        errors.append(
            f"'deadline' must be an integer, got {record['deadline']!r}"
        )
    revenue = record["revenue"]
    if not _is_number(revenue):
        errors.append(f"'revenue' must be a number, got {revenue!r}")
    elif not is_finite_number(revenue) or revenue < 0:
        errors.append(f"'revenue' must be finite and >= 0, got {revenue!r}")

    return errors
