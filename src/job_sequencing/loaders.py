"""Data loading utilities for job lists and stores."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from job_sequencing.schema import validate_job_record
from job_sequencing.store import InMemoryJobStore
from job_sequencing.types import Job
from job_sequencing.week import DEFAULT_SLOT_COUNT

logger = logging.getLogger(__name__)


def load_jobs_json(path: str | Path) -> list[Job]:
    """Load a list of jobs from a JSON fixture file.

    The JSON file holds either a bare list or an object with a "jobs" key:
    {
        "jobs": [
            {"id": "PRJ001", "title": "...", "deadline": 2, "revenue": 100.0},
            ...
        ]
    }

    Jobs keep file order. Raises ValueError if validation fails.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    if isinstance(data, dict) and "jobs" not in data:
        raise ValueError(f"Validation errors in {path.name}:\n  - missing 'jobs'")

    records = data["jobs"] if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise ValueError(f"Validation errors in {path.name}:\n  - 'jobs' must be a list")

    errors: list[str] = []
    for i, record in enumerate(records):
        errors.extend(f"job {i}: {e}" for e in validate_job_record(record))
    if errors:
        raise ValueError(
            f"Validation errors in {path.name}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )

    jobs = [
        Job(
            job_id=r["id"],
            title=r["title"],
            deadline=r["deadline"],
            revenue=float(r["revenue"]),
        )
        for r in records
    ]
    logger.debug("Loaded %d jobs from %s", len(jobs), path)
    return jobs


def load_store_json(
    path: str | Path,
    max_deadline: int = DEFAULT_SLOT_COUNT,
) -> InMemoryJobStore:
    """Load a JSON job file into a fresh InMemoryJobStore.

    Raises ValueError on validation errors or duplicate ids.
    """
    store = InMemoryJobStore(max_deadline=max_deadline)
    for job in load_jobs_json(path):
        store.insert(job)
    return store
