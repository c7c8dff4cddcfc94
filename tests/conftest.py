"""Shared test fixtures and data loading for job-sequencing.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"
JOBS_FILE = FIXTURES_DIR / "jobs.json"
INVALID_JOBS_FILE = FIXTURES_DIR / "invalid_jobs.json"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def make_job(job_id: str, deadline: int, revenue: float, title: str | None = None):
    """Build a Job; title defaults to the id."""
    from job_sequencing.types import Job

    return Job(job_id=job_id, title=title or job_id, deadline=deadline, revenue=revenue)


def jobs_from_records(records: list[dict]):
    """Build Jobs from scenario records {"id", "title", "deadline", "revenue"}."""
    return [
        make_job(r["id"], r["deadline"], r["revenue"], title=r.get("title"))
        for r in records
    ]


def slot_ids(result) -> list[str | None]:
    """Job id per slot, None for empty slots."""
    from job_sequencing.types import AssignedSlot

    return [
        s.job.job_id if isinstance(s, AssignedSlot) else None
        for s in result.slots
    ]


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def scenario_a_jobs():
    """Four jobs competing for two slots."""
    return [
        make_job("A", 1, 100),
        make_job("B", 2, 10),
        make_job("C", 2, 15),
        make_job("D", 1, 27),
    ]


@pytest.fixture
def store():
    """Empty store with the default PRJ prefix and a five-day week."""
    from job_sequencing.store import InMemoryJobStore

    return InMemoryJobStore()


@pytest.fixture
def sample_store():
    """Store loaded from data/fixtures/jobs.json."""
    from job_sequencing.loaders import load_store_json

    return load_store_json(JOBS_FILE)
