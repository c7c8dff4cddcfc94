#!/usr/bin/env python
"""Visual verification report for job-sequencing.

Run:  python scripts/verify.py

Produces a formatted report showing:
  1. The sample job list (data/fixtures/jobs.json) and its weekly schedule
  2. Every fixture scenario: inputs, expected vs actual slots, revenue totals
  3. A store walk-through: adding jobs with generated ids, then scheduling
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from job_sequencing.loaders import load_store_json
from job_sequencing.report import render_jobs, show_schedule
from job_sequencing.sequencing import schedule, schedule_store
from job_sequencing.store import InMemoryJobStore
from job_sequencing.types import AssignedSlot, InvalidJobError, Job


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def _slot_ids(result) -> list:
    return [s.job.job_id if isinstance(s, AssignedSlot) else None for s in result.slots]


# ---------------------------------------------------------------------------
# Section 1: Sample week
# ---------------------------------------------------------------------------
def section_sample_week():
    banner("SAMPLE WEEK")

    store = load_store_json(FIXTURES / "jobs.json")
    heading("Jobs")
    print(render_jobs(store.list_jobs()))

    heading("Schedule")
    show_schedule(schedule_store(store))


# ---------------------------------------------------------------------------
# Section 2: Scenarios
# ---------------------------------------------------------------------------
def section_scenarios() -> int:
    banner("SCENARIOS")

    data = _load(SCENARIOS / "sequencing.json")
    failures = 0
    for case in data["schedule"]:
        heading(f"{case['id']}: {case['description']}")
        jobs = [
            Job(r["id"], r["title"], r["deadline"], float(r["revenue"]))
            for r in case["jobs"]
        ]
        result = schedule(jobs, case["slot_count"])

        actual_slots = _slot_ids(result)
        actual_unscheduled = [j.job_id for j in result.unscheduled]
        ok = (
            actual_slots == case["expected_slots"]
            and actual_unscheduled == case["expected_unscheduled"]
        )
        failures += 0 if ok else 1

        print(f"    Slots:        expected {case['expected_slots']}")
        print(f"                  actual   {actual_slots}")
        print(f"    Unscheduled:  expected {case['expected_unscheduled']}")
        print(f"                  actual   {actual_unscheduled}")
        print(f"    Revenue:      captured {result.scheduled_revenue:,.2f}, "
              f"missed {result.unscheduled_revenue:,.2f}")
        print(f"    Result:       {'OK' if ok else 'MISMATCH'}")

    return failures


# ---------------------------------------------------------------------------
# Section 3: Store walk-through
# ---------------------------------------------------------------------------
def section_store():
    banner("STORE WALK-THROUGH")

    store = InMemoryJobStore()
    entries = [
        ("Website redesign", 2, 40000),
        ("API hardening", 1, 25000),
        ("", 3, 1000),
        ("Load testing", 9, 18000),
        ("Data cleanup", 1, 30000),
    ]

    heading("Adding jobs")
    for title, deadline, revenue in entries:
        try:
            job = store.add_job(title, deadline, revenue)
        except InvalidJobError as e:
            print(f"    rejected  {e}")
        else:
            print(f"    added     {job.job_id}  {job.title}")

    heading("Schedule")
    show_schedule(schedule_store(store))


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    banner("JOB-SEQUENCING   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_sample_week()
    failures = section_scenarios()
    section_store()

    banner("END OF REPORT")
    print()
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
