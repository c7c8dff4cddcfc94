"""Plain-text tables for schedules and job lists.

render_* functions return the text. show_* functions also print it.
"""

from __future__ import annotations

from typing import Sequence

from job_sequencing.types import AssignedSlot, Job, ScheduleResult, is_finite_number
from job_sequencing.week import WORK_WEEK, WorkWeek

EMPTY_SLOT_TEXT = "-- No job scheduled --"


def _table(headers: list[str], rows: list[list[str]], indent: int = 2) -> list[str]:
    """Format rows under headers with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    lines = [fmt.format(*headers).rstrip(), sep]
    for row in rows:
        lines.append(fmt.format(*row).rstrip())
    return lines


def _money(value: float) -> str:
    if not is_finite_number(value):
        return str(value)
    return f"{value:,.2f}"


def render_schedule(result: ScheduleResult, week: WorkWeek = WORK_WEEK) -> str:
    """One row per slot: day label, job title and revenue, then a TOTAL row."""
    rows: list[list[str]] = []
    for slot in result.slots:
        if isinstance(slot, AssignedSlot):
            rows.append([week.label(slot.index), slot.job.title, _money(slot.job.revenue)])
        else:
            rows.append([week.label(slot.index), EMPTY_SLOT_TEXT, "---"])
    rows.append(["", "TOTAL", _money(result.scheduled_revenue)])

    lines = ["  SCHEDULE", ""]
    lines.extend(_table(["Day", "Job", "Revenue"], rows))
    return "\n".join(lines)


def render_unscheduled(result: ScheduleResult) -> str:
    """Jobs that could not be placed, with the total missed revenue."""
    if not result.unscheduled:
        return "  All jobs have been scheduled."

    rows = [
        [job.job_id, job.title, f"Day {job.deadline}", _money(job.revenue)]
        for job in result.unscheduled
    ]
    lines = ["  NOT SCHEDULED", ""]
    lines.extend(_table(["ID", "Title", "Deadline", "Revenue"], rows))
    lines.append("")
    lines.append(f"  Total missed revenue: {_money(result.unscheduled_revenue)}")
    return "\n".join(lines)


def render_jobs(jobs: Sequence[Job]) -> str:
    """Every job as a row, followed by a count line."""
    if not jobs:
        return "  No jobs found."

    rows = [
        [job.job_id, job.title, f"Day {job.deadline}", _money(job.revenue)]
        for job in jobs
    ]
    lines = _table(["ID", "Title", "Deadline", "Revenue"], rows)
    lines.append("")
    lines.append(f"  Total jobs: {len(jobs)}")
    return "\n".join(lines)


def show_schedule(result: ScheduleResult, week: WorkWeek = WORK_WEEK) -> str:
    """Print the schedule and the unscheduled list. Returns the printed text."""
    text = render_schedule(result, week) + "\n\n" + render_unscheduled(result)
    print(text)
    return text


def show_jobs(jobs: Sequence[Job]) -> str:
    """Print the job table. Returns the printed text."""
    text = render_jobs(jobs)
    print(text)
    return text
