"""job-sequencing: Revenue-maximizing assignment of deadline-bound jobs to fixed slots."""

from job_sequencing.loaders import load_jobs_json, load_store_json
from job_sequencing.schema import ValidationPolicy, validate_job, validate_job_record
from job_sequencing.sequencing import schedule, schedule_store
from job_sequencing.store import InMemoryJobStore
from job_sequencing.types import (
    AssignedSlot,
    EmptySlot,
    InvalidConfigurationError,
    InvalidJobError,
    Job,
    ScheduleResult,
    Slot,
)
from job_sequencing.week import DEFAULT_SLOT_COUNT, WORK_WEEK, WorkWeek, latest_slot_index

__all__ = [
    "AssignedSlot",
    "DEFAULT_SLOT_COUNT",
    "EmptySlot",
    "InMemoryJobStore",
    "InvalidConfigurationError",
    "InvalidJobError",
    "Job",
    "ScheduleResult",
    "Slot",
    "ValidationPolicy",
    "WORK_WEEK",
    "WorkWeek",
    "latest_slot_index",
    "load_jobs_json",
    "load_store_json",
    "schedule",
    "schedule_store",
    "validate_job",
    "validate_job_record",
]
