"""InMemoryJobStore: the explicit job store handed to whoever calls the scheduler."""

from __future__ import annotations

import logging
import re

from job_sequencing.types import InvalidJobError, Job, is_finite_number
from job_sequencing.week import DEFAULT_SLOT_COUNT

logger = logging.getLogger(__name__)

DEFAULT_ID_PREFIX = "PRJ"


class InMemoryJobStore:
    """Owns job records and generates their identifiers.

    Not thread-safe. The scheduler only ever sees the snapshot returned by
    list_jobs().
    """

    def __init__(
        self,
        id_prefix: str = DEFAULT_ID_PREFIX,
        max_deadline: int = DEFAULT_SLOT_COUNT,
    ) -> None:
        self.id_prefix = id_prefix
        self.max_deadline = max_deadline
        self._jobs: dict[str, Job] = {}
        self._id_pattern = re.compile(rf"^{re.escape(id_prefix)}(\d+)$")

    def __len__(self) -> int:
        return len(self._jobs)

    def has_jobs(self) -> bool:
        return bool(self._jobs)

    def next_job_id(self) -> str:
        """Identifier after the highest numeric suffix in use.

        PRJ001 for an empty store, PRJ008 when PRJ007 is the highest.
        Ids that do not follow the prefix pattern are ignored.
        """
        highest = 0
        for job_id in self._jobs:
            match = self._id_pattern.match(job_id)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"{self.id_prefix}{highest + 1:03d}"

    def insert(self, job: Job) -> None:
        """Store a pre-built job. Raises ValueError on a duplicate id."""
        if job.job_id in self._jobs:
            raise ValueError(f"Duplicate job id: {job.job_id!r}")
        self._jobs[job.job_id] = job

    def add_job(self, title: str, deadline: int, revenue: float) -> Job:
        """Create, store and return a new job with a generated id.

        Title is stripped and must be non-empty, deadline must lie in
        1..max_deadline and revenue must be greater than 0.

        Raises InvalidJobError listing every problem found.
        """
        title = title.strip() if isinstance(title, str) else title
        reasons: list[str] = []
        if not isinstance(title, str) or not title:
            reasons.append("title cannot be empty")
        if (
            not isinstance(deadline, int)
            or isinstance(deadline, bool)
            or not 1 <= deadline <= self.max_deadline
        ):
            reasons.append(f"deadline must be between 1 and {self.max_deadline}")
        if not is_finite_number(revenue):
            reasons.append("revenue must be finite")
        elif revenue <= 0:
            reasons.append("revenue must be greater than 0")

        job_id = self.next_job_id()
        if reasons:
            raise InvalidJobError(job_id, reasons)

        job = Job(job_id=job_id, title=title, deadline=deadline, revenue=float(revenue))
        self._jobs[job_id] = job
        logger.info("Added job %s (%r, deadline %d, revenue %.2f)",
                    job_id, title, deadline, job.revenue)
        return job

    def _id_sort_key(self, job_id: str) -> tuple[int, int, str]:
        match = self._id_pattern.match(job_id)
        if match:
            return (0, int(match.group(1)), job_id)
        return (1, 0, job_id)

    def list_jobs(self) -> list[Job]:
        """Snapshot of all jobs ordered by id.

        Prefixed ids sort by their numeric suffix (PRJ999 before PRJ1000);
        other ids follow in string order.
        """
        return [self._jobs[k] for k in sorted(self._jobs, key=self._id_sort_key)]
