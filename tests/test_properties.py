"""Hypothesis property-based tests.

Properties that must hold for all valid inputs, verified by random generation.
"""

from __future__ import annotations

from collections import Counter
from itertools import combinations

from hypothesis import given, settings
from hypothesis import strategies as st

from conftest import make_job


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------
_slot_counts = st.integers(min_value=1, max_value=6)

# (deadline, revenue) pairs; deadlines include 0 and values past the week
_job_specs = st.lists(
    st.tuples(
        st.integers(min_value=-1, max_value=8),
        st.integers(min_value=0, max_value=1000),
    ),
    max_size=8,
)

_jobs = _job_specs.map(
    lambda specs: [make_job(f"J{i}", d, r) for i, (d, r) in enumerate(specs)]
)


def _best_revenue(jobs, slot_count: int) -> float:
    """Exhaustive optimum over every subset of eligible jobs.

    A subset fits iff, ordered by clamped deadline, the k-th job (1-based)
    has clamped deadline >= k.
    """
    eligible = [j for j in jobs if j.deadline >= 1]
    best = 0
    for size in range(len(eligible) + 1):
        for subset in combinations(eligible, size):
            clamped = sorted(min(j.deadline, slot_count) for j in subset)
            if all(d >= k for k, d in enumerate(clamped, start=1)):
                best = max(best, sum(j.revenue for j in subset))
    return best


# ---------------------------------------------------------------------------
# Property: capacity
# ---------------------------------------------------------------------------
class TestCapacity:

    @given(jobs=_jobs, slot_count=_slot_counts)
    @settings(max_examples=100)
    def test_one_slot_per_period(self, jobs, slot_count):
        """Exactly slot_count slots, indexed in order, no job placed twice."""
        from job_sequencing.sequencing import schedule

        result = schedule(jobs, slot_count)
        assert [s.index for s in result.slots] == list(range(slot_count))
        placed = [j.job_id for j in result.scheduled_jobs]
        assert len(placed) <= slot_count
        assert len(placed) == len(set(placed))


# ---------------------------------------------------------------------------
# Property: deadline
# ---------------------------------------------------------------------------
class TestDeadline:

    @given(jobs=_jobs, slot_count=_slot_counts)
    @settings(max_examples=100)
    def test_every_placed_job_meets_deadline(self, jobs, slot_count):
        from job_sequencing.sequencing import schedule
        from job_sequencing.types import AssignedSlot

        result = schedule(jobs, slot_count)
        for slot in result.slots:
            if isinstance(slot, AssignedSlot):
                assert slot.index + 1 <= min(slot.job.deadline, slot_count)


# ---------------------------------------------------------------------------
# Property: completeness
# ---------------------------------------------------------------------------
class TestCompleteness:

    @given(jobs=_jobs, slot_count=_slot_counts)
    @settings(max_examples=100)
    def test_every_job_accounted_for_once(self, jobs, slot_count):
        """Each input job is either placed or unscheduled, never both."""
        from job_sequencing.sequencing import schedule

        result = schedule(jobs, slot_count)
        seen = Counter(j.job_id for j in result.scheduled_jobs)
        seen.update(j.job_id for j in result.unscheduled)
        assert seen == Counter(j.job_id for j in jobs)

    @given(jobs=_jobs, slot_count=_slot_counts)
    @settings(max_examples=50)
    def test_revenue_conserved(self, jobs, slot_count):
        from job_sequencing.sequencing import schedule

        result = schedule(jobs, slot_count)
        total = sum(j.revenue for j in jobs)
        assert result.scheduled_revenue + result.unscheduled_revenue == total

    @given(jobs=_jobs, slot_count=_slot_counts)
    @settings(max_examples=50)
    def test_ineligible_never_placed(self, jobs, slot_count):
        from job_sequencing.sequencing import schedule

        result = schedule(jobs, slot_count)
        assert all(j.deadline >= 1 for j in result.scheduled_jobs)


# ---------------------------------------------------------------------------
# Property: determinism
# ---------------------------------------------------------------------------
class TestDeterminism:

    @given(jobs=_jobs, slot_count=_slot_counts)
    @settings(max_examples=50)
    def test_same_input_same_result(self, jobs, slot_count):
        from job_sequencing.sequencing import schedule

        assert schedule(jobs, slot_count) == schedule(list(jobs), slot_count)


# ---------------------------------------------------------------------------
# Property: optimality
# ---------------------------------------------------------------------------
class TestOptimality:

    @given(jobs=_jobs, slot_count=st.integers(min_value=1, max_value=5))
    @settings(max_examples=100, deadline=None)
    def test_matches_exhaustive_optimum(self, jobs, slot_count):
        """Greedy revenue equals the best of every feasible job subset."""
        from job_sequencing.sequencing import schedule

        result = schedule(jobs, slot_count)
        assert result.scheduled_revenue == _best_revenue(jobs, slot_count)

    @given(
        revenues=st.permutations(list(range(10, 90, 10))).map(lambda p: p[:5]),
        deadlines=st.permutations([1, 2, 3, 4, 5]),
    )
    @settings(max_examples=50, deadline=None)
    def test_distinct_dense_deadlines(self, revenues, deadlines):
        """Distinct deadlines covering 1..slot_count: every job fits."""
        from job_sequencing.sequencing import schedule

        jobs = [make_job(f"J{i}", d, r) for i, (d, r) in enumerate(zip(deadlines, revenues))]
        result = schedule(jobs, 5)
        assert result.unscheduled == ()
        assert result.scheduled_revenue == _best_revenue(jobs, 5) == sum(revenues)
