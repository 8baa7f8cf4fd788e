"""Tests for forced coverage."""
from oncall.models.requirements import Requirements
from oncall.solver.context import SchedulingContext
from oncall.solver.forced import assign_forced_coverage
from oncall.solver.ranking import find_record

from conftest import N, P, X, make_grid, make_people


def _context(rows, **reqs):
    people = make_people(len(rows))
    params = dict(days_in_month=len(rows[0]), first_day_of_month=0)
    params.update(reqs)
    return SchedulingContext.create(people, make_grid(rows), Requirements(**params))


class TestForcedCoverage:
    def test_assigns_everyone_available_when_within_requirement(self):
        ctx = _context(
            [[P, N], [X, N], [X, N]],
            on_call_sun_to_wed=2,
        )
        assigned = assign_forced_coverage(ctx)

        assert assigned == 1
        assert ctx.schedule.names_on(1) == ["P0"]
        assert ctx.schedule.count(2) == 0  # 3 available > 2 required
        assert ctx.people[0].points == 1

    def test_exactly_required(self):
        ctx = _context([[N], [N], [X]], on_call_sun_to_wed=2)
        assert assign_forced_coverage(ctx) == 2
        assert ctx.schedule.names_on(1) == ["P0", "P1"]

    def test_nobody_available(self):
        ctx = _context([[X, N], [X, N]])
        assert assign_forced_coverage(ctx) == 0
        assert ctx.schedule.count(1) == 0

    def test_zero_requirement_day_skipped(self):
        ctx = _context([[N], [X]], on_call_sun_to_wed=0)
        assert assign_forced_coverage(ctx) == 0

    def test_decrements_ranking_key_only(self):
        ctx = _context([[P, P, X], [X, N, N]], on_call_sun_to_wed=1)
        record = find_record(ctx.ranking, 0)
        before_days = list(record.preferred_days)

        assign_forced_coverage(ctx)

        # Day 1: only P0; day 3: only P1
        assert ctx.schedule.names_on(1) == ["P0"]
        assert ctx.schedule.names_on(3) == ["P1"]
        assert record.preferred_count == 1
        assert record.preferred_days == before_days
        assert find_record(ctx.ranking, 1).preferred_count == -1

    def test_ignores_preference(self):
        ctx = _context([[N], [X]])
        assign_forced_coverage(ctx)
        assert ctx.schedule.names_on(1) == ["P0"]
