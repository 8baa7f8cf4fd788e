"""Tests for the preference-balanced assignment pass."""
import pytest

from oncall.models.requirements import Requirements
from oncall.solver.context import SchedulingContext
from oncall.solver.preferred import PassConfig, assign_on_preferred, shift_threshold

from conftest import N, P, X, make_grid, make_people


def _context(rows, days=None, **reqs):
    people = make_people(len(rows))
    params = dict(days_in_month=days or len(rows[0]), first_day_of_month=0)
    params.update(reqs)
    return SchedulingContext.create(people, make_grid(rows), Requirements(**params))


def _days_of(ctx, idx):
    return sorted(ctx.people[idx].days_assigned())


class TestShiftThreshold:
    def test_values(self):
        assert shift_threshold(3, 0) == 1
        assert shift_threshold(3, 1) == 2
        assert shift_threshold(0, 1) == 0

    def test_iterations(self):
        assert PassConfig().iterations == 1
        assert PassConfig(use_lower_shift_threshold=True).iterations == 2


class TestPreferredPass:
    def test_only_preferred_days(self):
        ctx = _context([[P, N, P, N, N, N, N]])
        assigned = assign_on_preferred(ctx, 100)
        assert assigned == 2
        assert _days_of(ctx, 0) == [1, 3]

    def test_points_ceiling(self):
        ctx = _context([[P] * 7])
        assign_on_preferred(ctx, 3)
        # Ceiling checked before each shift: 1 + 1 + 1 reaches 3
        assert _days_of(ctx, 0) == [1, 2, 3]
        assert ctx.people[0].points == 3

    def test_stops_when_day_full(self):
        ctx = _context([[P], [P], [P]], on_call_sun_to_wed=2)
        assign_on_preferred(ctx, 10)
        assert ctx.schedule.count(1) == 2
        # Ties rank in reverse roster order
        assert ctx.schedule.names_on(1) == ["P2", "P1"]

    def test_fewest_preferred_first(self):
        ctx = _context([[P, P, P], [P, N, N]])
        assign_on_preferred(ctx, 10)
        assert ctx.schedule.names_on(1) == ["P1"]
        assert _days_of(ctx, 0) == [2, 3]

    def test_never_overfills(self):
        ctx = _context([[P, P], [P, P]])
        ctx.assign(0, 1, ctx.day_requirements[1])
        assign_on_preferred(ctx, 10)
        assert ctx.schedule.count(1) == 1
        assert ctx.schedule.count(2) == 1

    @pytest.mark.parametrize("spread,expected", [
        (0, [1, 2, 3, 4, 5, 6, 7]),
        (1, [1, 2, 3, 4, 5, 6, 7]),
        (2, [1, 3, 5, 7]),
        (3, [1, 4, 7]),
    ])
    def test_cooldown(self, spread, expected):
        ctx = _context([[P] * 7])
        assign_on_preferred(ctx, 100, PassConfig(spread=spread))
        assert _days_of(ctx, 0) == expected

    def test_cooldown_resets_between_passes(self):
        ctx = _context([[P] * 7])
        assign_on_preferred(ctx, 100, PassConfig(spread=3))
        assign_on_preferred(ctx, 100, PassConfig(name="fill"))
        assert _days_of(ctx, 0) == [1, 2, 3, 4, 5, 6, 7]

    def test_deterministic(self):
        rows = [[P, N, P, X, P, N, P], [N, P, P, N, X, P, P], [P, P, N, N, P, P, X]]
        first = _context(rows)
        second = _context(rows)
        assign_on_preferred(first, 3, PassConfig(spread=1))
        assign_on_preferred(second, 3, PassConfig(spread=1))
        assert [first.schedule.names_on(d) for d in range(1, 8)] == \
            [second.schedule.names_on(d) for d in range(1, 8)]


class TestOverride:
    """The permissive override keys on Not Available."""

    def test_not_preferred_is_not_picked(self):
        ctx = _context([[N, N]])
        assign_on_preferred(ctx, 10, PassConfig(allow_not_preferred=True))
        assert ctx.schedule.total_assigned == 0

    def test_not_available_is_picked(self):
        ctx = _context([[X, N]])
        assign_on_preferred(ctx, 10, PassConfig(allow_not_preferred=True))
        assert _days_of(ctx, 0) == [1]

    def test_override_off(self):
        ctx = _context([[X, N]])
        assign_on_preferred(ctx, 10)
        assert ctx.schedule.total_assigned == 0


class TestThresholdPasses:
    def test_lower_threshold_counts_shifts(self):
        # Week from Sunday: Fri/Sat are weekend shifts worth 2 points
        ctx = _context([[P] * 7])
        config = PassConfig(use_lower_shift_threshold=True)
        assign_on_preferred(ctx, 4, config)
        # Iteration 0: floor(0.65 * 4) = 2 shifts; iteration 1: floor(0.8 * 4) = 3
        assert _days_of(ctx, 0) == [1, 2, 3]

    def test_weekdays_only(self):
        ctx = _context([[P] * 7])
        config = PassConfig(use_lower_shift_threshold=True, only_fill_weekdays=True)
        assign_on_preferred(ctx, 3, config)
        # Weekend days 6 and 7 are never filled; ceiling of 3 points on weekdays
        assert _days_of(ctx, 0) == [1, 2, 3]

    def test_weekdays_only_skips_weekend_start(self):
        ctx = _context([[P, P]], first_day_of_month=5)
        config = PassConfig(use_lower_shift_threshold=True, only_fill_weekdays=True)
        assert assign_on_preferred(ctx, 10, config) == 0
