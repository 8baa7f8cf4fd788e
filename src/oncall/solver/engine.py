"""
Scheduling Engine
=================
Runs forced coverage once, then the preference passes in order of
increasing permissiveness, over one shared :class:`SchedulingContext`.

Pass plan:
1. spread        preferred days only, cooldown ``(days - 3) // points_per_person``
2. fill          preferred days only, no cooldown
3. not-preferred also consider the Not Available override
4. weekday-top-up    shift-count threshold, weekday shifts only, ceiling + 1
5. threshold-top-up  shift-count threshold, all days, ceiling + 1
6. threshold-not-preferred  as 5 with the override
"""
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from oncall.models.availability import AvailabilityGrid
from oncall.models.person import Person
from oncall.models.requirements import Requirements
from oncall.models.schedule import Schedule
from oncall.utils.logging_setup import PassLogger, get_logger, log_function_call

from .calendar import total_point_budget
from .context import SchedulingContext
from .forced import assign_forced_coverage
from .preferred import PassConfig, assign_on_preferred
from .stats import PersonStats, calculate_person_stats
from .validation import ValidationResult, validate_schedule

logger = get_logger("oncall.solver.engine")

FORCED_PASS = "forced"


def spread_for_month(days: int, points_per_person: int) -> int:
    """Cooldown that spaces a full share of shifts over the month."""
    if points_per_person <= 0:
        # Nobody is under a zero ceiling; block re-selection for the month
        return days
    return (days - 3) // points_per_person


def default_pass_plan(days: int, points_per_person: int) -> List[PassConfig]:
    """The fixed pass sequence run after forced coverage."""
    return [
        PassConfig(name="spread", spread=spread_for_month(days, points_per_person)),
        PassConfig(name="fill"),
        PassConfig(name="not-preferred", allow_not_preferred=True),
        PassConfig(name="weekday-top-up", use_lower_shift_threshold=True,
                   only_fill_weekdays=True, points_offset=1),
        PassConfig(name="threshold-top-up", use_lower_shift_threshold=True, points_offset=1),
        PassConfig(name="threshold-not-preferred", allow_not_preferred=True,
                   use_lower_shift_threshold=True, points_offset=1),
    ]


def run_passes(ctx: SchedulingContext, plan: Optional[Sequence[PassConfig]] = None) -> SchedulingContext:
    """Run forced coverage and the pass plan on ``ctx`` (mutated in place)."""
    slog = PassLogger("oncall.solver.engine")
    if plan is None:
        plan = default_pass_plan(ctx.days, ctx.points_per_person)

    slog.phase("Forced coverage")
    ctx.pass_counts[FORCED_PASS] = assign_forced_coverage(ctx)

    for config in plan:
        ceiling = ctx.points_per_person + config.points_offset
        slog.phase(f"Pass {config.name}")
        slog.detail("config", config)
        slog.detail("ceiling", ceiling)
        ctx.pass_counts[config.name] = (
            ctx.pass_counts.get(config.name, 0) + assign_on_preferred(ctx, ceiling, config)
        )

    slog.step(f"Assigned {ctx.schedule.total_assigned} shifts across {ctx.days} days")
    return ctx


@log_function_call
def assign_shifts(
    people: List[Person],
    grid: AvailabilityGrid,
    reqs: Requirements,
    plan: Optional[Sequence[PassConfig]] = None,
) -> Schedule:
    """
    Build the month's schedule.

    ``people`` are mutated: their shift lists and points hold the result.
    """
    ctx = SchedulingContext.create(people, grid, reqs)
    run_passes(ctx, plan)
    return ctx.schedule


@dataclass
class ScheduleResult:
    """Schedule plus everything needed to display or export it."""
    context: SchedulingContext
    validation: ValidationResult
    stats: List[PersonStats]
    solve_time_seconds: float = 0.0
    extras: Dict[str, Any] = field(default_factory=dict)

    @property
    def schedule(self) -> Schedule:
        return self.context.schedule

    @property
    def people(self) -> List[Person]:
        return self.context.people

    def summary(self) -> Dict[str, Any]:
        ctx = self.context
        return {
            "days": ctx.days,
            "people": len(ctx.people),
            "point_budget": total_point_budget(ctx.requirements),
            "points_per_person": ctx.points_per_person,
            "required_slots": self.validation.required_slots,
            "filled_slots": self.validation.filled_slots,
            "unfilled_slots": self.validation.unfilled_slots,
            "double_bookings": self.validation.double_bookings,
            "passes": dict(ctx.pass_counts),
            "solve_time": round(self.solve_time_seconds, 3),
        }


def solve(
    people: List[Person],
    grid: AvailabilityGrid,
    reqs: Requirements,
    plan: Optional[Sequence[PassConfig]] = None,
) -> ScheduleResult:
    """Schedule, validate coverage and compute per-person stats."""
    logger.info(f"Scheduling {len(people)} people over {reqs.days_in_month} days")
    t0 = time.time()
    ctx = SchedulingContext.create(people, grid, reqs)
    run_passes(ctx, plan)
    elapsed = time.time() - t0

    for p in ctx.people:
        p.sort_shifts()

    validation = validate_schedule(ctx.schedule, reqs)
    stats = calculate_person_stats(ctx.people, ctx.grid, ctx.points_per_person)
    return ScheduleResult(
        context=ctx,
        validation=validation,
        stats=stats,
        solve_time_seconds=elapsed,
    )
