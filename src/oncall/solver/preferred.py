"""
Preference-Balanced Assignment
==============================
Greedy pass that fills each day from the ranking (fewest preferred days
first), bounded by a fairness test on points or shift count.

The same pass runs several times with :class:`PassConfig` knobs that relax
the constraints step by step; every run only adds shifts.
"""
import math
from dataclasses import dataclass

from oncall.models.availability import Availability
from oncall.models.shift import ShiftType
from oncall.utils.logging_setup import get_logger

from .context import SchedulingContext
from .ranking import PreferenceRecord, reset_cooldowns, sort_ranking, tick_cooldowns
from .staffing import ShiftRequirement

logger = get_logger("oncall.solver.preferred")


@dataclass(frozen=True)
class PassConfig:
    """Knobs for one run of :func:`assign_on_preferred`."""
    name: str = "preferred"
    spread: int = 0  # Cooldown in days after an assignment
    allow_not_preferred: bool = False
    use_lower_shift_threshold: bool = False
    only_fill_weekdays: bool = False
    points_offset: int = 0  # Added to points-per-person for this pass

    @property
    def iterations(self) -> int:
        return 2 if self.use_lower_shift_threshold else 1


def shift_threshold(points_per_person: int, iteration: int) -> int:
    """Shift-count ceiling used by the lower-threshold passes."""
    return math.floor((0.65 + 0.15 * iteration) * points_per_person)


def _is_eligible(
    ctx: SchedulingContext,
    record: PreferenceRecord,
    day: int,
    requirement: ShiftRequirement,
    points_per_person: int,
    threshold: int,
    config: PassConfig,
) -> bool:
    person = ctx.people[record.person_idx]

    # Quirk kept on purpose: the override looks at Not Available, not Not Preferred
    override = (
        config.allow_not_preferred
        and ctx.grid.status(record.person_idx, day) == Availability.NOT_AVAILABLE
    )

    if config.only_fill_weekdays:
        under = (
            person.points + requirement.points <= points_per_person
            and requirement.shift_type == ShiftType.ON_CALL_WEEKDAY
        )
    elif config.use_lower_shift_threshold:
        under = person.shift_count < threshold
    else:
        under = person.points < points_per_person

    return (record.prefers(day) or override) and under and record.cooldown == 0


def assign_on_preferred(
    ctx: SchedulingContext,
    points_per_person: int,
    config: PassConfig = PassConfig(),
) -> int:
    """
    Run one configured preference pass over the whole month.

    Args:
        ctx: Shared scheduling state (mutated)
        points_per_person: Fairness ceiling for this pass
        config: Pass knobs

    Returns:
        Number of shifts assigned by this pass
    """
    assigned = 0

    for iteration in range(config.iterations):
        reset_cooldowns(ctx.ranking)
        threshold = shift_threshold(points_per_person, iteration) if config.use_lower_shift_threshold else 0
        logger.debug(f"[{config.name}] iteration {iteration}: threshold={threshold}")

        for day in range(1, ctx.days + 1):
            requirement = ctx.day_requirements[day]

            for record in ctx.ranking:
                if ctx.is_full(day):
                    break
                if _is_eligible(ctx, record, day, requirement, points_per_person, threshold, config):
                    ctx.assign(record.person_idx, day, requirement)
                    record.cooldown = config.spread
                    assigned += 1
                    logger.debug(
                        f"[{config.name}] day {day}: {ctx.people[record.person_idx].name} "
                        f"({requirement.shift_type.value})"
                    )

            sort_ranking(ctx.ranking)
            tick_cooldowns(ctx.ranking)

    logger.info(f"Pass '{config.name}' assigned {assigned} shifts")
    return assigned
