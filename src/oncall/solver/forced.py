"""
Forced Coverage
===============
On days where no more people are available than the day requires, every
available person is scheduled, preference or not.
"""
from oncall.utils.logging_setup import get_logger, log_function_call

from .context import SchedulingContext
from .ranking import PreferenceRecord

logger = get_logger("oncall.solver.forced")


@log_function_call
def assign_forced_coverage(ctx: SchedulingContext) -> int:
    """
    Run the forced-coverage pass once over the month.

    A day with ``0 < available <= required`` gets all of its available
    people, even when that leaves it short. Each forced assignment lowers the
    person's ranking key by one; their preferred-day list is left alone.

    Returns:
        Number of shifts assigned
    """
    by_person = {r.person_idx: r for r in ctx.ranking}
    assigned = 0

    for day in range(1, ctx.days + 1):
        requirement = ctx.day_requirements[day]
        available = ctx.grid.available_people(day)

        if not available or len(available) > requirement.required:
            continue

        for person_idx in available:
            ctx.assign(person_idx, day, requirement)
            record: PreferenceRecord = by_person[person_idx]
            record.preferred_count -= 1
            assigned += 1

        names = ", ".join(ctx.people[p].name for p in available)
        logger.debug(f"Day {day}: forced {len(available)}/{requirement.required} ({names})")

    logger.info(f"Forced coverage assigned {assigned} shifts")
    return assigned
