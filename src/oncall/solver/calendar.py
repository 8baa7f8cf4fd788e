"""
Calendar Derivation
===================
Closed-form weekend / Thursday counts for a month and the fairness
point budget derived from them.

Weekends here are Friday and Saturday nights.
"""
import math

from oncall.errors import ConfigurationError
from oncall.models.requirements import MonthInfo, Requirements
from oncall.utils.logging_setup import get_logger

logger = get_logger("oncall.solver.calendar")


def derive_month_info(days: int, first_day: int) -> MonthInfo:
    """
    Count weekend nights, Thursdays and weekdays without walking the month.

    Args:
        days: Days in the month (>= 1)
        first_day: Weekday of day 1 (0 = Sunday .. 6 = Saturday)
    """
    days_after_first_week = days - 7 + first_day
    # Truncated remainder, floored quotient: below 7 days this departs from a day walk
    days_in_last_week = int(math.fmod(days_after_first_week, 7))
    full_weeks_after_first = math.floor(days_after_first_week / 7)

    # A Saturday start only catches one night of the first weekend
    base = 1 if first_day == 6 else 2
    weekend_tail = days_in_last_week - 5 if days_in_last_week > 5 else 0
    num_weekends = base + 2 * full_weeks_after_first + (weekend_tail if days_in_last_week > 4 else 0)

    thursday_base = 0 if first_day > 4 else 1
    num_thursdays = thursday_base + full_weeks_after_first + (1 if days_in_last_week > 4 else 0)

    num_weekdays = days - num_weekends
    return MonthInfo(
        days=days,
        first_day=first_day,
        num_weekends=num_weekends,
        num_weekdays=num_weekdays,
        num_thursdays=num_thursdays,
        num_weekdays_excl_thursday=num_weekdays - num_thursdays,
    )


def total_point_budget(reqs: Requirements) -> int:
    """Points needed to cover every required slot of the month."""
    month = reqs.month
    weekday_slots = (
        month.num_weekdays_excl_thursday * reqs.on_call_sun_to_wed
        + month.num_thursdays * reqs.on_call_thurs
    )
    weekend_slots = month.num_weekends * reqs.on_call_fri_to_sat
    return weekday_slots * reqs.weekday_points + weekend_slots * reqs.weekend_points


def points_per_person(reqs: Requirements, person_count: int) -> int:
    """Fair share of the point budget, rounded down."""
    if person_count <= 0:
        raise ConfigurationError("Cannot compute points per person for an empty roster")
    budget = total_point_budget(reqs)
    share = budget // person_count
    logger.info(f"Point budget: total={budget}, per person={share} ({person_count} people)")
    return share
