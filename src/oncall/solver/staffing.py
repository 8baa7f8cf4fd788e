"""
Shift Requirements per Weekday
==============================
Maps a weekday index (0 = Sunday) to its shift category, headcount and
point value:
- Sun–Wed (0–3): weekday on call, Sun–Wed headcount
- Thu (4): weekday on call, Thursday headcount
- Fri–Sat (5–6): weekend on call, Fri–Sat headcount
"""
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from oncall.models.requirements import Requirements
from oncall.models.shift import THURSDAY, ShiftType


@dataclass(frozen=True)
class ShiftRequirement:
    """What one calendar day needs."""
    shift_type: ShiftType
    required: int
    points: int


def resolve_shift_requirement(weekday: int, reqs: Requirements) -> ShiftRequirement:
    """Resolve category, headcount and points for a weekday index."""
    if not 0 <= weekday <= 6:
        raise ValueError(f"Weekday index must be within 0..6, got {weekday}")

    if weekday < 5:
        required = reqs.on_call_thurs if weekday == THURSDAY else reqs.on_call_sun_to_wed
        return ShiftRequirement(ShiftType.ON_CALL_WEEKDAY, required, reqs.weekday_points)
    return ShiftRequirement(ShiftType.ON_CALL_WEEKEND, reqs.on_call_fri_to_sat, reqs.weekend_points)


def iter_month_days(reqs: Requirements) -> Iterator[Tuple[int, int]]:
    """
    Yield ``(day, weekday)`` for every calendar day.

    The weekday starts at the month's first weekday and advances mod 7,
    independently of the 1-indexed day number.
    """
    weekday = reqs.first_day_of_month
    for day in range(1, reqs.days_in_month + 1):
        yield day, weekday
        weekday = (weekday + 1) % 7


def daily_requirements(reqs: Requirements) -> List[ShiftRequirement]:
    """Requirement of every day, index 0 unused so that ``[day]`` works."""
    out: List[ShiftRequirement] = [None]
    for _, weekday in iter_month_days(reqs):
        out.append(resolve_shift_requirement(weekday, reqs))
    return out


def total_required_slots(reqs: Requirements) -> int:
    return sum(r.required for r in daily_requirements(reqs)[1:])
