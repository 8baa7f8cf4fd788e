"""
Centralized Person Statistics
=============================
Single source of truth for per-person statistics.
Used by the web view, Excel export and the CLI JSON summary.
"""
from dataclasses import dataclass
from typing import Dict, List

from oncall.models.availability import AvailabilityGrid
from oncall.models.person import Person
from oncall.models.shift import ShiftType
from oncall.utils.logging_setup import get_logger

logger = get_logger("oncall.solver.stats")


@dataclass
class PersonStats:
    """Statistics for a single person."""
    name: str
    weekday_shifts: int
    weekend_shifts: int
    total: int          # All shifts held
    points: int
    target: int         # Points per person
    delta: int          # points - target
    preferred_honoured: int  # Shifts that landed on a Preferred day


def calculate_person_stats(
    people: List[Person],
    grid: AvailabilityGrid,
    points_per_person: int,
) -> List[PersonStats]:
    """
    Calculate statistics for all people, in roster order.

    Args:
        people: Roster after scheduling
        grid: Availability the schedule was built from
        points_per_person: Fairness target
    """
    stats = []
    for idx, p in enumerate(people):
        honoured = sum(
            1 for s in p.shifts
            if s.day <= grid.days and grid.is_preferred(idx, s.day)
        )
        stats.append(PersonStats(
            name=p.name,
            weekday_shifts=p.count_shifts(ShiftType.ON_CALL_WEEKDAY),
            weekend_shifts=p.count_shifts(ShiftType.ON_CALL_WEEKEND),
            total=p.shift_count,
            points=p.points,
            target=points_per_person,
            delta=p.points - points_per_person,
            preferred_honoured=honoured,
        ))

    logger.debug(f"Calculated stats for {len(stats)} people")
    return stats


def stats_to_dict_list(stats: List[PersonStats]) -> List[Dict]:
    """Convert stats to list of dicts for DataFrame or export."""
    return [
        {
            "Name": s.name,
            "Weekday": s.weekday_shifts,
            "Weekend": s.weekend_shifts,
            "Shifts": s.total,
            "Points": s.points,
            "Target": s.target,
            "Δ": s.delta,
            "Preferred": s.preferred_honoured,
        }
        for s in stats
    ]
