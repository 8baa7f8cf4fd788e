"""
Preference Ranking
==================
People with the fewest Preferred days are considered first. The ranking is
re-sorted after every calendar day; the sort is stable so that ties keep
their current relative order.
"""
from dataclasses import dataclass, field
from typing import List

from oncall.models.availability import AvailabilityGrid
from oncall.utils.logging_setup import get_logger, log_function_call

logger = get_logger("oncall.solver.ranking")


@dataclass
class PreferenceRecord:
    """Mutable scratch record for one person during scheduling."""
    person_idx: int
    preferred_count: int
    preferred_days: List[int] = field(default_factory=list)
    cooldown: int = 0

    def prefers(self, day: int) -> bool:
        return day in self.preferred_days


def sort_ranking(ranking: List[PreferenceRecord]) -> None:
    """Stable in-place sort, ascending by preferred_count."""
    ranking.sort(key=lambda r: r.preferred_count)


@log_function_call
def build_preference_ranking(grid: AvailabilityGrid) -> List[PreferenceRecord]:
    """
    Build one record per person and rank fewest-preferred first.

    Records are built walking the roster backwards, which decides the
    initial order among people with equal counts.
    """
    ranking: List[PreferenceRecord] = []
    for person_idx in range(grid.people_count - 1, -1, -1):
        days = grid.preferred_days(person_idx)
        ranking.append(PreferenceRecord(person_idx, len(days), days, 0))

    sort_ranking(ranking)
    logger.debug(
        "Initial ranking: " + ", ".join(f"{r.person_idx}({r.preferred_count})" for r in ranking)
    )
    return ranking


def tick_cooldowns(ranking: List[PreferenceRecord]) -> None:
    """Decrement every positive cooldown by one day."""
    for record in ranking:
        if record.cooldown > 0:
            record.cooldown -= 1


def reset_cooldowns(ranking: List[PreferenceRecord]) -> None:
    for record in ranking:
        record.cooldown = 0


def find_record(ranking: List[PreferenceRecord], person_idx: int) -> PreferenceRecord:
    for record in ranking:
        if record.person_idx == person_idx:
            return record
    raise KeyError(person_idx)
