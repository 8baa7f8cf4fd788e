"""Mutable state shared by the forced-coverage and preference passes."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from oncall.errors import ConfigurationError
from oncall.models.availability import AvailabilityGrid
from oncall.models.person import Person
from oncall.models.requirements import Requirements
from oncall.models.schedule import Schedule
from oncall.models.shift import Shift

from .calendar import points_per_person
from .ranking import PreferenceRecord, build_preference_ranking
from .staffing import ShiftRequirement, daily_requirements


@dataclass
class SchedulingContext:
    """
    Everything the passes read and mutate.

    ``people``, ``schedule`` and ``ranking`` change as passes run;
    ``grid`` and ``requirements`` are read-only.
    """

    people: List[Person]
    grid: AvailabilityGrid
    requirements: Requirements
    schedule: Schedule
    ranking: List[PreferenceRecord]
    points_per_person: int
    day_requirements: List[Optional[ShiftRequirement]]

    # Assignments made by each pass, in run order
    pass_counts: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        people: List[Person],
        grid: AvailabilityGrid,
        reqs: Requirements,
    ) -> "SchedulingContext":
        """Validate the inputs line up and build fresh state."""
        if not people:
            raise ConfigurationError("Roster is empty: at least one person is required")
        if grid.people_count != len(people):
            raise ConfigurationError(
                f"Availability grid has {grid.people_count} rows for {len(people)} people"
            )
        if grid.days < reqs.days_in_month:
            # Undeclared days are neither preferred nor unavailable
            grid = AvailabilityGrid(rows=grid.rows, days=reqs.days_in_month)

        return cls(
            people=people,
            grid=grid,
            requirements=reqs,
            schedule=Schedule(days=reqs.days_in_month),
            ranking=build_preference_ranking(grid),
            points_per_person=points_per_person(reqs, len(people)),
            day_requirements=daily_requirements(reqs),
        )

    @property
    def days(self) -> int:
        return self.requirements.days_in_month

    def assign(self, person_idx: int, day: int, requirement: ShiftRequirement) -> Shift:
        """Record a shift on both the person and the day bucket."""
        person = self.people[person_idx]
        shift = Shift(person.name, requirement.shift_type, day)
        self.schedule.add(shift)
        person.assign(shift, requirement.points)
        return shift

    def is_full(self, day: int) -> bool:
        return self.schedule.count(day) >= self.day_requirements[day].required
