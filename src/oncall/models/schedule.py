"""Schedule model: one bucket of shifts per calendar day."""
from dataclasses import dataclass, field
from typing import Iterator, List

from .shift import Shift


@dataclass
class Schedule:
    """
    Day buckets 1..days. Slot 0 is an unused sentinel so that
    ``buckets[day]`` lines up with the calendar day.
    """

    days: int
    buckets: List[List[Shift]] = field(default_factory=list)

    def __post_init__(self):
        if not self.buckets:
            self.buckets = [[] for _ in range(self.days + 1)]

    def add(self, shift: Shift) -> None:
        self.buckets[shift.day].append(shift)

    def bucket(self, day: int) -> List[Shift]:
        if day < 1 or day > self.days:
            raise IndexError(f"Day {day} outside 1..{self.days}")
        return self.buckets[day]

    def count(self, day: int) -> int:
        return len(self.bucket(day))

    def names_on(self, day: int) -> List[str]:
        return [s.person_name for s in self.bucket(day)]

    def iter_days(self) -> Iterator[int]:
        return iter(range(1, self.days + 1))

    def all_shifts(self) -> List[Shift]:
        return [s for day in self.iter_days() for s in self.buckets[day]]

    @property
    def total_assigned(self) -> int:
        return sum(len(self.buckets[d]) for d in self.iter_days())

