"""Person model for roster members."""
from dataclasses import dataclass, field
from typing import List

from .shift import Shift, ShiftType


@dataclass
class Person:
    """A roster member and the shifts accumulated during scheduling."""

    name: str
    shifts: List[Shift] = field(default_factory=list)
    points: int = 0

    # Row index in the availability table
    id: int = field(default=0, compare=False)

    def __post_init__(self):
        self.name = str(self.name).strip()

    @property
    def shift_count(self) -> int:
        return len(self.shifts)

    def assign(self, shift: Shift, points: int) -> None:
        """Append a shift and add its point value."""
        self.shifts.append(shift)
        self.points += points

    def sort_shifts(self) -> None:
        """Stable sort of the shift list by calendar day."""
        self.shifts.sort(key=lambda s: s.day)

    def days_assigned(self) -> List[int]:
        return [s.day for s in self.shifts]

    def count_shifts(self, shift_type: ShiftType) -> int:
        return sum(1 for s in self.shifts if s.shift_type == shift_type)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "points": self.points,
            "shifts": [
                {"day": s.day, "type": s.shift_type.value}
                for s in self.shifts
            ],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Person":
        """Create from dictionary."""
        name = str(d.get("name", ""))
        person = cls(name=name, id=int(d.get("id", 0)))
        for s in d.get("shifts", []):
            person.shifts.append(
                Shift(person.name, ShiftType.from_string(s["type"]), int(s["day"]))
            )
        person.points = int(d.get("points", 0))
        return person
