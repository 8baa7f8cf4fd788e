"""Availability declarations and the person × day availability grid."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence

import pandas as pd


class Availability(str, Enum):
    """Three-valued per-person-per-day declaration."""
    PREFERRED = "Preferred"
    NOT_PREFERRED = "Not Preferred"
    NOT_AVAILABLE = "Not Available"

    @classmethod
    def from_string(cls, s: str) -> "Availability":
        """Parse a declaration; anything unrecognized counts as Not Preferred."""
        mapping = {
            "preferred": cls.PREFERRED,
            "not preferred": cls.NOT_PREFERRED,
            "notpreferred": cls.NOT_PREFERRED,
            "not available": cls.NOT_AVAILABLE,
            "notavailable": cls.NOT_AVAILABLE,
            "unavailable": cls.NOT_AVAILABLE,
        }
        key = " ".join(str(s).strip().lower().split())
        return mapping.get(key, cls.NOT_PREFERRED)


@dataclass
class AvailabilityGrid:
    """
    Read-only availability lookup indexed by person row and calendar day.

    Days are 1-indexed; ``rows[p][0]`` holds day 1.
    """

    rows: List[List[Availability]] = field(default_factory=list)
    days: int = 0

    def __post_init__(self):
        if not self.days and self.rows:
            self.days = max(len(r) for r in self.rows)
        # Missing trailing days behave like the blank cells they came from
        self.rows = [
            list(r) + [Availability.NOT_PREFERRED] * (self.days - len(r))
            for r in self.rows
        ]

    @classmethod
    def from_strings(cls, rows: Iterable[Sequence[str]], days: Optional[int] = None) -> "AvailabilityGrid":
        """Build from raw table cells (one row per person, one cell per day)."""
        parsed = [[Availability.from_string(c) for c in row] for row in rows]
        if days is not None:
            parsed = [r[:days] for r in parsed]
        return cls(rows=parsed, days=days or 0)

    @property
    def people_count(self) -> int:
        return len(self.rows)

    def status(self, person_idx: int, day: int) -> Availability:
        """Declaration of ``person_idx`` for calendar ``day`` (1..days)."""
        if day < 1 or day > self.days:
            raise IndexError(f"Day {day} outside 1..{self.days}")
        return self.rows[person_idx][day - 1]

    def is_preferred(self, person_idx: int, day: int) -> bool:
        return self.status(person_idx, day) == Availability.PREFERRED

    def is_unavailable(self, person_idx: int, day: int) -> bool:
        return self.status(person_idx, day) == Availability.NOT_AVAILABLE

    def preferred_days(self, person_idx: int) -> List[int]:
        return [
            day for day in range(1, self.days + 1)
            if self.is_preferred(person_idx, day)
        ]

    def available_people(self, day: int) -> List[int]:
        """Indices of people not marked Not Available on ``day``, in roster order."""
        return [
            p for p in range(self.people_count)
            if not self.is_unavailable(p, day)
        ]

    def to_dataframe(self, names: Optional[List[str]] = None) -> pd.DataFrame:
        """Person × day table of declaration strings."""
        index = names if names is not None else list(range(self.people_count))
        data = [[a.value for a in r] for r in self.rows]
        return pd.DataFrame(data, index=index, columns=list(range(1, self.days + 1)))
