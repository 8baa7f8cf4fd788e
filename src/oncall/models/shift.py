"""Shift type definitions and weekday constants."""
from dataclasses import dataclass
from enum import Enum


class ShiftType(str, Enum):
    """Categories of shift in the on-call rota."""
    ON_CALL_WEEKDAY = "OnCall-Weekday"
    ON_CALL_WEEKEND = "OnCall-Weekend"
    OFFICE_HOURS = "Office Hours"  # Declared, never produced by the passes

    @property
    def is_weekend(self) -> bool:
        return self is ShiftType.ON_CALL_WEEKEND

    @property
    def code(self) -> str:
        """Short code used in compact displays."""
        return {
            ShiftType.ON_CALL_WEEKDAY: "WD",
            ShiftType.ON_CALL_WEEKEND: "WE",
            ShiftType.OFFICE_HOURS: "OH",
        }[self]

    @classmethod
    def from_string(cls, s: str) -> "ShiftType":
        """Parse shift from its value, name or short code."""
        key = str(s).strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower(), member.code.lower()):
                return member
        raise ValueError(f"Unknown shift type: {s!r}")


@dataclass(frozen=True)
class Shift:
    """A single on-call shift held by one person on one calendar day."""
    person_name: str
    shift_type: ShiftType
    day: int  # 1-indexed calendar day

    @property
    def token(self) -> str:
        return self.shift_type.value


# Weekday index constants (0 = Sunday)
WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
SUNDAY = 0
WEDNESDAY = 3
THURSDAY = 4
FRIDAY = 5
SATURDAY = 6

WEEKDAY_ALIASES = {
    "sun": 0, "sunday": 0,
    "mon": 1, "monday": 1,
    "tue": 2, "tues": 2, "tuesday": 2,
    "wed": 3, "wednesday": 3,
    "thu": 4, "thur": 4, "thurs": 4, "thursday": 4,
    "fri": 5, "friday": 5,
    "sat": 6, "saturday": 6,
}


def normalize_weekday(value) -> int:
    """Normalize a weekday name or index to 0..6 (0 = Sunday)."""
    if isinstance(value, int):
        return value
    key = str(value).strip().lower()
    if key.isdigit():
        return int(key)
    if key in WEEKDAY_ALIASES:
        return WEEKDAY_ALIASES[key]
    raise ValueError(f"Unknown weekday: {value!r}")
