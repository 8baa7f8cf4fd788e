# oncall/models - Data models for the on-call scheduler
from .availability import Availability, AvailabilityGrid
from .person import Person
from .requirements import MonthInfo, Requirements
from .schedule import Schedule
from .shift import THURSDAY, WEEKDAY_NAMES, Shift, ShiftType

__all__ = [
    "Person",
    "Shift", "ShiftType", "WEEKDAY_NAMES", "THURSDAY",
    "Availability", "AvailabilityGrid",
    "Schedule",
    "Requirements", "MonthInfo",
]
