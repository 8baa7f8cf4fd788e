"""
Business Rules and Constants
============================
Central source of truth for shift colors, staffing defaults and point values.
"""
from dataclasses import dataclass, field
from typing import Dict


@dataclass
class ShiftTypeConfig:
    code: str
    label: str
    color_bg: str
    color_text: str


# Shift Definitions (keyed by ShiftType value)
SHIFTS = {
    "OnCall-Weekday": ShiftTypeConfig("WD", "On call (weekday)", "#DDEEFF", "#333333"),
    "OnCall-Weekend": ShiftTypeConfig("WE", "On call (weekend)", "#E6CCFF", "#333333"),
    "Office Hours": ShiftTypeConfig("OH", "Office hours", "#DDDDDD", "#333333"),
}


@dataclass
class RulesConfig:
    """Business rules constants."""

    # Placeholder headcounts used when an input is left blank
    default_staffing: Dict[str, int] = field(default_factory=lambda: {
        "sun_to_wed": 1,
        "thurs": 1,
        "fri_to_sat": 1,
    })

    # Fairness points per shift class
    weekday_points: int = 1
    weekend_points: int = 2

    default_days_in_month: int = 30
    default_first_day: int = 0  # Sunday

    # Export
    export_filename: str = "schedule.csv"
    excel_filename: str = "schedule.xlsx"


RULES = RulesConfig()
