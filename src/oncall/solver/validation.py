"""
Coverage Validation
===================
Checks a finished schedule against the day requirements. Short days are an
accepted end state of the passes: they are counted and logged, not raised.
"""
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from oncall.models.requirements import Requirements
from oncall.models.schedule import Schedule
from oncall.utils.logging_setup import get_logger, log_constraint

from .staffing import daily_requirements

logger = get_logger("oncall.solver.validation")


@dataclass
class Violation:
    """Single coverage issue."""
    type: str  # "unfilled_slot", "overstaffed", "double_booking"
    severity: str  # "critical", "warning", "info"
    day: int
    message: str
    person: str = ""
    count: int = 1


@dataclass
class ValidationResult:
    """Coverage metrics for a schedule."""
    required_slots: int = 0
    filled_slots: int = 0
    unfilled_slots: int = 0
    understaffed_days: int = 0
    overstaffed_days: int = 0
    double_bookings: int = 0

    violations: List[Violation] = field(default_factory=list)

    def add_violation(self, v: Violation):
        self.violations.append(v)

    def as_dict(self) -> Dict[str, int]:
        return {
            "required_slots": self.required_slots,
            "filled_slots": self.filled_slots,
            "unfilled_slots": self.unfilled_slots,
            "understaffed_days": self.understaffed_days,
            "overstaffed_days": self.overstaffed_days,
            "double_bookings": self.double_bookings,
        }

    @property
    def has_critical_issues(self) -> bool:
        return bool(self.get_critical_violations())

    @property
    def coverage_rate(self) -> float:
        if self.required_slots == 0:
            return 1.0
        return min(self.filled_slots, self.required_slots) / self.required_slots

    def get_critical_violations(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "critical"]

    def get_warnings(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "warning"]

    def short_days(self) -> List[int]:
        return [v.day for v in self.violations if v.type == "unfilled_slot"]


def validate_schedule(
    schedule: Schedule,
    reqs: Requirements,
) -> ValidationResult:
    """
    Compare each day bucket with its required headcount.

    Args:
        schedule: The filled schedule
        reqs: Requirements the schedule was built from

    Returns:
        ValidationResult with counts and per-day violations
    """
    result = ValidationResult()
    per_day = daily_requirements(reqs)

    for day in schedule.iter_days():
        required = per_day[day].required
        count = schedule.count(day)
        result.required_slots += required
        result.filled_slots += min(count, required)

        if count < required:
            missing = required - count
            result.unfilled_slots += missing
            result.understaffed_days += 1
            result.add_violation(Violation(
                type="unfilled_slot",
                severity="critical",
                day=day,
                message=f"Day {day}: {count}/{required} on call",
                count=missing,
            ))
        elif count > required:
            result.overstaffed_days += 1
            result.add_violation(Violation(
                type="overstaffed",
                severity="info",
                day=day,
                message=f"Day {day}: {count}/{required} on call (forced coverage)",
                count=count - required,
            ))

        for name, n in Counter(schedule.names_on(day)).items():
            if n > 1:
                result.double_bookings += n - 1
                result.add_violation(Violation(
                    type="double_booking",
                    severity="warning",
                    day=day,
                    message=f"Day {day}: {name} booked {n} times",
                    person=name,
                    count=n - 1,
                ))

    log_constraint(
        logger, "coverage", result.unfilled_slots == 0,
        f"{result.filled_slots}/{result.required_slots} slots filled, "
        f"{result.understaffed_days} short days",
        level=logging.INFO,
    )
    log_constraint(logger, "no_double_booking", result.double_bookings == 0,
                   f"{result.double_bookings} extra bookings")
    return result
