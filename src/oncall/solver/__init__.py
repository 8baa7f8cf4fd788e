# oncall/solver - Greedy multi-pass on-call assignment
from .calendar import derive_month_info, points_per_person, total_point_budget
from .context import SchedulingContext
from .engine import ScheduleResult, assign_shifts, default_pass_plan, run_passes, solve
from .forced import assign_forced_coverage
from .preferred import PassConfig, assign_on_preferred
from .ranking import PreferenceRecord, build_preference_ranking, sort_ranking
from .staffing import ShiftRequirement, iter_month_days, resolve_shift_requirement
from .stats import PersonStats, calculate_person_stats
from .validation import ValidationResult, Violation, validate_schedule

__all__ = [
    "solve",
    "assign_shifts",
    "run_passes",
    "default_pass_plan",
    "ScheduleResult",
    "SchedulingContext",
    "derive_month_info",
    "total_point_budget",
    "points_per_person",
    "build_preference_ranking",
    "sort_ranking",
    "PreferenceRecord",
    "resolve_shift_requirement",
    "iter_month_days",
    "ShiftRequirement",
    "assign_forced_coverage",
    "assign_on_preferred",
    "PassConfig",
    "validate_schedule",
    "ValidationResult",
    "Violation",
    "calculate_person_stats",
    "PersonStats",
]
