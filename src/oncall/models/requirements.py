"""Staffing requirements and calendar facts for one month."""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from oncall.errors import ConfigurationError

from .rules import RULES


@dataclass(frozen=True)
class MonthInfo:
    """Calendar-derived day counts for the month."""
    days: int
    first_day: int
    num_weekends: int  # Friday and Saturday nights
    num_weekdays: int
    num_thursdays: int
    num_weekdays_excl_thursday: int


# camelCase option names accepted from the web form / JSON
OPTION_ALIASES = {
    "onCallSunToWed": "on_call_sun_to_wed",
    "onCallThurs": "on_call_thurs",
    "onCallFriToSat": "on_call_fri_to_sat",
    "daysInMonth": "days_in_month",
    "firstDayOfMonth": "first_day_of_month",
    "onCallWeekday": "weekday_points",
    "onCallWeekend": "weekend_points",
}


@dataclass
class Requirements:
    """Headcount per weekday class, point values and month shape."""

    days_in_month: int = RULES.default_days_in_month
    first_day_of_month: int = RULES.default_first_day  # 0 = Sunday .. 6 = Saturday

    on_call_sun_to_wed: int = RULES.default_staffing["sun_to_wed"]
    on_call_thurs: int = RULES.default_staffing["thurs"]
    on_call_fri_to_sat: int = RULES.default_staffing["fri_to_sat"]

    weekday_points: int = RULES.weekday_points
    weekend_points: int = RULES.weekend_points

    def __post_init__(self):
        if not 1 <= self.days_in_month <= 31:
            raise ConfigurationError(f"days_in_month must be within 1..31, got {self.days_in_month}")
        if not 0 <= self.first_day_of_month <= 6:
            raise ConfigurationError(
                f"first_day_of_month must be within 0..6 (0 = Sunday), got {self.first_day_of_month}"
            )
        for name in ("on_call_sun_to_wed", "on_call_thurs", "on_call_fri_to_sat"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} cannot be negative")

    @property
    def month(self) -> MonthInfo:
        from oncall.solver.calendar import derive_month_info
        return derive_month_info(self.days_in_month, self.first_day_of_month)

    def to_dict(self) -> Dict[str, int]:
        """Serialize using the camelCase option names."""
        return {
            "onCallSunToWed": self.on_call_sun_to_wed,
            "onCallThurs": self.on_call_thurs,
            "onCallFriToSat": self.on_call_fri_to_sat,
            "daysInMonth": self.days_in_month,
            "firstDayOfMonth": self.first_day_of_month,
            "onCallWeekday": self.weekday_points,
            "onCallWeekend": self.weekend_points,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Requirements":
        """
        Create from a dict of options.

        Accepts camelCase option names or field names. Blank or missing
        headcounts fall back to the placeholder defaults.
        """
        kwargs: Dict[str, int] = {}
        for key, value in d.items():
            field_name = OPTION_ALIASES.get(key, key)
            if field_name not in cls.__dataclass_fields__:
                continue
            if value is None or (isinstance(value, str) and not value.strip()):
                continue
            try:
                kwargs[field_name] = int(value)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Option {key!r} must be an integer, got {value!r}") from e
        return cls(**kwargs)

    @classmethod
    def validated(cls, d: Optional[Dict[str, Any]] = None, **kwargs) -> "Requirements":
        """Validate options through the pydantic layer, then build the dataclass."""
        from pydantic import ValidationError

        from .validated import ValidatedRequirements

        data = dict(d or {})
        data.update(kwargs)
        try:
            return ValidatedRequirements(**data).to_dataclass()
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e
