"""
Pydantic Validated Models
=========================
Validation layer for requirement options arriving from the web form,
the CLI or JSON.

Usage:
    from oncall.models.validated import ValidatedRequirements

    reqs = ValidatedRequirements(onCallSunToWed=2, daysInMonth=31).to_dataclass()

Note: the ``Requirements`` dataclass stays the type the solver consumes.
"""
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .rules import RULES

_HEADCOUNT_DEFAULTS = {
    "on_call_sun_to_wed": RULES.default_staffing["sun_to_wed"],
    "on_call_thurs": RULES.default_staffing["thurs"],
    "on_call_fri_to_sat": RULES.default_staffing["fri_to_sat"],
}


class ValidatedRequirements(BaseModel):
    """
    Pydantic-validated requirements.

    Use this for strict validation at input boundaries.
    Can be converted to/from the dataclass Requirements.
    """
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    # Staffing
    on_call_sun_to_wed: int = Field(
        default=_HEADCOUNT_DEFAULTS["on_call_sun_to_wed"], ge=0, le=50, alias="onCallSunToWed"
    )
    on_call_thurs: int = Field(
        default=_HEADCOUNT_DEFAULTS["on_call_thurs"], ge=0, le=50, alias="onCallThurs"
    )
    on_call_fri_to_sat: int = Field(
        default=_HEADCOUNT_DEFAULTS["on_call_fri_to_sat"], ge=0, le=50, alias="onCallFriToSat"
    )

    # Month shape
    days_in_month: int = Field(default=RULES.default_days_in_month, ge=1, le=31, alias="daysInMonth")
    first_day_of_month: int = Field(
        default=RULES.default_first_day, ge=0, le=6, alias="firstDayOfMonth",
        description="0 = Sunday .. 6 = Saturday",
    )

    # Points
    weekday_points: int = Field(default=RULES.weekday_points, ge=0, alias="onCallWeekday")
    weekend_points: int = Field(default=RULES.weekend_points, ge=0, alias="onCallWeekend")

    @field_validator("on_call_sun_to_wed", "on_call_thurs", "on_call_fri_to_sat", mode="before")
    @classmethod
    def blank_to_placeholder(cls, v, info: ValidationInfo):
        """Blank inputs take the placeholder headcount."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return _HEADCOUNT_DEFAULTS[info.field_name]
        return v

    def to_dataclass(self):
        """Convert to the Requirements dataclass."""
        from oncall.models.requirements import Requirements

        return Requirements(
            days_in_month=self.days_in_month,
            first_day_of_month=self.first_day_of_month,
            on_call_sun_to_wed=self.on_call_sun_to_wed,
            on_call_thurs=self.on_call_thurs,
            on_call_fri_to_sat=self.on_call_fri_to_sat,
            weekday_points=self.weekday_points,
            weekend_points=self.weekend_points,
        )

    @classmethod
    def from_dataclass(cls, reqs) -> "ValidatedRequirements":
        """Create from dataclass Requirements."""
        return cls(
            days_in_month=reqs.days_in_month,
            first_day_of_month=reqs.first_day_of_month,
            on_call_sun_to_wed=reqs.on_call_sun_to_wed,
            on_call_thurs=reqs.on_call_thurs,
            on_call_fri_to_sat=reqs.on_call_fri_to_sat,
            weekday_points=reqs.weekday_points,
            weekend_points=reqs.weekend_points,
        )
