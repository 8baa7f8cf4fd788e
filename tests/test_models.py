"""Tests for domain models."""
import pytest

from oncall.errors import ConfigurationError
from oncall.models.availability import Availability, AvailabilityGrid
from oncall.models.person import Person
from oncall.models.requirements import Requirements
from oncall.models.schedule import Schedule
from oncall.models.shift import Shift, ShiftType, normalize_weekday
from oncall.models.validated import ValidatedRequirements

from conftest import N, P, X, make_grid


class TestShiftType:
    """Tests for ShiftType enum."""

    def test_tokens(self):
        assert ShiftType.ON_CALL_WEEKDAY.value == "OnCall-Weekday"
        assert ShiftType.ON_CALL_WEEKEND.value == "OnCall-Weekend"
        assert ShiftType.OFFICE_HOURS.value == "Office Hours"

    def test_is_weekend(self):
        assert ShiftType.ON_CALL_WEEKEND.is_weekend
        assert not ShiftType.ON_CALL_WEEKDAY.is_weekend

    def test_from_string(self):
        assert ShiftType.from_string("OnCall-Weekday") == ShiftType.ON_CALL_WEEKDAY
        assert ShiftType.from_string("we") == ShiftType.ON_CALL_WEEKEND
        assert ShiftType.from_string(" office_hours ") == ShiftType.OFFICE_HOURS

    def test_from_string_unknown(self):
        with pytest.raises(ValueError):
            ShiftType.from_string("Night")


class TestWeekday:
    def test_names_and_indices(self):
        assert normalize_weekday("Sunday") == 0
        assert normalize_weekday("thu") == 4
        assert normalize_weekday("6") == 6
        assert normalize_weekday(3) == 3

    def test_unknown(self):
        with pytest.raises(ValueError):
            normalize_weekday("Funday")


class TestAvailability:
    """Tests for availability parsing and the grid."""

    def test_from_string(self):
        assert Availability.from_string("Preferred") == Availability.PREFERRED
        assert Availability.from_string(" not  available ") == Availability.NOT_AVAILABLE
        assert Availability.from_string("Not Preferred") == Availability.NOT_PREFERRED

    def test_unknown_counts_as_not_preferred(self):
        assert Availability.from_string("") == Availability.NOT_PREFERRED
        assert Availability.from_string("maybe") == Availability.NOT_PREFERRED

    def test_grid_days_inferred_and_padded(self):
        grid = make_grid([[P, P, X], [N]])
        assert grid.days == 3
        assert grid.people_count == 2
        assert grid.status(1, 3) == Availability.NOT_PREFERRED

    def test_grid_truncates_to_days(self):
        grid = AvailabilityGrid.from_strings([[P, P, P, P]], days=2)
        assert grid.days == 2
        assert grid.preferred_days(0) == [1, 2]

    def test_status_is_one_indexed(self):
        grid = make_grid([[P, X]])
        assert grid.is_preferred(0, 1)
        assert grid.is_unavailable(0, 2)
        with pytest.raises(IndexError):
            grid.status(0, 0)
        with pytest.raises(IndexError):
            grid.status(0, 3)

    def test_available_people(self):
        grid = make_grid([[X, P], [N, X], [P, N]])
        assert grid.available_people(1) == [1, 2]
        assert grid.available_people(2) == [0, 2]

    def test_to_dataframe(self):
        grid = make_grid([[P, X]])
        df = grid.to_dataframe(["Alice"])
        assert list(df.columns) == [1, 2]
        assert df.loc["Alice", 2] == "Not Available"


class TestPerson:
    """Tests for Person model."""

    def test_name_is_stripped(self):
        assert Person(name="  Alice ").name == "Alice"

    def test_assign_accumulates_points(self):
        p = Person(name="Alice")
        p.assign(Shift("Alice", ShiftType.ON_CALL_WEEKEND, 6), 2)
        p.assign(Shift("Alice", ShiftType.ON_CALL_WEEKDAY, 2), 1)
        assert p.points == 3
        assert p.shift_count == 2
        assert p.count_shifts(ShiftType.ON_CALL_WEEKEND) == 1

    def test_sort_shifts(self):
        p = Person(name="Alice")
        for day in (5, 1, 3):
            p.assign(Shift("Alice", ShiftType.ON_CALL_WEEKDAY, day), 1)
        p.sort_shifts()
        assert p.days_assigned() == [1, 3, 5]

    def test_dict_round_trip(self):
        p = Person(name="Bob", id=2)
        p.assign(Shift("Bob", ShiftType.ON_CALL_WEEKDAY, 4), 1)
        restored = Person.from_dict(p.to_dict())
        assert restored.name == "Bob"
        assert restored.points == 1
        assert restored.shifts == p.shifts


class TestRequirements:
    """Tests for Requirements and its validated counterpart."""

    def test_defaults_are_placeholders(self):
        reqs = Requirements()
        assert (reqs.on_call_sun_to_wed, reqs.on_call_thurs, reqs.on_call_fri_to_sat) == (1, 1, 1)
        assert (reqs.weekday_points, reqs.weekend_points) == (1, 2)

    @pytest.mark.parametrize("kwargs", [
        {"days_in_month": 0},
        {"days_in_month": 32},
        {"first_day_of_month": 7},
        {"on_call_thurs": -1},
    ])
    def test_out_of_range(self, kwargs):
        with pytest.raises(ConfigurationError):
            Requirements(**kwargs)

    def test_from_dict_accepts_aliases(self):
        reqs = Requirements.from_dict({
            "onCallSunToWed": "2", "onCallThurs": 3, "daysInMonth": "31", "firstDayOfMonth": 5,
        })
        assert reqs.on_call_sun_to_wed == 2
        assert reqs.on_call_thurs == 3
        assert reqs.on_call_fri_to_sat == 1
        assert reqs.days_in_month == 31
        assert reqs.first_day_of_month == 5

    def test_from_dict_blank_uses_placeholder(self):
        reqs = Requirements.from_dict({"onCallFriToSat": " ", "onCallThurs": None})
        assert reqs.on_call_fri_to_sat == 1
        assert reqs.on_call_thurs == 1

    def test_from_dict_rejects_non_integer(self):
        with pytest.raises(ConfigurationError):
            Requirements.from_dict({"onCallThurs": "two"})

    def test_to_dict_round_trip(self):
        reqs = Requirements(days_in_month=28, first_day_of_month=3, on_call_fri_to_sat=2)
        assert Requirements.from_dict(reqs.to_dict()) == reqs

    def test_validated(self):
        reqs = Requirements.validated({"daysInMonth": 30, "onCallSunToWed": ""}, on_call_thurs=2)
        assert reqs.days_in_month == 30
        assert reqs.on_call_sun_to_wed == 1
        assert reqs.on_call_thurs == 2

    def test_validated_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            Requirements.validated({"daysInMonth": 40})
        with pytest.raises(ConfigurationError):
            Requirements.validated({"onCallThurs": -2})

    def test_pydantic_model_round_trip(self):
        reqs = Requirements(days_in_month=29, on_call_sun_to_wed=3)
        model = ValidatedRequirements.from_dataclass(reqs)
        assert model.to_dataclass() == reqs

    def test_month_info(self):
        month = Requirements(days_in_month=30, first_day_of_month=0).month
        assert month.num_weekends == 8
        assert month.num_thursdays == 4


class TestSchedule:
    """Tests for the day-bucket schedule."""

    def test_buckets(self):
        s = Schedule(days=3)
        s.add(Shift("A", ShiftType.ON_CALL_WEEKDAY, 2))
        s.add(Shift("B", ShiftType.ON_CALL_WEEKDAY, 2))
        assert s.count(2) == 2
        assert s.names_on(2) == ["A", "B"]
        assert s.count(1) == 0
        assert s.total_assigned == 2

    def test_bucket_out_of_range(self):
        s = Schedule(days=3)
        with pytest.raises(IndexError):
            s.bucket(0)
        with pytest.raises(IndexError):
            s.bucket(4)

