"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from oncall.models.availability import Availability, AvailabilityGrid
from oncall.models.person import Person
from oncall.models.requirements import Requirements

P = Availability.PREFERRED.value
N = Availability.NOT_PREFERRED.value
X = Availability.NOT_AVAILABLE.value


def make_grid(rows):
    """Grid from rows of declaration strings."""
    return AvailabilityGrid.from_strings(rows)


def make_people(count, prefix="P"):
    return [Person(name=f"{prefix}{i}", id=i) for i in range(count)]


@pytest.fixture
def week_requirements():
    """One week starting Sunday, one person on call every day."""
    return Requirements(
        days_in_month=7,
        first_day_of_month=0,
        on_call_sun_to_wed=1,
        on_call_thurs=1,
        on_call_fri_to_sat=1,
    )


@pytest.fixture
def disjoint_week():
    """Four people whose Preferred days cover the week without overlap."""
    rows = [
        [P, P, N, N, N, N, N],
        [N, N, P, P, N, N, N],
        [N, N, N, N, P, P, N],
        [N, N, N, N, N, N, P],
    ]
    return make_people(4), make_grid(rows)


@pytest.fixture
def availability_csv(tmp_path):
    """Form export: timestamp, name, then one column per day."""
    header = "Timestamp,Name," + ",".join(str(d) for d in range(1, 8))
    lines = [
        header,
        "2024-05-01 10:00,Alice,Preferred,Preferred,Not Preferred,Not Preferred,Not Preferred,Not Preferred,Not Preferred",
        "2024-05-01 10:05,Bob,Not Preferred,Not Preferred,Preferred,Preferred,Not Preferred,Not Preferred,Not Preferred",
        "2024-05-01 10:07,Carol,Not Preferred,Not Preferred,Not Preferred,Not Preferred,Preferred,Preferred,Not Available",
        "2024-05-01 10:09,Dan,Not Available,Not Preferred,Not Preferred,Not Preferred,Not Preferred,Not Preferred,Preferred",
    ]
    path = tmp_path / "availability.csv"
    path.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8")
    return path
