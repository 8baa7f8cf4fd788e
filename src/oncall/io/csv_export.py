"""CSV export of the person × day schedule grid."""
import io
from pathlib import Path
from typing import IO, List, Optional, Union

import pandas as pd

from oncall.models.person import Person
from oncall.models.rules import RULES
from oncall.models.schedule import Schedule
from oncall.utils.logging_setup import get_logger

logger = get_logger("oncall.io.csv_export")

DEFAULT_FILENAME = RULES.export_filename


def sort_person_shifts(people: List[Person]) -> None:
    """Stable sort of every person's shifts by day."""
    for p in people:
        p.sort_shifts()


def build_schedule_grid(people: List[Person], days: int) -> pd.DataFrame:
    """
    One row per person (roster order), columns ``Name, 1..days``.

    A cell holds the shift category token, or "" when the person is off that
    day. Two shifts of the same category on one day show once; different
    categories are joined with "/".
    """
    sort_person_shifts(people)
    rows = []
    for p in people:
        row = {"Name": p.name}
        row.update({day: "" for day in range(1, days + 1)})
        for s in p.shifts:
            if s.day > days:
                continue
            current = row[s.day]
            tokens = set(current.split("/")) if current else set()
            tokens.add(s.token)
            row[s.day] = "/".join(sorted(tokens))
        rows.append(row)
    return pd.DataFrame(rows, columns=["Name"] + list(range(1, days + 1)))


def generate_csv_content(schedule: Schedule, people: List[Person]) -> str:
    """Header ``Name,1,...,D`` then one line per person."""
    grid = build_schedule_grid(people, schedule.days)
    return grid.to_csv(index=False, lineterminator="\n")


def export_schedule_csv(
    schedule: Schedule,
    people: List[Person],
    output: Optional[Union[str, Path, IO]] = None,
) -> str:
    """
    Write the schedule grid as CSV.

    Args:
        schedule: Filled schedule
        people: Roster, in the row order wanted
        output: Path or text buffer (default ``schedule.csv``)

    Returns:
        The CSV content
    """
    content = generate_csv_content(schedule, people)
    if output is None:
        output = DEFAULT_FILENAME
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        logger.info(f"Schedule written to {output}")
    else:
        output.write(content)
    return content


def csv_bytes(schedule: Schedule, people: List[Person]) -> bytes:
    """CSV content encoded for a download button."""
    buffer = io.StringIO()
    export_schedule_csv(schedule, people, buffer)
    return buffer.getvalue().encode("utf-8")
