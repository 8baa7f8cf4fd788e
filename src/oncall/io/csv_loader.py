"""Loading of availability tables (form exports) into people and a grid."""
from pathlib import Path
from typing import IO, List, Optional, Sequence, Tuple, Union

import pandas as pd

from oncall.errors import InputUnreadableError
from oncall.models.availability import AvailabilityGrid
from oncall.models.person import Person
from oncall.utils.logging_setup import get_logger

logger = get_logger("oncall.io.csv_loader")

Source = Union[str, Path, IO, pd.DataFrame]


def read_availability_table(source: Source) -> pd.DataFrame:
    """
    Read the raw table as strings, header row consumed.

    Raises:
        InputUnreadableError: the file is missing, undecodable or empty
    """
    if isinstance(source, pd.DataFrame):
        return source.copy().fillna("").astype(str)
    try:
        df = pd.read_csv(source, dtype=str, keep_default_na=False, skipinitialspace=True, index_col=False)
    except FileNotFoundError as e:
        raise InputUnreadableError(f"File could not be read: {e}") from e
    except UnicodeDecodeError as e:
        raise InputUnreadableError(f"File could not be decoded as text: {e}") from e
    except pd.errors.EmptyDataError as e:
        raise InputUnreadableError("File is empty") from e
    except pd.errors.ParserError as e:
        raise InputUnreadableError(f"File is not a valid CSV table: {e}") from e
    return df


def load_availability(
    source: Source,
    days: Optional[int] = None,
) -> Tuple[List[Person], AvailabilityGrid]:
    """
    Load people and their availability from a form export.

    Layout: header row, then one row per person with
    ``timestamp, name, day 1, day 2, ...``. The timestamp column is dropped.

    Args:
        source: Path, file-like object or DataFrame
        days: Days in the month; extra columns are ignored, missing ones
            count as Not Preferred

    Returns:
        (people, grid) with ``grid`` row ``i`` belonging to ``people[i]``
    """
    df = read_availability_table(source)
    if df.shape[1] < 2:
        raise InputUnreadableError(
            "Table must have a timestamp column and a name column before the day columns"
        )

    # Drop timestamp; name is the next column
    body = df.iloc[:, 1:]
    rows = body.values.tolist()
    return availability_from_rows(rows, days=days)


def availability_from_rows(
    rows: Sequence[Sequence[str]],
    days: Optional[int] = None,
) -> Tuple[List[Person], AvailabilityGrid]:
    """
    Build people and grid from already-split rows ``[name, day1, day2, ...]``.

    Rows with a blank name are skipped.
    """
    people: List[Person] = []
    cells: List[List[str]] = []
    for row in rows:
        if not row or not str(row[0]).strip():
            continue
        person = Person(name=str(row[0]), id=len(people))
        people.append(person)
        cells.append([str(c) for c in row[1:]])

    if not people:
        raise InputUnreadableError("No people found in availability table")

    declared = max(len(c) for c in cells)
    if days is not None and declared < days:
        logger.warning(f"Table declares {declared} days, month has {days}: missing days count as Not Preferred")
    grid = AvailabilityGrid.from_strings(cells, days=days if days is not None else declared)
    logger.info(f"Loaded availability for {len(people)} people over {grid.days} days")
    return people, grid


def availability_to_dataframe(people: List[Person], grid: AvailabilityGrid) -> pd.DataFrame:
    """Person × day table for display."""
    return grid.to_dataframe([p.name for p in people])
