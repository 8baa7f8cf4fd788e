"""Excel export functionality for schedules."""
import io
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from oncall.models.person import Person
from oncall.models.rules import SHIFTS
from oncall.models.shift import WEEKDAY_NAMES
from oncall.solver.engine import ScheduleResult
from oncall.solver.stats import stats_to_dict_list

from .csv_export import build_schedule_grid

# Fill colors keyed by shift token
SHIFT_COLORS = {token: cfg.color_bg.lstrip("#") for token, cfg in SHIFTS.items()}
SHORT_COLOR = "FFC7CE"

THIN = Side(border_style="thin", color="CCCCCC")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)


def _fill(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _write_day_headers(ws, days: int, first_day: int, start_col: int = 2):
    """Day numbers on row 1, weekday names on row 2."""
    ws.cell(row=1, column=1, value="Name").font = Font(bold=True)
    for day in range(1, days + 1):
        c = start_col + day - 1
        weekday = WEEKDAY_NAMES[(first_day + day - 1) % 7]
        for r, val in ((1, day), (2, weekday)):
            cell = ws.cell(row=r, column=c, value=val)
            cell.font = Font(bold=True)
            cell.alignment = Alignment(horizontal="center", vertical="center")


def export_to_excel(
    result: ScheduleResult,
    output: Union[str, Path, io.BytesIO],
    people: Optional[List[Person]] = None,
    config: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Export a schedule result to an Excel workbook.

    Sheets:
        Summary: run metrics and coverage counts
        Schedule: person × day grid colored by shift type, plus coverage rows
        Stats: per-person statistics

    Args:
        result: Output of ``solve``
        output: File path or BytesIO buffer
        people: Row order (default: roster order)
        config: Extra key/values listed on the summary sheet
    """
    ctx = result.context
    people = people if people is not None else ctx.people
    days = ctx.days
    wb = Workbook()

    # ========== Summary Sheet ==========
    ws_sum = wb.active
    ws_sum.title = "Summary"
    summary_rows = [["Metric", "Value"]]
    for key, val in result.summary().items():
        if isinstance(val, dict):
            val = ", ".join(f"{k}={v}" for k, v in val.items())
        summary_rows.append([key, val])
    for key, val in (config or {}).items():
        summary_rows.append([key, str(val)])

    for i, row_data in enumerate(summary_rows, start=1):
        for j, val in enumerate(row_data, start=1):
            cell = ws_sum.cell(row=i, column=j, value=val)
            if i == 1:
                cell.font = Font(bold=True)

    if result.validation.violations:
        start = len(summary_rows) + 3
        ws_sum.cell(row=start - 1, column=1, value="Issues").font = Font(bold=True)
        for i, v in enumerate(result.validation.violations):
            ws_sum.cell(row=start + i, column=1, value=v.type)
            ws_sum.cell(row=start + i, column=2, value=v.message)

    for i in range(1, 3):
        ws_sum.column_dimensions[get_column_letter(i)].width = 28
    ws_sum.freeze_panes = "A2"

    # ========== Schedule Sheet ==========
    ws = wb.create_sheet("Schedule")
    _write_day_headers(ws, days, ctx.requirements.first_day_of_month)
    ws.freeze_panes = "B3"

    grid = build_schedule_grid(people, days)
    for r, row in enumerate(grid.to_dict("records"), start=3):
        ws.cell(row=r, column=1, value=row["Name"])
        for day in range(1, days + 1):
            val = row[day]
            cell = ws.cell(row=r, column=1 + day, value=val)
            if val in SHIFT_COLORS:
                cell.fill = _fill(SHIFT_COLORS[val])
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = BORDER_THIN

    # Coverage rows
    cov_row = len(grid) + 4
    ws.cell(row=cov_row, column=1, value="Assigned").font = Font(bold=True)
    ws.cell(row=cov_row + 1, column=1, value="Required").font = Font(bold=True)
    for day in range(1, days + 1):
        assigned = ctx.schedule.count(day)
        required = ctx.day_requirements[day].required
        a_cell = ws.cell(row=cov_row, column=1 + day, value=assigned)
        ws.cell(row=cov_row + 1, column=1 + day, value=required)
        if assigned < required:
            a_cell.fill = _fill(SHORT_COLOR)
        a_cell.alignment = Alignment(horizontal="center")

    ws.column_dimensions["A"].width = 22
    for day in range(1, days + 1):
        ws.column_dimensions[get_column_letter(1 + day)].width = 15

    # ========== Stats Sheet ==========
    ws_st = wb.create_sheet("Stats")
    stats = stats_to_dict_list(result.stats)
    if stats:
        headers = list(stats[0].keys())
        for j, col in enumerate(headers, start=1):
            ws_st.cell(row=1, column=j, value=col).font = Font(bold=True)
        for i, row in enumerate(stats, start=2):
            for j, col in enumerate(headers, start=1):
                ws_st.cell(row=i, column=j, value=row[col])
        for i in range(1, len(headers) + 1):
            ws_st.column_dimensions[get_column_letter(i)].width = 14
        ws_st.freeze_panes = "A2"

    if isinstance(output, io.BytesIO):
        wb.save(output)
    else:
        wb.save(str(output))


def excel_bytes(result: ScheduleResult) -> bytes:
    """Workbook content for a download button."""
    buffer = io.BytesIO()
    export_to_excel(result, buffer)
    return buffer.getvalue()
