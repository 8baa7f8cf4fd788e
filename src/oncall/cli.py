from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict

from oncall.errors import SchedulingError
from oncall.io.csv_export import DEFAULT_FILENAME, export_schedule_csv
from oncall.io.csv_loader import load_availability
from oncall.io.excel_export import export_to_excel
from oncall.models.requirements import Requirements
from oncall.models.shift import normalize_weekday
from oncall.solver.engine import solve
from oncall.utils.logging_setup import get_logger, setup_logging

logger = get_logger("oncall.cli")


def _build_options(args: argparse.Namespace) -> Dict[str, Any]:
    opts: Dict[str, Any] = {
        "daysInMonth": args.days,
        "firstDayOfMonth": normalize_weekday(args.first_day),
    }
    if args.sun_wed is not None:
        opts["onCallSunToWed"] = args.sun_wed
    if args.thurs is not None:
        opts["onCallThurs"] = args.thurs
    if args.fri_sat is not None:
        opts["onCallFriToSat"] = args.fri_sat
    return opts


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Monthly on-call rota from an availability CSV")
    p.add_argument("--csv", required=True, help="Availability export (timestamp, name, one column per day)")
    p.add_argument("--days", type=int, required=True, help="Days in the month")
    p.add_argument("--first-day", default="0", help="Weekday of day 1: 0-6 (0 = Sunday) or a name")
    p.add_argument("--sun-wed", type=int, default=None, help="On-call headcount Sunday to Wednesday")
    p.add_argument("--thurs", type=int, default=None, help="On-call headcount Thursday")
    p.add_argument("--fri-sat", type=int, default=None, help="On-call headcount Friday and Saturday")
    p.add_argument("--output", default=DEFAULT_FILENAME, help=f"CSV output (default: {DEFAULT_FILENAME})")
    p.add_argument("--excel", default=None, help="Also write an Excel workbook here")
    p.add_argument("--log-file", default=None, help="Write a rotating log file")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--json", dest="json_out", action="store_true", help="Print the summary as JSON")
    args = p.parse_args(argv)

    level = {0: "WARNING", 1: "INFO"}.get(args.verbose, "DEBUG")
    setup_logging(level=level, log_file=args.log_file)

    try:
        reqs = Requirements.validated(_build_options(args))
        people, grid = load_availability(args.csv, days=reqs.days_in_month)
        result = solve(people, grid, reqs)
    except (SchedulingError, ValueError) as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2

    export_schedule_csv(result.schedule, result.people, args.output)
    if args.excel:
        export_to_excel(result, args.excel)

    summary = result.summary()
    if args.json_out:
        print(json.dumps({"summary": summary}, ensure_ascii=False, indent=2))
    else:
        print("Summary:")
        for k, v in summary.items():
            print(f" - {k}: {v}")
        for v in result.validation.get_critical_violations():
            print(f" ! {v.message}")
        print(f"Schedule written to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
