# oncall/io - Input/output handling
from .csv_export import DEFAULT_FILENAME, build_schedule_grid, export_schedule_csv, generate_csv_content
from .csv_loader import availability_from_rows, load_availability
from .excel_export import export_to_excel

__all__ = [
    "load_availability",
    "availability_from_rows",
    "build_schedule_grid",
    "generate_csv_content",
    "export_schedule_csv",
    "export_to_excel",
    "DEFAULT_FILENAME",
]
