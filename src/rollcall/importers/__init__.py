"""CSV import pipeline for travel-booking and leave-system exports."""

from __future__ import annotations

from rollcall.importers.dates import normalize_date
from rollcall.importers.leave import import_leave_csv
from rollcall.importers.samples import generate_sample_leave_csv, generate_sample_travel_csv
from rollcall.importers.tokenizer import detect_delimiter, parse_line
from rollcall.importers.travel import import_travel_csv

__all__ = [
    "detect_delimiter",
    "generate_sample_leave_csv",
    "generate_sample_travel_csv",
    "import_leave_csv",
    "import_travel_csv",
    "normalize_date",
    "parse_line",
]
