"""Canonical example files offered as "download sample" for each import format."""

from __future__ import annotations

TRAVEL_SAMPLE_ROWS = [
    "Employee ID,Name,Start Date,End Date,Destination",
    "EMP001,John Smith,2026-02-20,2026-02-22,Tokyo",
    "EMP002,Sarah Johnson,2026-02-25,2026-02-27,Paris",
    "EMP003,Michael Brown,2026-03-01,2026-03-03,London",
]

LEAVE_SAMPLE_ROWS = [
    "Employee ID,Name,Start Date,End Date,Leave Type,Remaining Days",
    "EMP004,Anna Schmidt,2026-02-18,2026-02-19,Annual Leave,15",
    "EMP005,Thomas Müller,2026-02-21,2026-02-21,Sick Leave,20",
    "EMP006,Emma Weber,2026-02-24,2026-02-26,Annual Leave,12",
]


def generate_sample_travel_csv() -> str:
    return "\n".join(TRAVEL_SAMPLE_ROWS)


def generate_sample_leave_csv() -> str:
    return "\n".join(LEAVE_SAMPLE_ROWS)
