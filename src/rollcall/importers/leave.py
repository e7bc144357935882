"""HR leave-system CSV import.

Fixed layout, header always present: employee id, name, start date, end
date, leave type, remaining days. Employees must already exist.
"""

from __future__ import annotations

import logging
from typing import Optional

from rollcall.core.exceptions import ImportPipelineError
from rollcall.importers.dates import normalize_date
from rollcall.importers.scope import ImportContext
from rollcall.importers.tokenizer import COMMA, parse_line, split_lines
from rollcall.models.imports import ImportResult, ImportScope
from rollcall.models.master_data import AttendanceStatus
from rollcall.services.attendance_repository import AttendanceRepository

logger = logging.getLogger(__name__)

LEAVE_COLUMNS = 6
SICK_NOTE = "Sick leave"


def classify_leave(leave_type: str, remaining_days: str) -> tuple[AttendanceStatus, str]:
    """Status and note for a leave type; anything mentioning "sick" is sick leave."""
    if "sick" in leave_type.lower():
        return AttendanceStatus.SICK, SICK_NOTE
    return AttendanceStatus.VACATION, f"{leave_type} ({remaining_days} days remaining)"


def import_leave_csv(csv_text: str, repository: AttendanceRepository, scope: ImportScope | str = ImportScope.ALL,
                     scope_value: Optional[str] = None) -> ImportResult:
    """Import a leave-system export as vacation/sick records."""
    try:
        context = ImportContext(repository, scope, scope_value)
        lines = split_lines(csv_text or "")
        if len(lines) < 2:
            raise ImportPipelineError("CSV file is empty")
    except ImportPipelineError as exc:
        logger.warning("Leave import rejected: %s", exc)
        return ImportResult.failure(str(exc))

    result = ImportResult()
    for index in range(1, len(lines)):
        if not lines[index].strip():
            continue
        row = index + 1
        try:
            columns = parse_line(lines[index], COMMA)
            if len(columns) < LEAVE_COLUMNS:
                result.errors.append(f"Row {row}: Insufficient columns")
                continue
            error = _import_row(context, columns, result)
            if error:
                result.errors.append(f"Row {row}: {error}")
        except Exception as exc:
            logger.debug("Leave row %d failed", row, exc_info=True)
            result.errors.append(f"Row {row}: {exc}")

    logger.info("Leave import finished: %d records, %d errors", result.imported, len(result.errors))
    return result


def _import_row(context: ImportContext, columns: list[str], result: ImportResult) -> str | None:
    """Import one row; returns an error message for rejected rows."""
    employee_id, _name, start_raw, end_raw, leave_type, remaining_days = columns[:LEAVE_COLUMNS]

    if not context.in_employee_scope(employee_id):
        return None

    employee = context.repository.get_employee_by_id(employee_id)
    if employee is None and context.scope == ImportScope.LOCATION:
        return None
    if employee is None:
        return f"Employee ID {employee_id} not found"
    if not context.in_location_scope(employee):
        return None

    status, note = classify_leave(leave_type, remaining_days)
    records = context.repository.add_attendance_range(
        employee.id, normalize_date(start_raw), normalize_date(end_raw), status, note,
    )
    result.imported += len(records)
    return None
