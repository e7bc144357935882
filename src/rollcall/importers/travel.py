"""Travel-booking CSV import: business trips expanded into daily records.

Unknown employees are provisioned on the fly with placeholder master data.
Row-level problems never abort the file; they are collected in
``ImportResult.errors`` as ``"Row <line>: <message>"``.
"""

from __future__ import annotations

import logging
from typing import Optional

from rollcall.core.config import ImportConfig
from rollcall.core.exceptions import ImportPipelineError
from rollcall.importers.dates import normalize_date
from rollcall.importers.header_detection import detect_header
from rollcall.importers.scope import ImportContext
from rollcall.importers.tokenizer import detect_delimiter, parse_line, split_lines
from rollcall.models.employee import Employee
from rollcall.models.imports import ImportResult, ImportScope, TravelColumnMapping
from rollcall.models.master_data import AttendanceStatus, Position, get_locations, is_valid_location
from rollcall.services.attendance_repository import AttendanceRepository

logger = logging.getLogger(__name__)

DEFAULT_NAME = "New Employee"
DEFAULT_LOCATION = "LDN"
DEFAULT_DESTINATION = "Unknown"
DEFAULT_DEPARTMENT = "Operations"
REPEATED_HEADER_ID = "employee id"


def import_travel_csv(csv_text: str, repository: AttendanceRepository, scope: ImportScope | str = ImportScope.ALL,
                      scope_value: Optional[str] = None,
                      config: ImportConfig | None = None) -> ImportResult:
    """Import a travel-booking export (comma or tab separated).

    Returns ``success=False`` only when the file cannot be processed at all.
    """
    config = config or ImportConfig()
    try:
        context = ImportContext(repository, scope, scope_value)
        lines = split_lines(csv_text or "")
        if not any(line.strip() for line in lines):
            raise ImportPipelineError("CSV file is empty")
    except ImportPipelineError as exc:
        logger.warning("Travel import rejected: %s", exc)
        return ImportResult.failure(str(exc))

    delimiter = detect_delimiter(lines, config.delimiter_sample_lines)
    detection = detect_header(lines, delimiter, config.header_scan_lines)
    if detection.header_index is None:
        logger.info("No travel header found; using positional columns")
        first_data = 0
    else:
        first_data = detection.header_index + 1

    result = ImportResult()
    for index in range(first_data, len(lines)):
        if not lines[index].strip():
            continue
        try:
            _import_row(context, detection.mapping, parse_line(lines[index], delimiter), result, config)
        except Exception as exc:
            logger.debug("Travel row %d failed", index + 1, exc_info=True)
            result.errors.append(f"Row {index + 1}: {exc}")

    logger.info("Travel import finished: %d records, %d employees created, %d errors",
                result.imported, result.auto_created, len(result.errors))
    return result


def _import_row(context: ImportContext, mapping: TravelColumnMapping, columns: list[str],
                result: ImportResult, config: ImportConfig) -> None:
    employee_id = mapping.value("employee_id", columns)
    start_raw = mapping.value("start_date", columns)
    end_raw = mapping.value("end_date", columns)

    if not employee_id or employee_id.lower() == REPEATED_HEADER_ID or not start_raw or not end_raw:
        return
    if not context.in_employee_scope(employee_id):
        return

    start = normalize_date(start_raw)
    end = normalize_date(end_raw)

    repository = context.repository
    employee = repository.get_employee_by_id(employee_id)
    if not context.in_location_scope(employee):
        return

    if employee is None:
        employee = repository.add_employee(_provision_employee(
            employee_id,
            mapping.value("name", columns) or DEFAULT_NAME,
            mapping.value("location", columns) or DEFAULT_LOCATION,
            config,
        ))
        result.auto_created += 1
        logger.info("Auto-created employee %s from travel import", employee.id)

    destination = mapping.value("destination", columns) or DEFAULT_DESTINATION
    purpose = mapping.value("purpose", columns)
    country = mapping.value("country", columns)

    records = repository.add_attendance_range(
        employee.id, start, end, AttendanceStatus.BUSINESS_TRIP,
        purpose or f"Business trip to {destination}",
        {"destination": destination, "country": country or None},
    )
    result.imported += len(records)


def _provision_employee(employee_id: str, name: str, location: str, config: ImportConfig) -> Employee:
    location = location.strip().upper()
    if not is_valid_location(location):
        location = get_locations()[0]
    return Employee(
        id=employee_id,
        name=name,
        location=location,
        department=DEFAULT_DEPARTMENT,
        position=Position.OTHER,
        email=f"{employee_id.strip().lower()}@{config.email_domain}",
    )
