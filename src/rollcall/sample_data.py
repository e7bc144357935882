"""Demo employees and a month of generated attendance for a fresh store."""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta

from rollcall.core.exceptions import EmployeeValidationError
from rollcall.models.attendance import AttendanceInput
from rollcall.models.employee import Employee
from rollcall.models.master_data import AttendanceStatus
from rollcall.services.access import AccessControl
from rollcall.services.attendance_repository import AttendanceRepository

logger = logging.getLogger(__name__)

DEMO_USER_ID = "EMP001"

_SAMPLE_EMPLOYEES: list[dict] = [
    # London
    {"id": "EMP001", "name": "John Smith", "location": "LDN", "department": "Sales", "position": "gm",
     "email": "john.smith@company.com"},
    {"id": "EMP002", "name": "Sarah Johnson", "location": "LDN", "department": "Finance",
     "position": "office_manager", "email": "sarah.johnson@company.com"},
    {"id": "EMP003", "name": "Michael Brown", "location": "LDN", "department": "Sales", "position": "other",
     "manager": "EMP001", "email": "michael.brown@company.com"},
    # Düsseldorf
    {"id": "EMP004", "name": "Anna Schmidt", "location": "DSS", "department": "Sales", "position": "dgm",
     "email": "anna.schmidt@company.com"},
    {"id": "EMP005", "name": "Thomas Müller", "location": "DSS", "department": "Operations", "position": "other",
     "manager": "EMP004", "email": "thomas.mueller@company.com"},
    # Hamburg
    {"id": "EMP006", "name": "Emma Weber", "location": "HBG", "department": "IT", "position": "office_manager",
     "email": "emma.weber@company.com"},
    {"id": "EMP007", "name": "Lucas Fischer", "location": "HBG", "department": "IT", "position": "other",
     "manager": "EMP006", "email": "lucas.fischer@company.com"},
    # Paris
    {"id": "EMP008", "name": "Sophie Martin", "location": "PRS", "department": "HR", "position": "gm",
     "email": "sophie.martin@company.com"},
    {"id": "EMP009", "name": "Pierre Dubois", "location": "PRS", "department": "Finance", "position": "other",
     "manager": "EMP008", "email": "pierre.dubois@company.com"},
    # Milan
    {"id": "EMP010", "name": "Giulia Rossi", "location": "MIL", "department": "Sales", "position": "dgm",
     "email": "giulia.rossi@company.com"},
    {"id": "EMP011", "name": "Marco Bianchi", "location": "MIL", "department": "Operations", "position": "other",
     "manager": "EMP010", "email": "marco.bianchi@company.com"},
    {"id": "EMP012", "name": "Emily Davis", "location": "LDN", "department": "HR", "position": "other",
     "manager": "EMP002", "email": "emily.davis@company.com"},
    {"id": "EMP013", "name": "佐藤太郎", "location": "LDN", "department": "Sales", "position": "gm",
     "email": "taro.sato@company.com"},
]

# (status, weight); weights sum to 1
_STATUS_WEIGHTS = [
    (AttendanceStatus.OFFICE, 0.5),
    (AttendanceStatus.WFH, 0.25),
    (AttendanceStatus.BUSINESS_TRIP, 0.1),
    (AttendanceStatus.OUT, 0.05),
    (AttendanceStatus.VACATION, 0.08),
    (AttendanceStatus.SICK, 0.02),
]
_DESTINATIONS = ["Tokyo", "New York", "Singapore", "Dubai", "Sydney"]


def generate_sample_employees() -> list[Employee]:
    return [Employee.model_validate(e) for e in _SAMPLE_EMPLOYEES]


def _note_for(status: AttendanceStatus, rng: random.Random) -> tuple[str, str | None]:
    if status == AttendanceStatus.BUSINESS_TRIP:
        destination = rng.choice(_DESTINATIONS)
        return f"Business trip to {destination}", destination
    if status == AttendanceStatus.OUT:
        return "Client meeting", None
    if status == AttendanceStatus.VACATION:
        return "Annual leave", None
    if status == AttendanceStatus.SICK:
        return "Sick leave", None
    return "", None


def generate_sample_attendance(employees: list[Employee], today: date | None = None,
                               rng: random.Random | None = None) -> list[AttendanceInput]:
    """Weekday records from the first of ``today``'s month up to ``today``."""
    today = today or date.today()
    rng = rng or random.Random()
    statuses = [s for s, _ in _STATUS_WEIGHTS]
    weights = [w for _, w in _STATUS_WEIGHTS]

    records: list[AttendanceInput] = []
    for employee in employees:
        day = today.replace(day=1)
        while day <= today:
            if day.weekday() < 5:
                status = rng.choices(statuses, weights)[0]
                note, destination = _note_for(status, rng)
                records.append(AttendanceInput(
                    employee_id=employee.id, date=day.isoformat(), status=status,
                    note=note, destination=destination,
                ))
            day += timedelta(days=1)
    return records


def initialize_sample_data(repository: AttendanceRepository, access: AccessControl,
                           today: date | None = None, rng: random.Random | None = None) -> bool:
    """Seed demo data into an empty store; returns False when employees already exist."""
    if repository.get_all_employees():
        return False

    employees = []
    for employee in generate_sample_employees():
        try:
            employees.append(repository.add_employee(employee))
        except EmployeeValidationError:
            logger.exception("Skipping sample employee %s", employee.id)

    for record in generate_sample_attendance(employees, today, rng):
        repository.add_attendance(record)

    access.set_current_user(DEMO_USER_ID)
    logger.info("Sample data initialized: %d employees", len(employees))
    return True
