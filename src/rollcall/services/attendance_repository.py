"""AttendanceRepository: the only component that mutates the record store.

Enforces the identity rules: employee IDs match case/whitespace-insensitively,
and there is at most one attendance record per (employee, date) pair.
"""

from __future__ import annotations

import logging
import secrets
import time
from datetime import date as Date
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional

from rollcall.core.exceptions import DuplicateIDError, MissingIDError
from rollcall.models.attendance import (
    AttendanceInput,
    AttendanceRecord,
    AttendanceStatistics,
    AttendanceUpdate,
    StatusCount,
    to_iso_date,
)
from rollcall.models.employee import Employee, EmployeeUpdate
from rollcall.models.master_data import AttendanceStatus, Role, get_role_from_position, get_statuses
from rollcall.persistence.record_store import Collection, RecordStore

logger = logging.getLogger(__name__)


def normalize_employee_id(employee_id: Optional[str]) -> str:
    """Comparison key for employee IDs."""
    return (employee_id or "").strip().lower()


def _now() -> datetime:
    return datetime.now(timezone.utc)


class AttendanceRepository:
    """CRUD and queries over employees and attendance records."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    @property
    def store(self) -> RecordStore:
        return self._store

    # ---- employees ----

    def get_all_employees(self) -> list[Employee]:
        return self._store.get(Collection.EMPLOYEES)

    def get_employee_by_id(self, employee_id: Optional[str]) -> Employee | None:
        key = normalize_employee_id(employee_id)
        if not key:
            return None
        for employee in self.get_all_employees():
            if normalize_employee_id(employee.id) == key:
                return employee
        return None

    def employee_id_exists(self, employee_id: str) -> bool:
        return self.get_employee_by_id(employee_id) is not None

    def add_employee(self, employee: Employee | Mapping[str, Any]) -> Employee:
        """Insert a new employee.

        Raises:
            MissingIDError: ``id`` is empty.
            DuplicateIDError: an employee with the same normalized id exists.
        """
        if isinstance(employee, Mapping):
            if not str(employee.get("id") or "").strip():
                raise MissingIDError()
            employee = Employee.model_validate(employee)
        if not employee.id:
            raise MissingIDError()

        employees = self.get_all_employees()
        key = normalize_employee_id(employee.id)
        if any(normalize_employee_id(e.id) == key for e in employees):
            raise DuplicateIDError(employee.id)

        created = employee.model_copy(update={"created_at": _now()})
        employees.append(created)
        self._store.set(Collection.EMPLOYEES, employees)
        logger.debug("Added employee %s", created.id)
        return created

    def update_employee(self, employee_id: str, patch: EmployeeUpdate | Mapping[str, Any]) -> Employee | None:
        """Apply ``patch``; returns None when the employee does not exist."""
        if isinstance(patch, Mapping):
            patch = EmployeeUpdate.model_validate(patch)
        changes = patch.model_dump(exclude_unset=True)
        if changes.get("position") is not None and changes.get("role") is None:
            changes["role"] = get_role_from_position(changes["position"])

        employees = self.get_all_employees()
        key = normalize_employee_id(employee_id)
        for index, employee in enumerate(employees):
            if normalize_employee_id(employee.id) == key:
                merged = {**employee.model_dump(), **changes, "updated_at": _now()}
                employees[index] = Employee.model_validate(merged)
                self._store.set(Collection.EMPLOYEES, employees)
                return employees[index]
        return None

    def delete_employee(self, employee_id: str) -> bool:
        """Remove the employee and every attendance record with the exact same ``employeeId``."""
        employees = self.get_all_employees()
        remaining = [e for e in employees if e.id != employee_id]
        self._store.set(Collection.EMPLOYEES, remaining)

        attendance = self.get_all_attendance()
        kept = [a for a in attendance if a.employee_id != employee_id]
        self._store.set(Collection.ATTENDANCE, kept)
        logger.info("Deleted employee %s (%d attendance records removed)",
                    employee_id, len(attendance) - len(kept))
        return len(remaining) != len(employees)

    def get_employees_by_location(self, location: str) -> list[Employee]:
        return [e for e in self.get_all_employees() if e.location == location]

    def get_employees_by_department(self, department: str) -> list[Employee]:
        return [e for e in self.get_all_employees() if e.department == department]

    def get_employees_by_role(self, role: str) -> list[Employee]:
        return [e for e in self.get_all_employees() if e.role == role]

    def get_managers(self) -> list[Employee]:
        return self.get_employees_by_role(Role.MANAGER)

    # ---- attendance ----

    def get_all_attendance(self) -> list[AttendanceRecord]:
        return self._store.get(Collection.ATTENDANCE)

    def get_attendance_by_id(self, record_id: str) -> AttendanceRecord | None:
        return next((a for a in self.get_all_attendance() if a.id == record_id), None)

    def get_attendance_by_employee_and_date(self, employee_id: str, day: str | Date) -> AttendanceRecord | None:
        key = normalize_employee_id(employee_id)
        iso = to_iso_date(day)
        for record in self.get_all_attendance():
            if record.date == iso and normalize_employee_id(record.employee_id) == key:
                return record
        return None

    def get_attendance_by_date(self, day: str | Date) -> list[AttendanceRecord]:
        iso = to_iso_date(day)
        return [a for a in self.get_all_attendance() if a.date == iso]

    def get_attendance_by_date_range(self, start: str | Date, end: str | Date) -> list[AttendanceRecord]:
        """Records with ``start <= date <= end``; ISO strings sort chronologically."""
        lo, hi = to_iso_date(start), to_iso_date(end)
        return [a for a in self.get_all_attendance() if lo <= a.date <= hi]

    def get_attendance_by_employee(self, employee_id: str) -> list[AttendanceRecord]:
        key = normalize_employee_id(employee_id)
        return [a for a in self.get_all_attendance() if normalize_employee_id(a.employee_id) == key]

    def add_attendance(self, attendance: AttendanceInput | Mapping[str, Any]) -> AttendanceRecord:
        """Insert a record, or overwrite the existing one for the same (employee, date)."""
        if isinstance(attendance, Mapping):
            attendance = AttendanceInput.model_validate(attendance)

        employee = self.get_employee_by_id(attendance.employee_id)
        employee_id = employee.id if employee is not None else attendance.employee_id
        fields = attendance.model_dump(exclude_unset=True)
        fields["employee_id"] = employee_id

        existing = self.get_attendance_by_employee_and_date(employee_id, attendance.date)
        if existing is not None:
            return self.update_attendance(existing.id, fields)

        records = self.get_all_attendance()
        now = _now()
        record = AttendanceRecord.model_validate({
            **fields,
            "id": self._generate_id("ATT", {r.id for r in records}),
            "created_at": now,
            "updated_at": now,
        })
        records.append(record)
        self._store.set(Collection.ATTENDANCE, records)
        return record

    def add_attendance_range(self, employee_id: str, start: str | Date, end: str | Date,
                             status: AttendanceStatus | str, note: str = "",
                             meta: Mapping[str, Any] | None = None) -> list[AttendanceRecord]:
        """Upsert one record per calendar day from ``start`` to ``end`` inclusive.

        Dates are handled as calendar dates, never instants. ``meta`` may carry
        ``country`` and ``destination``; absent keys are cleared on existing days.

        Raises:
            ValueError: either bound is not an ISO calendar date.
        """
        first = Date.fromisoformat(to_iso_date(start))
        last = Date.fromisoformat(to_iso_date(end))
        # Absent metadata is sent as None and clears it on an overwritten day.
        extra = {k: (meta or {}).get(k) for k in ("country", "destination")}

        records: list[AttendanceRecord] = []
        day = first
        while day <= last:
            records.append(self.add_attendance(AttendanceInput(
                employee_id=employee_id, date=day.isoformat(), status=status, note=note, **extra,
            )))
            day += timedelta(days=1)
        return records

    def update_attendance(self, record_id: str, patch: AttendanceUpdate | Mapping[str, Any]) -> AttendanceRecord | None:
        if isinstance(patch, Mapping):
            patch = AttendanceUpdate.model_validate(patch)
        changes = patch.model_dump(exclude_unset=True)

        records = self.get_all_attendance()
        for index, record in enumerate(records):
            if record.id == record_id:
                merged = {**record.model_dump(), **changes, "updated_at": _now()}
                records[index] = AttendanceRecord.model_validate(merged)
                self._store.set(Collection.ATTENDANCE, records)
                return records[index]
        return None

    def delete_attendance(self, record_id: str) -> bool:
        records = self.get_all_attendance()
        kept = [a for a in records if a.id != record_id]
        self._store.set(Collection.ATTENDANCE, kept)
        return len(kept) != len(records)

    # ---- maintenance & reporting ----

    def get_statistics(self, start: str | Date, end: str | Date) -> AttendanceStatistics:
        records = self.get_attendance_by_date_range(start, end)
        stats = AttendanceStatistics(
            start_date=to_iso_date(start), end_date=to_iso_date(end), total=len(records),
        )
        for info in get_statuses():
            stats.by_status[info.value] = StatusCount(
                count=sum(1 for r in records if r.status == info.value),
                label=info.label,
                color=info.color,
            )
        return stats

    def clear_all_data(self) -> None:
        self._store.remove_all()

    @staticmethod
    def _generate_id(prefix: str, taken: set[str]) -> str:
        """``<prefix><epoch ms><3 random digits>``, unique among ``taken``."""
        while True:
            candidate = f"{prefix}{int(time.time() * 1000)}{secrets.randbelow(1000):03d}"
            if candidate not in taken:
                return candidate
