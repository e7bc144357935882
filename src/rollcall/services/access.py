"""Current-user pointer, role-based permission checks and QR check-in."""

from __future__ import annotations

import logging
from datetime import date

from rollcall.core.exceptions import EmployeeNotFoundError
from rollcall.models.attendance import AttendanceInput, AttendanceRecord
from rollcall.models.employee import Employee
from rollcall.models.master_data import AttendanceStatus, Permission, get_role_info
from rollcall.services.attendance_repository import AttendanceRepository

logger = logging.getLogger(__name__)

# Statuses a check-in code may carry; anything else only selects the user.
CHECK_IN_STATUSES = (AttendanceStatus.OFFICE, AttendanceStatus.WFH)


class AccessControl:
    """Resolves the "logged in" employee and their role permissions.

    There is no session: the pointer is a single stored employee id.
    """

    def __init__(self, repository: AttendanceRepository) -> None:
        self._repo = repository

    def get_current_user(self) -> Employee | None:
        user_id = self._repo.store.get_current_user()
        if not user_id:
            return None
        return self._repo.get_employee_by_id(user_id)

    def set_current_user(self, employee_id: str) -> None:
        self._repo.store.set_current_user(employee_id)

    def logout(self) -> None:
        self._repo.store.set_current_user(None)

    def has_permission(self, action: Permission | str) -> bool:
        user = self.get_current_user()
        if user is None:
            return False
        try:
            permission = Permission(action)
        except ValueError:
            return False
        return get_role_info(user.role).permissions.get(permission, False)

    def check_in(self, employee_id: str, kind: str, location: str = "",
                 today: date | None = None) -> AttendanceRecord | None:
        """Make ``employee_id`` the current user and record today's office/WFH status.

        The note reads ``QR Check-in (OFFICE at <location>)``. Kinds other than
        office and wfh select the user without recording anything.

        Raises:
            EmployeeNotFoundError: no employee matches ``employee_id``.
        """
        employee = self._repo.get_employee_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        self.set_current_user(employee.id)

        kind = (kind or "").strip().lower()
        if kind not in CHECK_IN_STATUSES:
            logger.info("Ignoring check-in of unknown type %r for %s", kind, employee.id)
            return None

        location = (location or "").strip()
        where = f" at {location}" if location else ""
        return self._repo.add_attendance(AttendanceInput(
            employee_id=employee.id,
            date=(today or date.today()).isoformat(),
            status=kind,
            note=f"QR Check-in ({kind.upper()}{where})",
        ))
