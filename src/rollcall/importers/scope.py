"""Import scope: which rows of a file an import is allowed to touch."""

from __future__ import annotations

from typing import Optional

from rollcall.core.exceptions import ImportPipelineError
from rollcall.models.employee import Employee
from rollcall.models.imports import ImportScope
from rollcall.services.attendance_repository import AttendanceRepository, normalize_employee_id


class ImportContext:
    """Repository plus scope shared by the per-row import steps."""

    def __init__(self, repository: AttendanceRepository, scope: ImportScope | str = ImportScope.ALL,
                 scope_value: Optional[str] = None) -> None:
        try:
            self.scope = ImportScope(scope)
        except ValueError as exc:
            raise ImportPipelineError(f"Unknown import scope: {scope!r}") from exc
        self.scope_value = (scope_value or "").strip()
        if self.scope != ImportScope.ALL and not self.scope_value:
            raise ImportPipelineError(f"Scope {self.scope.value!r} requires a scope value")
        self.repository = repository

    def in_employee_scope(self, employee_id: str) -> bool:
        if self.scope != ImportScope.EMPLOYEE:
            return True
        return normalize_employee_id(employee_id) == normalize_employee_id(self.scope_value)

    def in_location_scope(self, employee: Employee | None) -> bool:
        """Location scope only admits rows for existing employees at that location."""
        if self.scope != ImportScope.LOCATION:
            return True
        return employee is not None and employee.location == self.scope_value.upper()
