"""Employee read endpoints used by the calendar, list and form views."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from rollcall.api.deps import get_repository
from rollcall.services.attendance_repository import AttendanceRepository

router = APIRouter(tags=["employees"])


@router.get("")
async def list_employees(repo: AttendanceRepository = Depends(get_repository)) -> list[dict]:
    return [e.model_dump(mode="json", by_alias=True) for e in repo.get_all_employees()]


@router.get("/{employee_id}")
async def get_employee(employee_id: str, repo: AttendanceRepository = Depends(get_repository)) -> dict:
    employee = repo.get_employee_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail=f"Employee {employee_id} not found")
    return employee.model_dump(mode="json", by_alias=True)
