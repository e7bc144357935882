"""Current-user pointer, permission checks and QR check-in."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from rollcall.api.deps import get_access, get_repository
from rollcall.core.exceptions import EmployeeNotFoundError
from rollcall.services.access import AccessControl
from rollcall.services.attendance_repository import AttendanceRepository

router = APIRouter(tags=["session"])


class CurrentUserRequest(BaseModel):
    employee_id: str


class CheckInRequest(BaseModel):
    employee_id: str
    checkin: str
    loc: str = ""


@router.put("/session/current-user")
async def set_current_user(body: CurrentUserRequest,
                           repo: AttendanceRepository = Depends(get_repository),
                           access: AccessControl = Depends(get_access)) -> dict:
    employee = repo.get_employee_by_id(body.employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail=f"Employee {body.employee_id} not found")
    access.set_current_user(employee.id)
    return {"currentUser": employee.id}


@router.get("/permissions/{action}")
async def has_permission(action: str, access: AccessControl = Depends(get_access)) -> dict:
    return {"action": action, "allowed": access.has_permission(action)}


@router.post("/session/check-in")
async def check_in(body: CheckInRequest, access: AccessControl = Depends(get_access)) -> dict:
    """QR code check-in: ``checkin`` is office or wfh, ``loc`` labels the scanned code."""
    try:
        record = access.check_in(body.employee_id, body.checkin, body.loc)
    except EmployeeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {
        "currentUser": access.get_current_user().id,
        "record": None if record is None else record.model_dump(mode="json", by_alias=True),
    }
