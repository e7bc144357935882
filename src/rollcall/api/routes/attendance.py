"""Attendance and master-data read endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from rollcall.api.deps import get_repository
from rollcall.models.master_data import get_locations, get_status_info
from rollcall.services.attendance_repository import AttendanceRepository

router = APIRouter(tags=["attendance"])


@router.get("/attendance")
async def list_attendance(date: Optional[str] = None,
                          repo: AttendanceRepository = Depends(get_repository)) -> list[dict]:
    try:
        records = repo.get_all_attendance() if date is None else repo.get_attendance_by_date(date)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return [r.model_dump(mode="json", by_alias=True) for r in records]


@router.get("/locations")
async def locations() -> list[str]:
    return [loc.value for loc in get_locations()]


@router.get("/statuses/{status}")
async def status_info(status: str) -> dict:
    return get_status_info(status).model_dump(mode="json")
