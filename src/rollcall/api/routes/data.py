"""Whole-store export/import and S3 export archives."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, HTTPException

from rollcall.api.deps import get_access, get_data_transfer
from rollcall.core.exceptions import ArchiveError
from rollcall.models.master_data import Permission
from rollcall.models.snapshot import DataSnapshot
from rollcall.services.access import AccessControl
from rollcall.services.data_transfer import DataTransferService

router = APIRouter(tags=["data"])


def _require(access: AccessControl, permission: Permission) -> None:
    if not access.has_permission(permission):
        raise HTTPException(status_code=403, detail=f"Missing permission {permission.value}")


@router.get("/export")
async def export_data(transfer: DataTransferService = Depends(get_data_transfer),
                      access: AccessControl = Depends(get_access)) -> dict:
    _require(access, Permission.CAN_EXPORT)
    return transfer.export_data().model_dump(mode="json", by_alias=True)


@router.post("/import")
async def import_data(snapshot: DataSnapshot = Body(...),
                      transfer: DataTransferService = Depends(get_data_transfer),
                      access: AccessControl = Depends(get_access)) -> dict:
    _require(access, Permission.CAN_EDIT)
    imported = transfer.import_data(snapshot)
    return {
        "employees": None if imported.employees is None else len(imported.employees),
        "attendance": None if imported.attendance is None else len(imported.attendance),
    }


@router.get("/archives")
async def list_archives(transfer: DataTransferService = Depends(get_data_transfer)) -> list[str]:
    try:
        return transfer.list_archives()
    except ArchiveError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc


@router.post("/archives")
async def archive_export(transfer: DataTransferService = Depends(get_data_transfer),
                         access: AccessControl = Depends(get_access)) -> dict[str, str]:
    _require(access, Permission.CAN_EXPORT)
    try:
        return {"path": transfer.archive_export()}
    except ArchiveError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from exc
