"""CSV import endpoints; gated on the ``canImport`` permission."""

from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from rollcall.api.deps import get_access, get_repository
from rollcall.importers import (
    generate_sample_leave_csv,
    generate_sample_travel_csv,
    import_leave_csv,
    import_travel_csv,
)
from rollcall.models.imports import ImportScope
from rollcall.models.master_data import Permission
from rollcall.services.access import AccessControl
from rollcall.services.attendance_repository import AttendanceRepository

router = APIRouter(tags=["imports"])


class ImportRequest(BaseModel):
    csv_text: str
    scope: ImportScope = ImportScope.ALL
    scope_value: Optional[str] = None


def _require_import(access: AccessControl) -> None:
    if not access.has_permission(Permission.CAN_IMPORT):
        raise HTTPException(status_code=403, detail="You do not have permission to import data")


@router.post("/travel")
async def import_travel(body: ImportRequest, request: Request,
                        repo: AttendanceRepository = Depends(get_repository),
                        access: AccessControl = Depends(get_access)) -> dict:
    _require_import(access)
    result = import_travel_csv(body.csv_text, repo, body.scope, body.scope_value,
                               config=request.app.state.settings.imports)
    return result.model_dump(by_alias=True)


@router.post("/leave")
async def import_leave(body: ImportRequest,
                       repo: AttendanceRepository = Depends(get_repository),
                       access: AccessControl = Depends(get_access)) -> dict:
    _require_import(access)
    result = import_leave_csv(body.csv_text, repo, body.scope, body.scope_value)
    return result.model_dump(by_alias=True)


@router.get("/samples/{kind}", response_class=PlainTextResponse)
async def sample(kind: Literal["travel", "leave"]) -> str:
    return generate_sample_travel_csv() if kind == "travel" else generate_sample_leave_csv()
