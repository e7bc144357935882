"""Request-scoped accessors for services held on ``app.state``."""

from __future__ import annotations

from fastapi import Request

from rollcall.services.access import AccessControl
from rollcall.services.attendance_repository import AttendanceRepository
from rollcall.services.data_transfer import DataTransferService


def get_repository(request: Request) -> AttendanceRepository:
    return request.app.state.repository


def get_access(request: Request) -> AccessControl:
    return request.app.state.access


def get_data_transfer(request: Request) -> DataTransferService:
    return request.app.state.data_transfer
