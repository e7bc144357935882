"""Attendance record models: one status per employee per calendar day."""

from __future__ import annotations

import re
from datetime import date as Date
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from rollcall.models.employee import DOCUMENT_CONFIG
from rollcall.models.master_data import AttendanceStatus

_ISO_LIKE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")


def to_iso_date(value: str | Date) -> str:
    """Return ``value`` as a zero-padded ``YYYY-MM-DD`` string.

    Raises ValueError for anything that is not a real calendar date.
    """
    if isinstance(value, Date):
        return value.isoformat()
    match = _ISO_LIKE.match(str(value).strip())
    if not match:
        raise ValueError(f"not an ISO calendar date: {value!r}")
    year, month, day = (int(g) for g in match.groups())
    return Date(year, month, day).isoformat()


class AttendanceInput(BaseModel):
    """Insert payload for ``add_attendance``."""

    model_config = DOCUMENT_CONFIG

    employee_id: str
    date: str
    status: AttendanceStatus
    note: str = ""
    country: Optional[str] = None
    destination: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: str | Date) -> str:
        return to_iso_date(value)


class AttendanceRecord(AttendanceInput):
    """Single attendance record as stored in the ``attendance`` collection."""

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AttendanceUpdate(BaseModel):
    """Partial attendance patch."""

    model_config = DOCUMENT_CONFIG

    employee_id: Optional[str] = None
    date: Optional[str] = None
    status: Optional[AttendanceStatus] = None
    note: Optional[str] = None
    country: Optional[str] = None
    destination: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: str | Date | None) -> str | None:
        return None if value is None else to_iso_date(value)


class StatusCount(BaseModel):
    count: int = 0
    label: str
    color: str


class AttendanceStatistics(BaseModel):
    """Per-status counts over a date range."""

    start_date: str
    end_date: str
    total: int = 0
    by_status: dict[AttendanceStatus, StatusCount] = Field(default_factory=dict)
