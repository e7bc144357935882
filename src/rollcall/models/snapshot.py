"""Full data export document."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

from rollcall.models.attendance import AttendanceRecord
from rollcall.models.employee import DOCUMENT_CONFIG, Employee


class DataSnapshot(BaseModel):
    """Employees and attendance as exported; ``None`` collections are left untouched on import."""

    model_config = DOCUMENT_CONFIG

    employees: Optional[list[Employee]] = None
    attendance: Optional[list[AttendanceRecord]] = None
    exported_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
