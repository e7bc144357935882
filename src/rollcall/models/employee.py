"""Employee master record, the identity every attendance record points at."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel

from rollcall.models.master_data import Location, Position, Role, get_role_from_position

# Documents are stored with camelCase keys; Python code uses snake_case.
DOCUMENT_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
    "str_strip_whitespace": True,
}


class Employee(BaseModel):
    """Single employee as stored in the ``employees`` collection."""

    model_config = DOCUMENT_CONFIG

    id: str
    name: str = ""
    location: Location = Location.LDN
    department: str = ""
    position: Position = Position.OTHER
    role: Optional[Role] = None  # derived from position when omitted
    manager: Optional[str] = None  # Employee.id of the line manager
    email: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def _derive_role(self) -> Employee:
        if self.role is None:
            self.role = get_role_from_position(self.position)
        return self

    @property
    def is_manager(self) -> bool:
        return self.role == Role.MANAGER


class EmployeeUpdate(BaseModel):
    """Partial employee patch; ``id`` is not patchable."""

    model_config = DOCUMENT_CONFIG

    name: Optional[str] = None
    location: Optional[Location] = None
    department: Optional[str] = None
    position: Optional[Position] = None
    role: Optional[Role] = None
    manager: Optional[str] = None
    email: Optional[str] = None
