"""CSV import models: scope, detected column layout and import outcome."""

from __future__ import annotations

from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ImportScope(StrEnum):
    ALL = "all"
    LOCATION = "location"
    EMPLOYEE = "employee"


class TravelColumnMapping(BaseModel):
    """Column index per semantic field of a travel-booking export.

    ``None`` means the column is absent, which is distinct from index 0.
    """

    employee_id: Optional[int] = None
    name: Optional[int] = None
    location: Optional[int] = None
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    destination: Optional[int] = None
    purpose: Optional[int] = None
    country: Optional[int] = None

    @classmethod
    def positional(cls) -> TravelColumnMapping:
        """Fixed layout used when no header row is recognised."""
        return cls(employee_id=0, name=1, start_date=2, end_date=3, destination=4)

    def value(self, field: str, columns: list[str]) -> str:
        """Cell for ``field`` in a tokenized row; empty when absent or short."""
        index = getattr(self, field)
        if index is None or index >= len(columns):
            return ""
        return columns[index]


class HeaderDetection(BaseModel):
    """Outcome of header-row detection."""

    mapping: TravelColumnMapping
    header_index: Optional[int] = None  # None: no header, every line is data
    score: int = 0


class ImportResult(BaseModel):
    """Aggregate outcome returned by both CSV importers."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    success: bool = True
    imported: int = 0
    auto_created: int = 0
    errors: list[str] = Field(default_factory=list)

    @classmethod
    def failure(cls, message: str) -> ImportResult:
        return cls(success=False, errors=[message])
