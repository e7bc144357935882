"""Organization, position, role and status master tables.

These tables are fixed configuration; views read them through the helper
functions at the bottom of this module.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Location(StrEnum):
    LDN = "LDN"
    DSS = "DSS"
    HBG = "HBG"
    PRS = "PRS"
    MIL = "MIL"


class Position(StrEnum):
    OFFICE_MANAGER = "office_manager"
    GM = "gm"
    DGM = "dgm"
    OTHER = "other"


class Role(StrEnum):
    MANAGER = "manager"
    GENERAL = "general"


class Permission(StrEnum):
    CAN_VIEW = "canView"
    CAN_EDIT = "canEdit"
    CAN_DELETE = "canDelete"
    CAN_IMPORT = "canImport"
    CAN_EXPORT = "canExport"
    CAN_MANAGE_EMPLOYEES = "canManageEmployees"


class AttendanceStatus(StrEnum):
    OFFICE = "office"
    WFH = "wfh"
    BUSINESS_TRIP = "business_trip"
    OUT = "out"
    VACATION = "vacation"
    SICK = "sick"


class PositionInfo(BaseModel):
    label: str
    role: Role


class RoleInfo(BaseModel):
    label: str
    permissions: dict[Permission, bool]


class StatusInfo(BaseModel):
    value: AttendanceStatus
    label: str
    color: str


LOCATIONS: list[Location] = list(Location)

DEPARTMENTS: dict[Location, list[str]] = {
    Location.LDN: ["Sales", "Finance", "HR", "IT", "Operations"],
    Location.DSS: ["Sales", "Finance", "HR", "Operations"],
    Location.HBG: ["Sales", "Finance", "IT", "Operations"],
    Location.PRS: ["Sales", "Finance", "HR", "IT"],
    Location.MIL: ["Sales", "Finance", "Operations"],
}

POSITIONS: dict[Position, PositionInfo] = {
    Position.OFFICE_MANAGER: PositionInfo(label="Office Manager", role=Role.MANAGER),
    Position.GM: PositionInfo(label="GM", role=Role.MANAGER),
    Position.DGM: PositionInfo(label="DGM", role=Role.MANAGER),
    Position.OTHER: PositionInfo(label="Other", role=Role.GENERAL),
}

ROLES: dict[Role, RoleInfo] = {
    Role.MANAGER: RoleInfo(label="Manager", permissions={p: True for p in Permission}),
    Role.GENERAL: RoleInfo(label="General", permissions={p: False for p in Permission}),
}

STATUSES: list[StatusInfo] = [
    StatusInfo(value=AttendanceStatus.OFFICE, label="Office", color="#4CAF50"),
    StatusInfo(value=AttendanceStatus.WFH, label="Remote (WFH)", color="#2196F3"),
    StatusInfo(value=AttendanceStatus.BUSINESS_TRIP, label="Business Trip", color="#FF9800"),
    StatusInfo(value=AttendanceStatus.OUT, label="Out", color="#9C27B0"),
    StatusInfo(value=AttendanceStatus.VACATION, label="Vacation", color="#F44336"),
    StatusInfo(value=AttendanceStatus.SICK, label="Sick Leave", color="#607D8B"),
]


def get_locations() -> list[Location]:
    return list(LOCATIONS)


def is_valid_location(value: str) -> bool:
    return value in {loc.value for loc in Location}


def get_departments_by_location(location: str) -> list[str]:
    if not is_valid_location(location):
        return []
    return list(DEPARTMENTS[Location(location)])


def get_all_departments() -> list[str]:
    """Sorted union of every location's departments."""
    return sorted({dept for depts in DEPARTMENTS.values() for dept in depts})


def get_positions() -> dict[Position, PositionInfo]:
    return dict(POSITIONS)


def get_position_info(position: str | None) -> PositionInfo:
    try:
        return POSITIONS[Position(position)]
    except ValueError:
        return POSITIONS[Position.OTHER]


def get_role_from_position(position: str | None) -> Role:
    return get_position_info(position).role


def get_role_info(role: str | None) -> RoleInfo:
    try:
        return ROLES[Role(role)]
    except ValueError:
        return ROLES[Role.GENERAL]


def get_statuses() -> list[StatusInfo]:
    return list(STATUSES)


def get_status_info(status: str | None) -> StatusInfo:
    """Status entry for ``status``; unknown values resolve to the first status."""
    for info in STATUSES:
        if info.value == status:
            return info
    return STATUSES[0]
