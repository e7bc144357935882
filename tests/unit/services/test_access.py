"""Unit tests for AccessControl."""

from __future__ import annotations

from datetime import date

import pytest

from rollcall.core.exceptions import EmployeeNotFoundError
from rollcall.models.master_data import AttendanceStatus, Permission
from rollcall.services.access import AccessControl
from tests.fakes import make_repository


@pytest.fixture
def access():
    repo = make_repository()
    repo.add_employee({"id": "EMP001", "name": "John Smith", "position": "gm"})
    repo.add_employee({"id": "EMP002", "name": "Sarah Johnson", "position": "other"})
    return AccessControl(repo)


def test_no_current_user_by_default(access):
    assert access.get_current_user() is None
    assert access.has_permission(Permission.CAN_VIEW) is False


def test_current_user_resolves_case_insensitively(access):
    access.set_current_user("emp001")
    assert access.get_current_user().id == "EMP001"


@pytest.mark.parametrize("action", list(Permission))
def test_manager_has_every_permission(access, action):
    access.set_current_user("EMP001")
    assert access.has_permission(action) is True


def test_general_role_is_denied(access):
    access.set_current_user("EMP002")
    assert access.has_permission("canImport") is False
    assert access.has_permission("canView") is False


def test_unknown_action_is_denied(access):
    access.set_current_user("EMP001")
    assert access.has_permission("canFly") is False


def test_pointer_to_deleted_employee_resolves_to_none(access):
    access.set_current_user("EMP001")
    access._repo.delete_employee("EMP001")
    assert access.get_current_user() is None


def test_logout_clears_pointer(access):
    access.set_current_user("EMP001")
    access.logout()
    assert access.get_current_user() is None


class TestCheckIn:
    DAY = date(2026, 2, 20)

    def test_office_check_in_records_today(self, access):
        record = access.check_in("emp002", "OFFICE", "LDN 3F", today=self.DAY)
        assert access.get_current_user().id == "EMP002"
        assert (record.employee_id, record.date, record.status) == ("EMP002", "2026-02-20", AttendanceStatus.OFFICE)
        assert record.note == "QR Check-in (OFFICE at LDN 3F)"

    def test_note_without_location(self, access):
        assert access.check_in("EMP002", "wfh", today=self.DAY).note == "QR Check-in (WFH)"

    def test_repeat_check_in_keeps_one_record(self, access):
        access.check_in("EMP002", "office", today=self.DAY)
        access.check_in("EMP002", "wfh", today=self.DAY)
        (record,) = access._repo.get_attendance_by_employee("EMP002")
        assert record.status == AttendanceStatus.WFH

    @pytest.mark.parametrize("kind", ["vacation", "gym", ""])
    def test_other_kinds_only_select_user(self, access, kind):
        assert access.check_in("EMP002", kind, today=self.DAY) is None
        assert access.get_current_user().id == "EMP002"
        assert access._repo.get_all_attendance() == []

    def test_unknown_employee_raises(self, access):
        with pytest.raises(EmployeeNotFoundError):
            access.check_in("EMP999", "office", today=self.DAY)
        assert access.get_current_user() is None
