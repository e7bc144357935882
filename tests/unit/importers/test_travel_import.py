"""Unit tests for the travel-booking CSV import."""

from __future__ import annotations

import pytest

from rollcall.core.config import ImportConfig
from rollcall.importers.samples import generate_sample_travel_csv
from rollcall.importers.travel import import_travel_csv
from rollcall.models.master_data import AttendanceStatus, Role
from tests.fakes import make_repository

HEADER = "Employee ID,Name,Start Date,End Date,Destination"


@pytest.fixture
def repo():
    r = make_repository()
    r.add_employee({"id": "EMP001", "name": "John Smith", "location": "LDN"})
    r.add_employee({"id": "EMP004", "name": "Anna Schmidt", "location": "DSS"})
    return r


def _csv(*rows: str) -> str:
    return "\n".join([HEADER, *rows])


class TestImport:
    def test_sample_file_provisions_missing_employees(self, repo):
        result = import_travel_csv(generate_sample_travel_csv(), repo)
        assert result.success is True
        assert result.imported == 9
        assert result.auto_created == 2
        assert result.errors == []

    def test_trip_becomes_business_trip_days(self, repo):
        import_travel_csv(_csv("EMP001,John Smith,2026-02-20,2026-02-22,Tokyo"), repo)
        records = repo.get_attendance_by_employee("EMP001")
        assert [r.date for r in records] == ["2026-02-20", "2026-02-21", "2026-02-22"]
        assert all(r.status == AttendanceStatus.BUSINESS_TRIP for r in records)
        assert records[0].note == "Business trip to Tokyo"
        assert records[0].destination == "Tokyo"

    def test_purpose_and_country_columns(self, repo):
        text = "\n".join([
            "ID,Employee,Leg1 Start,Leg1 End,Destination,Request Purpose,Country",
            "emp001,John Smith,2026/3/2,2026/3/2,Osaka,Client visit,Japan",
        ])
        result = import_travel_csv(text, repo)
        (record,) = repo.get_attendance_by_employee("EMP001")
        assert result.auto_created == 0
        assert record.employee_id == "EMP001"
        assert (record.note, record.country, record.date) == ("Client visit", "Japan", "2026-03-02")

    def test_reimport_is_idempotent(self, repo):
        text = _csv("EMP001,John Smith,2026-02-20,2026-02-22,Tokyo")
        import_travel_csv(text, repo)
        import_travel_csv(text, repo)
        assert len(repo.get_all_attendance()) == 3

    def test_tab_separated_without_header(self, repo):
        result = import_travel_csv("EMP001\tJohn Smith\t2026-02-20\t2026-02-20\tRome", repo)
        assert result.imported == 1
        assert repo.get_attendance_by_employee("EMP001")[0].destination == "Rome"


class TestSkippedRows:
    def test_missing_dates_are_skipped_silently(self, repo):
        result = import_travel_csv(_csv(
            "EMP001,John Smith,,2026-02-22,Tokyo",
            "EMP001,John Smith,2026-02-20,,Tokyo",
            ",Nobody,2026-02-20,2026-02-21,Tokyo",
        ), repo)
        assert (result.imported, result.auto_created, result.errors) == (0, 0, [])

    def test_repeated_header_is_skipped(self, repo):
        result = import_travel_csv(_csv(HEADER, "EMP001,John Smith,2026-02-20,2026-02-20,Tokyo"), repo)
        assert result.imported == 1
        assert result.errors == []

    def test_partial_date_is_a_row_error(self, repo):
        result = import_travel_csv(_csv("EMP001,John Smith,Feb 2026,Feb 2026,Tokyo"), repo)
        assert result.imported == 0
        assert len(result.errors) == 1
        assert repo.get_all_attendance() == []

    def test_bad_date_is_a_row_error(self, repo):
        result = import_travel_csv(_csv(
            "EMP001,John Smith,soon,2026-02-22,Tokyo",
            "EMP004,Anna Schmidt,2026-02-20,2026-02-20,Paris",
        ), repo)
        assert result.success is True
        assert result.imported == 1
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Row 2:")


class TestProvisioning:
    def test_defaults_for_auto_created_employee(self, repo):
        import_travel_csv(_csv("EMP777,Jane Doe,2026-03-01,2026-03-02,Berlin"), repo)
        employee = repo.get_employee_by_id("EMP777")
        assert employee.name == "Jane Doe"
        assert employee.location == "LDN"
        assert employee.department == "Operations"
        assert employee.role == Role.GENERAL
        assert employee.email == "emp777@company.com"

    def test_branch_column_sets_location(self, repo):
        text = "\n".join([
            "Employee ID,Name,Branch,Start Date,End Date,Location",
            "EMP778,Marie Curie,prs,2026-03-01,2026-03-01,Vienna",
            "EMP779,Max Planck,Berlin,2026-03-01,2026-03-01,Vienna",
        ])
        import_travel_csv(text, repo, config=ImportConfig(email_domain="example.org"))
        assert repo.get_employee_by_id("EMP778").location == "PRS"
        assert repo.get_employee_by_id("EMP779").location == "LDN"
        assert repo.get_employee_by_id("EMP778").email == "emp778@example.org"
        assert repo.get_attendance_by_employee("EMP778")[0].destination == "Vienna"

    def test_missing_name_uses_placeholder(self, repo):
        import_travel_csv(_csv("EMP780,,2026-03-01,2026-03-01,Berlin"), repo)
        assert repo.get_employee_by_id("EMP780").name == "New Employee"


class TestScope:
    ROWS = (
        "EMP001,John Smith,2026-02-20,2026-02-20,Tokyo",
        "EMP004,Anna Schmidt,2026-02-20,2026-02-20,Paris",
        "EMP999,Someone New,2026-02-20,2026-02-20,Rome",
    )

    def test_location_scope_imports_only_matching_employees(self, repo):
        result = import_travel_csv(_csv(*self.ROWS), repo, "location", "ldn")
        assert (result.imported, result.auto_created) == (1, 0)
        assert repo.get_employee_by_id("EMP999") is None

    def test_employee_scope(self, repo):
        result = import_travel_csv(_csv(*self.ROWS), repo, "employee", " emp004 ")
        assert result.imported == 1
        assert [a.employee_id for a in repo.get_all_attendance()] == ["EMP004"]

    def test_employee_scope_can_provision(self, repo):
        result = import_travel_csv(_csv(*self.ROWS), repo, "employee", "EMP999")
        assert (result.imported, result.auto_created) == (1, 1)


class TestRejectedFiles:
    @pytest.mark.parametrize("text", ["", "   \n  \n"])
    def test_empty_file(self, repo, text):
        result = import_travel_csv(text, repo)
        assert result.success is False
        assert result.errors == ["CSV file is empty"]

    def test_scope_without_value(self, repo):
        assert import_travel_csv(_csv(*TestScope.ROWS), repo, "location").success is False

    def test_unknown_scope(self, repo):
        assert import_travel_csv(_csv(*TestScope.ROWS), repo, "team", "x").success is False
        assert repo.get_all_attendance() == []
