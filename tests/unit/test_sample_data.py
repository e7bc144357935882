"""Unit tests for demo data generation."""

from __future__ import annotations

import random
from datetime import date

from rollcall.models.master_data import AttendanceStatus, Location
from rollcall.sample_data import (
    DEMO_USER_ID,
    generate_sample_attendance,
    generate_sample_employees,
    initialize_sample_data,
)
from rollcall.services.access import AccessControl
from tests.fakes import make_repository

TODAY = date(2026, 2, 20)  # Friday


def test_sample_employees_cover_every_location():
    employees = generate_sample_employees()
    assert len(employees) == 13
    assert {e.location for e in employees} == set(Location)
    assert len({e.id for e in employees}) == 13


def test_attendance_covers_weekdays_up_to_today():
    employees = generate_sample_employees()[:2]
    records = generate_sample_attendance(employees, TODAY, random.Random(7))
    # 1..20 February 2026 holds 15 weekdays
    assert len(records) == 30
    assert all(date.fromisoformat(r.date).weekday() < 5 for r in records)
    assert max(r.date for r in records) == "2026-02-20"


def test_business_trips_carry_destination():
    records = generate_sample_attendance(generate_sample_employees(), TODAY, random.Random(1))
    trips = [r for r in records if r.status == AttendanceStatus.BUSINESS_TRIP]
    assert trips
    assert all(r.destination and r.note == f"Business trip to {r.destination}" for r in trips)


def test_initialize_seeds_empty_store_once():
    repo = make_repository()
    access = AccessControl(repo)
    assert initialize_sample_data(repo, access, TODAY, random.Random(3)) is True
    assert len(repo.get_all_employees()) == 13
    assert len(repo.get_all_attendance()) == 13 * 15
    assert access.get_current_user().id == DEMO_USER_ID

    assert initialize_sample_data(repo, access, TODAY) is False
    assert len(repo.get_all_employees()) == 13
