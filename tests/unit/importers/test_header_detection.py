"""Unit tests for travel header detection."""

from __future__ import annotations

from rollcall.importers.header_detection import HEADER_MIN_SCORE, detect_header, resolve_columns, score_mapping
from rollcall.importers.tokenizer import TAB
from rollcall.models.imports import TravelColumnMapping


class TestResolveColumns:
    def test_canonical_header(self):
        mapping = resolve_columns(["Employee ID", "Name", "Start Date", "End Date", "Destination"])
        assert mapping == TravelColumnMapping(employee_id=0, name=1, start_date=2, end_date=3, destination=4)
        assert score_mapping(mapping) == 5

    def test_booking_tool_wording(self):
        mapping = resolve_columns(["ID", "Employee", "Leg1 Start", "Leg1 End", "Leg1 Country", "Request Purpose"])
        assert (mapping.employee_id, mapping.name, mapping.start_date, mapping.end_date) == (0, 1, 2, 3)
        assert mapping.destination == 4
        assert mapping.purpose == 5
        assert mapping.country is None

    def test_location_is_branch_without_branch_column(self):
        mapping = resolve_columns(["Employee ID", "Location", "Start Date", "End Date"])
        assert mapping.location == 1
        assert mapping.destination is None

    def test_location_is_destination_with_branch_column(self):
        mapping = resolve_columns(["Employee ID", "Branch", "Start Date", "End Date", "Location", "Country"])
        assert mapping.location == 1
        assert mapping.destination == 4
        assert mapping.country == 5

    def test_id_alone_is_below_threshold(self):
        assert score_mapping(resolve_columns(["ID", "Notes"])) < HEADER_MIN_SCORE


class TestDetectHeader:
    def test_skips_report_metadata(self):
        lines = [
            "Travel report",
            "Generated,2026-02-01",
            "",
            "Employee ID,Name,Start Date,End Date,Destination",
            "EMP001,John Smith,2026-02-20,2026-02-22,Tokyo",
        ]
        detection = detect_header(lines)
        assert detection.header_index == 3
        assert detection.mapping.destination == 4

    def test_tab_separated(self):
        lines = ["ID\tEmployee\tLeg1 Start\tLeg1 End", "EMP001\tJohn\t2026-02-20\t2026-02-21"]
        detection = detect_header(lines, TAB)
        assert detection.header_index == 0
        assert detection.score == 5

    def test_positional_fallback(self):
        detection = detect_header(["EMP001,John Smith,2026-02-20,2026-02-22,Tokyo"])
        assert detection.header_index is None
        assert detection.mapping == TravelColumnMapping.positional()

    def test_header_beyond_scan_window_is_missed(self):
        lines = ["filler"] * 5 + ["Employee ID,Name,Start Date,End Date"]
        assert detect_header(lines, scan_lines=5).header_index is None
