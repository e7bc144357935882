"""Unit tests for import date normalization."""

from __future__ import annotations

import pytest

from rollcall.importers.dates import normalize_date


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2026-02-20", "2026-02-20"),
        ("2026/2/5", "2026-02-05"),
        ("2026-2-5", "2026-02-05"),
        (" 2026-02-20 ", "2026-02-20"),
        ("10 8, 2026", "2026-10-08"),
        ("13 8, 2026", "2026-08-13"),
        ("2 20 2026", "2026-02-20"),
        ("Feb 20, 2026", "2026-02-20"),
    ],
)
def test_recognised_encodings(raw, expected):
    assert normalize_date(raw) == expected


def test_ambiguous_numeric_reads_month_first():
    assert normalize_date("5 6, 2026") == "2026-05-06"


@pytest.mark.parametrize("raw", ["soon", ""])
def test_unparseable_is_returned_unchanged(raw):
    assert normalize_date(raw) == raw


@pytest.mark.parametrize("raw", ["2026-02", "Feb 2026", "2026", "20"])
def test_partial_date_is_not_completed_from_today(raw):
    assert normalize_date(raw) == raw
