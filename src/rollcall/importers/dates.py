"""Date normalization for heterogeneous export encodings.

Known-ambiguous policy: for numeric ``"<a> <b>, <yyyy>"`` values the first
group is the month unless it exceeds 12, in which case the groups are read as
day-month. Values where both groups are <= 12 cannot be disambiguated and are
always read month-first.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

_YEAR_FIRST = re.compile(r"^(\d{4})([-/])(\d{1,2})\2(\d{1,2})$")
_NUMERIC_MONTH_DAY = re.compile(r"^(\d{1,2})\s+(\d{1,2}),?\s+(\d{4})$")

# Two unrelated defaults: a component dateutil had to borrow differs between them.
_PARSE_DEFAULTS = (datetime(2000, 1, 1), datetime(2001, 2, 2))


def _iso(year: int, month: int, day: int) -> str | None:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


def normalize_date(raw: str) -> str:
    """Return ``raw`` as ``YYYY-MM-DD``, or unchanged (with a warning) if unparseable.

    Partial dates such as ``"Feb 2026"`` count as unparseable.
    """
    value = (raw or "").strip()

    match = _YEAR_FIRST.match(value)
    if match:
        iso = _iso(int(match.group(1)), int(match.group(3)), int(match.group(4)))
        if iso:
            return iso

    match = _NUMERIC_MONTH_DAY.match(value)
    if match:
        first, second, year = (int(g) for g in match.groups())
        month, day = (second, first) if first > 12 else (first, second)
        iso = _iso(year, month, day)
        if iso:
            return iso

    if value:
        try:
            first, second = (date_parser.parse(value, default=d).date() for d in _PARSE_DEFAULTS)
        except (ValueError, OverflowError):
            pass
        else:
            if first == second:
                return first.isoformat()

    logger.warning("Unrecognised date %r left as-is", raw)
    return raw
