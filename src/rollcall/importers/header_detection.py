"""Scored header-row detection for travel-booking exports.

Exports differ in header wording and sometimes carry report metadata above
the real header, so every line in a scan window is treated as a candidate:
its cells are matched against known phrases per semantic column and the
resulting mapping is scored. The first candidate scoring at least
``HEADER_MIN_SCORE`` wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from rollcall.importers.tokenizer import parse_line
from rollcall.models.imports import HeaderDetection, TravelColumnMapping

HEADER_MIN_SCORE = 3
HEADER_SCAN_LINES = 30


@dataclass(frozen=True)
class _Phrases:
    exact: tuple[str, ...] = ()
    contains: tuple[str, ...] = ()

    def matches(self, cell: str) -> bool:
        return cell in self.exact or any(p in cell for p in self.contains)


# Resolution order matters: a cell is claimed by the first field that matches it.
_PRIMARY: dict[str, _Phrases] = {
    "employee_id": _Phrases(exact=("id",), contains=("employee id",)),
    "start_date": _Phrases(contains=("leg1 start", "start date")),
    "end_date": _Phrases(contains=("leg1 end", "end date")),
    "name": _Phrases(exact=("employee", "name"), contains=("employee name",)),
    "location": _Phrases(contains=("branch",)),
    "destination": _Phrases(contains=("leg1 country", "destination", "travel request name")),
    "purpose": _Phrases(contains=("request purpose", "purpose")),
    "country": _Phrases(exact=("country",)),
}

# Second pass for fields still unresolved. A bare "location" header is the
# employee's branch unless a branch column exists, then it is the trip's.
_FALLBACK: dict[str, _Phrases] = {
    "location": _Phrases(exact=("location",)),
    "destination": _Phrases(exact=("location",)),
    "country": _Phrases(contains=("country",)),
}

_WEIGHTS = {"employee_id": 2, "start_date": 1, "end_date": 1, "name": 1}


def resolve_columns(cells: list[str]) -> TravelColumnMapping:
    """Map lower-cased header ``cells`` to column indexes."""
    cells = [c.strip().lower() for c in cells]
    resolved: dict[str, int] = {}
    claimed: set[int] = set()

    for table in (_PRIMARY, _FALLBACK):
        for field, phrases in table.items():
            if field in resolved:
                continue
            for index, cell in enumerate(cells):
                if index not in claimed and cell and phrases.matches(cell):
                    resolved[field] = index
                    claimed.add(index)
                    break

    return TravelColumnMapping(**resolved)


def score_mapping(mapping: TravelColumnMapping) -> int:
    return sum(weight for field, weight in _WEIGHTS.items() if getattr(mapping, field) is not None)


def detect_header(lines: list[str], delimiter: str = ",",
                  scan_lines: int = HEADER_SCAN_LINES) -> HeaderDetection:
    """Find the header row among the first ``scan_lines`` lines.

    Falls back to the positional layout with no header row.
    """
    for index, line in enumerate(lines[:scan_lines]):
        if not line.strip():
            continue
        mapping = resolve_columns(parse_line(line, delimiter))
        score = score_mapping(mapping)
        if score >= HEADER_MIN_SCORE:
            return HeaderDetection(mapping=mapping, header_index=index, score=score)
    return HeaderDetection(mapping=TravelColumnMapping.positional())
