"""Line splitting, delimiter detection and quote-aware field tokenizing."""

from __future__ import annotations

COMMA = ","
TAB = "\t"


def split_lines(text: str) -> list[str]:
    """Lines of ``text`` with surrounding blank space trimmed and CRs dropped."""
    return [line.rstrip("\r") for line in text.strip().split("\n")]


def parse_line(line: str, delimiter: str = COMMA) -> list[str]:
    """Split ``line`` on ``delimiter`` outside double-quoted spans.

    Each ``"`` toggles the quoted state and is dropped; doubled quotes are not
    unescaped. Fields are whitespace-trimmed.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def detect_delimiter(lines: list[str], sample: int = 10) -> str:
    """Tab when it strictly outnumbers commas in the first ``sample`` non-empty lines."""
    probe = [line for line in lines if line.strip()][:sample]
    tabs = sum(line.count(TAB) for line in probe)
    commas = sum(line.count(COMMA) for line in probe)
    return TAB if tabs > commas else COMMA
