"""Roster CSV — pure parsing and de-duplication of uploaded student rosters.

Invariants:
    - Header must contain unique_number and name (extra columns ignored)
    - Values are whitespace-trimmed; rows missing either value are skipped
    - First occurrence of a unique_number wins; later duplicates are dropped
    - Zero data rows is an error, zero *usable* rows is not (total_users == 0)
"""

import csv
import io

from attendance_api.core.domain_types import RosterEntry
from attendance_api.core.errors import InvalidInputError

REQUIRED_COLUMNS = ("unique_number", "name")
EMPTY_OR_INVALID = "CSV file is empty or invalid"


def decode_upload(payload: bytes) -> str:
    """Decode uploaded bytes as UTF-8, tolerating a byte-order mark."""
    try:
        return payload.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise InvalidInputError(EMPTY_OR_INVALID, "file")


def parse_rows(text: str) -> list[dict[str, str]]:
    """Parse CSV text into header-keyed rows."""
    reader = csv.DictReader(io.StringIO(text, newline=""))
    if reader.fieldnames is None:
        raise InvalidInputError(EMPTY_OR_INVALID, "file")
    reader.fieldnames = [h.strip() for h in reader.fieldnames]
    if any(col not in reader.fieldnames for col in REQUIRED_COLUMNS):
        raise InvalidInputError(EMPTY_OR_INVALID, "file")
    try:
        rows = list(reader)
    except csv.Error:
        raise InvalidInputError(EMPTY_OR_INVALID, "file")
    if not rows:
        raise InvalidInputError(EMPTY_OR_INVALID, "file")
    return rows


def dedupe_roster(rows: list[dict[str, str]]) -> list[RosterEntry]:
    """Trim values, drop incomplete rows, keep the first row per unique_number."""
    seen: set[str] = set()
    entries = []
    for row in rows:
        unique_number = (row.get("unique_number") or "").strip()
        name = (row.get("name") or "").strip()
        if not unique_number or not name or unique_number in seen:
            continue
        seen.add(unique_number)
        entries.append(RosterEntry(unique_number, name))
    return entries


def read_roster(payload: bytes) -> list[RosterEntry]:
    """Full pipeline: bytes -> deduplicated roster entries."""
    return dedupe_roster(parse_rows(decode_upload(payload)))
