"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ClassId/StudentId wrap the integer primary keys
    - Primary keys fit a 32-bit INTEGER column (MAX_ROW_ID)
    - AttendanceDate is always an ISO calendar date string (YYYY-MM-DD)
    - Only AttendanceStatus.PRESENT is ever written

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NamedTuple, NewType


# ─── Identity Types ──────────────────────────────────────────────

ClassId = NewType("ClassId", int)
StudentId = NewType("StudentId", int)

MAX_ROW_ID = 2**31 - 1


# ─── Value Types ─────────────────────────────────────────────────

AttendanceDate = NewType("AttendanceDate", str)   # YYYY-MM-DD


class RosterEntry(NamedTuple):
    """One student row accepted from an uploaded roster."""
    unique_number: str
    name: str


# ─── Enums ───────────────────────────────────────────────────────

class AttendanceStatus(str, Enum):
    """Attendance states stored in the `status` column.

    "Absent" is derived (no PRESENT row for the date), never stored.
    """
    PRESENT = "Present"
