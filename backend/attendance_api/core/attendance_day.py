"""Attendance dates — server-local calendar days as YYYY-MM-DD strings."""

from datetime import date

from attendance_api.core.domain_types import AttendanceDate

# Empty is allowed and resolves to today.
DATE_PATTERN = r"^(\d{4}-\d{2}-\d{2})?$"


def format_day(day: date) -> AttendanceDate:
    return AttendanceDate(day.strftime("%Y-%m-%d"))


def today_iso() -> AttendanceDate:
    """Today's date in the server's local timezone."""
    return format_day(date.today())


def resolve_day(requested: str | None) -> AttendanceDate:
    """Use the requested day when given, otherwise today."""
    return AttendanceDate(requested) if requested else today_iso()
