"""Attendance edits as explicit commands.

``apply_attendance_change`` takes the current record and a change description
and returns a new record; saving it is the caller's job.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from ..common.datetime_utils import normalize_clock_time, to_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceRecord, parse_overtime, parse_status

_UNSET: Any = object()


@dataclass(frozen=True)
class AttendanceChange:
    """Fields to set on a record. ``_UNSET`` fields are left as they are."""

    status: Any = _UNSET
    morning_entry: Any = _UNSET
    afternoon_entry: Any = _UNSET
    overtime_hours: Any = _UNSET

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AttendanceChange":
        kwargs: dict[str, Any] = {}
        if "status" in data:
            kwargs["status"] = parse_status(data["status"])
        if "morningEntry" in data:
            kwargs["morning_entry"] = normalize_clock_time(data["morningEntry"])
        if "afternoonEntry" in data:
            kwargs["afternoon_entry"] = normalize_clock_time(data["afternoonEntry"])
        if "overtimeHours" in data:
            kwargs["overtime_hours"] = parse_overtime(data["overtimeHours"])
        return cls(**kwargs)

    def is_empty(self) -> bool:
        return all(v is _UNSET for v in (self.status, self.morning_entry, self.afternoon_entry, self.overtime_hours))


def new_record(*, record_id: str, employee_id: str, work_date: Any) -> AttendanceRecord:
    """Blank record a change is applied to when none exists yet for the day."""
    return AttendanceRecord(
        record_id=record_id,
        employee_id=employee_id,
        work_date=to_date(work_date),
        status=AttendanceStatus.PRESENT,
    )


def apply_attendance_change(current: AttendanceRecord, change: AttendanceChange) -> AttendanceRecord:
    if change.is_empty():
        raise ValidationError("No attendance changes given")

    updates = {
        name: value
        for name, value in (
            ("status", change.status),
            ("morning_entry", change.morning_entry),
            ("afternoon_entry", change.afternoon_entry),
            ("overtime_hours", change.overtime_hours),
        )
        if value is not _UNSET
    }
    updated = replace(current, **updates)

    # Absent days carry no clock-ins or overtime.
    if updated.status == AttendanceStatus.ABSENT:
        updated = replace(updated, morning_entry=None, afternoon_entry=None, overtime_hours=None)
    return updated
