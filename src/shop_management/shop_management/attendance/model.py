from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import normalize_clock_time, to_date
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one day."""

    record_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    morning_entry: Optional[str] = None
    afternoon_entry: Optional[str] = None
    overtime_hours: Optional[float] = None

    @property
    def is_qualifying(self) -> bool:
        return self.status in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "employeeId": self.employee_id,
            "date": self.work_date.isoformat(),
            "morningEntry": self.morning_entry,
            "afternoonEntry": self.afternoon_entry,
            "status": self.status.value,
            "overtimeHours": self.overtime_hours,
        }


def parse_status(value: Any) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError("Status must be Present, Late or Absent")


def parse_overtime(value: Any) -> Optional[float]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError("Overtime hours must be a number")
    if not math.isfinite(hours):
        raise ValidationError("Overtime hours must be a finite number")
    if hours < 0:
        raise ValidationError("Overtime hours cannot be negative")
    return hours


def record_from_mapping(data: Mapping[str, Any]) -> AttendanceRecord:
    """Ingestion boundary: build a record from a stored/posted document.

    Dates may arrive as ISO strings or timestamp objects and are normalized
    to ``date``; clock-in entries are normalized to ``HH:MM``.
    """
    employee_id = data.get("employeeId")
    if not employee_id:
        raise ValidationError("employeeId is required")
    return AttendanceRecord(
        record_id=str(data.get("id") or ""),
        employee_id=str(employee_id),
        work_date=to_date(data.get("date")),
        status=parse_status(data.get("status")),
        morning_entry=normalize_clock_time(data.get("morningEntry")),
        afternoon_entry=normalize_clock_time(data.get("afternoonEntry")),
        overtime_hours=parse_overtime(data.get("overtimeHours")),
    )
