from datetime import date

import pytest

from src.shop_management.shop_management.attendance.changes import (
    AttendanceChange,
    apply_attendance_change,
    new_record,
)
from src.shop_management.shop_management.attendance.model import record_from_mapping
from src.shop_management.shop_management.core.enums import AttendanceStatus
from src.shop_management.shop_management.core.exceptions import ValidationError
from conftest import make_record


def test_new_record_starts_present():
    record = new_record(record_id="r1", employee_id="e1", work_date="2025-01-06")
    assert record.status == AttendanceStatus.PRESENT
    assert record.work_date == date(2025, 1, 6)
    assert record.morning_entry is None


def test_change_sets_only_given_fields():
    current = make_record("r1", "e1", date(2025, 1, 6), "08:00", "13:30", status=AttendanceStatus.LATE)
    updated = apply_attendance_change(current, AttendanceChange.from_mapping({"afternoonEntry": "13:45"}))

    assert updated.afternoon_entry == "13:45"
    assert updated.morning_entry == "08:00"
    assert updated.status == AttendanceStatus.LATE
    # records are values; the original is untouched
    assert current.afternoon_entry == "13:30"


def test_absent_clears_entries_and_overtime():
    current = make_record("r1", "e1", date(2025, 1, 6), "08:00", "13:30", overtime=2)
    updated = apply_attendance_change(current, AttendanceChange.from_mapping({"status": "Absent"}))

    assert updated.status == AttendanceStatus.ABSENT
    assert (updated.morning_entry, updated.afternoon_entry, updated.overtime_hours) == (None, None, None)


def test_empty_change_rejected():
    current = make_record("r1", "e1", date(2025, 1, 6))
    with pytest.raises(ValidationError):
        apply_attendance_change(current, AttendanceChange.from_mapping({"unrelated": 1}))


@pytest.mark.parametrize(
    "data",
    [
        {"status": "OnLeave"},
        {"morningEntry": "8am"},
        {"overtimeHours": -1},
        {"overtimeHours": "lots"},
        {"overtimeHours": "Infinity"},
    ],
)
def test_invalid_change_values(data):
    with pytest.raises(ValidationError):
        AttendanceChange.from_mapping(data)


def test_record_from_mapping_normalizes_stored_document():
    record = record_from_mapping(
        {
            "id": "att1",
            "employeeId": "emp001",
            "date": {"seconds": 1738324800},
            "morningEntry": "8:05",
            "afternoonEntry": "",
            "status": "Late",
            "overtimeHours": "1.5",
        }
    )
    assert record.work_date == date(2025, 1, 31)
    assert record.morning_entry == "08:05"
    assert record.afternoon_entry is None
    assert record.overtime_hours == 1.5
