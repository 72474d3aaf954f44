from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.mysql_base import MySQLRepository, entry_from_mysql, number_from_mysql
from .model import AttendanceRecord
from .repository import AttendanceRepository

_SELECT = """
    SELECT record_id, employee_id, work_date, morning_entry, afternoon_entry, status, overtime_hours
    FROM attendance_records
"""

_UPSERT = """
    INSERT INTO attendance_records(record_id, employee_id, work_date, morning_entry,
                                   afternoon_entry, status, overtime_hours)
    VALUES(%s,%s,%s,%s,%s,%s,%s)
    ON DUPLICATE KEY UPDATE
        work_date=VALUES(work_date), morning_entry=VALUES(morning_entry),
        afternoon_entry=VALUES(afternoon_entry), status=VALUES(status),
        overtime_hours=VALUES(overtime_hours)
"""


def _to_record(row: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=str(row["record_id"]),
        employee_id=str(row["employee_id"]),
        work_date=row["work_date"],
        status=AttendanceStatus(row["status"]),
        morning_entry=entry_from_mysql(row.get("morning_entry")),
        afternoon_entry=entry_from_mysql(row.get("afternoon_entry")),
        overtime_hours=number_from_mysql(row.get("overtime_hours")),
    )


class MySQLAttendanceRepository(MySQLRepository, AttendanceRepository):
    def _records(self, where: str = "", params: tuple = ()) -> Sequence[AttendanceRecord]:
        rows = self._select(f"{_SELECT} {where} ORDER BY work_date, employee_id", params)
        return [_to_record(r) for r in rows]

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        return self._records("WHERE work_date BETWEEN %s AND %s", (start_date, end_date))

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return self._records("WHERE employee_id=%s", (employee_id,))

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        row = self._select_one(f"{_SELECT} WHERE record_id=%s", (record_id,))
        return _to_record(row) if row else None

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        row = self._select_one(f"{_SELECT} WHERE employee_id=%s AND work_date=%s LIMIT 1", (employee_id, work_date))
        return _to_record(row) if row else None

    def save(self, record: AttendanceRecord) -> None:
        self._execute(
            _UPSERT,
            (
                record.record_id,
                record.employee_id,
                record.work_date,
                record.morning_entry,
                record.afternoon_entry,
                record.status.value,
                record.overtime_hours,
            ),
        )

    def delete_by_id(self, record_id: str) -> bool:
        return self._execute("DELETE FROM attendance_records WHERE record_id=%s", (record_id,)) > 0
