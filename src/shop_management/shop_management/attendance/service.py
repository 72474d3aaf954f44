from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date
from typing import Any, Callable, Iterable, Mapping, Sequence

from ..common.datetime_utils import to_date
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .changes import AttendanceChange, apply_attendance_change, new_record
from .model import AttendanceRecord, record_from_mapping
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use case: record and correct daily attendance.

    Every edit goes through ``apply_attendance_change`` and is then saved
    explicitly; nothing is kept in memory between calls.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        id_factory: Callable[[], str] | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)

    def record_attendance(self, form: Mapping[str, Any]) -> AttendanceRecord:
        """Create the day's record for an employee, or update the existing one."""
        employee_id = str(form.get("employeeId") or "").strip()
        if not employee_id:
            raise ValidationError("employeeId is required")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        work_date = to_date(form.get("date"))
        change = AttendanceChange.from_mapping(form)

        current = self._attendance.get_for_employee_and_date(employee_id, work_date)
        if current is None:
            current = new_record(record_id=self._new_id(), employee_id=employee_id, work_date=work_date)

        record = apply_attendance_change(current, change)
        self._attendance.save(record)
        logger.debug("Saved attendance %s for %s on %s", record.record_id, employee_id, work_date)
        return record

    def import_records(self, documents: Iterable[Mapping[str, Any]]) -> int:
        """Store already-recorded attendance documents (e.g. an export from another system).

        All documents are validated before anything is saved. Documents without
        an ``id`` get a fresh one.
        """
        records = []
        for doc in documents:
            if not isinstance(doc, Mapping):
                raise ValidationError("Each attendance record must be an object")
            record = record_from_mapping(doc)
            if not self._employees.get_by_id(record.employee_id):
                raise NotFoundError(f"Employee not found: {record.employee_id}")
            records.append(record if record.record_id else replace(record, record_id=self._new_id()))

        for record in records:
            self._attendance.save(record)
        logger.info("Imported %d attendance records", len(records))
        return len(records)

    def update_record(self, record_id: str, changes: Mapping[str, Any]) -> AttendanceRecord:
        current = self._attendance.get_by_id(record_id)
        if not current:
            raise NotFoundError("Attendance record not found")
        record = apply_attendance_change(current, AttendanceChange.from_mapping(changes))
        self._attendance.save(record)
        return record

    def delete_record(self, record_id: str) -> None:
        if not self._attendance.delete_by_id(record_id):
            raise NotFoundError("Attendance record not found")

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        return sorted(self._attendance.list_for_employee(employee_id), key=lambda r: r.work_date, reverse=True)

    def get_day_sheet(self, day: date) -> list[dict]:
        """One row per employee for ``day``, with their record when there is one."""
        by_employee = {r.employee_id: r for r in self._attendance.list_between(start_date=day, end_date=day)}
        rows = []
        for employee in self._employees.list_all():
            record = by_employee.get(employee.employee_id)
            rows.append(
                {
                    "employeeId": employee.employee_id,
                    "name": employee.name,
                    "position": employee.position,
                    "record": record.to_dict() if record else None,
                }
            )
        return rows
