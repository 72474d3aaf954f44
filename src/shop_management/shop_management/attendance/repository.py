from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        """Records with ``start_date <= work_date <= end_date``."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def save(self, record: AttendanceRecord) -> None:
        """Create or merge-update by ``record_id`` (last write wins)."""

        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> bool:
        raise NotImplementedError
