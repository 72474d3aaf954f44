from __future__ import annotations

from datetime import date
from typing import Optional

import pytest

from src.shop_management.shop_management.attendance.model import AttendanceRecord
from src.shop_management.shop_management.core.enums import AttendanceStatus, PaymentMethod
from src.shop_management.shop_management.employees.model import Employee


class InMemoryEmployees:
    def __init__(self, employees=()):
        self._by_id: dict[str, Employee] = {e.employee_id: e for e in employees}

    def list_all(self):
        return list(self._by_id.values())

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def save(self, employee: Employee) -> None:
        self._by_id[employee.employee_id] = employee

    def delete_by_id(self, employee_id: str) -> bool:
        return self._by_id.pop(employee_id, None) is not None


class InMemoryAttendance:
    def __init__(self, records=()):
        self._by_id: dict[str, AttendanceRecord] = {r.record_id: r for r in records}

    def stored(self):
        return list(self._by_id.values())

    def list_between(self, *, start_date: date, end_date: date):
        return [r for r in self._by_id.values() if start_date <= r.work_date <= end_date]

    def list_for_employee(self, employee_id: str):
        return [r for r in self._by_id.values() if r.employee_id == employee_id]

    def get_by_id(self, record_id: str) -> Optional[AttendanceRecord]:
        return self._by_id.get(record_id)

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._by_id.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def save(self, record: AttendanceRecord) -> None:
        self._by_id[record.record_id] = record

    def delete_by_id(self, record_id: str) -> bool:
        return self._by_id.pop(record_id, None) is not None


class FakeNotifier:
    def __init__(self, error: Exception | None = None):
        self.sent: list[tuple[str, str]] = []
        self._error = error

    def send_message(self, chat_id: str, text: str) -> dict:
        if self._error:
            raise self._error
        self.sent.append((chat_id, text))
        return {"success": True, "result": {"message_id": len(self.sent)}}


def make_employee(employee_id="e1", *, method=PaymentMethod.WEEKLY, **rates) -> Employee:
    return Employee(
        employee_id=employee_id,
        name=f"Worker {employee_id}",
        phone="0911223344",
        payment_method=method,
        account_number="1000123456",
        **rates,
    )


def make_record(record_id, employee_id, work_date, morning="09:00", afternoon="13:00",
                status=AttendanceStatus.PRESENT, overtime=None) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=record_id,
        employee_id=employee_id,
        work_date=work_date,
        status=status,
        morning_entry=morning,
        afternoon_entry=afternoon,
        overtime_hours=overtime,
    )


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def notifier():
    return FakeNotifier()
