from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import PaymentMethod
from ..database.mysql_base import MySQLRepository, number_from_mysql
from .model import Employee
from .repository import EmployeeRepository

_SELECT = """
    SELECT employee_id, name, phone, position, payment_method, account_number,
           daily_rate, monthly_rate, hourly_rate
    FROM employees
"""

_UPSERT = """
    INSERT INTO employees(employee_id, name, phone, position, payment_method, account_number,
                          daily_rate, monthly_rate, hourly_rate)
    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
    ON DUPLICATE KEY UPDATE
        name=VALUES(name), phone=VALUES(phone), position=VALUES(position),
        payment_method=VALUES(payment_method), account_number=VALUES(account_number),
        daily_rate=VALUES(daily_rate), monthly_rate=VALUES(monthly_rate), hourly_rate=VALUES(hourly_rate)
"""


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=str(row["employee_id"]),
        name=row["name"],
        phone=row["phone"],
        position=row.get("position"),
        payment_method=PaymentMethod(row["payment_method"]),
        account_number=row["account_number"],
        daily_rate=number_from_mysql(row.get("daily_rate")),
        monthly_rate=number_from_mysql(row.get("monthly_rate")),
        hourly_rate=number_from_mysql(row.get("hourly_rate")),
    )


class MySQLEmployeeRepository(MySQLRepository, EmployeeRepository):
    def list_all(self) -> Sequence[Employee]:
        return [_to_employee(r) for r in self._select(f"{_SELECT} ORDER BY name")]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        row = self._select_one(f"{_SELECT} WHERE employee_id=%s", (employee_id,))
        return _to_employee(row) if row else None

    def save(self, employee: Employee) -> None:
        self._execute(
            _UPSERT,
            (
                employee.employee_id,
                employee.name,
                employee.phone,
                employee.position,
                employee.payment_method.value,
                employee.account_number,
                employee.daily_rate,
                employee.monthly_rate,
                employee.hourly_rate,
            ),
        )

    def delete_by_id(self, employee_id: str) -> bool:
        return self._execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,)) > 0
