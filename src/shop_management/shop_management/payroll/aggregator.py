"""Attendance -> payroll folding.

Pure functions: the same employees, records, period and policy always give
the same entries. This is the one place hours and amounts are computed; the
payroll lists, the per-employee summary and the expense history all call it.
"""
from __future__ import annotations

import logging
from collections import Counter, defaultdict
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.enums import AttendanceStatus, PaymentMethod
from ..employees.model import Employee
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import ShiftWindowCalculator
from .model import DailyExpense, ExpenseHistory, PayrollEntry
from .periods import PayPeriod
from .policy import PayrollPolicy
from .rates import effective_hourly_rate

logger = logging.getLogger(__name__)


def _group_by_employee(records: Iterable[AttendanceRecord]) -> dict[str, list[AttendanceRecord]]:
    grouped: dict[str, list[AttendanceRecord]] = defaultdict(list)
    for r in records:
        grouped[r.employee_id].append(r)
    return grouped


def _warn_duplicates(employee: Employee, records: Sequence[AttendanceRecord]) -> None:
    counts = Counter(r.work_date for r in records)
    duplicated = sorted(d.isoformat() for d, n in counts.items() if n > 1)
    if duplicated:
        logger.warning(
            "Employee %s has several attendance records on %s; all of them are counted",
            employee.employee_id,
            ", ".join(duplicated),
        )


def build_payroll_entry(
    employee: Employee,
    hourly_rate: float,
    records: Sequence[AttendanceRecord],
    period: PayPeriod,
    *,
    policy: PayrollPolicy,
    calculator: Optional[PayrollCalculator] = None,
) -> Optional[PayrollEntry]:
    """Fold one employee's records for ``period`` into a PayrollEntry.

    Returns None when the combined amount is not positive.
    """
    calculator = calculator or ShiftWindowCalculator(policy)
    qualifying = [
        r
        for r in records
        if r.employee_id == employee.employee_id and r.is_qualifying and period.contains(r.work_date)
    ]
    _warn_duplicates(employee, qualifying)

    total_hours = 0.0
    overtime_hours = 0.0
    minutes_late = 0
    for r in qualifying:
        total_hours += calculator.worked_hours(r.morning_entry, r.afternoon_entry)
        overtime_hours += r.overtime_hours or 0.0
        if r.status == AttendanceStatus.LATE:
            minutes_late += calculator.minutes_late(r.morning_entry, r.afternoon_entry)

    base_amount = total_hours * hourly_rate
    overtime_amount = overtime_hours * hourly_rate * policy.overtime_multiplier
    amount = base_amount + overtime_amount
    if amount <= 0:
        return None

    return PayrollEntry(
        employee_id=employee.employee_id,
        employee_name=employee.name,
        payment_method=employee.payment_method,
        period=period.label,
        period_ethiopian=period.ethiopian_label,
        working_days=len({r.work_date for r in qualifying}),
        total_hours=total_hours,
        overtime_hours=overtime_hours,
        hourly_rate=hourly_rate,
        base_amount=base_amount,
        overtime_amount=overtime_amount,
        amount=amount,
        minutes_late=minutes_late,
    )


def calculate_payroll(
    employees: Sequence[Employee],
    records: Sequence[AttendanceRecord],
    period: PayPeriod,
    *,
    policy: PayrollPolicy,
    calculator: Optional[PayrollCalculator] = None,
    payment_method: Optional[PaymentMethod] = None,
) -> list[PayrollEntry]:
    """Entries for every paid employee in ``period``, in input order.

    Employees without a usable rate, or without qualifying hours, are left out.
    """
    calculator = calculator or ShiftWindowCalculator(policy)
    by_employee = _group_by_employee(records)

    entries: list[PayrollEntry] = []
    for employee in employees:
        if payment_method is not None and employee.payment_method != payment_method:
            continue
        rate = effective_hourly_rate(employee, policy)
        if not rate:
            continue
        entry = build_payroll_entry(
            employee,
            rate,
            by_employee.get(employee.employee_id, []),
            period,
            policy=policy,
            calculator=calculator,
        )
        if entry is not None:
            entries.append(entry)
    return entries


def expense_history(
    employees: Sequence[Employee],
    records: Sequence[AttendanceRecord],
    period: PayPeriod,
    *,
    policy: PayrollPolicy,
    calculator: Optional[PayrollCalculator] = None,
    payment_method: Optional[PaymentMethod] = None,
) -> ExpenseHistory:
    """Payroll cost per day of ``period``, same rules as calculate_payroll."""
    calculator = calculator or ShiftWindowCalculator(policy)
    rates = {
        e.employee_id: effective_hourly_rate(e, policy)
        for e in employees
        if payment_method is None or e.payment_method == payment_method
    }

    per_day: dict = defaultdict(float)
    for r in records:
        rate = rates.get(r.employee_id)
        if not rate or not r.is_qualifying or not period.contains(r.work_date):
            continue
        hours = calculator.worked_hours(r.morning_entry, r.afternoon_entry)
        overtime = (r.overtime_hours or 0.0) * policy.overtime_multiplier
        per_day[r.work_date] += (hours + overtime) * rate

    return ExpenseHistory(
        period=period,
        points=[DailyExpense(day=d, amount=per_day.get(d, 0.0)) for d in period.days()],
    )
