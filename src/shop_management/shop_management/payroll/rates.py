from __future__ import annotations

from ..employees.model import Employee
from .policy import PayrollPolicy


def effective_hourly_rate(employee: Employee, policy: PayrollPolicy) -> float:
    """Resolve one hourly rate from the employee's rate fields.

    First match wins: hourly rate, then daily rate / hours per day, then
    monthly rate / (working days per month * hours per day). Returns 0.0 when
    nothing positive is configured.
    """
    if employee.hourly_rate:
        rate = float(employee.hourly_rate)
    elif employee.daily_rate:
        rate = float(employee.daily_rate) / policy.hours_per_day
    elif employee.monthly_rate:
        rate = float(employee.monthly_rate) / policy.monthly_hours
    else:
        rate = 0.0
    return rate if rate > 0 else 0.0
