from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import PaymentMethod, PayrollStatus
from .periods import PayPeriod


@dataclass(frozen=True)
class PayrollEntry:
    """Derived payroll line for one employee and one period (never persisted)."""

    employee_id: str
    employee_name: str
    payment_method: PaymentMethod
    period: str
    period_ethiopian: str
    working_days: int
    total_hours: float
    overtime_hours: float
    hourly_rate: float
    base_amount: float
    overtime_amount: float
    amount: float
    minutes_late: int = 0
    status: PayrollStatus = PayrollStatus.UNPAID

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employeeName": self.employee_name,
            "paymentMethod": self.payment_method.value,
            "period": self.period,
            "periodEthiopian": self.period_ethiopian,
            "workingDays": self.working_days,
            "totalHours": round(self.total_hours, 2),
            "overtimeHours": round(self.overtime_hours, 2),
            "hourlyRate": round(self.hourly_rate, 4),
            "baseAmount": round(self.base_amount, 2),
            "overtimeAmount": round(self.overtime_amount, 2),
            "amount": round(self.amount, 2),
            "minutesLate": self.minutes_late,
            "status": self.status.value,
        }


def total_amount(entries: list[PayrollEntry]) -> float:
    return sum(e.amount for e in entries)


@dataclass(frozen=True)
class DailyExpense:
    day: date
    amount: float


@dataclass(frozen=True)
class ExpenseHistory:
    """Per-day payroll expense over a period (expense chart data)."""

    period: PayPeriod
    points: list[DailyExpense] = field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(p.amount for p in self.points)

    def to_dict(self) -> dict:
        return {
            "period": self.period.to_dict(),
            "points": [{"date": p.day.isoformat(), "amount": round(p.amount, 2)} for p in self.points],
            "total": round(self.total, 2),
        }


@dataclass(frozen=True)
class PayrollOverview:
    """Upcoming weekly and monthly payouts."""

    weekly_period: PayPeriod
    monthly_period: PayPeriod
    weekly: list[PayrollEntry]
    monthly: list[PayrollEntry]

    def to_dict(self) -> dict:
        return {
            "weekly": {
                "period": self.weekly_period.to_dict(),
                "entries": [e.to_dict() for e in self.weekly],
                "total": round(total_amount(self.weekly), 2),
            },
            "monthly": {
                "period": self.monthly_period.to_dict(),
                "entries": [e.to_dict() for e in self.monthly],
                "total": round(total_amount(self.monthly), 2),
            },
        }
