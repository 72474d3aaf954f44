from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

from ..common import ethiopian_calendar
from ..core.enums import MonthCalendar, PaymentMethod
from .policy import PayrollPolicy


def _short(day: date) -> str:
    return f"{day:%b} {day.day}"


@dataclass(frozen=True)
class PayPeriod:
    """Closed date interval payroll is aggregated over."""

    start: date
    end: date

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError(f"Period end {self.end} is before start {self.start}")

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def days(self) -> list[date]:
        return [self.start + timedelta(days=i) for i in range((self.end - self.start).days + 1)]

    @property
    def label(self) -> str:
        s, e = self.start, self.end
        if s.day == 1 and (s.year, s.month) == (e.year, e.month) and e.day == calendar.monthrange(e.year, e.month)[1]:
            return s.strftime("%B %Y")
        if s.year != e.year:
            return f"{_short(s)}, {s.year} - {_short(e)}, {e.year}"
        return f"{_short(s)} - {_short(e)}, {e.year}"

    @property
    def ethiopian_label(self) -> str:
        return ethiopian_calendar.format_range(self.start, self.end)

    def to_dict(self) -> dict:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "label": self.label,
            "ethiopianLabel": self.ethiopian_label,
        }


def week_containing(day: date, *, week_starts_on: int) -> PayPeriod:
    start = day - timedelta(days=(day.weekday() - week_starts_on) % 7)
    return PayPeriod(start=start, end=start + timedelta(days=6))


def month_containing(day: date, *, month_calendar: MonthCalendar = MonthCalendar.GREGORIAN) -> PayPeriod:
    if month_calendar == MonthCalendar.ETHIOPIAN:
        start, end = ethiopian_calendar.month_bounds(day)
        return PayPeriod(start=start, end=end)
    last_day = calendar.monthrange(day.year, day.month)[1]
    return PayPeriod(start=day.replace(day=1), end=day.replace(day=last_day))


def current_period(payment_method: PaymentMethod, today: date, policy: PayrollPolicy) -> PayPeriod:
    if payment_method == PaymentMethod.WEEKLY:
        return week_containing(today, week_starts_on=policy.week_starts_on)
    return month_containing(today, month_calendar=policy.month_calendar)


def previous_period(period: PayPeriod, payment_method: PaymentMethod, policy: PayrollPolicy) -> PayPeriod:
    return current_period(payment_method, period.start - timedelta(days=1), policy)


def last_completed_period(payment_method: PaymentMethod, today: date, policy: PayrollPolicy) -> PayPeriod:
    """Last calendar week (Weekly) or last calendar month (Monthly) before ``today``'s."""
    return previous_period(current_period(payment_method, today, policy), payment_method, policy)


def recent_periods(payment_method: PaymentMethod, today: date, policy: PayrollPolicy, *, count: int) -> list[PayPeriod]:
    """Current period first, then earlier ones; used for period selectors."""
    periods: list[PayPeriod] = []
    period = current_period(payment_method, today, policy)
    for _ in range(max(count, 0)):
        periods.append(period)
        period = previous_period(period, payment_method, policy)
    return periods
