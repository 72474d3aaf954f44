from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Any, Optional

from ..core import constants
from ..core.enums import MonthCalendar


def _minutes(t: time) -> int:
    return t.hour * 60 + t.minute


@dataclass(frozen=True)
class ShiftWindow:
    """A fixed daily work interval clock-ins are measured against."""

    start: time
    end: time
    # earliest clock-in that still earns credit; defaults to ``start``
    credit_from: Optional[time] = None

    def __post_init__(self):
        if self.end <= self.start:
            raise ValueError(f"Shift end {self.end} must be after start {self.start}")
        if self.credit_from is not None and self.credit_from > self.start:
            raise ValueError(f"Credit start {self.credit_from} must not be after shift start {self.start}")

    def credited_hours(self, entry: time) -> float:
        """Hours credited for clocking in at ``entry``.

        Clock-ins before ``credit_from`` earn nothing extra; at or after the end earn 0.
        """
        if entry >= self.end:
            return 0.0
        return (_minutes(self.end) - max(_minutes(self.credit_from or self.start), _minutes(entry))) / 60

    def minutes_late(self, entry: time) -> int:
        return max(0, _minutes(entry) - _minutes(self.start))


@dataclass(frozen=True)
class PayrollPolicy:
    """Rate and period rules shared by every payroll surface."""

    morning: ShiftWindow = ShiftWindow(constants.MORNING_SHIFT_START, constants.MORNING_SHIFT_END)
    afternoon: ShiftWindow = ShiftWindow(
        constants.AFTERNOON_SHIFT_START, constants.AFTERNOON_SHIFT_END, credit_from=constants.AFTERNOON_CREDIT_FROM
    )
    hours_per_day: int = constants.HOURS_PER_DAY
    monthly_working_days: int = constants.DEFAULT_MONTHLY_WORKING_DAYS
    overtime_multiplier: float = constants.DEFAULT_OVERTIME_MULTIPLIER
    week_starts_on: int = constants.DEFAULT_WEEK_STARTS_ON
    month_calendar: MonthCalendar = MonthCalendar.GREGORIAN

    def __post_init__(self):
        if self.hours_per_day <= 0 or self.monthly_working_days <= 0:
            raise ValueError("hours_per_day and monthly_working_days must be positive")
        if self.overtime_multiplier < 0:
            raise ValueError("overtime_multiplier cannot be negative")
        if not 0 <= self.week_starts_on <= 6:
            raise ValueError("week_starts_on must be a weekday number 0-6 (Monday=0)")

    @property
    def monthly_hours(self) -> int:
        return self.monthly_working_days * self.hours_per_day

    @classmethod
    def from_settings(cls, settings: Any) -> "PayrollPolicy":
        return cls(
            monthly_working_days=int(getattr(settings, "MONTHLY_WORKING_DAYS", constants.DEFAULT_MONTHLY_WORKING_DAYS)),
            overtime_multiplier=float(getattr(settings, "OVERTIME_MULTIPLIER", constants.DEFAULT_OVERTIME_MULTIPLIER)),
            week_starts_on=int(getattr(settings, "WEEK_STARTS_ON", constants.DEFAULT_WEEK_STARTS_ON)),
            month_calendar=MonthCalendar(getattr(settings, "MONTH_CALENDAR", MonthCalendar.GREGORIAN.value)),
        )
