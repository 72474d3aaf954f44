from __future__ import annotations

from enum import Enum


class PaymentMethod(str, Enum):
    """How often an employee is paid."""

    WEEKLY = "Weekly"
    MONTHLY = "Monthly"


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored in the database."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"


class PayrollStatus(str, Enum):
    PAID = "Paid"
    UNPAID = "Unpaid"


class MonthCalendar(str, Enum):
    """Calendar used to cut monthly pay periods."""

    GREGORIAN = "gregorian"
    ETHIOPIAN = "ethiopian"
