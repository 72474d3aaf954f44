from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_PERIOD_OPTIONS
from ..core.enums import PaymentMethod
from ..core.exceptions import NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..notifications.service import NotificationService
from .aggregator import build_payroll_entry, calculate_payroll, expense_history
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import ShiftWindowCalculator
from .formatter import format_chat_summary, format_sms_summary
from .model import ExpenseHistory, PayrollEntry, PayrollOverview
from .periods import PayPeriod, last_completed_period, recent_periods
from .policy import PayrollPolicy
from .rates import effective_hourly_rate

logger = logging.getLogger(__name__)


class PayrollService:
    """Use case: payroll lists, summaries and expense history.

    Each call reads a fresh snapshot of employees and attendance from the
    repositories and hands it to the pure functions in ``aggregator``.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        attendance: AttendanceRepository,
        *,
        policy: Optional[PayrollPolicy] = None,
        calculator: Optional[PayrollCalculator] = None,
        notifications: Optional[NotificationService] = None,
    ):
        self._employees = employees
        self._attendance = attendance
        self._policy = policy or PayrollPolicy()
        self._calculator = calculator or ShiftWindowCalculator(self._policy)
        self._notifications = notifications

    @property
    def policy(self) -> PayrollPolicy:
        return self._policy

    def _records(self, period: PayPeriod) -> Sequence[AttendanceRecord]:
        return self._attendance.list_between(start_date=period.start, end_date=period.end)

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def default_period(self, payment_method: PaymentMethod, *, today: Optional[date] = None) -> PayPeriod:
        return last_completed_period(payment_method, today or now_local().date(), self._policy)

    def period_options(
        self,
        payment_method: PaymentMethod,
        *,
        today: Optional[date] = None,
        count: int = DEFAULT_PERIOD_OPTIONS,
    ) -> list[PayPeriod]:
        return recent_periods(payment_method, today or now_local().date(), self._policy, count=count)

    def payroll_for_period(self, payment_method: PaymentMethod, period: PayPeriod) -> list[PayrollEntry]:
        return calculate_payroll(
            self._employees.list_all(),
            self._records(period),
            period,
            policy=self._policy,
            calculator=self._calculator,
            payment_method=payment_method,
        )

    def overview(self, *, today: Optional[date] = None) -> PayrollOverview:
        """Weekly employees for last week, monthly employees for last month."""
        weekly_period = self.default_period(PaymentMethod.WEEKLY, today=today)
        monthly_period = self.default_period(PaymentMethod.MONTHLY, today=today)
        return PayrollOverview(
            weekly_period=weekly_period,
            monthly_period=monthly_period,
            weekly=self.payroll_for_period(PaymentMethod.WEEKLY, weekly_period),
            monthly=self.payroll_for_period(PaymentMethod.MONTHLY, monthly_period),
        )

    def employee_payroll(
        self,
        employee_id: str,
        *,
        period: Optional[PayPeriod] = None,
        today: Optional[date] = None,
    ) -> Optional[PayrollEntry]:
        employee = self._get_employee(employee_id)
        period = period or self.default_period(employee.payment_method, today=today)
        rate = effective_hourly_rate(employee, self._policy)
        if not rate:
            return None
        return build_payroll_entry(
            employee,
            rate,
            self._attendance.list_for_employee(employee_id),
            period,
            policy=self._policy,
            calculator=self._calculator,
        )

    def sms_summary(self, employee_id: str, *, period: Optional[PayPeriod] = None) -> Optional[str]:
        entry = self.employee_payroll(employee_id, period=period)
        return format_sms_summary(entry) if entry else None

    def send_summary(self, employee_id: str, *, period: Optional[PayPeriod] = None) -> dict:
        """Send the employee's payroll summary to the admin chat."""
        if self._notifications is None:
            return {"success": False, "error": "Notifications are not configured."}

        entry = self.employee_payroll(employee_id, period=period)
        if entry is None:
            return {"success": False, "error": "No payroll for this employee in the selected period."}

        result = self._notifications.send_admin_summary(format_chat_summary(entry))
        if result.get("success"):
            logger.info("Payroll summary for %s (%s) sent", entry.employee_id, entry.period)
        return result

    def expense_history(
        self,
        period: PayPeriod,
        *,
        payment_method: Optional[PaymentMethod] = None,
    ) -> ExpenseHistory:
        return expense_history(
            self._employees.list_all(),
            self._records(period),
            period,
            policy=self._policy,
            calculator=self._calculator,
            payment_method=payment_method,
        )
