from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .notifications.service import NotificationService
from .notifications.telegram import Notifier, TelegramNotifier
from .payroll.policy import PayrollPolicy
from .payroll.service import PayrollService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    notification_service: NotificationService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    policy: PayrollPolicy,
    notifier: Notifier,
    admin_chat_id: Optional[str],
) -> Container:
    notification_service = NotificationService(notifier, admin_chat_id=admin_chat_id)
    return Container(
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
        payroll_service=PayrollService(
            employees_repo,
            attendance_repo,
            policy=policy,
            notifications=notification_service,
        ),
        notification_service=notification_service,
    )


def build_container(
    *,
    db_config: dict,
    policy: Optional[PayrollPolicy] = None,
    admin_chat_id: Optional[str] = None,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        policy=policy or PayrollPolicy(),
        notifier=TelegramNotifier(),
        admin_chat_id=admin_chat_id,
    )
