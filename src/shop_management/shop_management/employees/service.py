from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Any, Callable, Mapping, Sequence

from ..common.validators import optional_non_negative, require_min_length
from ..core.enums import PaymentMethod
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_RATE_FIELDS = {
    "dailyRate": "daily_rate",
    "monthlyRate": "monthly_rate",
    "hourlyRate": "hourly_rate",
}


def _parse_payment_method(value: Any) -> PaymentMethod:
    try:
        return PaymentMethod(value)
    except ValueError:
        raise ValidationError("Payment method must be Weekly or Monthly")


def _parse_position(value: Any):
    text = (value or "").strip() if isinstance(value, str) else value
    return text or None


# form key -> (dataclass field, parser)
_FIELD_PARSERS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    "name": ("name", lambda v: require_min_length(v, "Name", 2)),
    "phone": ("phone", lambda v: require_min_length(v, "Phone number", 9)),
    "position": ("position", _parse_position),
    "paymentMethod": ("payment_method", _parse_payment_method),
    "accountNumber": ("account_number", lambda v: require_min_length(v, "Account number", 5)),
    **{key: (field, lambda v, key=key: optional_non_negative(v, key)) for key, field in _RATE_FIELDS.items()},
}


def parse_employee_form(form: Mapping[str, Any], *, partial: bool = False) -> dict[str, Any]:
    """Validate an employee form into dataclass keyword arguments.

    With ``partial=True`` only the keys present are validated (merge update).
    """
    values: dict[str, Any] = {}
    for key, (field, parser) in _FIELD_PARSERS.items():
        if key not in form:
            if partial or key in ("position", *_RATE_FIELDS):
                continue
            raise ValidationError(f"{key} is required")
        values[field] = parser(form[key])
    return values


class EmployeeService:
    """Use case: manage employees (create / merge-update / delete)."""

    def __init__(self, employees: EmployeeRepository, *, id_factory: Callable[[], str] | None = None):
        self._employees = employees
        self._new_id = id_factory or (lambda: uuid.uuid4().hex)

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create_employee(self, form: Mapping[str, Any]) -> Employee:
        employee = Employee(employee_id=self._new_id(), **parse_employee_form(form))
        self._employees.save(employee)
        logger.info("Created employee %s (%s)", employee.employee_id, employee.name)
        return employee

    def update_employee(self, employee_id: str, changes: Mapping[str, Any]) -> Employee:
        current = self.get_employee(employee_id)
        updated = replace(current, **parse_employee_form(changes, partial=True))
        self._employees.save(updated)
        return updated

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Employee not found")
        logger.info("Deleted employee %s", employee_id)
