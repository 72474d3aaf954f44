from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import PaymentMethod


@dataclass(frozen=True)
class Employee:
    """Domain entity: a shop employee and their pay configuration.

    Note: Plain data object, no DB access. Normally only one of the three rate
    fields is set; see payroll.rates for how they are resolved.
    """

    employee_id: str
    name: str
    phone: str
    payment_method: PaymentMethod
    account_number: str
    position: Optional[str] = None
    daily_rate: Optional[float] = None
    monthly_rate: Optional[float] = None
    hourly_rate: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "phone": self.phone,
            "position": self.position,
            "paymentMethod": self.payment_method.value,
            "accountNumber": self.account_number,
            "dailyRate": self.daily_rate,
            "monthlyRate": self.monthly_rate,
            "hourlyRate": self.hourly_rate,
        }
