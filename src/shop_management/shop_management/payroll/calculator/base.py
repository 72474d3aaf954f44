from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class PayrollCalculator(ABC):
    """Turns one day's two clock-ins into paid hours (Strategy Pattern for payroll)."""

    @abstractmethod
    def worked_hours(self, morning_entry: Optional[str], afternoon_entry: Optional[str]) -> float:
        raise NotImplementedError

    @abstractmethod
    def minutes_late(self, morning_entry: Optional[str], afternoon_entry: Optional[str]) -> int:
        raise NotImplementedError
