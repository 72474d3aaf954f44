from __future__ import annotations

from typing import Optional

from ...common.datetime_utils import parse_clock_time
from ..policy import PayrollPolicy
from .base import PayrollCalculator


class ShiftWindowCalculator(PayrollCalculator):
    """Standard rule: credit each shift from max(shift start, clock-in) to shift end.

    Both clock-ins are required; a day with only one of them earns 0 hours.
    """

    def __init__(self, policy: Optional[PayrollPolicy] = None):
        self._policy = policy or PayrollPolicy()

    def worked_hours(self, morning_entry: Optional[str], afternoon_entry: Optional[str]) -> float:
        if not morning_entry or not afternoon_entry:
            return 0.0
        hours = self._policy.morning.credited_hours(parse_clock_time(morning_entry))
        hours += self._policy.afternoon.credited_hours(parse_clock_time(afternoon_entry))
        return max(hours, 0.0)

    def minutes_late(self, morning_entry: Optional[str], afternoon_entry: Optional[str]) -> int:
        minutes = 0
        if morning_entry:
            minutes += self._policy.morning.minutes_late(parse_clock_time(morning_entry))
        if afternoon_entry:
            minutes += self._policy.afternoon.minutes_late(parse_clock_time(afternoon_entry))
        return minutes
