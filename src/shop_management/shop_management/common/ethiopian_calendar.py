"""Ethiopian calendar helpers used for payroll period labels.

The Ethiopian calendar has twelve 30-day months followed by Pagumen, which has
5 days (6 in the year before a Gregorian leap year). Conversion goes through
the Julian Day Number so it is exact in both directions.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

# JDN of Meskerem 1, year 1 minus one year of days; see to_ethiopian().
_ETHIOPIAN_EPOCH_JDN = 1723856
# date.toordinal() + this offset == Julian Day Number
_ORDINAL_TO_JDN = 1721425

MONTH_NAMES = (
    "Meskerem",
    "Tekemt",
    "Hedar",
    "Tahsas",
    "Ter",
    "Yekatit",
    "Megabit",
    "Miazia",
    "Genbot",
    "Sene",
    "Hamle",
    "Nehasse",
    "Pagumen",
)


@dataclass(frozen=True, order=True)
class EthiopianDate:
    year: int
    month: int
    day: int

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def short(self) -> str:
        return f"{self.month_name} {self.day}"

    def __str__(self) -> str:
        return f"{self.month_name} {self.day}, {self.year}"


def is_leap_year(year: int) -> bool:
    return year % 4 == 3


def month_days(year: int, month: int) -> int:
    if month < 1 or month > 13:
        raise ValueError(f"Ethiopian month out of range: {month}")
    if month <= 12:
        return 30
    return 6 if is_leap_year(year) else 5


def to_ethiopian(value: date) -> EthiopianDate:
    jdn = value.toordinal() + _ORDINAL_TO_JDN
    cycle, r = divmod(jdn - _ETHIOPIAN_EPOCH_JDN, 1461)
    n = r % 365 + 365 * (r // 1460)
    year = 4 * cycle + r // 365 - r // 1460
    return EthiopianDate(year=year, month=n // 30 + 1, day=n % 30 + 1)


def to_gregorian(year: int, month: int, day: int) -> date:
    if day < 1 or day > month_days(year, month):
        raise ValueError(f"Invalid Ethiopian date: {year}-{month}-{day}")
    jdn = _ETHIOPIAN_EPOCH_JDN + 365 * year + year // 4 + 30 * (month - 1) + day - 1
    return date.fromordinal(jdn - _ORDINAL_TO_JDN)


def month_bounds(value: date) -> tuple[date, date]:
    """Gregorian first/last day of the Ethiopian month containing ``value``."""
    eth = to_ethiopian(value)
    start = to_gregorian(eth.year, eth.month, 1)
    return start, start + timedelta(days=month_days(eth.year, eth.month) - 1)


def format_range(start: date, end: date) -> str:
    """Human label such as ``Tekemt 1 - Tekemt 7, 2019``."""
    s, e = to_ethiopian(start), to_ethiopian(end)
    if s.year != e.year:
        return f"{s} - {e}"
    if s.month == e.month and s.day == 1 and e.day == month_days(e.year, e.month):
        return f"{s.month_name} {s.year}"
    return f"{s.short()} - {e.short()}, {e.year}"
