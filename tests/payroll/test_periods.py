from datetime import date

import pytest

from src.shop_management.shop_management.core.enums import MonthCalendar, PaymentMethod
from src.shop_management.shop_management.payroll.periods import (
    PayPeriod,
    last_completed_period,
    month_containing,
    recent_periods,
    week_containing,
)
from src.shop_management.shop_management.payroll.policy import PayrollPolicy


def test_week_starts_on_sunday_by_default():
    policy = PayrollPolicy()
    period = week_containing(date(2025, 1, 8), week_starts_on=policy.week_starts_on)
    assert (period.start, period.end) == (date(2025, 1, 5), date(2025, 1, 11))


def test_week_start_is_configurable():
    period = week_containing(date(2025, 1, 8), week_starts_on=0)
    assert (period.start, period.end) == (date(2025, 1, 6), date(2025, 1, 12))


def test_last_completed_week_crosses_year_boundary():
    period = last_completed_period(PaymentMethod.WEEKLY, date(2025, 1, 8), PayrollPolicy())
    assert (period.start, period.end) == (date(2024, 12, 29), date(2025, 1, 4))
    assert period.label == "Dec 29, 2024 - Jan 4, 2025"


def test_last_completed_month():
    period = last_completed_period(PaymentMethod.MONTHLY, date(2025, 3, 15), PayrollPolicy())
    assert (period.start, period.end) == (date(2025, 2, 1), date(2025, 2, 28))
    assert period.label == "February 2025"


def test_ethiopian_month_periods():
    policy = PayrollPolicy(month_calendar=MonthCalendar.ETHIOPIAN)

    current = month_containing(date(2026, 10, 18), month_calendar=MonthCalendar.ETHIOPIAN)
    assert (current.start, current.end) == (date(2026, 10, 11), date(2026, 11, 9))

    previous = last_completed_period(PaymentMethod.MONTHLY, date(2026, 10, 18), policy)
    assert (previous.start, previous.end) == (date(2026, 9, 11), date(2026, 10, 10))
    assert previous.ethiopian_label == "Meskerem 2019"


def test_ethiopian_pagumen_is_a_short_month():
    policy = PayrollPolicy(month_calendar=MonthCalendar.ETHIOPIAN)
    period = last_completed_period(PaymentMethod.MONTHLY, date(2026, 9, 20), policy)
    assert (period.start, period.end) == (date(2026, 9, 6), date(2026, 9, 10))


def test_recent_periods_newest_first():
    periods = recent_periods(PaymentMethod.WEEKLY, date(2025, 1, 8), PayrollPolicy(), count=3)
    assert [p.start for p in periods] == [date(2025, 1, 5), date(2024, 12, 29), date(2024, 12, 22)]


def test_period_helpers():
    period = PayPeriod(start=date(2025, 1, 5), end=date(2025, 1, 11))
    assert period.label == "Jan 5 - Jan 11, 2025"
    assert len(period.days()) == 7
    assert period.contains(date(2025, 1, 11))
    assert not period.contains(date(2025, 1, 12))


def test_inverted_period_rejected():
    with pytest.raises(ValueError):
        PayPeriod(start=date(2025, 1, 11), end=date(2025, 1, 5))
