import time as time_module
from datetime import date, datetime, time, timezone

import pytest

from src.shop_management.shop_management.common.datetime_utils import (
    normalize_clock_time,
    parse_clock_time,
    to_date,
)
from src.shop_management.shop_management.core.exceptions import ValidationError


class _Timestamp:
    def to_datetime(self):
        return datetime(2025, 1, 31, 9, 30)


@pytest.mark.parametrize(
    "value",
    [
        "2025-01-31",
        "2025-01-31T21:00:00.000Z",
        datetime(2025, 1, 31, 23, 59),
        date(2025, 1, 31),
        _Timestamp(),
        {"seconds": 1738324800, "nanoseconds": 0},  # 12:00 UTC, same day in any shop timezone
    ],
)
def test_to_date_accepts_all_stored_shapes(value):
    assert to_date(value) == date(2025, 1, 31)


@pytest.mark.parametrize("value", ["", "31/01/2025", 12, None])
def test_to_date_rejects_unknown_shapes(value):
    with pytest.raises(ValidationError):
        to_date(value)


def test_parse_clock_time():
    assert parse_clock_time("08:05") == time(8, 5)
    with pytest.raises(ValidationError):
        parse_clock_time("24:00")


def test_normalize_clock_time():
    assert normalize_clock_time(None) is None
    assert normalize_clock_time("  ") is None
    assert normalize_clock_time(time(9, 0)) == "09:00"
    assert normalize_clock_time("9:00") == "09:00"


@pytest.fixture
def utc_plus_three(monkeypatch):
    if not hasattr(time_module, "tzset"):
        pytest.skip("needs time.tzset")
    monkeypatch.setenv("TZ", "EAT-3")
    time_module.tzset()
    yield
    monkeypatch.undo()
    time_module.tzset()


def test_timestamps_use_the_local_calendar_day(utc_plus_three):
    # 2025-01-31 00:00 at UTC+3 is 2025-01-30 21:00 UTC
    local_midnight = 1738270800

    assert to_date("2025-01-31T00:00:00+03:00") == date(2025, 1, 31)
    assert to_date({"seconds": local_midnight}) == date(2025, 1, 31)
    assert to_date(datetime(2025, 1, 30, 21, 0, tzinfo=timezone.utc)) == date(2025, 1, 31)
