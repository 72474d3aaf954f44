import importlib

import pytest

from config import get_settings_module
from src.shop_management.shop_management.core.enums import MonthCalendar
from src.shop_management.shop_management.payroll.policy import PayrollPolicy


@pytest.mark.parametrize(
    "env, module",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_policy_from_testing_settings():
    settings = importlib.import_module("config.testing")
    policy = PayrollPolicy.from_settings(settings)
    assert policy.monthly_hours == 208
    assert policy.week_starts_on == 6
    assert policy.month_calendar == MonthCalendar.GREGORIAN
    assert settings.TELEGRAM_ADMIN_CHAT_ID == "test-admin-chat"
