"""Example: use the service layer directly (no Flask).

Prints the upcoming weekly/monthly payroll and each entry's SMS summary.
"""

import importlib

from config import get_settings_module

from src.shop_management.shop_management.container import build_container
from src.shop_management.shop_management.payroll.formatter import format_sms_summary
from src.shop_management.shop_management.payroll.policy import PayrollPolicy


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, policy=PayrollPolicy.from_settings(settings))
    overview = container.payroll_service.overview()

    for title, period, entries in (
        ("Weekly", overview.weekly_period, overview.weekly),
        ("Monthly", overview.monthly_period, overview.monthly),
    ):
        print(f"== {title} payout: {period.label} ({period.ethiopian_label})")
        for entry in entries:
            print(format_sms_summary(entry))
            print()


if __name__ == "__main__":
    main()
