from __future__ import annotations

import re

from ..core.constants import CURRENCY
from .model import PayrollEntry

_MARKDOWN_SPECIAL = re.compile(r"([_*`\[])")


def _money(value: float) -> str:
    return f"{CURRENCY} {value:.2f}"


def _period(entry: PayrollEntry) -> str:
    return f"{entry.period} ({entry.period_ethiopian})"


def format_sms_summary(entry: PayrollEntry) -> str:
    """Plain-text payroll summary for SMS / copy to clipboard."""
    return (
        f"Hi {entry.employee_name}, your payroll for {_period(entry)}:\n"
        f"Working days: {entry.working_days}\n"
        f"Total hours: {entry.total_hours:.2f}\n"
        f"Overtime: {entry.overtime_hours:.2f} hrs\n"
        f"Base pay: {_money(entry.base_amount)}\n"
        f"Overtime pay: {_money(entry.overtime_amount)}\n"
        f"Total payout: {_money(entry.amount)}\n"
        f"Thank you."
    )


def escape_markdown(text: str) -> str:
    return _MARKDOWN_SPECIAL.sub(r"\\\1", text)


def format_chat_summary(entry: PayrollEntry) -> str:
    """Same summary in the chat channel's Markdown dialect.

    Legacy Markdown has no escaping inside an entity, so names and labels stay
    outside the bold parts.
    """
    return (
        f"*Payroll Summary for* {escape_markdown(entry.employee_name)}\n"
        f"*Period:* {escape_markdown(_period(entry))}\n"
        f"\n"
        f"Working days: {entry.working_days}\n"
        f"Total hours: {entry.total_hours:.2f}\n"
        f"Overtime: {entry.overtime_hours:.2f} hrs\n"
        f"Base Pay: {_money(entry.base_amount)}\n"
        f"Overtime Pay: + {_money(entry.overtime_amount)}\n"
        f"--------------------\n"
        f"*Total Payout: {_money(entry.amount)}*"
    )
