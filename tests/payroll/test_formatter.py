from src.shop_management.shop_management.core.enums import PaymentMethod
from src.shop_management.shop_management.payroll.formatter import format_chat_summary, format_sms_summary
from src.shop_management.shop_management.payroll.model import PayrollEntry


def _entry(name="Jane Doe"):
    return PayrollEntry(
        employee_id="e1",
        employee_name=name,
        payment_method=PaymentMethod.WEEKLY,
        period="Jan 5 - Jan 11, 2025",
        period_ethiopian="Tahsas 27 - Ter 3, 2017",
        working_days=3,
        total_hours=22.5,
        overtime_hours=1.0,
        hourly_rate=20.0,
        base_amount=450.0,
        overtime_amount=20.0,
        amount=470.0,
    )


def test_sms_summary():
    assert format_sms_summary(_entry()) == (
        "Hi Jane Doe, your payroll for Jan 5 - Jan 11, 2025 (Tahsas 27 - Ter 3, 2017):\n"
        "Working days: 3\n"
        "Total hours: 22.50\n"
        "Overtime: 1.00 hrs\n"
        "Base pay: ETB 450.00\n"
        "Overtime pay: ETB 20.00\n"
        "Total payout: ETB 470.00\n"
        "Thank you."
    )


def test_chat_summary_is_markdown():
    text = format_chat_summary(_entry())
    assert text.startswith("*Payroll Summary for* Jane Doe\n*Period:* Jan 5 - Jan 11, 2025 (Tahsas 27 - Ter 3, 2017)\n")
    assert "Base Pay: ETB 450.00" in text
    assert "Overtime Pay: + ETB 20.00" in text
    assert text.endswith("*Total Payout: ETB 470.00*")


def test_chat_summary_escapes_names_outside_bold():
    text = format_chat_summary(_entry(name="abebe_k*"))
    first_line = text.splitlines()[0]
    assert first_line == "*Payroll Summary for* abebe\\_k\\*"
