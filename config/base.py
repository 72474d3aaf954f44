"""Settings shared by every environment; each environment module overrides what differs."""
import os


def env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, "1" if default else "0").strip().lower() in {"1", "true", "yes", "on"}


def db_config(default_database: str) -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": int(os.getenv("DB_PORT", "3306")),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", ""),
        "database": os.getenv("DB_NAME", default_database),
    }


# Chat that receives payroll summaries. The bot token itself (TELEGRAM_BOT_TOKEN)
# is read from the environment when a message is sent.
TELEGRAM_ADMIN_CHAT_ID = os.getenv("TELEGRAM_ADMIN_CHAT_ID")

# Payroll policy
MONTHLY_WORKING_DAYS = int(os.getenv("MONTHLY_WORKING_DAYS", "26"))
OVERTIME_MULTIPLIER = float(os.getenv("OVERTIME_MULTIPLIER", "1.0"))
WEEK_STARTS_ON = int(os.getenv("WEEK_STARTS_ON", "6"))  # Monday=0 ... Sunday=6
MONTH_CALENDAR = os.getenv("MONTH_CALENDAR", "gregorian")  # or "ethiopian"
