from .base import *  # noqa: F401,F403
from .base import db_config

SECRET_KEY = "test-secret"
DB_CONFIG = db_config("shop_db_test")

TELEGRAM_ADMIN_CHAT_ID = "test-admin-chat"
MONTHLY_WORKING_DAYS = 26
OVERTIME_MULTIPLIER = 1.0
WEEK_STARTS_ON = 6
MONTH_CALENDAR = "gregorian"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
