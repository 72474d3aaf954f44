import os

from .base import *  # noqa: F401,F403
from .base import db_config, env_flag

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")
DB_CONFIG = db_config("shop_db")

DEBUG = True

# Apply database/schema.sql on startup (CREATE IF NOT EXISTS, safe to repeat)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", True)
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", False)
