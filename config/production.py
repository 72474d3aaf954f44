import os

from .base import *  # noqa: F401,F403
from .base import db_config, env_flag

SECRET_KEY = os.environ.get("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = db_config("shop_db")

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", False)
AUTO_SEED_DB = False
