import os

from .config import Config, db_config

SECRET_KEY = Config.SECRET_KEY
JWT_SECRET = Config.JWT_SECRET
TOKEN_EXPIRY_DAYS = Config.TOKEN_EXPIRY_DAYS

DB_CONFIG = db_config()

CORS_ORIGINS = Config.CORS_ORIGINS
EMPLOYEE_ID_PREFIX = Config.EMPLOYEE_ID_PREFIX
PORT = Config.PORT

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app pings MongoDB and creates indexes on startup (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed demo users on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
