import os

from .config import Config, db_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
JWT_SECRET = os.getenv("JWT_SECRET", "please-set-JWT_SECRET")
TOKEN_EXPIRY_DAYS = Config.TOKEN_EXPIRY_DAYS

DB_CONFIG = db_config()

CORS_ORIGINS = Config.CORS_ORIGINS
EMPLOYEE_ID_PREFIX = Config.EMPLOYEE_ID_PREFIX
PORT = Config.PORT

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
