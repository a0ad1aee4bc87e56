import os

SECRET_KEY = "test-secret"
JWT_SECRET = "test-jwt-secret"
TOKEN_EXPIRY_DAYS = 7

DB_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
    "database": os.getenv("DB_NAME", "ems-test"),
    "timeout_ms": 1000,
}

CORS_ORIGINS = ["http://localhost:5173"]
EMPLOYEE_ID_PREFIX = "2025"
PORT = 5000

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
AUTO_SEED_DB = False
