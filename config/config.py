import os
import urllib.parse


def build_mongo_uri() -> str:
    """MONGO_URI wins; otherwise build an Atlas SRV URI from DB_USER/DB_PASS/DB_HOST."""
    uri = os.environ.get("MONGO_URI")
    if uri:
        return uri

    user = os.environ.get("DB_USER")
    password = os.environ.get("DB_PASS")
    host = os.environ.get("DB_HOST", "localhost:27017")
    if not user:
        return f"mongodb://{host}"

    # Credentials may contain '@' or ':'.
    user = urllib.parse.quote_plus(user)
    password = urllib.parse.quote_plus(password or "")
    return f"mongodb+srv://{user}:{password}@{host}/?retryWrites=true&w=majority"


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "ems-dev-secret"
    JWT_SECRET = os.environ.get("JWT_SECRET") or SECRET_KEY
    TOKEN_EXPIRY_DAYS = int(os.environ.get("TOKEN_EXPIRY_DAYS", "7"))

    DB_NAME = os.environ.get("DB_NAME", "ems-demo")
    MONGO_TIMEOUT_MS = int(os.environ.get("MONGO_TIMEOUT_MS", "5000"))

    CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]

    # Empty means "current year".
    EMPLOYEE_ID_PREFIX = os.environ.get("EMPLOYEE_ID_PREFIX") or None

    PORT = int(os.environ.get("PORT", "5000"))


def db_config() -> dict:
    return {
        "uri": build_mongo_uri(),
        "database": Config.DB_NAME,
        "timeout_ms": Config.MONGO_TIMEOUT_MS,
    }
