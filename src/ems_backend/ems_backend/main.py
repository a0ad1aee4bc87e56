from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from config import get_settings_module

from .auth.controller import register as register_auth
from .common.http import register_error_handlers
from .container import Container, build_container
from .core.constants import TOKEN_EXPIRY_DAYS
from .database.bootstrap import check_connection, ensure_demo_users, ensure_indexes
from .employees.controller import register as register_employees
from .feedback.controller import register as register_feedback
from .records.controller import register as register_records

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    CORS(app, origins=getattr(settings, "CORS_ORIGINS", []), supports_credentials=True)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, db_config.get("database"))
        container = build_container(
            db_config=db_config,
            jwt_secret=getattr(settings, "JWT_SECRET"),
            token_expiry_days=int(getattr(settings, "TOKEN_EXPIRY_DAYS", TOKEN_EXPIRY_DAYS)),
            employee_id_prefix=getattr(settings, "EMPLOYEE_ID_PREFIX", None),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            check_connection(container.conn)
            ensure_indexes(container.conn)
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            ensure_demo_users(container.employee_service)

    app.extensions["ems_container"] = container

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return "EMS Backend is running"

    register_error_handlers(app)
    register_auth(app, container)
    register_employees(app, container)
    register_records(app, container)
    register_feedback(app, container)

    return app
