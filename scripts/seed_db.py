from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module
from ems_backend.container import build_container
from ems_backend.database.bootstrap import ensure_demo_users


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        jwt_secret=settings.JWT_SECRET,
        employee_id_prefix=getattr(settings, "EMPLOYEE_ID_PREFIX", None),
    )
    try:
        created = ensure_demo_users(container.employee_service)
    finally:
        container.conn.close()

    print(f"OK: seeded {len(created)} demo user(s) -> {settings.DB_CONFIG['database']}")


if __name__ == "__main__":
    main()
