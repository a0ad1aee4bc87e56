from __future__ import annotations

import importlib

from dotenv import load_dotenv

from config import get_settings_module
from ems_backend.database.bootstrap import check_connection, ensure_indexes, list_collections
from ems_backend.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    conn = DatabaseConnection(
        DBConfig(uri=db_config["uri"], database=db_config["database"], timeout_ms=int(db_config.get("timeout_ms", 5000)))
    )
    try:
        check_connection(conn)
        indexes = ensure_indexes(conn)
        collections = list_collections(conn)
    finally:
        conn.close()

    print(f"OK: {db_config['database']} indexes={', '.join(indexes)} collections={', '.join(collections)}")


if __name__ == "__main__":
    main()
