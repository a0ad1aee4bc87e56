from __future__ import annotations

import logging

from pymongo import ASCENDING

from ..core.constants import USERS_COLLECTION
from ..core.enums import Role
from .connection import DatabaseConnection
from .mongo_base import store_errors

logger = logging.getLogger(__name__)

DEMO_USERS = (
    {"name": "Admin Demo", "email": "admin@ems.local", "role": Role.ADMIN.value},
    {"name": "Employee Demo", "email": "employee@ems.local", "role": Role.EMPLOYEE.value},
)


def ensure_indexes(conn: DatabaseConnection) -> list[str]:
    """Create the unique indexes registration relies on. Idempotent."""
    users = conn.collection(USERS_COLLECTION)
    with store_errors():
        names = [
            users.create_index([("email", ASCENDING)], unique=True, name="uniq_email"),
            users.create_index([("employeeId", ASCENDING)], unique=True, sparse=True, name="uniq_employee_id"),
        ]
    logger.info("indexes ready on %s: %s", USERS_COLLECTION, ", ".join(names))
    return names


def ensure_demo_users(registration) -> list[str]:
    """Register the demo accounts that are missing; returns the new employeeIds.

    `registration` is an EmployeeService; ids go through the normal assignment path.
    """
    created: list[str] = []
    for candidate in DEMO_USERS:
        if registration.find_by_email(candidate["email"]):
            continue
        result = registration.register(dict(candidate))
        created.append(result.employee_id)
    if created:
        logger.info("seeded demo users: %s", ", ".join(created))
    return created


def list_collections(conn: DatabaseConnection) -> list[str]:
    with store_errors():
        return sorted(conn.database().list_collection_names())


def check_connection(conn: DatabaseConnection) -> None:
    with store_errors():
        conn.ping()
    logger.info("connected to MongoDB database %s", conn.database_name)
