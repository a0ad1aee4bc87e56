from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from .auth.token import TokenService
from .core.constants import TOKEN_EXPIRY_DAYS
from .database.connection import DatabaseConnection, DBConfig
from .employees.mongo_employee_repository import MongoEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .feedback.service import FeedbackService
from .records.service import RecordService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: EmployeeRepository

    token_service: TokenService
    employee_service: EmployeeService
    record_service: RecordService
    feedback_service: FeedbackService


def build_services(
    users_repo: EmployeeRepository,
    *,
    jwt_secret: str,
    token_expiry_days: int = TOKEN_EXPIRY_DAYS,
    employee_id_prefix: Optional[str] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        users_repo=users_repo,
        token_service=TokenService(jwt_secret, expires_in=timedelta(days=int(token_expiry_days))),
        employee_service=EmployeeService(users_repo, employee_id_prefix=employee_id_prefix),
        record_service=RecordService(users_repo),
        feedback_service=FeedbackService(users_repo),
    )


def build_container(
    *,
    db_config: dict,
    jwt_secret: str,
    token_expiry_days: int = TOKEN_EXPIRY_DAYS,
    employee_id_prefix: Optional[str] = None,
) -> Container:
    config = DBConfig(
        uri=str(db_config["uri"]),
        database=str(db_config["database"]),
        timeout_ms=int(db_config.get("timeout_ms", 5000)),
    )
    conn = DatabaseConnection(config)

    return build_services(
        MongoEmployeeRepository(conn),
        jwt_secret=jwt_secret,
        token_expiry_days=token_expiry_days,
        employee_id_prefix=employee_id_prefix,
        conn=conn,
    )
