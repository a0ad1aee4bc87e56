from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..common.datetime_utils import current_year_prefix
from ..common.validators import require_json_object, require_non_empty
from ..core.constants import EMPLOYEE_ID_SEQUENCE_WIDTH
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError
from .model import EmployeeRecord
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

# Assigned by the system at creation; never accepted from the client.
_SYSTEM_FIELDS = ("_id", "employeeId")


@dataclass(frozen=True)
class Registration:
    inserted_id: str
    employee_id: str


class EmployeeService:
    """Use cases: register employees, look them up, answer the admin check."""

    def __init__(self, users: EmployeeRepository, *, employee_id_prefix: Optional[str] = None):
        self._users = users
        self._prefix = employee_id_prefix

    def next_employee_id(self) -> str:
        # Count-based: two concurrent registrations can compute the same id.
        # The unique employeeId index turns that into a ConflictError.
        prefix = self._prefix or current_year_prefix()
        sequence = self._users.count() + 1
        return f"{prefix}{sequence:0{EMPLOYEE_ID_SEQUENCE_WIDTH}d}"

    def register(self, candidate: Any) -> Registration:
        candidate = require_json_object(candidate)
        email = require_non_empty(candidate.get("email"), "Email is required")

        if self._users.get_by_email(email):
            raise ConflictError("User already exists")

        document: dict[str, Any] = {k: v for k, v in candidate.items() if k not in _SYSTEM_FIELDS}
        document["email"] = email
        document.setdefault("role", Role.EMPLOYEE.value)
        document["employeeId"] = self.next_employee_id()

        inserted_id = self._users.insert(document)
        logger.info("registered %s as employee %s", email, document["employeeId"])
        return Registration(inserted_id=inserted_id, employee_id=document["employeeId"])

    def find_by_email(self, email: str) -> Optional[EmployeeRecord]:
        return self._users.get_by_email(email)

    def get_by_email(self, email: str) -> EmployeeRecord:
        record = self._users.get_by_email(email)
        if not record:
            raise NotFoundError("User not found")
        return record

    def list_all(self) -> Sequence[EmployeeRecord]:
        return self._users.list_all()

    def is_admin(self, *, requester_email: Optional[str], email: str) -> bool:
        """Admin check for `email`, asked by the holder of a verified token.

        The role is read from the store, not from the token claims, so a token
        issued before a role change cannot keep admin rights.
        """
        if requester_email != email:
            raise AuthorizationError("Forbidden")
        record = self._users.get_by_email(email)
        return bool(record and record.is_admin)
