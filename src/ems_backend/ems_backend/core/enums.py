from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles known to the admin check. Any other stored value means "not admin"."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


class RecordAction(str, Enum):
    """Actions accepted by PATCH /users/<id> in the `action` field."""

    CLOCK_IN = "clockIn"
    CLOCK_OUT = "clockOut"
    UPDATE_PAYROLL = "updatePayroll"
    UPDATE_COMMUNICATION = "updateCommunication"
    UPDATE_ROLE = "updateRole"


class ActionOutcome(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    OK = "ok"
