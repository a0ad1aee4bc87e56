from __future__ import annotations

from typing import Any, Optional

from ..core.constants import NO_PAYROLL, NOT_RECORDED
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import AttendanceEntry
from ..employees.repository import EmployeeRepository


class FeedbackService:
    """Read-model: one row per attendance day with display defaults filled in."""

    def __init__(self, users: EmployeeRepository):
        self._users = users

    def daily_feedback(self, email: Optional[str]) -> list[dict[str, Any]]:
        if not email:
            raise ValidationError("Email required")
        record = self._users.get_by_email(email)
        if not record:
            raise NotFoundError("User not found")
        return [self._to_row(day) for day in record.attendance]

    @staticmethod
    def _to_row(day: AttendanceEntry) -> dict[str, Any]:
        return {
            "date": day.date,
            "clockIn": day.clockIn or NOT_RECORDED,
            "clockOut": day.clockOut or NOT_RECORDED,
            "communicationRating": day.communicationRating or 0,
            "payroll": day.payroll or NO_PAYROLL,
        }
