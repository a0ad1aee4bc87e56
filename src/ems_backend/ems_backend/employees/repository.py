from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..database.mongo_base import WriteResult
from .model import AttendanceEntry, EmployeeRecord, PerformanceEntry


class EmployeeRepository(Protocol):
    """Record Store interface for the employee collection.

    Note (DIP): services depend on this interface, never on pymongo directly.
    Every write reports matched/modified counts for a single record.
    """

    def get_by_id(self, record_id: str) -> Optional[EmployeeRecord]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[EmployeeRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[EmployeeRecord]:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def insert(self, document: dict[str, Any]) -> str:
        """Insert a new record and return its identifier. Duplicate keys raise ConflictError."""

        raise NotImplementedError

    def set_fields(self, record_id: str, fields: dict[str, Any]) -> WriteResult:
        raise NotImplementedError

    def push_attendance(self, record_id: str, entry: AttendanceEntry) -> WriteResult:
        """Append `entry` only if the record has no attendance entry for `entry.date`."""

        raise NotImplementedError

    def update_attendance(self, record_id: str, work_date: str, fields: dict[str, Any]) -> WriteResult:
        """Set `fields` on the attendance entry matching `work_date`."""

        raise NotImplementedError

    def push_performance(self, record_id: str, entry: PerformanceEntry) -> WriteResult:
        """Append `entry` only if the record has no performance entry for `entry.date`."""

        raise NotImplementedError

    def update_performance(self, record_id: str, work_date: str, fields: dict[str, Any]) -> WriteResult:
        raise NotImplementedError

    def pull_performance(self, record_id: str, work_date: str) -> WriteResult:
        raise NotImplementedError

    def pull_day(self, record_id: str, work_date: str) -> WriteResult:
        """Remove both the attendance and the performance entry for `work_date`."""

        raise NotImplementedError
