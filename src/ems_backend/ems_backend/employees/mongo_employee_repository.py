from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.constants import USERS_COLLECTION
from ..database.connection import DatabaseConnection
from ..database.mongo_base import WriteResult, by_id, store_errors
from .model import AttendanceEntry, EmployeeRecord, PerformanceEntry
from .repository import EmployeeRepository


class MongoEmployeeRepository(EmployeeRepository):
    def __init__(self, conn: DatabaseConnection, *, collection: str = USERS_COLLECTION):
        self._users = conn.collection(collection)

    def get_by_id(self, record_id: str) -> Optional[EmployeeRecord]:
        with store_errors():
            doc = self._users.find_one(by_id(record_id))
        return EmployeeRecord.from_document(doc) if doc else None

    def get_by_email(self, email: str) -> Optional[EmployeeRecord]:
        with store_errors():
            doc = self._users.find_one({"email": email})
        return EmployeeRecord.from_document(doc) if doc else None

    def list_all(self) -> Sequence[EmployeeRecord]:
        with store_errors():
            docs = list(self._users.find())
        return [EmployeeRecord.from_document(d) for d in docs]

    def count(self) -> int:
        with store_errors():
            return int(self._users.count_documents({}))

    def insert(self, document: dict[str, Any]) -> str:
        with store_errors():
            result = self._users.insert_one(dict(document))
        return str(result.inserted_id)

    def set_fields(self, record_id: str, fields: dict[str, Any]) -> WriteResult:
        return self._update(by_id(record_id), {"$set": dict(fields)})

    def push_attendance(self, record_id: str, entry: AttendanceEntry) -> WriteResult:
        flt = {**by_id(record_id), "attendance.date": {"$ne": entry.date}}
        return self._update(flt, {"$push": {"attendance": entry.to_document()}})

    def update_attendance(self, record_id: str, work_date: str, fields: dict[str, Any]) -> WriteResult:
        flt = {**by_id(record_id), "attendance.date": work_date}
        return self._update(flt, {"$set": {f"attendance.$.{k}": v for k, v in fields.items()}})

    def push_performance(self, record_id: str, entry: PerformanceEntry) -> WriteResult:
        flt = {**by_id(record_id), "performance.date": {"$ne": entry.date}}
        return self._update(flt, {"$push": {"performance": entry.to_document()}})

    def update_performance(self, record_id: str, work_date: str, fields: dict[str, Any]) -> WriteResult:
        flt = {**by_id(record_id), "performance.date": work_date}
        return self._update(flt, {"$set": {f"performance.$.{k}": v for k, v in fields.items()}})

    def pull_performance(self, record_id: str, work_date: str) -> WriteResult:
        return self._update(by_id(record_id), {"$pull": {"performance": {"date": work_date}}})

    def pull_day(self, record_id: str, work_date: str) -> WriteResult:
        return self._update(
            by_id(record_id),
            {"$pull": {"attendance": {"date": work_date}, "performance": {"date": work_date}}},
        )

    def _update(self, flt: dict, update: dict) -> WriteResult:
        with store_errors():
            result = self._users.update_one(flt, update)
        return WriteResult.from_update(result)
