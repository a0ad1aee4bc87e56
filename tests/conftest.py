from __future__ import annotations

import copy
import os
from typing import Any, Optional

import pytest
from bson import ObjectId

os.environ.setdefault("APP_ENV", "testing")

from ems_backend.container import build_services  # noqa: E402
from ems_backend.core.exceptions import ConflictError  # noqa: E402
from ems_backend.database.mongo_base import WriteResult  # noqa: E402
from ems_backend.employees.model import AttendanceEntry, EmployeeRecord, PerformanceEntry  # noqa: E402
from ems_backend.main import create_app  # noqa: E402

WORK_DATE = "2025-06-02"
MISS = WriteResult(matched=0, modified=0)


class InMemoryEmployees:
    """Dict-backed EmployeeRepository that reports matched/modified like MongoDB."""

    def __init__(self):
        self.docs: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []

    def add(self, **fields) -> str:
        record_id = str(ObjectId())
        doc = {"attendance": [], "performance": [], **fields}
        doc["_id"] = record_id
        self.docs[record_id] = doc
        return record_id

    def get_by_id(self, record_id: str) -> Optional[EmployeeRecord]:
        doc = self.docs.get(record_id)
        return EmployeeRecord.from_document(copy.deepcopy(doc)) if doc else None

    def get_by_email(self, email: str) -> Optional[EmployeeRecord]:
        for doc in self.docs.values():
            if doc.get("email") == email:
                return EmployeeRecord.from_document(copy.deepcopy(doc))
        return None

    def list_all(self):
        return [EmployeeRecord.from_document(copy.deepcopy(d)) for d in self.docs.values()]

    def count(self) -> int:
        return len(self.docs)

    def insert(self, document: dict[str, Any]) -> str:
        if any(d.get("email") == document.get("email") for d in self.docs.values()):
            raise ConflictError("User already exists")
        return self.add(**copy.deepcopy(document))

    def set_fields(self, record_id: str, fields: dict[str, Any]) -> WriteResult:
        self.calls.append("set_fields")
        doc = self.docs.get(record_id)
        if not doc:
            return MISS
        modified = any(doc.get(k) != v for k, v in fields.items())
        doc.update(fields)
        return WriteResult(matched=1, modified=int(modified))

    def push_attendance(self, record_id: str, entry: AttendanceEntry) -> WriteResult:
        self.calls.append("push_attendance")
        return self._push(record_id, "attendance", entry.date, entry.to_document())

    def update_attendance(self, record_id: str, work_date: str, fields: dict[str, Any]) -> WriteResult:
        self.calls.append("update_attendance")
        return self._update(record_id, "attendance", work_date, fields)

    def push_performance(self, record_id: str, entry: PerformanceEntry) -> WriteResult:
        self.calls.append("push_performance")
        return self._push(record_id, "performance", entry.date, entry.to_document())

    def update_performance(self, record_id: str, work_date: str, fields: dict[str, Any]) -> WriteResult:
        self.calls.append("update_performance")
        return self._update(record_id, "performance", work_date, fields)

    def pull_performance(self, record_id: str, work_date: str) -> WriteResult:
        self.calls.append("pull_performance")
        return self._pull(record_id, ("performance",), work_date)

    def pull_day(self, record_id: str, work_date: str) -> WriteResult:
        self.calls.append("pull_day")
        return self._pull(record_id, ("attendance", "performance"), work_date)

    def _push(self, record_id: str, key: str, work_date: str, item: dict) -> WriteResult:
        doc = self.docs.get(record_id)
        if not doc or any(e.get("date") == work_date for e in doc.setdefault(key, [])):
            return MISS
        doc[key].append(item)
        return WriteResult(matched=1, modified=1)

    def _update(self, record_id: str, key: str, work_date: str, fields: dict) -> WriteResult:
        doc = self.docs.get(record_id)
        for entry in (doc or {}).get(key, []):
            if entry.get("date") == work_date:
                modified = any(entry.get(k) != v for k, v in fields.items())
                entry.update(fields)
                return WriteResult(matched=1, modified=int(modified))
        return MISS

    def _pull(self, record_id: str, keys: tuple[str, ...], work_date: str) -> WriteResult:
        doc = self.docs.get(record_id)
        if not doc:
            return MISS
        changed = False
        for key in keys:
            kept = [e for e in doc.get(key, []) if e.get("date") != work_date]
            changed = changed or len(kept) != len(doc.get(key, []))
            doc[key] = kept
        return WriteResult(matched=1, modified=int(changed))


@pytest.fixture
def users() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def container(users):
    return build_services(users, jwt_secret="test-jwt-secret", employee_id_prefix="2025")


@pytest.fixture
def app(container):
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def work_date() -> str:
    return WORK_DATE
