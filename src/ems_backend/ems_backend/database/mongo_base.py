from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..core.exceptions import ConflictError, NotFoundError, StoreError


@dataclass(frozen=True)
class WriteResult:
    """Counts reported by a single-document update."""

    matched: int
    modified: int

    @classmethod
    def from_update(cls, result) -> "WriteResult":
        return cls(matched=int(result.matched_count), modified=int(result.modified_count))


@contextmanager
def store_errors() -> Iterator[None]:
    """Translate driver errors into domain errors."""
    try:
        yield
    except DuplicateKeyError as e:
        if "employeeId" in ((e.details or {}).get("keyPattern") or {}):
            raise ConflictError("Employee ID already assigned, try again") from e
        raise ConflictError("User already exists") from e
    except PyMongoError as e:
        raise StoreError(str(e)) from e


def to_object_id(record_id: str) -> ObjectId:
    # An id that cannot name a document cannot name an existing record.
    try:
        return ObjectId(str(record_id))
    except (InvalidId, TypeError) as e:
        raise NotFoundError("User not found") from e


def by_id(record_id: str) -> dict:
    return {"_id": to_object_id(record_id)}
