from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..core.enums import Role

Score = Union[int, float]

# Keys the model owns; everything else in a stored document is profile data.
_RECORD_KEYS = {"_id", "email", "role", "employeeId", "attendance", "performance"}


@dataclass(frozen=True)
class AttendanceEntry:
    """One day on an employee's attendance timeline. Empty strings mean "not recorded"."""

    date: str
    weekDay: str = ""
    clockIn: str = ""
    clockOut: str = ""
    payroll: str = ""
    communicationRating: int = 0

    @classmethod
    def from_document(cls, doc: dict) -> "AttendanceEntry":
        return cls(
            date=doc.get("date"),
            weekDay=doc.get("weekDay") or "",
            clockIn=doc.get("clockIn") or "",
            clockOut=doc.get("clockOut") or "",
            payroll=doc.get("payroll") or "",
            communicationRating=doc.get("communicationRating") or 0,
        )

    def to_document(self) -> dict:
        return {
            "weekDay": self.weekDay,
            "date": self.date,
            "clockIn": self.clockIn,
            "clockOut": self.clockOut,
            "payroll": self.payroll,
            "communicationRating": self.communicationRating,
        }


@dataclass(frozen=True)
class PerformanceEntry:
    date: str
    score: Score

    @classmethod
    def from_document(cls, doc: dict) -> "PerformanceEntry":
        return cls(date=doc.get("date"), score=doc.get("score"))

    def to_document(self) -> dict:
        return {"date": self.date, "score": self.score}


@dataclass(frozen=True)
class EmployeeRecord:
    """Domain entity: an employee profile plus its attendance/performance history.

    Note: Plain data object (no store access). `profile` carries whatever extra
    fields were presented at registration (name, photo, ...).
    """

    record_id: str
    email: str
    role: Optional[str] = None
    employee_id: Optional[str] = None
    attendance: tuple[AttendanceEntry, ...] = ()
    performance: tuple[PerformanceEntry, ...] = ()
    profile: dict[str, Any] = field(default_factory=dict)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    def attendance_for(self, work_date: str) -> Optional[AttendanceEntry]:
        return next((a for a in self.attendance if a.date == work_date), None)

    def performance_for(self, work_date: str) -> Optional[PerformanceEntry]:
        return next((p for p in self.performance if p.date == work_date), None)

    @classmethod
    def from_document(cls, doc: dict) -> "EmployeeRecord":
        return cls(
            record_id=str(doc["_id"]),
            email=doc.get("email"),
            role=doc.get("role"),
            employee_id=doc.get("employeeId"),
            attendance=tuple(AttendanceEntry.from_document(a) for a in doc.get("attendance") or ()),
            performance=tuple(PerformanceEntry.from_document(p) for p in doc.get("performance") or ()),
            profile={k: v for k, v in doc.items() if k not in _RECORD_KEYS},
        )

    def to_json(self) -> dict:
        out: dict[str, Any] = dict(self.profile)
        out.update(
            {
                "_id": self.record_id,
                "email": self.email,
                "role": self.role,
                "employeeId": self.employee_id,
                "attendance": [a.to_document() for a in self.attendance],
                "performance": [p.to_document() for p in self.performance],
            }
        )
        return out
