from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ..common.validators import require_non_empty, require_number
from ..core.enums import ActionOutcome, RecordAction
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..database.mongo_base import WriteResult
from ..employees.model import AttendanceEntry, EmployeeRecord, PerformanceEntry
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    outcome: ActionOutcome
    message: str

    @property
    def created(self) -> bool:
        return self.outcome == ActionOutcome.CREATED


class RecordService:
    """Record Update Engine: applies named actions to one employee's timeline.

    Upsert-or-update actions try the positional update first and append only
    when it matched nothing. Appends are conditional on the date being absent,
    so no path can leave two entries for one date.
    """

    # A concurrent append between our update and push makes the push miss;
    # one more update attempt then lands on that entry.
    _UPSERT_ATTEMPTS = 2

    def __init__(self, users: EmployeeRepository):
        self._users = users
        self._actions: dict[RecordAction, Callable[[EmployeeRecord, Mapping[str, Any]], ActionResult]] = {
            RecordAction.CLOCK_IN: self._clock_in,
            RecordAction.CLOCK_OUT: self._clock_out,
            RecordAction.UPDATE_PAYROLL: self._update_payroll,
            RecordAction.UPDATE_COMMUNICATION: self._update_communication,
            RecordAction.UPDATE_ROLE: self._update_role,
        }

    def _load(self, record_id: str) -> EmployeeRecord:
        record = self._users.get_by_id(record_id)
        if not record:
            raise NotFoundError("User not found")
        return record

    def apply_action(self, record_id: str, action: Any, payload: Mapping[str, Any]) -> ActionResult:
        record = self._load(record_id)
        try:
            handler = self._actions[RecordAction(action)]
        except ValueError:
            raise ValidationError("Invalid action")
        result = handler(record, payload)
        logger.info("%s on %s: %s", action, record.record_id, result.outcome.value)
        return result

    def _clock_in(self, record: EmployeeRecord, payload: Mapping[str, Any]) -> ActionResult:
        work_date = _require_date(payload)
        if record.attendance_for(work_date):
            raise ConflictError("Already clocked in today.")

        entry = AttendanceEntry(
            date=work_date,
            weekDay=payload.get("weekDay") or "",
            clockIn=payload.get("clockIn") or "",
        )
        if not self._users.push_attendance(record.record_id, entry).matched:
            # Someone else clocked in for this date after we loaded the record.
            raise ConflictError("Already clocked in today.")
        return ActionResult(ActionOutcome.CREATED, "Clock-in recorded.")

    def _clock_out(self, record: EmployeeRecord, payload: Mapping[str, Any]) -> ActionResult:
        work_date = _require_date(payload)
        result = self._users.update_attendance(
            record.record_id, work_date, {"clockOut": payload.get("clockOut") or ""}
        )
        if not result.matched:
            logger.warning("clock-out for %s on %s matched no attendance entry", record.record_id, work_date)
        return ActionResult(ActionOutcome.OK, "Clock-out recorded.")

    def _update_payroll(self, record: EmployeeRecord, payload: Mapping[str, Any]) -> ActionResult:
        work_date = _require_date(payload)
        payroll = payload.get("payroll") or ""
        outcome = self._upsert_attendance(
            record.record_id,
            work_date,
            {"payroll": payroll},
            AttendanceEntry(date=work_date, payroll=payroll),
        )
        if outcome == ActionOutcome.CREATED:
            return ActionResult(outcome, "Payroll added to new entry.")
        return ActionResult(outcome, "Payroll updated successfully.")

    def _update_communication(self, record: EmployeeRecord, payload: Mapping[str, Any]) -> ActionResult:
        work_date = _require_date(payload)
        rating = payload.get("communicationRating")
        if rating is None:
            rating = 0
        else:
            rating = require_number(rating, "Communication rating must be a number")
        outcome = self._upsert_attendance(
            record.record_id,
            work_date,
            {"communicationRating": rating},
            AttendanceEntry(date=work_date, communicationRating=rating),
        )
        if outcome == ActionOutcome.CREATED:
            return ActionResult(outcome, "Communication added to new entry.")
        return ActionResult(outcome, "Communication updated")

    def _update_role(self, record: EmployeeRecord, payload: Mapping[str, Any]) -> ActionResult:
        role = payload.get("role")
        if not role:
            raise ValidationError("Role is required")
        # Re-sending the current role modifies nothing and is reported as a failure.
        if not self._users.set_fields(record.record_id, {"role": role}).modified:
            raise NotFoundError("Failed to update role")
        return ActionResult(ActionOutcome.UPDATED, "Role updated")

    def set_performance(self, record_id: str, payload: Mapping[str, Any]) -> ActionResult:
        if not _day(payload.get("date")):
            raise ValidationError("Date and numeric score required")
        score = require_number(payload.get("score"), "Date and numeric score required")
        work_date = _day(payload["date"])

        record = self._load(record_id)
        outcome = self._upsert(
            lambda: self._users.update_performance(record.record_id, work_date, {"score": score}),
            lambda: self._users.push_performance(record.record_id, PerformanceEntry(date=work_date, score=score)),
        )
        logger.info("performance on %s for %s: %s", record.record_id, work_date, outcome.value)
        if outcome == ActionOutcome.CREATED:
            return ActionResult(outcome, "Performance added")
        return ActionResult(outcome, "Performance updated")

    def reset_communication(self, record_id: str, work_date: Any) -> ActionResult:
        record = self._load(record_id)
        self._users.update_attendance(record.record_id, _day(work_date), {"communicationRating": 0})
        return ActionResult(ActionOutcome.OK, "Communication reset")

    def reset_payroll(self, record_id: str, work_date: Any) -> ActionResult:
        record = self._load(record_id)
        self._users.update_attendance(record.record_id, _day(work_date), {"payroll": ""})
        return ActionResult(ActionOutcome.OK, "Payroll reset")

    def reset_performance(self, record_id: str, work_date: Any) -> ActionResult:
        record = self._load(record_id)
        self._users.pull_performance(record.record_id, _day(work_date))
        return ActionResult(ActionOutcome.OK, "Performance reset")

    def delete_day(self, record_id: str, work_date: Any) -> ActionResult:
        record = self._load(record_id)
        work_date = _day(work_date)
        self._users.pull_day(record.record_id, work_date)
        logger.info("deleted attendance and performance of %s for %s", record.record_id, work_date)
        return ActionResult(ActionOutcome.OK, "Attendance & performance deleted")

    def _upsert_attendance(
        self, record_id: str, work_date: str, fields: dict[str, Any], new_entry: AttendanceEntry
    ) -> ActionOutcome:
        return self._upsert(
            lambda: self._users.update_attendance(record_id, work_date, fields),
            lambda: self._users.push_attendance(record_id, new_entry),
        )

    def _upsert(self, update: Callable[[], WriteResult], append: Callable[[], WriteResult]) -> ActionOutcome:
        for _ in range(self._UPSERT_ATTEMPTS):
            if update().matched:
                return ActionOutcome.UPDATED
            if append().matched:
                return ActionOutcome.CREATED
        raise ConflictError("Entry changed concurrently, try again")


def _day(value: Any) -> Any:
    # Every dated operation keys entries by the same trimmed date string.
    return value.strip() if isinstance(value, str) else value


def _require_date(payload: Mapping[str, Any]) -> str:
    return require_non_empty(payload.get("date"), "Date is required")
