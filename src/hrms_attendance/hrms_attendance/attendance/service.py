from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..api.client import flatten_error_messages
from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ApiError, ValidationError
from .aggregator import filter_history
from .model import AttendanceRecord
from .presentation import to_history_rows
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def get_history(self, employee_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        return filter_history(self._attendance.list_all(), employee_id)

    def get_history_ui(self, employee_id: Optional[str] = None) -> list[dict]:
        return to_history_rows(self.get_history(employee_id))

    def mark_attendance(
        self,
        *,
        employee_id: str,
        status: str,
        work_date: Optional[date] = None,
    ) -> AttendanceRecord:
        employee_id = require_non_empty(employee_id, "employeeId")
        known = AttendanceStatus.parse(status)
        if known is None:
            raise ValidationError(
                f"Unsupported attendance status: {status!r}",
                field_errors={"status": [f'"{status}" is not a valid choice.']},
            )
        work_date = work_date or today_local()

        try:
            record = self._attendance.create(employee_id=employee_id, work_date=work_date, status=known.value)
        except ApiError as e:
            if e.field_errors:
                message = flatten_error_messages(e.field_errors) or "Failed to mark attendance."
                raise ValidationError(message, field_errors=e.field_errors) from e
            raise ApiError("An unexpected error occurred. Please verify data.", status_code=e.status_code) from e

        logger.info("Marked %s as %s on %s", employee_id, known.value, work_date.isoformat())
        return record
