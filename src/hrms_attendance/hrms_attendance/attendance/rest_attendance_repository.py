from __future__ import annotations

from datetime import date
from typing import Sequence

from ..api.client import ApiClient, expect_object_list
from ..core.constants import ATTENDANCE_PATH, ISO_DATE_FORMAT
from .model import AttendanceRecord
from .repository import AttendanceRepository


class RestAttendanceRepository(AttendanceRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[AttendanceRecord]:
        rows = expect_object_list(self._client.get(ATTENDANCE_PATH), ATTENDANCE_PATH)
        return [AttendanceRecord.from_json(r) for r in rows]

    def create(self, *, employee_id: str, work_date: date, status: str) -> AttendanceRecord:
        payload = {
            "employeeId": employee_id,
            "date": work_date.strftime(ISO_DATE_FORMAT),
            "status": status,
        }
        created = self._client.post(ATTENDANCE_PATH, payload)
        if isinstance(created, dict):
            return AttendanceRecord.from_json(created)
        return AttendanceRecord(id=None, employee_id=employee_id, date=payload["date"], status=status)
