from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import date_part


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance submission as returned by the backend.

    ``date`` and ``status`` are kept exactly as transmitted. The history may
    hold several records for the same employee and day.
    """

    id: Any
    employee_id: str
    date: str
    status: str
    employee_name: str = ""

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        employee_id = data.get("employee_id", data.get("employeeId", ""))
        employee_name = data.get("employee_name", data.get("employeeName"))
        return cls(
            id=data.get("id"),
            employee_id=str(employee_id),
            date=data.get("date") or "",
            status=data.get("status") or "",
            employee_name=str(employee_name or ""),
        )

    @property
    def work_date(self) -> Optional[date]:
        return date_part(self.date)


@dataclass(frozen=True)
class AttendanceStats:
    """Summary counts for one calendar date."""

    total_employees: int
    present_count: int
    absent_count: int
    attendance_rate: int
    pending_count: int

    @classmethod
    def empty(cls) -> "AttendanceStats":
        return cls(total_employees=0, present_count=0, absent_count=0, attendance_rate=0, pending_count=0)

    def to_dict(self) -> dict:
        return {
            "total_employees": self.total_employees,
            "present_count": self.present_count,
            "absent_count": self.absent_count,
            "attendance_rate": self.attendance_rate,
            "pending_count": self.pending_count,
        }
