from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


@dataclass(frozen=True)
class StatusBadge:
    label: str
    css_class: str
    icon: str | None = None


_BADGES = {
    AttendanceStatus.PRESENT: StatusBadge(label="Present", css_class="badge-present", icon="check-circle"),
    AttendanceStatus.ABSENT: StatusBadge(label="Absent", css_class="badge-absent", icon="x-square"),
}


def status_badge(status: str) -> StatusBadge:
    """Badge for a status; unrecognized values get a plain badge with the raw text."""
    known = AttendanceStatus.parse(status)
    if known is None:
        return StatusBadge(label=str(status), css_class="badge-neutral")
    return _BADGES[known]


def to_history_row(record: AttendanceRecord) -> dict:
    badge = status_badge(record.status)
    work_date = record.work_date
    return {
        "id": record.id,
        "employee_id": record.employee_id,
        "employee_name": record.employee_name,
        "date": work_date.strftime("%Y-%m-%d") if work_date else record.date,
        "weekday": work_date.strftime("%A") if work_date else "-",
        "status": badge.label,
        "css_class": badge.css_class,
        "icon": badge.icon,
    }


def to_history_rows(records: Sequence[AttendanceRecord]) -> list[dict]:
    return [to_history_row(r) for r in records]
