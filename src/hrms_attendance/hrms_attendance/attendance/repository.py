from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        """Full history in backend order, duplicates included."""
        raise NotImplementedError

    def create(self, *, employee_id: str, work_date: date, status: str) -> AttendanceRecord:
        raise NotImplementedError
