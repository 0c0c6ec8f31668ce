from __future__ import annotations

from enum import Enum
from typing import Optional


class AttendanceStatus(str, Enum):
    """Attendance status values accepted by the backend."""

    PRESENT = "Present"
    ABSENT = "Absent"

    @classmethod
    def parse(cls, value: object) -> Optional["AttendanceStatus"]:
        """Return the matching member, or None for an unrecognized status."""
        for member in cls:
            if member.value == value:
                return member
        return None
