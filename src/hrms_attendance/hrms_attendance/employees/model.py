from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee on the roster.

    Only ``employee_id`` is meaningful to attendance aggregation, the other
    fields are display data.
    """

    employee_id: str
    full_name: str
    email: str
    department: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            employee_id=str(data.get("employeeId", data.get("employee_id", ""))),
            full_name=str(data.get("fullName", data.get("full_name", "")) or ""),
            email=str(data.get("email") or ""),
            department=str(data.get("department") or ""),
        )

    def to_json(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "fullName": self.full_name,
            "email": self.email,
            "department": self.department,
        }

    @property
    def initials(self) -> str:
        parts = self.full_name.split(" ")
        first = parts[0][:1] if parts else ""
        second = parts[1][:1] if len(parts) > 1 else ""
        return f"{first}{second}"
