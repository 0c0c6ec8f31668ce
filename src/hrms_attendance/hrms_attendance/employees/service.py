from __future__ import annotations

import logging
from typing import Sequence

from ..api.client import flatten_error_messages
from ..common.validators import require_email, require_non_empty
from ..core.exceptions import ApiError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def register_employee(self, *, employee_id: str, full_name: str, email: str, department: str) -> Employee:
        employee = Employee(
            employee_id=require_non_empty(employee_id, "employeeId"),
            full_name=require_non_empty(full_name, "fullName"),
            email=require_email(email, "email"),
            department=require_non_empty(department, "department"),
        )

        try:
            created = self._employees.create(employee)
        except ApiError as e:
            if e.field_errors:
                message = flatten_error_messages(e.field_errors) or "Failed to add employee."
                raise ValidationError(message, field_errors=e.field_errors) from e
            raise ApiError("An unexpected error occurred. Please try again.", status_code=e.status_code) from e

        logger.info("Registered employee %s", created.employee_id)
        return created

    def delete_employee(self, employee_id: str) -> None:
        employee_id = require_non_empty(employee_id, "employeeId")
        try:
            self._employees.delete_by_id(employee_id)
        except ApiError as e:
            raise ApiError(
                "Failed to delete employee. They might have attendance records attached.",
                status_code=e.status_code,
            ) from e
        logger.info("Deleted employee %s", employee_id)
