from __future__ import annotations

from typing import Sequence

from ..api.client import ApiClient, expect_object_list
from ..core.constants import EMPLOYEES_PATH
from .model import Employee
from .repository import EmployeeRepository


class RestEmployeeRepository(EmployeeRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def list_all(self) -> Sequence[Employee]:
        rows = expect_object_list(self._client.get(EMPLOYEES_PATH), EMPLOYEES_PATH)
        return [Employee.from_json(r) for r in rows]

    def create(self, employee: Employee) -> Employee:
        created = self._client.post(EMPLOYEES_PATH, employee.to_json())
        return Employee.from_json(created) if isinstance(created, dict) else employee

    def delete_by_id(self, employee_id: str) -> None:
        self._client.delete(f"{EMPLOYEES_PATH}{employee_id}/")
