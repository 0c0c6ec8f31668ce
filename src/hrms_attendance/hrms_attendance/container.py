from __future__ import annotations

from dataclasses import dataclass

from .api.client import ApiClient, ApiConfig
from .attendance.rest_attendance_repository import RestAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT_SECONDS
from .dashboard.service import DashboardService
from .employees.rest_employee_repository import RestEmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    client: ApiClient

    employees_repo: RestEmployeeRepository
    attendance_repo: RestAttendanceRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def build_container(*, api_config: dict) -> Container:
    config = ApiConfig(
        base_url=str(api_config.get("base_url") or DEFAULT_API_BASE_URL),
        timeout=float(api_config.get("timeout", DEFAULT_API_TIMEOUT_SECONDS)),
    )
    client = ApiClient(config)

    employees_repo = RestEmployeeRepository(client)
    attendance_repo = RestAttendanceRepository(client)

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(attendance_repo)
    dashboard_service = DashboardService(employees_repo, attendance_repo)

    return Container(
        client=client,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        dashboard_service=dashboard_service,
    )
