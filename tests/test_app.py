from __future__ import annotations

from datetime import date

import pytest

from src.hrms_attendance.hrms_attendance.attendance.model import AttendanceRecord
from src.hrms_attendance.hrms_attendance.attendance.service import AttendanceService
from src.hrms_attendance.hrms_attendance.container import Container
from src.hrms_attendance.hrms_attendance.core.exceptions import ApiError
from src.hrms_attendance.hrms_attendance.dashboard.service import DashboardService
from src.hrms_attendance.hrms_attendance.employees.model import Employee
from src.hrms_attendance.hrms_attendance.employees.service import EmployeeService
from src.hrms_attendance.hrms_attendance.main import create_app


class InMemoryEmployees:
    def __init__(self, employees):
        self.by_id = {e.employee_id: e for e in employees}
        self.referenced: set[str] = set()

    def list_all(self):
        return list(self.by_id.values())

    def create(self, employee):
        if employee.employee_id in self.by_id:
            raise ApiError("bad", status_code=400, field_errors={"employeeId": ["Already exists."]})
        self.by_id[employee.employee_id] = employee
        return employee

    def delete_by_id(self, employee_id):
        if employee_id in self.referenced or employee_id not in self.by_id:
            raise ApiError("conflict", status_code=409)
        del self.by_id[employee_id]


class InMemoryAttendance:
    def __init__(self, records):
        self.records = list(records)

    def list_all(self):
        return list(self.records)

    def create(self, *, employee_id, work_date: date, status):
        rec = AttendanceRecord(id=len(self.records) + 1, employee_id=employee_id, date=work_date.isoformat(), status=status)
        self.records.append(rec)
        return rec


@pytest.fixture
def repos():
    employees = InMemoryEmployees([Employee("E1", "Ada L", "ada@x.io", "IT"), Employee("E2", "Bob K", "bob@x.io", "HR")])
    attendance = InMemoryAttendance([
        AttendanceRecord(id=1, employee_id="E1", date="2026-10-19T09:00:00", status="Present"),
        AttendanceRecord(id=2, employee_id="E2", date="2026-10-18", status="Absent"),
    ])
    return employees, attendance


@pytest.fixture
def client(monkeypatch, repos, fixed_today):
    from src.hrms_attendance.hrms_attendance.dashboard import service as dashboard_module

    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setattr(dashboard_module, "today_local", lambda: fixed_today)

    employees, attendance = repos
    container = Container(
        client=None,
        employees_repo=employees,
        attendance_repo=attendance,
        employee_service=EmployeeService(employees),
        attendance_service=AttendanceService(attendance),
        dashboard_service=DashboardService(employees, attendance),
    )
    return create_app(container).test_client()


def test_dashboard_endpoint(client):
    resp = client.get("/api/dashboard")

    assert resp.status_code == 200
    data = resp.get_json()
    assert data["success"] is True
    assert data["stats"] == {
        "total_employees": 2,
        "present_count": 1,
        "absent_count": 0,
        "attendance_rate": 50,
        "pending_count": 1,
    }
    assert data["pending_message"] == "1 employees not marked yet"


def test_attendance_history_filter(client):
    all_rows = client.get("/api/attendance").get_json()["records"]
    e2_rows = client.get("/api/attendance?employee_id=E2").get_json()["records"]

    assert [r["id"] for r in all_rows] == [1, 2]
    assert [r["id"] for r in e2_rows] == [2]
    assert e2_rows[0]["css_class"] == "badge-absent"
    assert e2_rows[0]["icon"] == "x-square"


def test_attendance_page_lists_roster_for_filter(client):
    employees = client.get("/api/attendance").get_json()["employees"]

    assert employees == [
        {"employeeId": "E1", "fullName": "Ada L"},
        {"employeeId": "E2", "fullName": "Bob K"},
    ]


def test_mark_attendance_then_stats_refresh(client):
    resp = client.post("/api/attendance", json={"employeeId": "E2", "date": "2026-10-19", "status": "Absent"})

    assert resp.status_code == 201
    stats = client.get("/api/dashboard").get_json()["stats"]
    assert stats["absent_count"] == 1
    assert stats["pending_count"] == 0


def test_mark_attendance_bad_input(client):
    assert client.post("/api/attendance", json={"employeeId": "E1", "status": "Maybe"}).status_code == 400
    assert client.post("/api/attendance", json={"employeeId": "E1", "date": "19/10", "status": "Present"}).status_code == 400
    assert client.post("/api/attendance", json={"employeeId": "E1", "date": 20261019, "status": "Present"}).status_code == 400
    assert client.post("/api/attendance", json={"employeeId": "E1", "date": "2026-10- 9", "status": "Present"}).status_code == 400
    assert client.post("/api/attendance", json=[{"employeeId": "E1", "status": "Present"}]).status_code == 400
    assert client.post("/api/employees", json=["E9"]).status_code == 400


def test_register_and_delete_employee(client):
    resp = client.post(
        "/api/employees",
        json={"employeeId": "E3", "fullName": "Cy D", "email": "cy@x.io", "department": "Ops"},
    )
    assert resp.status_code == 201

    ids = [e["employeeId"] for e in client.get("/api/employees").get_json()["employees"]]
    assert ids == ["E1", "E2", "E3"]

    assert client.delete("/api/employees/E3").status_code == 200


def test_register_duplicate_reports_server_message(client):
    resp = client.post(
        "/api/employees",
        json={"employeeId": "E1", "fullName": "Dup", "email": "d@x.io", "department": "IT"},
    )

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Already exists."


def test_delete_referenced_employee_fails(client, repos):
    employees, _ = repos
    employees.referenced.add("E1")

    resp = client.delete("/api/employees/E1")

    assert resp.status_code == 502
    assert "attendance records attached" in resp.get_json()["message"]
