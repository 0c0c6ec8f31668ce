from __future__ import annotations

import logging

from src.hrms_attendance.hrms_attendance.attendance.model import AttendanceRecord, AttendanceStats
from src.hrms_attendance.hrms_attendance.core.exceptions import ApiError
from src.hrms_attendance.hrms_attendance.dashboard.service import DashboardService
from src.hrms_attendance.hrms_attendance.employees.model import Employee


class FakeEmployees:
    def __init__(self, employees):
        self.employees = list(employees)
        self.fail = False

    def list_all(self):
        if self.fail:
            raise ApiError("employees down")
        return list(self.employees)


class FakeAttendance:
    def __init__(self, records):
        self.records = list(records)
        self.fail = False

    def list_all(self):
        if self.fail:
            raise ApiError("attendance down")
        return list(self.records)


def _emp(employee_id):
    return Employee(employee_id=employee_id, full_name=employee_id, email=f"{employee_id}@x.io", department="IT")


def _rec(rid, employee_id, status, day="2026-10-19"):
    return AttendanceRecord(id=rid, employee_id=employee_id, date=day, status=status)


def test_refresh_aggregates_today(fixed_today):
    employees = FakeEmployees([_emp("E1"), _emp("E2"), _emp("E3")])
    attendance = FakeAttendance([_rec(1, "E1", "Present"), _rec(2, "E2", "Absent"), _rec(3, "E1", "Absent")])

    view = DashboardService(employees, attendance).refresh(fixed_today)

    assert view.error is None
    assert view.stats == AttendanceStats(
        total_employees=3, present_count=0, absent_count=2, attendance_rate=0, pending_count=1
    )
    assert view.pending_message == "1 employees not marked yet"
    assert len(view.history) == 3


def test_all_marked_message(fixed_today):
    employees = FakeEmployees([_emp("E1")])
    attendance = FakeAttendance([_rec(1, "E1", "Present")])

    view = DashboardService(employees, attendance).refresh(fixed_today)

    assert view.pending_message == "All employees marked for today"
    assert view.to_dict()["date_label"] == "Monday, October 19, 2026"
    assert view.to_dict()["stats"]["attendance_rate"] == 100


def test_failed_refresh_keeps_previous_stats(fixed_today):
    employees = FakeEmployees([_emp("E1"), _emp("E2")])
    attendance = FakeAttendance([_rec(1, "E1", "Present")])
    svc = DashboardService(employees, attendance)

    good = svc.refresh(fixed_today)
    attendance.fail = True
    stale = svc.refresh(fixed_today)

    assert stale.error == "Failed to fetch attendance records from server."
    assert stale.stats == good.stats
    assert stale.stats.present_count == 1
    assert stale.history == ()


def test_failed_first_refresh_is_empty(fixed_today):
    employees = FakeEmployees([_emp("E1")])
    employees.fail = True
    svc = DashboardService(employees, FakeAttendance([]))

    view = svc.refresh(fixed_today)

    assert view.stats == AttendanceStats.empty()
    assert view.error is not None
    assert svc.last_stats is None


def test_refresh_picks_up_mutations(fixed_today):
    employees = FakeEmployees([_emp("E1"), _emp("E2")])
    attendance = FakeAttendance([])
    svc = DashboardService(employees, attendance)

    assert svc.refresh(fixed_today).stats.pending_count == 2

    attendance.records.append(_rec(1, "E2", "Present"))
    employees.employees.pop(0)

    stats = svc.refresh(fixed_today).stats
    assert stats.total_employees == 1
    assert stats.pending_count == 0
    assert stats.attendance_rate == 100


def test_orphan_records_are_logged_not_dropped(fixed_today, caplog):
    employees = FakeEmployees([_emp("E1")])
    attendance = FakeAttendance([_rec(1, "E1", "Absent"), _rec(2, "DELETED", "Present")])

    with caplog.at_level(logging.WARNING):
        view = DashboardService(employees, attendance).refresh(fixed_today)

    assert view.stats.present_count == 1
    assert view.stats.attendance_rate == 100
    assert "missing from the roster" in caplog.text
