"""Daily attendance aggregation.

Pure functions over an already fetched roster and attendance history. Nothing
here reads the clock, performs I/O or mutates its inputs, so the functions are
safe to call from several threads at once.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .model import AttendanceRecord, AttendanceStats


def compute_daily_snapshot(records: Sequence[AttendanceRecord], reference_date: date) -> list[AttendanceRecord]:
    """One record per employee for ``reference_date``.

    Records are scanned in input order and a later record for the same
    employee replaces an earlier one (last write wins). Records whose date
    cannot be parsed never match. The order of the result is unspecified.
    """
    latest: dict[str, AttendanceRecord] = {}
    for record in records:
        if record.work_date != reference_date:
            continue
        latest[str(record.employee_id)] = record
    return list(latest.values())


def _rate_percent(part: int, total: int) -> int:
    # integer round-half-up of part / total * 100
    return (part * 200 + total) // (2 * total)


def compute_statistics(snapshot: Sequence[AttendanceRecord], roster: Sequence[Employee]) -> AttendanceStats:
    """Counts for a daily snapshot against the roster.

    ``pending_count`` is based on the snapshot size, not on present + absent:
    a record with an unrecognized status still means the employee was marked.
    Records of employees missing from the roster are counted as they are.
    """
    total = len(roster)
    present = sum(1 for r in snapshot if r.status == AttendanceStatus.PRESENT.value)
    absent = sum(1 for r in snapshot if r.status == AttendanceStatus.ABSENT.value)

    return AttendanceStats(
        total_employees=total,
        present_count=present,
        absent_count=absent,
        attendance_rate=_rate_percent(present, total) if total > 0 else 0,
        pending_count=max(0, total - len(snapshot)),
    )


def filter_history(records: Sequence[AttendanceRecord], employee_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
    """Raw history for one employee, or the whole history when no filter is set.

    Ids are compared as strings. Duplicates and input order are preserved.
    """
    if employee_id is None or str(employee_id) == "":
        return records
    wanted = str(employee_id)
    return [r for r in records if str(r.employee_id) == wanted]


def find_orphan_records(records: Sequence[AttendanceRecord], roster: Sequence[Employee]) -> list[AttendanceRecord]:
    """Records whose employee is not on the roster."""
    known = {str(e.employee_id) for e in roster}
    return [r for r in records if str(r.employee_id) not in known]
