from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..attendance.aggregator import compute_daily_snapshot, compute_statistics, find_orphan_records
from ..attendance.model import AttendanceRecord, AttendanceStats
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import format_display_date, today_local
from ..core.exceptions import ApiError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardView:
    reference_date: date
    stats: AttendanceStats
    roster: Sequence[Employee] = field(default_factory=tuple)
    history: Sequence[AttendanceRecord] = field(default_factory=tuple)
    error: Optional[str] = None

    @property
    def pending_message(self) -> str:
        if self.stats.pending_count > 0:
            return f"{self.stats.pending_count} employees not marked yet"
        return "All employees marked for today"

    @property
    def date_label(self) -> str:
        return format_display_date(self.reference_date)

    def to_dict(self) -> dict:
        return {
            "date": self.reference_date.isoformat(),
            "date_label": self.date_label,
            "stats": self.stats.to_dict(),
            "pending_message": self.pending_message,
            "error": self.error,
        }


class DashboardService:
    """Fetch roster and history, then aggregate the daily statistics.

    Note: The last good statistics are kept; a failed refresh returns them
    unchanged together with an error message instead of resetting to zero.
    """

    def __init__(self, employees: EmployeeRepository, attendance: AttendanceRepository):
        self._employees = employees
        self._attendance = attendance
        self._last_stats: Optional[AttendanceStats] = None

    @property
    def last_stats(self) -> Optional[AttendanceStats]:
        return self._last_stats

    def _fetch(self) -> tuple[Sequence[Employee], Sequence[AttendanceRecord]]:
        with ThreadPoolExecutor(max_workers=2) as pool:
            roster_future = pool.submit(self._employees.list_all)
            history_future = pool.submit(self._attendance.list_all)
            return roster_future.result(), history_future.result()

    def refresh(self, reference_date: Optional[date] = None) -> DashboardView:
        reference_date = reference_date or today_local()

        try:
            roster, history = self._fetch()
        except ApiError as e:
            logger.error("Failed to fetch dashboard data: %s", e)
            return DashboardView(
                reference_date=reference_date,
                stats=self._last_stats or AttendanceStats.empty(),
                error="Failed to fetch attendance records from server.",
            )

        snapshot = compute_daily_snapshot(history, reference_date)
        orphans = find_orphan_records(snapshot, roster)
        if orphans:
            logger.warning(
                "%d attendance record(s) on %s reference employees missing from the roster",
                len(orphans),
                reference_date.isoformat(),
            )

        stats = compute_statistics(snapshot, roster)
        self._last_stats = stats
        return DashboardView(reference_date=reference_date, stats=stats, roster=roster, history=history)
