from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

from ..core.constants import DISPLAY_DATE_FORMAT, ISO_DATE_FORMAT

_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date.

    Only the exact zero-padded form is accepted; ``" 2026-10-19"`` and
    ``"2026-10- 9"`` raise ValueError.
    """
    if not _ISO_DATE_RE.fullmatch(value):
        raise ValueError(f"Invalid date: {value!r}")
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def date_part(value: object) -> Optional[date]:
    """Calendar date of a transmitted date/timestamp, or None if malformed.

    Only the part before ``T`` is looked at, so ``2026-10-19T23:59:00Z`` and
    ``2026-10-19`` both give ``date(2026, 10, 19)``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    try:
        return parse_iso_date(value.split("T", 1)[0])
    except ValueError:
        return None


def format_display_date(value: date) -> str:
    """``Monday, October 19, 2026`` style label."""
    return value.strftime(DISPLAY_DATE_FORMAT).replace(" 0", " ")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
