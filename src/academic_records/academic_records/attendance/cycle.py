"""Status cycle for the interactive attendance grid.

States are ``NONE`` (no record yet) plus the three stored statuses::

    NONE -> PRESENT -> ABSENT -> LATE -> PRESENT -> ...

``NONE`` is represented by ``None``.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus

_NEXT = {
    None: AttendanceStatus.PRESENT,
    AttendanceStatus.PRESENT: AttendanceStatus.ABSENT,
    AttendanceStatus.ABSENT: AttendanceStatus.LATE,
    AttendanceStatus.LATE: AttendanceStatus.PRESENT,
}


def next_status(current: Optional[AttendanceStatus]) -> AttendanceStatus:
    if current is not None:
        current = AttendanceStatus(current)
    return _NEXT[current]


def is_editable(day: date, today: date) -> bool:
    """Only today and past days can be marked; future days are inert."""
    return day <= today
