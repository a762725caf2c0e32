from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's presence mark for one calendar day.

    At most one record exists per (student_id, date); the attendance
    service is what keeps it that way.
    """

    id: int
    student_id: Optional[int] = None
    date: Optional[datetime.date] = None
    status: Optional[AttendanceStatus] = None
    reason: str = ""


@dataclass(frozen=True)
class GridRow:
    """Read-model for one student row of the monthly attendance grid."""

    student_id: int
    name: str
    grade_level: Optional[int]
    cells: tuple[Optional[AttendanceStatus], ...]
    rate: int
    low_attendance: bool


@dataclass(frozen=True)
class AttendanceGrid:
    days: tuple[datetime.date, ...]
    editable: tuple[bool, ...]
    rows: tuple[GridRow, ...]
