"""Derived metrics over record snapshots.

All functions are pure: they take sequences of records and return numbers
or read-models, never touching a store. Percentages are whole numbers
rounded half-up, and an empty denominator yields 0.
"""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..classes.model import ClassSection
from ..common.datetime_utils import today_local
from ..core.constants import LETTER_THRESHOLDS
from ..core.enums import AttendanceStatus, LetterGrade
from ..grades.model import Grade
from ..students.model import Student


@dataclass(frozen=True)
class Occupancy:
    count: int
    capacity: int
    rate: int

    @property
    def display_rate(self) -> int:
        # The raw rate may exceed 100; only the display is clamped.
        return min(self.rate, 100)

    @property
    def over_capacity(self) -> bool:
        return self.count > self.capacity


@dataclass(frozen=True)
class DashboardSummary:
    total_students: int
    active_students: int
    average_attendance: int
    average_grade: int
    today_present_count: int


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def ratio_percent(part: float, whole: float) -> int:
    if not whole:
        return 0
    return round_half_up(100 * part / whole)


def grade_percentage(grade: Grade) -> int:
    """Rounded display percentage of a single grade."""
    return round_half_up(grade.percentage)


def grade_average(grades: Sequence[Grade]) -> int:
    """Mean of per-grade percentages, 0 when there are no grades."""
    if not grades:
        return 0
    return round_half_up(sum(g.percentage for g in grades) / len(grades))


def attendance_rate(records: Sequence[AttendanceRecord]) -> int:
    present = sum(1 for r in records if r.status == AttendanceStatus.PRESENT)
    return ratio_percent(present, len(records))


def attendance_breakdown(records: Sequence[AttendanceRecord]) -> Dict[str, int]:
    counts = Counter(r.status for r in records)
    total = len(records)
    return {status.value: ratio_percent(counts[status], total) for status in AttendanceStatus}


def letter_grade(percentage: float) -> LetterGrade:
    for letter, lower in LETTER_THRESHOLDS:
        if percentage >= lower:
            return LetterGrade(letter)
    return LetterGrade.F


def grade_band(percentage: float) -> str:
    if percentage >= 90:
        return "success"
    if percentage >= 80:
        return "primary"
    if percentage >= 70:
        return "warning"
    return "error"


def grades_for(student_id: int, grades: Iterable[Grade]) -> list[Grade]:
    return [g for g in grades if g.student_id == student_id]


def records_for(student_id: int, records: Iterable[AttendanceRecord]) -> list[AttendanceRecord]:
    return [r for r in records if r.student_id == student_id]


def grade_distribution(students: Sequence[Student], grades: Sequence[Grade]) -> Dict[str, int]:
    """Bucket every student by the letter of their grade average.

    Students without grades average 0 and land in F.
    """
    by_student: Dict[int, list[Grade]] = {}
    for g in grades:
        by_student.setdefault(g.student_id, []).append(g)

    distribution = {letter.value: 0 for letter in LetterGrade}
    for s in students:
        letter = letter_grade(grade_average(by_student.get(s.id, [])))
        distribution[letter.value] += 1
    return distribution


def is_in_class(student: Student, section: ClassSection) -> bool:
    return (
        student.is_active
        and student.grade_level == section.grade_level
        and student.section == section.section
    )


def class_occupancy(section: ClassSection, students: Sequence[Student]) -> Occupancy:
    count = sum(1 for s in students if is_in_class(s, section))
    return Occupancy(count=count, capacity=section.capacity, rate=ratio_percent(count, section.capacity))


def dashboard_summary(
    students: Sequence[Student],
    grades: Sequence[Grade],
    attendance: Sequence[AttendanceRecord],
    *,
    today: Optional[date] = None,
) -> DashboardSummary:
    """Global metrics, pooled over all records rather than averaged per student."""

    today = today or today_local()
    present = sum(1 for r in attendance if r.status == AttendanceStatus.PRESENT)
    total_pct = sum(g.percentage for g in grades)

    return DashboardSummary(
        total_students=len(students),
        active_students=sum(1 for s in students if s.is_active),
        average_attendance=ratio_percent(present, len(attendance)),
        average_grade=round_half_up(total_pct / len(grades)) if grades else 0,
        today_present_count=sum(
            1 for r in attendance if r.date == today and r.status == AttendanceStatus.PRESENT
        ),
    )
