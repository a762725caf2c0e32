from __future__ import annotations

from datetime import date

import pytest

from src.academic_records.academic_records.analytics.metrics import (
    attendance_breakdown,
    attendance_rate,
    class_occupancy,
    dashboard_summary,
    grade_average,
    grade_distribution,
    grade_percentage,
    letter_grade,
    round_half_up,
)
from src.academic_records.academic_records.attendance.model import AttendanceRecord
from src.academic_records.academic_records.classes.model import ClassSection
from src.academic_records.academic_records.core.enums import AttendanceStatus, LetterGrade, Section, StudentStatus
from src.academic_records.academic_records.grades.model import Grade
from src.academic_records.academic_records.students.model import Student

P, A, L = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE


def _att(student_id: int, status: AttendanceStatus, day: date = date(2024, 10, 14)) -> AttendanceRecord:
    return AttendanceRecord(id=0, student_id=student_id, date=day, status=status)


def test_grade_average_of_mixed_scales():
    grades = [
        Grade(id=1, student_id=1, score=45, max_score=50),
        Grade(id=2, student_id=1, score=80, max_score=100),
    ]

    assert grade_average(grades) == 85


def test_empty_inputs_yield_zero():
    assert grade_average([]) == 0
    assert attendance_rate([]) == 0
    assert attendance_breakdown([]) == {"present": 0, "absent": 0, "late": 0}


def test_zero_max_score_does_not_divide():
    grade = Grade(id=1, score=10, max_score=0)

    assert grade.percentage == 0
    assert grade_percentage(grade) == 0
    assert grade_average([grade]) == 0


def test_rounding_is_half_up():
    assert round_half_up(84.5) == 85
    assert round_half_up(2.5) == 3
    assert round_half_up(84.49) == 84
    # 1 of 8 present is 12.5%
    assert attendance_rate([_att(1, P)] + [_att(1, A)] * 7) == 13


def test_attendance_rate_counts_only_present():
    assert attendance_rate([_att(1, P), _att(1, L), _att(1, A)]) == 33


@pytest.mark.parametrize(
    "pct, letter",
    [(100, "A"), (90, "A"), (89, "B"), (80, "B"), (79, "C"), (70, "C"), (69, "D"), (60, "D"), (59, "F"), (0, "F")],
)
def test_letter_grade_bounds_are_inclusive(pct, letter):
    assert letter_grade(pct) == LetterGrade(letter)


def test_grade_distribution_puts_ungraded_students_in_f():
    students = [Student(id=1, name="A"), Student(id=2, name="B"), Student(id=3, name="C")]
    grades = [
        Grade(id=1, student_id=1, score=95, max_score=100),
        Grade(id=2, student_id=2, score=36, max_score=50),
    ]

    assert grade_distribution(students, grades) == {"A": 1, "B": 0, "C": 1, "D": 0, "F": 1}


def test_class_occupancy_counts_active_matching_students():
    section = ClassSection(id=1, name="5A", grade_level=5, section=Section.A, capacity=3)
    students = [
        Student(id=1, grade_level=5, section=Section.A),
        Student(id=2, grade_level=5, section=Section.A, status=StudentStatus.INACTIVE),
        Student(id=3, grade_level=5, section=Section.B),
        Student(id=4, grade_level=6, section=Section.A),
        Student(id=5, grade_level=5, section=Section.A),
    ]

    occ = class_occupancy(section, students)

    assert occ.count == 2
    assert occ.rate == 67


def test_class_occupancy_rate_is_not_clamped():
    section = ClassSection(id=1, grade_level=5, section=Section.A, capacity=1)
    students = [Student(id=i, grade_level=5, section=Section.A) for i in (1, 2, 3)]

    occ = class_occupancy(section, students)

    assert occ.rate == 300
    assert occ.display_rate == 100
    assert occ.over_capacity


def test_class_occupancy_with_zero_capacity():
    section = ClassSection(id=1, grade_level=5, section=Section.A, capacity=0)

    assert class_occupancy(section, [Student(id=1, grade_level=5, section=Section.A)]).rate == 0


def test_dashboard_summary_pools_over_all_records(fixed_today):
    students = [
        Student(id=1),
        Student(id=2),
        Student(id=3, status=StudentStatus.INACTIVE),
    ]
    # Per-student means would be 100 and 50; the pooled figure is 3/4.
    attendance = [
        _att(1, P, fixed_today),
        _att(1, P),
        _att(2, P, fixed_today),
        _att(2, A, fixed_today),
    ]
    grades = [
        Grade(id=1, student_id=1, score=1, max_score=1),
        Grade(id=2, student_id=2, score=1, max_score=2),
        Grade(id=3, student_id=2, score=0, max_score=2),
    ]

    summary = dashboard_summary(students, grades, attendance, today=fixed_today)

    assert summary.total_students == 3
    assert summary.active_students == 2
    assert summary.average_attendance == 75
    assert summary.average_grade == 50
    assert summary.today_present_count == 2


def test_dashboard_summary_on_empty_school(fixed_today):
    summary = dashboard_summary([], [], [], today=fixed_today)

    assert (summary.average_attendance, summary.average_grade, summary.today_present_count) == (0, 0, 0)
