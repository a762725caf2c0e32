from __future__ import annotations

from datetime import date

import pytest

from src.academic_records.academic_records.classes.model import ClassSection
from src.academic_records.academic_records.core.enums import Section, StudentStatus, Subject
from src.academic_records.academic_records.core.exceptions import ValidationError
from src.academic_records.academic_records.grades.model import Grade
from src.academic_records.academic_records.query.pipeline import (
    StudentFilter,
    class_roster,
    filter_by_subject,
    filter_students,
    next_sort_state,
    sort_records,
)
from src.academic_records.academic_records.students.model import Student


@pytest.fixture
def students():
    return [
        Student(id=1, name="Carla", email="carla@school.edu", grade_level=5, section=Section.A,
                enrollment_date=date(2023, 9, 1)),
        Student(id=2, name="ann", email="ann.b@school.edu", grade_level=6, section=Section.B,
                enrollment_date=date(2021, 9, 1), status=StudentStatus.INACTIVE),
        Student(id=3, name="Bruno", email="bruno@mail.org", grade_level=5, section=Section.A,
                enrollment_date=date(2022, 9, 1)),
    ]


def test_single_student_grade_level_scenario():
    ann = Student(id=1, name="Ann", grade_level=5, status=StudentStatus.ACTIVE)

    assert filter_students([ann], StudentFilter(text="", grade_level="5", status="all")) == [ann]
    assert filter_students([ann], StudentFilter(grade_level="6")) == []


def test_text_matches_name_or_email_case_insensitively(students):
    assert [s.id for s in filter_students(students, StudentFilter(text="ANN"))] == [2]
    assert [s.id for s in filter_students(students, StudentFilter(text="mail.org"))] == [3]


def test_filters_combine_with_and(students):
    flt = StudentFilter(text="school.edu", grade_level=5, status="active")

    assert [s.id for s in filter_students(students, flt)] == [1]


def test_empty_filter_passes_everyone(students):
    assert filter_students(students, StudentFilter()) == students


def test_sort_maps_caller_fields_to_storage(students):
    assert [s.id for s in sort_records(students, "name")] == [2, 3, 1]
    assert [s.id for s in sort_records(students, "enrollmentDate")] == [2, 3, 1]
    assert [s.id for s in sort_records(students, "gradeLevel", "desc")] == [2, 1, 3]


def test_descending_is_exact_reverse_for_unique_keys(students):
    asc = sort_records(students, "email", "asc")
    desc = sort_records(students, "email", "desc")

    assert desc == list(reversed(asc))


def test_sort_is_stable_for_equal_keys(students):
    assert [s.id for s in sort_records(students, "grade_level")] == [1, 3, 2]


def test_sort_puts_missing_values_last():
    rows = [Student(id=1, grade_level=None), Student(id=2, grade_level=3)]

    assert [s.id for s in sort_records(rows, "gradeLevel")] == [2, 1]


def test_sort_groups_unconverted_values_after_numbers():
    rows = [
        Student(id=1, grade_level="abc"),
        Student(id=2, grade_level=7),
        Student(id=3, grade_level=None),
        Student(id=4, grade_level=5),
    ]

    assert [s.id for s in sort_records(rows, "gradeLevel")] == [4, 2, 1, 3]
    assert [s.id for s in sort_records(rows, "gradeLevel", "desc")] == [3, 1, 2, 4]


def test_sort_rejects_unknown_field_and_direction(students):
    with pytest.raises(ValidationError):
        sort_records(students, "favouriteColour")
    with pytest.raises(ValidationError):
        sort_records(students, "name", "sideways")


def test_header_click_toggles_direction():
    assert next_sort_state("name", "asc", "name") == ("name", "desc")
    assert next_sort_state("name", "desc", "name") == ("name", "asc")
    assert next_sort_state("name", "desc", "gradeLevel") == ("gradeLevel", "asc")


def test_class_roster_is_derived_from_students(students):
    section = ClassSection(id=1, name="5A", grade_level=5, section=Section.A, capacity=30)

    assert [s.id for s in class_roster(section, students)] == [1, 3]


def test_filter_by_subject(students):
    grades = [Grade(id=1, student_id=3, subject=Subject.ART, score=1, max_score=1)]

    assert [s.id for s in filter_by_subject(students, grades, "Art")] == [3]
    assert filter_by_subject(students, grades, "all") == students
