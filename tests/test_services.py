from __future__ import annotations

import asyncio

import pytest

from src.academic_records.academic_records.core.enums import StudentStatus
from src.academic_records.academic_records.core.exceptions import NotFoundError
from src.academic_records.academic_records.query.pipeline import StudentFilter


def test_student_service_filters_then_sorts(seeded_container):
    svc = seeded_container.student_service

    students = asyncio.run(
        svc.list_students(flt=StudentFilter(status="active", grade_level="6"), sort="name")
    )

    assert [s.name for s in students] == ["Noah Davis"]


def test_deleting_a_student_leaves_grades_and_attendance(seeded_container):
    asyncio.run(seeded_container.student_service.delete(1))

    grades = asyncio.run(seeded_container.grade_service.list_grades(student_id=1))
    attendance = asyncio.run(seeded_container.attendance_service.list_for_student(1))
    assert len(grades) == 2
    assert len(attendance) == 2


def test_roster_follows_student_changes(seeded_container):
    classes = seeded_container.class_service
    students = seeded_container.student_service

    assert [s.id for s in asyncio.run(classes.roster(1))] == [1, 2]
    asyncio.run(students.update(2, {"status": StudentStatus.INACTIVE}))
    asyncio.run(students.create({"name": "New", "gradeLevel": 5, "section": "A"}))

    assert [s.id for s in asyncio.run(classes.roster(1))] == [1, 9]
    assert asyncio.run(classes.occupancy(1)).count == 2


def test_class_crud_not_found(container):
    with pytest.raises(NotFoundError):
        asyncio.run(container.class_service.update(1, {"capacity": 10}))


def test_grade_service_lists_by_student_and_subject(seeded_container):
    svc = seeded_container.grade_service

    assert [g.id for g in asyncio.run(svc.list_grades(student_id=1, subject="Science"))] == [2]
    assert [g.id for g in asyncio.run(svc.list_grades(subject="Mathematics"))] == [1, 3]
    assert len(asyncio.run(svc.list_grades())) == 8
    assert asyncio.run(svc.student_average(2)) == 82


def test_grade_table_bands(seeded_container):
    rows = {r.student.id: r for r in asyncio.run(seeded_container.grade_service.table())}

    assert rows[1].band == "success"
    assert rows[6].letter.value == "F"
    assert rows[5].average == 0
