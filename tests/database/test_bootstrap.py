from __future__ import annotations

from src.academic_records.academic_records.attendance.memory_attendance_repository import (
    InMemoryAttendanceRepository,
)
from src.academic_records.academic_records.classes.memory_class_repository import InMemoryClassRepository
from src.academic_records.academic_records.database.bootstrap import SEED_KINDS, load_seed, seed_stores
from src.academic_records.academic_records.grades.memory_grade_repository import InMemoryGradeRepository
from src.academic_records.academic_records.students.memory_student_repository import InMemoryStudentRepository


def test_seed_stores_loads_every_kind_from_the_seed_file(settings):
    stores = {
        "students": InMemoryStudentRepository(latency_scale=0),
        "classes": InMemoryClassRepository(latency_scale=0),
        "grades": InMemoryGradeRepository(latency_scale=0),
        "attendance": InMemoryAttendanceRepository(latency_scale=0),
    }

    counts = seed_stores(stores, load_seed(settings["SEED_PATH"]))

    assert tuple(counts) == SEED_KINDS
    assert counts == {"students": 8, "classes": 4, "grades": 8, "attendance": 8}
    keys = [(r.student_id, r.date) for r in stores["attendance"].snapshot()]
    assert len(keys) == len(set(keys))
