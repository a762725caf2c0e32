from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .classes.memory_class_repository import InMemoryClassRepository
from .classes.service import ClassService
from .core import constants
from .database.bootstrap import load_seed, seed_stores
from .grades.memory_grade_repository import InMemoryGradeRepository
from .grades.service import GradeService
from .reports.service import DashboardService, ReportService
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    """All stores and services of one session.

    Build one per process (or per test); nothing is shared between containers.
    """

    students_repo: InMemoryStudentRepository
    classes_repo: InMemoryClassRepository
    grades_repo: InMemoryGradeRepository
    attendance_repo: InMemoryAttendanceRepository

    student_service: StudentService
    class_service: ClassService
    grade_service: GradeService
    attendance_service: AttendanceService
    dashboard_service: DashboardService
    report_service: ReportService


def build_container(*, settings: Optional[Mapping[str, Any]] = None) -> Container:
    settings = dict(settings or {})
    scale = float(settings.get("STORE_LATENCY_SCALE", constants.DEFAULT_LATENCY_SCALE))

    students_repo = InMemoryStudentRepository(latency_scale=scale)
    classes_repo = InMemoryClassRepository(latency_scale=scale)
    grades_repo = InMemoryGradeRepository(latency_scale=scale)
    attendance_repo = InMemoryAttendanceRepository(latency_scale=scale)

    seed_path = settings.get("SEED_PATH")
    if settings.get("AUTO_SEED") and seed_path:
        seed_stores(
            {
                "students": students_repo,
                "classes": classes_repo,
                "grades": grades_repo,
                "attendance": attendance_repo,
            },
            load_seed(seed_path),
        )

    return Container(
        students_repo=students_repo,
        classes_repo=classes_repo,
        grades_repo=grades_repo,
        attendance_repo=attendance_repo,
        student_service=StudentService(students_repo),
        class_service=ClassService(classes_repo, students_repo),
        grade_service=GradeService(grades_repo, students_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            low_attendance_threshold=int(
                settings.get("LOW_ATTENDANCE_THRESHOLD", constants.DEFAULT_LOW_ATTENDANCE_THRESHOLD)
            ),
        ),
        dashboard_service=DashboardService(students_repo, grades_repo, attendance_repo),
        report_service=ReportService(students_repo, grades_repo, attendance_repo),
    )
