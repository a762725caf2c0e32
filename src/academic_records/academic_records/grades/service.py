from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..analytics.metrics import grade_average, grade_band, grades_for, letter_grade
from ..core.constants import FILTER_ALL
from ..core.enums import LetterGrade
from ..query.pipeline import filter_by_subject
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import Grade
from .repository import GradeRepository


@dataclass(frozen=True)
class StudentGradeRow:
    """Read-model for one row of the grades table."""

    student: Student
    grades: tuple[Grade, ...]
    average: int
    letter: LetterGrade
    band: str


class GradeService:
    def __init__(self, grades: GradeRepository, students: StudentRepository):
        self._grades = grades
        self._students = students

    async def list_grades(self, *, student_id: Optional[int] = None, subject: Optional[str] = None) -> Sequence[Grade]:
        by_subject = bool(subject) and subject != FILTER_ALL
        if student_id is None:
            if by_subject:
                return await self._grades.get_by_subject(subject)
            return await self._grades.get_all()

        grades = await self._grades.get_by_student_id(student_id)
        if by_subject:
            grades = [g for g in grades if g.subject == subject]
        return grades

    async def get(self, grade_id: int) -> Grade:
        return await self._grades.get_by_id(grade_id)

    async def create(self, payload: Mapping[str, Any]) -> Grade:
        return await self._grades.create(payload)

    async def update(self, grade_id: int, payload: Mapping[str, Any]) -> Grade:
        return await self._grades.update(grade_id, payload)

    async def delete(self, grade_id: int) -> bool:
        return await self._grades.delete(grade_id)

    async def student_average(self, student_id: int) -> int:
        return grade_average(await self._grades.get_by_student_id(student_id))

    async def table(self, *, subject: str = FILTER_ALL) -> Sequence[StudentGradeRow]:
        students, grades = await asyncio.gather(self._students.get_all(), self._grades.get_all())
        rows = []
        for s in filter_by_subject(students, grades, subject):
            mine = grades_for(s.id, grades)
            average = grade_average(mine)
            rows.append(
                StudentGradeRow(
                    student=s,
                    grades=tuple(mine),
                    average=average,
                    letter=letter_grade(average),
                    band=grade_band(average),
                )
            )
        return rows
