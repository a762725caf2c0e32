from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..query.pipeline import ASC, StudentFilter, filter_students, sort_records
from .model import Student
from .repository import StudentRepository


class StudentService:
    """Use case: browse and maintain the student roll."""

    def __init__(self, students: StudentRepository):
        self._students = students

    async def list_students(
        self,
        *,
        flt: Optional[StudentFilter] = None,
        sort: str = "name",
        direction: str = ASC,
    ) -> Sequence[Student]:
        students = await self._students.get_all()
        if flt is not None:
            students = filter_students(students, flt)
        return sort_records(students, sort, direction)

    async def get(self, student_id: int) -> Student:
        return await self._students.get_by_id(student_id)

    async def create(self, payload: Mapping[str, Any]) -> Student:
        return await self._students.create(payload)

    async def update(self, student_id: int, payload: Mapping[str, Any]) -> Student:
        return await self._students.update(student_id, payload)

    async def delete(self, student_id: int) -> bool:
        # Grades and attendance of the student are left in place.
        return await self._students.delete(student_id)
