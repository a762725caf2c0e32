from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..analytics.metrics import Occupancy, class_occupancy
from ..query.pipeline import class_overview, class_roster
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import ClassSection
from .repository import ClassRepository


@dataclass(frozen=True)
class ClassOverviewRow:
    """Read-model for the classes page."""

    section: ClassSection
    occupancy: Occupancy


class ClassService:
    def __init__(self, classes: ClassRepository, students: StudentRepository):
        self._classes = classes
        self._students = students

    async def list_classes(self) -> Sequence[ClassSection]:
        return await self._classes.get_all()

    async def list_for_grade_level(self, grade_level: int) -> Sequence[ClassSection]:
        return await self._classes.get_by_grade_level(grade_level)

    async def get(self, class_id: int) -> ClassSection:
        return await self._classes.get_by_id(class_id)

    async def create(self, payload: Mapping[str, Any]) -> ClassSection:
        return await self._classes.create(payload)

    async def update(self, class_id: int, payload: Mapping[str, Any]) -> ClassSection:
        return await self._classes.update(class_id, payload)

    async def delete(self, class_id: int) -> bool:
        return await self._classes.delete(class_id)

    async def roster(self, class_id: int) -> Sequence[Student]:
        section, students = await asyncio.gather(self._classes.get_by_id(class_id), self._students.get_all())
        return class_roster(section, students)

    async def occupancy(self, class_id: int) -> Occupancy:
        section, students = await asyncio.gather(self._classes.get_by_id(class_id), self._students.get_all())
        return class_occupancy(section, students)

    async def overview(self) -> Sequence[ClassOverviewRow]:
        sections, students = await asyncio.gather(self._classes.get_all(), self._students.get_all())
        return [ClassOverviewRow(section=c, occupancy=o) for c, o in class_overview(sections, students)]
