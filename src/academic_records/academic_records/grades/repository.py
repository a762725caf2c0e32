from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from ..core.enums import Subject
from .model import Grade


class GradeRepository(Protocol):
    async def get_all(self) -> Sequence[Grade]:
        raise NotImplementedError

    async def get_by_id(self, grade_id: int) -> Grade:
        raise NotImplementedError

    async def create(self, payload: Mapping[str, Any]) -> Grade:
        raise NotImplementedError

    async def update(self, grade_id: int, payload: Mapping[str, Any]) -> Grade:
        raise NotImplementedError

    async def delete(self, grade_id: int) -> bool:
        raise NotImplementedError

    async def get_by_student_id(self, student_id: int) -> Sequence[Grade]:
        raise NotImplementedError

    async def get_by_subject(self, subject: Subject | str) -> Sequence[Grade]:
        raise NotImplementedError
