from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Services depend on this interface, not on a concrete store.
    """

    async def get_all(self) -> Sequence[Student]:
        raise NotImplementedError

    async def get_by_id(self, student_id: int) -> Student:
        raise NotImplementedError

    async def create(self, payload: Mapping[str, Any]) -> Student:
        raise NotImplementedError

    async def update(self, student_id: int, payload: Mapping[str, Any]) -> Student:
        raise NotImplementedError

    async def delete(self, student_id: int) -> bool:
        raise NotImplementedError

    async def get_by_grade_level(self, grade_level: int) -> Sequence[Student]:
        raise NotImplementedError

    async def search(self, text: str) -> Sequence[Student]:
        raise NotImplementedError
