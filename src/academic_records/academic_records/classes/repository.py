from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from .model import ClassSection


class ClassRepository(Protocol):
    async def get_all(self) -> Sequence[ClassSection]:
        raise NotImplementedError

    async def get_by_id(self, class_id: int) -> ClassSection:
        raise NotImplementedError

    async def create(self, payload: Mapping[str, Any]) -> ClassSection:
        raise NotImplementedError

    async def update(self, class_id: int, payload: Mapping[str, Any]) -> ClassSection:
        raise NotImplementedError

    async def delete(self, class_id: int) -> bool:
        raise NotImplementedError

    async def get_by_grade_level(self, grade_level: int) -> Sequence[ClassSection]:
        raise NotImplementedError
