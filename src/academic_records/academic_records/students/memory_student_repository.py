from __future__ import annotations

from typing import Iterable, List

from ..core import constants
from ..database.memory_base import InMemoryRecordStore
from .model import Student


class InMemoryStudentRepository(InMemoryRecordStore[Student]):
    def __init__(self, records: Iterable[Student] = (), *, latency_scale: float = constants.DEFAULT_LATENCY_SCALE):
        super().__init__(Student, records, latency_scale=latency_scale)

    async def get_by_grade_level(self, grade_level: int) -> List[Student]:
        return await self.filter(lambda s: s.grade_level == grade_level)

    async def search(self, text: str) -> List[Student]:
        needle = (text or "").lower()
        return await self.filter(lambda s: needle in (s.name or "").lower() or needle in (s.email or "").lower())
