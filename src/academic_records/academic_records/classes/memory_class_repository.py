from __future__ import annotations

from typing import Iterable, List

from ..core import constants
from ..database.memory_base import InMemoryRecordStore
from .model import ClassSection


class InMemoryClassRepository(InMemoryRecordStore[ClassSection]):
    def __init__(self, records: Iterable[ClassSection] = (), *, latency_scale: float = constants.DEFAULT_LATENCY_SCALE):
        super().__init__(ClassSection, records, latency_scale=latency_scale)

    async def get_by_grade_level(self, grade_level: int) -> List[ClassSection]:
        return await self.filter(lambda c: c.grade_level == grade_level)
