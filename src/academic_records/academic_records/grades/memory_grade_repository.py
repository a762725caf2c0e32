from __future__ import annotations

from typing import Iterable, List

from ..core import constants
from ..core.enums import Subject
from ..database.memory_base import InMemoryRecordStore
from .model import Grade


class InMemoryGradeRepository(InMemoryRecordStore[Grade]):
    def __init__(self, records: Iterable[Grade] = (), *, latency_scale: float = constants.DEFAULT_LATENCY_SCALE):
        super().__init__(Grade, records, latency_scale=latency_scale)

    async def get_by_student_id(self, student_id: int) -> List[Grade]:
        return await self.filter(lambda g: g.student_id == student_id)

    async def get_by_subject(self, subject: Subject | str) -> List[Grade]:
        # Subject is a str enum, so plain strings compare equal too.
        return await self.filter(lambda g: g.subject == subject)
