from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional

from ..core.enums import GradeType, Subject


@dataclass(frozen=True)
class Grade:
    """Domain entity: one scored assessment of a student.

    ``score`` may exceed ``max_score``; nothing here checks it.
    """

    id: int
    student_id: Optional[int] = None
    subject: Optional[Subject] = None
    score: float = 0.0
    max_score: float = 0.0
    grade_type: Optional[GradeType] = None
    semester: str = ""
    date: Optional[datetime.date] = None

    @property
    def percentage(self) -> float:
        # Recomputed on every read, never stored.
        if not self.max_score:
            return 0.0
        return self.score / self.max_score * 100
