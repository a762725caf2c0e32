"""Filtering and ordering over record snapshots, shared by the table views."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union

from ..analytics.metrics import class_occupancy, is_in_class, Occupancy
from ..classes.model import ClassSection
from ..common.fields import to_snake
from ..core.constants import FILTER_ALL
from ..core.exceptions import ValidationError
from ..grades.model import Grade
from ..students.model import Student

T = TypeVar("T")

ASC = "asc"
DESC = "desc"

# Caller-facing sort names -> canonical attribute.
SORT_FIELDS = {
    "name": "name",
    "email": "email",
    "gradeLevel": "grade_level",
    "section": "section",
    "enrollmentDate": "enrollment_date",
    "status": "status",
    "capacity": "capacity",
    "subject": "subject",
    "score": "score",
    "maxScore": "max_score",
    "gradeType": "grade_type",
    "date": "date",
    "studentId": "student_id",
    "id": "id",
}
_CANONICAL = set(SORT_FIELDS.values())


@dataclass(frozen=True)
class StudentFilter:
    text: str = ""
    grade_level: Union[int, str] = FILTER_ALL
    status: str = FILTER_ALL

    def matches(self, student: Student) -> bool:
        return (
            _matches_text(student, self.text)
            and _matches_grade_level(student, self.grade_level)
            and _matches_status(student, self.status)
        )


def _matches_text(student: Student, text: str) -> bool:
    if not text:
        return True
    needle = text.lower()
    return needle in (student.name or "").lower() or needle in (student.email or "").lower()


def _matches_grade_level(student: Student, grade_level) -> bool:
    if grade_level is None or grade_level == FILTER_ALL:
        return True
    try:
        return student.grade_level == int(grade_level)
    except (TypeError, ValueError):
        return False


def _matches_status(student: Student, status) -> bool:
    if status is None or status == FILTER_ALL:
        return True
    return student.status == status


def filter_students(students: Iterable[Student], flt: StudentFilter) -> List[Student]:
    return [s for s in students if flt.matches(s)]


def filter_by_subject(students: Iterable[Student], grades: Sequence[Grade], subject: str) -> List[Student]:
    """Students with at least one grade in ``subject`` ("all" keeps everyone)."""
    if not subject or subject == FILTER_ALL:
        return list(students)
    graded = {g.student_id for g in grades if g.subject == subject}
    return [s for s in students if s.id in graded]


def resolve_sort_field(field: str) -> str:
    if field in SORT_FIELDS:
        return SORT_FIELDS[field]
    snake = to_snake(field)
    if snake in _CANONICAL:
        return snake
    raise ValidationError(f"Unknown sort field: {field!r}")


def _sort_key(attr: str):
    # Values are grouped by kind (numbers, days, text, None) so a field holding
    # a value the store could not convert still sorts.
    def key(record) -> Tuple[int, Any]:
        value = getattr(record, attr, None)
        if value is None:
            return (3, 0)
        if isinstance(value, (int, float)):
            return (0, value)
        if isinstance(value, date):
            return (1, value)
        if isinstance(value, str):
            return (2, value.lower())
        return (2, str(value).lower())

    return key


def sort_records(records: Iterable[T], field: str = "name", direction: str = ASC) -> List[T]:
    """Stable sort on a caller-facing field name.

    ``None`` values sort after everything else ascending. A field holding
    mixed kinds orders numbers, then days, then text.
    """
    if direction not in (ASC, DESC):
        raise ValidationError(f"Unknown sort direction: {direction!r}")
    attr = resolve_sort_field(field)
    return sorted(records, key=_sort_key(attr), reverse=direction == DESC)


def next_sort_state(current_field: Optional[str], current_direction: str, clicked_field: str) -> Tuple[str, str]:
    """Header click: the active column flips direction, any other starts ascending."""
    if clicked_field == current_field:
        return clicked_field, DESC if current_direction == ASC else ASC
    return clicked_field, ASC


def class_roster(section: ClassSection, students: Iterable[Student]) -> List[Student]:
    return [s for s in students if is_in_class(s, section)]


def class_overview(sections: Iterable[ClassSection], students: Sequence[Student]) -> List[Tuple[ClassSection, Occupancy]]:
    return [(c, class_occupancy(c, students)) for c in sections]
