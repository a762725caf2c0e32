from __future__ import annotations

from enum import Enum


class StudentStatus(str, Enum):
    """Enrollment status of a student."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class AttendanceStatus(str, Enum):
    """Daily presence mark stored on an attendance record."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class GradeType(str, Enum):
    TEST = "test"
    QUIZ = "quiz"
    ASSIGNMENT = "assignment"
    PROJECT = "project"
    EXAM = "exam"


class Subject(str, Enum):
    MATHEMATICS = "Mathematics"
    SCIENCE = "Science"
    ENGLISH = "English"
    HISTORY = "History"
    GEOGRAPHY = "Geography"
    ART = "Art"


class Section(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class LetterGrade(str, Enum):
    """Letter bands, ordered best first."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"
