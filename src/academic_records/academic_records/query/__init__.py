from .pipeline import (
    ASC,
    DESC,
    StudentFilter,
    class_overview,
    class_roster,
    filter_by_subject,
    filter_students,
    next_sort_state,
    sort_records,
)

__all__ = [
    "ASC",
    "DESC",
    "StudentFilter",
    "class_overview",
    "class_roster",
    "filter_by_subject",
    "filter_students",
    "next_sort_state",
    "sort_records",
]
