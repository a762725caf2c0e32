from .metrics import (
    DashboardSummary,
    Occupancy,
    attendance_breakdown,
    attendance_rate,
    class_occupancy,
    dashboard_summary,
    grade_average,
    grade_distribution,
    letter_grade,
)

__all__ = [
    "DashboardSummary",
    "Occupancy",
    "attendance_breakdown",
    "attendance_rate",
    "class_occupancy",
    "dashboard_summary",
    "grade_average",
    "grade_distribution",
    "letter_grade",
]
