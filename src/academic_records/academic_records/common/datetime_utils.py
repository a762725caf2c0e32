from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_day(value) -> date:
    """Normalise a date, datetime or ISO string to a calendar-day key.

    Time-of-day is discarded, so ``"2024-03-05T14:30:00Z"`` and
    ``datetime(2024, 3, 5, 8)`` both map to ``date(2024, 3, 5)``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # Only a time part may follow the day: "T..." or " ...".
        if len(text) == 10 or (len(text) > 10 and text[10] in "T "):
            try:
                return parse_iso_date(text[:10])
            except ValueError:
                pass
    raise ValidationError(f"Invalid date: {value!r}")


def today_local() -> date:
    """Current local calendar day.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
