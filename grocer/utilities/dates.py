from datetime import date, datetime, timedelta
from typing import Tuple, Union

from grocer.utilities.constants import DATE_FORMAT


def parse_date(value: Union[str, date, datetime, None]) -> date:
    """Accept a date, a datetime or a 'YYYY-MM-DD' string (ISO datetimes are truncated)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Invalid date: {value!r}")
    text = value.strip()
    try:
        return datetime.strptime(text[:10], DATE_FORMAT).date()
    except ValueError:
        raise ValueError(f"Invalid date: {value!r}") from None


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def week_range(day: date) -> Tuple[date, date]:
    """Return (monday, sunday) of the week containing `day`."""
    iso = day.isocalendar()
    monday = date.fromisocalendar(iso.year, iso.week, 1)
    return monday, monday + timedelta(days=6)


__all__ = ['parse_date', 'format_date', 'week_range']
