# dates.py
from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from .domain.models import LocaleBundle

DATE_FORMAT = "%Y-%m-%d"


def today(now: Optional[datetime] = None) -> str:
    """Current date in the fare calendar's format."""
    return (now or datetime.now()).strftime(DATE_FORMAT)


def parse_date(value: str) -> date:
    """Parse a 'YYYY-MM-DD' date; raises ValueError otherwise."""
    return datetime.strptime(value, DATE_FORMAT).date()


def with_weekday(value: str, bundle: LocaleBundle) -> str:
    """Append the localized weekday name, or return the raw string if unparseable."""
    try:
        weekday = parse_date(value).weekday()
    except ValueError:
        return value
    return f"{value} {bundle.weekday(weekday)}"
