from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DISPLAY_DATE_FORMAT, STORAGE_DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, STORAGE_DATE_FORMAT).date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def to_storage_date(value: date) -> str:
    return value.strftime(STORAGE_DATE_FORMAT)


def format_date_display(value: str) -> str:
    """Render a stored YYYY-MM-DD string as DD/MM/YYYY.

    Unparseable strings are shown as stored.
    """
    try:
        return parse_iso_date(value).strftime(DISPLAY_DATE_FORMAT)
    except (TypeError, ValueError):
        return value


def require_log_date(value: str | None, *, today: date | None = None) -> str:
    """Validate a daily-log date: defaults to today, never in the future."""
    today = today or today_local()
    if value is None or not str(value).strip():
        return to_storage_date(today)

    try:
        parsed = parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError("Date must be a valid YYYY-MM-DD date.")

    if parsed > today:
        raise ValidationError("Date cannot be in the future.")
    return to_storage_date(parsed)
