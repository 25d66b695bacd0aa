"""
Date and money helpers shared by repositories and services.

SQLite has no DATE or DECIMAL type, so:
- dates are stored as ISO 8601 ``YYYY-MM-DD`` text
- currency is stored as NUMERIC and surfaced as ``Decimal`` with two places

Usage:
    from core.datetime_utils import to_db_date, from_db_date, to_money

    to_db_date(date(2025, 9, 15))   # "2025-09-15"
    from_db_date("2025-09-15")      # date(2025, 9, 15)
    to_money(3500.0)                # Decimal("3500.00")
"""
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union

CENTS = Decimal("0.01")


def utc_now() -> datetime:
    """Get current datetime in UTC with timezone info."""
    return datetime.now(timezone.utc)


def format_iso(dt: datetime) -> str:
    """Format a datetime as ISO 8601 UTC with a 'Z' suffix."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def to_db_date(value: Union[date, str]) -> str:
    """
    Normalize a date for storage.

    Accepts a ``date`` (or ``datetime``, whose time part is dropped) or an
    ISO date string. Raises ValueError for strings that are not ISO dates.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return date.fromisoformat(value).isoformat()


def from_db_date(value: Optional[str]) -> Optional[date]:
    """Parse a stored ISO date; None passes through."""
    if value is None:
        return None
    return date.fromisoformat(value)


def to_money(value: Union[Decimal, float, int, str, None]) -> Optional[Decimal]:
    """
    Convert a stored NUMERIC value to a two-place Decimal.

    SQLite hands NUMERIC columns back as int or float; going through str()
    keeps the decimal digits the float actually prints.
    """
    if value is None:
        return None
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


def to_db_money(value: Union[Decimal, float, int, str, None]) -> Optional[str]:
    """Format a currency value for a NUMERIC column."""
    money = to_money(value)
    return None if money is None else str(money)
