"""Conversions between Python values and Freelo's wire formats."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal


def format_currency(amount: float | int | Decimal) -> str:
    """Encode an amount as integer cents, e.g. ``1000.25 -> "100025"``."""
    cents = (Decimal(str(amount)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return str(int(cents))


def parse_currency(amount: str | int) -> float:
    """Decode integer cents, e.g. ``"100025" -> 1000.25``."""
    return int(amount) / 100


def parse_date(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime. Naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value: datetime | date | str) -> str:
    """Format as a UTC ISO 8601 timestamp with milliseconds, e.g. ``2024-01-31T12:00:00.000Z``."""
    if isinstance(value, str):
        value = parse_date(value)
    elif not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def format_date_range(start: datetime | date | str, end: datetime | date | str) -> str:
    return f"{format_date(start)}..{format_date(end)}"
