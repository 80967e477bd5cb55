"""Reusable field constraints shared by the tool input models."""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import AfterValidator, Field

from freelo_mcp.utils.formatters import parse_date

CURRENCIES = ("CZK", "EUR", "USD")

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _check_date(value: str) -> str:
    try:
        parse_date(value)
    except ValueError:
        raise ValueError("Invalid date format") from None
    return value


def _check_email(value: str) -> str:
    if not validate_email(value):
        raise ValueError("Invalid email address")
    return value


CurrencyCode = Literal["CZK", "EUR", "USD"]
SortOrder = Literal["asc", "desc"]
DateString = Annotated[str, AfterValidator(_check_date)]
EmailString = Annotated[str, AfterValidator(_check_email)]
PositiveInt = Annotated[int, Field(gt=0)]
PageIndex = Annotated[int, Field(ge=0, description="Page number (0-based)")]
IdList = list[int]


def validate_currency(currency: str) -> bool:
    return currency in CURRENCIES


def validate_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def validate_positive_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
