"""Tests for currency and date conversions."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from freelo_mcp.utils.formatters import (
    format_currency,
    format_date,
    format_date_range,
    parse_currency,
    parse_date,
)


class TestCurrency:
    def test_known_value(self):
        assert format_currency(1000.25) == "100025"
        assert parse_currency("100025") == 1000.25

    def test_whole_amounts(self):
        assert format_currency(5) == "500"
        assert format_currency(Decimal("0.10")) == "10"
        assert parse_currency(0) == 0

    def test_rounds_half_up_to_cents(self):
        assert format_currency(0.125) == "13"
        assert format_currency(19.999) == "2000"

    @pytest.mark.parametrize("amount", [0.01, 12.34, 99999.99])
    def test_round_trip(self, amount):
        assert parse_currency(format_currency(amount)) == amount

    def test_negative_amount(self):
        assert format_currency(-3.5) == "-350"
        assert parse_currency("-350") == -3.5


class TestDates:
    def test_format_naive_datetime_as_utc(self):
        assert format_date(datetime(2024, 1, 31, 12, 0, 0)) == "2024-01-31T12:00:00.000Z"

    def test_format_converts_to_utc(self):
        value = datetime(2024, 1, 31, 14, 30, 0, 250000, tzinfo=timezone(timedelta(hours=2)))
        assert format_date(value) == "2024-01-31T12:30:00.250Z"

    def test_format_date_only(self):
        assert format_date(date(2024, 2, 29)) == "2024-02-29T00:00:00.000Z"

    def test_format_string(self):
        assert format_date("2024-03-01") == "2024-03-01T00:00:00.000Z"

    def test_parse_naive_is_utc(self):
        assert parse_date("2024-03-01T08:00:00").tzinfo == timezone.utc

    def test_parse_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_date("yesterday")

    def test_range(self):
        assert (
            format_date_range(date(2024, 1, 1), "2024-01-31")
            == "2024-01-01T00:00:00.000Z..2024-01-31T00:00:00.000Z"
        )
