"""Unit tests for amount and date parsing."""

import datetime as dt
from decimal import Decimal

import pytest

from receipt_scanner.parsing import (
    normalize_amount_text,
    parse_abbrev_month_date,
    parse_amount,
    parse_numeric_date,
    rollover_date,
)


class TestParseAmount:
    """Tolerant money parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("$ 1,234.56", Decimal("1234.56")),
            ("$12.99", Decimal("12.99")),
            ("12,99", Decimal("12.99")),
            ("1.234,56", Decimal("1234.56")),
            ("1,234", Decimal("1234")),
            (" 20 . 00 ", Decimal("20.00")),
            ("-3.50", Decimal("-3.50")),
            (".75", Decimal(".75")),
        ],
    )
    def test_parses_amounts(self, raw, expected):
        assert parse_amount(raw) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "$",
            "TOTAL",
            "1e5",
            "NaN",
            "Infinity",
            "12.34.56",
            "1_000",
            "1" * 27,
            "0123456789012.00",
        ],
    )
    def test_rejects_non_amounts(self, raw):
        assert parse_amount(raw) is None

    @pytest.mark.unit
    def test_normalize_strips_currency_and_spaces(self):
        assert normalize_amount_text("$ 1,234.56") == "1234.56"


class TestRolloverDate:
    """Lenient calendar arithmetic for impossible day numbers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "year,month,day,expected",
        [
            (2024, 2, 14, dt.date(2024, 2, 14)),
            (2024, 2, 30, dt.date(2024, 3, 1)),
            (2023, 2, 29, dt.date(2023, 3, 1)),
            (2024, 4, 31, dt.date(2024, 5, 1)),
            (2024, 2, 0, dt.date(2024, 1, 31)),
            (2024, 12, 99, dt.date(2025, 3, 9)),
        ],
    )
    def test_rollover(self, year, month, day, expected):
        assert rollover_date(year, month, day) == expected

    @pytest.mark.unit
    def test_never_raises_at_calendar_edges(self):
        assert rollover_date(0, 1, 0) == dt.date.min
        assert rollover_date(9999, 12, 40) == dt.date.max


class TestDateParsing:
    """Month-name and MM/DD/YYYY dates."""

    @pytest.mark.unit
    def test_abbrev_month(self):
        assert parse_abbrev_month_date("Feb 14 2024") == dt.date(2024, 2, 14)

    @pytest.mark.unit
    def test_abbrev_month_is_case_sensitive(self):
        assert parse_abbrev_month_date("OCT 05, 2023") is None

    @pytest.mark.unit
    def test_upper_case_item_is_not_a_date(self):
        assert parse_abbrev_month_date("DECAF 12 OZ 1299") is None

    @pytest.mark.unit
    def test_abbrev_month_invalid_day_does_not_raise(self):
        assert parse_abbrev_month_date("Feb 30 2024") == dt.date(2024, 3, 1)

    @pytest.mark.unit
    def test_abbrev_month_must_lead(self):
        assert parse_abbrev_month_date("Paid Feb 14 2024") is None

    @pytest.mark.unit
    def test_abbrev_month_needs_year(self):
        assert parse_abbrev_month_date("Feb 14") is None

    @pytest.mark.unit
    def test_numeric_date_anywhere_in_text(self):
        text = "Store 12\n03/07/2024 09:15\nThank you"
        assert parse_numeric_date(text) == dt.date(2024, 3, 7)

    @pytest.mark.unit
    def test_numeric_date_without_leading_zeros(self):
        assert parse_numeric_date("3/7/2024") == dt.date(2024, 3, 7)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("02/30/2024", dt.date(2024, 3, 1)),
            ("13/45/2024", dt.date(2025, 2, 14)),
            ("4/0/2024", dt.date(2024, 3, 31)),
        ],
    )
    def test_numeric_date_rolls_over(self, text, expected):
        assert parse_numeric_date(text) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["N/A", "2024/03/07", "12/25/24", ""])
    def test_numeric_date_misses(self, text):
        assert parse_numeric_date(text) is None
