"""Tests for currency rounding and display formatting."""

from decimal import Decimal

import pytest

from invoice_studio.models.invoice import LineItem
from invoice_studio.utils.currency import (
    currency_exponent,
    format_currency,
    parse_amount,
    round_money,
    to_decimal,
)
from invoice_studio.utils.totals import compute_totals


@pytest.mark.parametrize(
    "value, code, expected",
    [
        (1234.5, "USD", "$1,234.50"),
        (Decimal("0.005"), "USD", "$0.01"),
        (Decimal("2.675"), "EUR", "€2.68"),
        (-12, "GBP", "-£12.00"),
        (1234.5, "JPY", "¥1,235"),
        (99.999, "CAD", "CA$100.00"),
        (12, "AED", "AED 12.00"),
        (1000000, "inr", "₹1,000,000.00"),
    ],
)
def test_format_known_currencies(value, code, expected):
    assert format_currency(value, code) == expected


def test_unknown_currency_falls_back_to_code():
    assert format_currency(Decimal("1234.567"), "XYZ") == "XYZ 1,234.57"
    assert format_currency(-5, "XYZ") == "-XYZ 5.00"


def test_empty_currency_renders_number_only():
    assert format_currency(7, "") == "7.00"
    assert format_currency(7, None) == "7.00"


def test_round_half_up():
    assert round_money(Decimal("0.125"), "USD") == Decimal("0.13")
    assert round_money(Decimal("-0.125"), "USD") == Decimal("-0.13")
    assert round_money(Decimal("2.5"), "JPY") == Decimal("3")


def test_negative_zero_displays_without_sign():
    assert format_currency(Decimal("-0.004"), "USD") == "$0.00"


def test_exponents():
    assert currency_exponent("USD") == 2
    assert currency_exponent("JPY") == 0
    assert currency_exponent("ZZZ") == 2


@pytest.mark.parametrize(
    "value, code",
    [
        (Decimal("1234.565"), "USD"),
        (Decimal("-9876.5"), "EUR"),
        (Decimal("1234.5"), "JPY"),
        (Decimal("0.004"), "GBP"),
        (Decimal("42.42"), "CNY"),
        (Decimal("1000.1"), "XYZ"),
    ],
)
def test_parse_reproduces_rounded_value(value, code):
    assert parse_amount(format_currency(value, code)) == round_money(value, code)


def test_parse_amount_without_digits_is_zero():
    assert parse_amount("$") == 0


@pytest.mark.parametrize(
    "value, expected",
    [(None, Decimal(0)), ("", Decimal(0)), ("abc", Decimal(0)), (0.1, Decimal("0.1")), (True, Decimal(1))],
)
def test_to_decimal(value, expected):
    assert to_decimal(value) == expected


def test_amounts_beyond_default_precision_still_round():
    totals = compute_totals([LineItem("a", "", 1e15, 1e15)])
    assert totals.total == Decimal("1e30")
    assert format_currency(totals.total, "USD") == f"${10**30:,}.00"
    assert round_money(Decimal("1e27"), "USD") == Decimal("1e27")
    assert round_money(
        Decimal("1234567890123456789012345678901.235"), "USD"
    ) == Decimal("1234567890123456789012345678901.24")
    assert totals.formatted("JPY")["total"] == f"¥{10**30:,}"


def test_large_amount_parses_back():
    value = Decimal("98765432109876543210987654321.995")
    assert parse_amount(format_currency(value, "EUR")) == round_money(value, "EUR")


@pytest.mark.parametrize("code", ["X1", "A2B", "Q9"])
def test_parse_ignores_digits_in_unknown_code(code):
    assert format_currency(-5, code) == f"-{code} 5.00"
    assert parse_amount(format_currency(5, code)) == Decimal("5.00")
    assert parse_amount(format_currency(-5, code)) == Decimal("-5.00")


def test_non_finite_inputs_count_as_zero():
    assert to_decimal(float("inf")) == 0
    assert to_decimal(Decimal("NaN")) == 0
    assert format_currency(float("-inf"), "USD") == "$0.00"
