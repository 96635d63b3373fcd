"""Tests for the totals cascade."""

from decimal import Decimal

import pytest

from invoice_studio.data.demo_invoices import DEMO_INVOICES
from invoice_studio.models.invoice import AdjustmentMode, LineItem
from invoice_studio.utils.totals import compute_totals, line_amount, totals_for

PERCENT = AdjustmentMode.PERCENT
AMOUNT = AdjustmentMode.AMOUNT


def _items(*rows):
    return [LineItem(f"item-{i}", "", qty, price) for i, (qty, price) in enumerate(rows)]


def _assert_cascade(totals):
    assert totals.taxable_base == totals.subtotal - totals.discount_amount
    assert totals.total == totals.taxable_base + totals.tax_amount + totals.shipping_amount
    assert totals.balance_due == totals.total - totals.amount_paid


def test_percent_tax_scenario():
    totals = compute_totals(_items((40, 100), (20, 120)), PERCENT, 0, PERCENT, 10, 0, 0)
    assert totals.subtotal == Decimal("6400.00")
    assert totals.tax_amount == Decimal("640.00")
    assert totals.total == Decimal("7040.00")
    assert totals.balance_due == Decimal("7040.00")


def test_full_cascade_with_every_adjustment():
    totals = compute_totals(
        _items((2, "19.99"), (1, 5)),
        discount_type=PERCENT,
        discount_value=10,
        tax_type=PERCENT,
        tax_value="8.25",
        shipping="4.50",
        amount_paid=20,
    )
    assert totals.subtotal == Decimal("44.98")
    assert totals.discount_amount == Decimal("4.498")
    assert totals.taxable_base == Decimal("40.482")
    assert totals.tax_amount == Decimal("3.3397650")
    assert totals.total == Decimal("48.3217650")
    assert totals.balance_due == Decimal("28.3217650")
    _assert_cascade(totals)


def test_amount_mode_uses_values_as_is():
    totals = compute_totals(_items((1, 100)), AMOUNT, 15, AMOUNT, 7, 3, 0)
    assert totals.discount_amount == Decimal(15)
    assert totals.tax_amount == Decimal(7)
    assert totals.total == Decimal(95)


def test_modes_accept_plain_strings():
    totals = compute_totals(_items((1, 200)), "percent", 50, "amount", 10)
    assert totals.discount_amount == Decimal(100)
    assert totals.tax_amount == Decimal(10)


@pytest.mark.parametrize("mode", [PERCENT, AMOUNT])
def test_zero_discount_is_zero_in_either_mode(mode):
    totals = compute_totals(_items((3, 33)), mode, 0, PERCENT, 5)
    assert totals.discount_amount == 0


def test_empty_items_degrade_to_shipping():
    totals = compute_totals([], PERCENT, 10, PERCENT, 20, shipping=12, amount_paid=5)
    assert totals.subtotal == 0
    assert totals.total == Decimal(12)
    assert totals.balance_due == Decimal(7)
    _assert_cascade(totals)


def test_discount_larger_than_subtotal_is_not_clamped():
    totals = compute_totals(_items((1, 50)), AMOUNT, 80, PERCENT, 10)
    assert totals.taxable_base == Decimal(-30)
    assert totals.tax_amount == Decimal("-3.0")
    assert totals.total == Decimal("-33.0")
    _assert_cascade(totals)


def test_negative_quantities_propagate():
    totals = compute_totals(_items((-2, 10), (1, 5)), PERCENT, 0, PERCENT, 0)
    assert totals.subtotal == Decimal(-15)
    assert totals.total == Decimal(-15)


def test_none_shipping_and_paid_count_as_zero():
    totals = compute_totals(_items((1, 10)), PERCENT, 0, PERCENT, 0, None, None)
    assert totals.shipping_amount == 0
    assert totals.balance_due == Decimal(10)


def test_float_inputs_avoid_binary_noise():
    totals = compute_totals(_items((3, 0.1)), PERCENT, 0, PERCENT, 0)
    assert totals.subtotal == Decimal("0.3")


def test_deterministic_and_inputs_untouched():
    items = _items((4, "12.5"), (1, 3))
    first = compute_totals(items, PERCENT, 5, AMOUNT, 2, 1, 1)
    second = compute_totals(items, PERCENT, 5, AMOUNT, 2, 1, 1)
    assert first == second
    assert items == _items((4, "12.5"), (1, 3))


def test_line_amount():
    assert line_amount(LineItem("a", "", 3, "2.50")) == Decimal("7.50")
    assert LineItem("a", "", 3, "2.50").amount == Decimal("7.50")


def test_totals_for_invoice():
    totals = totals_for(DEMO_INVOICES[0])
    assert totals.total == Decimal("7040")
    assert totals.rounded("USD").total == Decimal("7040.00")


def test_formatted_summary():
    totals = compute_totals(_items((1, "1234.565")), PERCENT, 0, PERCENT, 0)
    formatted = totals.formatted("USD")
    assert formatted["total"] == "$1,234.57"
    assert formatted["discount_amount"] == "$0.00"
    assert totals.to_dict()["subtotal"] == "1234.565"
