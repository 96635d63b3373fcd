"""Tests for the Reflex row models used by the editor."""

from invoice_studio.data.demo_invoices import DEMO_INVOICES
from invoice_studio.models.invoice import LineItem
from invoice_studio.models.reflex_models import (
    line_item_from_model,
    line_item_model,
    reprice_line_items,
)
from invoice_studio.utils.totals import totals_for


def test_line_item_row_round_trips():
    item = LineItem("item-1", "Hosting", 3, 2.5)
    row = line_item_model(item, "USD")
    assert row.amount == "$7.50"
    assert line_item_from_model(row) == LineItem("item-1", "Hosting", 3.0, 2.5)


def test_currency_change_reprices_rows():
    rows = [line_item_model(item, "USD") for item in DEMO_INVOICES[0].items]
    assert [row.amount for row in rows] == ["$4,000.00", "$2,400.00"]

    repriced = reprice_line_items(rows, "JPY")
    assert [row.amount for row in repriced] == ["¥4,000", "¥2,400"]
    assert [row.id for row in repriced] == [row.id for row in rows]
    assert [row.amount for row in rows] == ["$4,000.00", "$2,400.00"]


def test_repriced_rows_share_the_totals_currency():
    invoice = DEMO_INVOICES[1]
    rows = reprice_line_items([line_item_model(i, "USD") for i in invoice.items], "JPY")
    assert rows[0].amount == totals_for(invoice).formatted("JPY")["subtotal"] == "¥1,500"
    half_yen = reprice_line_items([line_item_model(LineItem("a", "", 3, 2.5), "USD")], "JPY")
    assert half_yen[0].amount == "¥8"
