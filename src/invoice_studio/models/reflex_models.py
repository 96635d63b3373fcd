"""
Reflex-compatible models for the Invoice Studio UI.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components. Monetary values arrive pre-formatted.
"""

import reflex as rx

from invoice_studio.models.invoice import Client, Invoice, LineItem
from invoice_studio.utils.currency import format_currency
from invoice_studio.utils.totals import totals_for


class LineItemModel(rx.Base):
    """Editable line item row."""

    id: str = ""
    description: str = ""
    quantity: float = 1.0
    unit_price: float = 0.0
    amount: str = ""


class ClientModel(rx.Base):
    """Client option for the editor."""

    id: str = ""
    name: str = ""
    email: str = ""
    address: str = ""


class InvoiceRowModel(rx.Base):
    """Dashboard row for an invoice."""

    id: str = ""
    number: str = ""
    client_name: str = ""
    issue_date: str = ""
    status: str = ""
    total: str = ""


def line_item_model(item: LineItem, currency: str) -> LineItemModel:
    """Convert a LineItem into an editable row with its formatted amount."""
    return LineItemModel(
        id=item.id,
        description=item.description,
        quantity=float(item.quantity),
        unit_price=float(item.unit_price),
        amount=format_currency(item.amount, currency),
    )


def line_item_from_model(model: LineItemModel) -> LineItem:
    """Convert an editable row back into a LineItem."""
    return LineItem(
        id=model.id,
        description=model.description,
        quantity=model.quantity,
        unit_price=model.unit_price,
    )


def reprice_line_items(models: list[LineItemModel], currency: str) -> list[LineItemModel]:
    """Rebuild rows so their amounts are formatted in currency."""
    return [line_item_model(line_item_from_model(model), currency) for model in models]


def client_model(client: Client) -> ClientModel:
    """Convert a Client into its Reflex model."""
    return ClientModel(
        id=client.id, name=client.name, email=client.email, address=client.address
    )


def invoice_row_model(invoice: Invoice, client_name: str) -> InvoiceRowModel:
    """Convert an Invoice into a dashboard row."""
    return InvoiceRowModel(
        id=invoice.id,
        number=invoice.number,
        client_name=client_name or "Unknown Client",
        issue_date=invoice.issue_date.strftime("%b %d, %Y"),
        status=invoice.status.value,
        total=format_currency(totals_for(invoice).total, invoice.currency),
    )
