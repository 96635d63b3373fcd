"""
Reflex state management for the Invoice Studio application.

This module contains the application state class that drives the
dashboard and the invoice editor. The editor keeps the invoice being
edited as plain fields; every read of the totals rebuilds an Invoice value
and runs the pure calculator over it, so the preview never holds stale
figures.
"""

from dataclasses import replace
from datetime import date

import reflex as rx

from invoice_studio.lib import logs, objects
from invoice_studio.models.invoice import (
    AdjustmentMode,
    Invoice,
    InvoiceStatus,
    Layout,
    LineItem,
)
from invoice_studio.models.reflex_models import (
    ClientModel,
    InvoiceRowModel,
    LineItemModel,
    client_model,
    invoice_row_model,
    line_item_from_model,
    line_item_model,
    reprice_line_items,
)
from invoice_studio.services import get_invoice_service
from invoice_studio.utils.currency import CURRENCIES, to_decimal
from invoice_studio.utils.invoice_helpers import parse_date
from invoice_studio.utils.numbering import NUMBERING_PRESETS
from invoice_studio.utils.templates import TEMPLATE_STYLES, resolve_template
from invoice_studio.utils.totals import totals_for

LOG = logs.logger(__file__)

APP_TITLE = "Invoice Studio"
APP_SUBTITLE = "Overview of your financial activity."

CURRENCY_CODES = list(CURRENCIES)
TEMPLATE_NAMES = [template.value for template in TEMPLATE_STYLES]
STATUS_NAMES = [status.value for status in InvoiceStatus]
FORMAT_PRESETS = [pattern for _, pattern in NUMBERING_PRESETS]

_NUMERIC_FIELDS = {"discount_value", "tax_value", "shipping", "amount_paid"}
_ITEM_NUMERIC_FIELDS = {"quantity", "unit_price"}


def _get_service():
    """Get the configured invoice service (lazy loaded)."""
    return get_invoice_service()


def _as_float(value: str | float | int | None) -> float:
    """Convert raw input to a float; unparseable input counts as zero."""
    return float(to_decimal(value))


class InvoiceState(rx.State):
    """
    Main application state for Invoice Studio.

    Handles the dashboard listing and the fields of the invoice being
    edited.
    """

    # Dashboard
    invoices: list[InvoiceRowModel] = []
    stats: dict[str, str] = {}
    clients: list[ClientModel] = []
    profile_name: str = ""
    brand_color: str = "#4f46e5"
    invoice_format: str = ""

    # Editor
    invoice_id: str = ""
    number: str = ""
    client_id: str = ""
    issue_date: str = ""
    due_date: str = ""
    status: str = InvoiceStatus.DRAFT.value
    notes: str = ""
    items: list[LineItemModel] = []
    discount_type: str = AdjustmentMode.PERCENT.value
    discount_value: float = 0.0
    tax_type: str = AdjustmentMode.PERCENT.value
    tax_value: float = 0.0
    shipping: float = 0.0
    amount_paid: float = 0.0
    currency: str = "USD"
    template: str = "modern"
    layout: str = Layout.PORTRAIT.value
    payment_link: str = ""
    tax_rate: float = 0.0
    error: str = ""

    @rx.var(cache=False)
    def totals(self) -> dict[str, str]:
        """Formatted totals of the invoice being edited."""
        return totals_for(self._to_invoice()).formatted(self.currency)

    @rx.var
    def template_style(self) -> dict:
        """Resolved style of the selected template."""
        return resolve_template(self.template).to_dict()

    @rx.var
    def client_name(self) -> str:
        """Name of the selected client."""
        for client in self.clients:
            if client.id == self.client_id:
                return client.name
        return ""

    @rx.event
    def on_load(self):
        """Event handler for the dashboard page load."""
        try:
            self._refresh()
        except Exception as e:
            LOG.error("Dashboard load failed: %s", e, exc_info=True)
            self.error = "Could not load invoices."

    @rx.event
    def new_invoice(self):
        """Start a new draft invoice and open the editor."""
        try:
            self._refresh()
            self._load(_get_service().new_invoice())
        except Exception as e:
            LOG.error("Could not start invoice: %s", e, exc_info=True)
            self.error = "Could not start a new invoice."
            return
        return rx.redirect("/editor")

    @rx.event
    def edit_invoice(self, invoice_id: str):
        """Open an existing invoice in the editor."""
        invoice = _get_service().get_invoice(invoice_id)
        if invoice is None:
            LOG.warning("edit_invoice - unknown id:%s", invoice_id)
            return
        self._load(invoice)
        return rx.redirect("/editor")

    @rx.event
    def delete_invoice(self, invoice_id: str):
        """Delete an invoice and refresh the dashboard."""
        _get_service().delete_invoice(invoice_id)
        self._refresh()

    @rx.event
    def save(self):
        """Persist the invoice being edited and return to the dashboard."""
        try:
            _get_service().save_invoice(self._to_invoice())
        except Exception as e:
            LOG.error("Save failed: %s", e, exc_info=True)
            self.error = "Could not save the invoice."
            return
        self._refresh()
        return rx.redirect("/")

    @rx.event
    def set_field(self, name: str, value: str):
        """Set a scalar invoice field from an input control."""
        if name in _NUMERIC_FIELDS:
            setattr(self, name, _as_float(value))
        elif name == "currency":
            self.currency = value
            self.items = reprice_line_items(self.items, value)
        else:
            setattr(self, name, value)

    @rx.event
    def add_item(self):
        """Append an empty line item."""
        self.items = self.items + [
            line_item_model(LineItem(id=objects.new_id("item")), self.currency)
        ]

    @rx.event
    def remove_item(self, item_id: str):
        """Remove the line item with item_id."""
        self.items = [item for item in self.items if item.id != item_id]

    @rx.event
    def set_item_field(self, item_id: str, name: str, value: str):
        """Update one field of a line item and recompute its amount."""
        updated = []
        for model in self.items:
            if model.id == item_id:
                item = line_item_from_model(model)
                if name in _ITEM_NUMERIC_FIELDS:
                    item = replace(item, **{name: _as_float(value)})
                else:
                    item = replace(item, **{name: value})
                model = line_item_model(item, self.currency)
            updated.append(model)
        self.items = updated

    @rx.event
    def set_invoice_format(self, value: str):
        """Change the numbering format on the profile."""
        service = _get_service()
        service.save_profile(replace(service.get_profile(), invoice_format=value))
        self.invoice_format = value

    def _refresh(self):
        """Reload dashboard rows, stats and clients from the service."""
        service = _get_service()
        profile = service.get_profile()
        clients = service.list_clients()
        names = {client.id: client.name for client in clients}
        self.clients = [client_model(client) for client in clients]
        self.invoices = [
            invoice_row_model(inv, names.get(inv.client_id, ""))
            for inv in service.all_invoices()
        ]
        self.stats = service.dashboard_stats().formatted()
        self.profile_name = profile.name
        self.brand_color = profile.brand_color
        self.invoice_format = profile.invoice_format
        self.error = ""

    def _load(self, invoice: Invoice):
        """Copy an invoice into the editor fields."""
        self.invoice_id = invoice.id
        self.number = invoice.number
        self.client_id = invoice.client_id
        self.issue_date = invoice.issue_date.isoformat()
        self.due_date = invoice.due_date.isoformat()
        self.status = invoice.status.value
        self.notes = invoice.notes
        self.items = [line_item_model(item, invoice.currency) for item in invoice.items]
        self.discount_type = invoice.discount_type.value
        self.discount_value = float(invoice.discount_value)
        self.tax_type = invoice.tax_type.value
        self.tax_value = float(invoice.tax_value)
        self.shipping = float(invoice.shipping)
        self.amount_paid = float(invoice.amount_paid)
        self.currency = invoice.currency
        self.template = invoice.template
        self.layout = invoice.layout.value
        self.payment_link = invoice.payment_link
        self.tax_rate = float(invoice.tax_rate)

    def _to_invoice(self) -> Invoice:
        """Build an Invoice value from the editor fields."""
        issue = parse_date(self.issue_date)
        due = parse_date(self.due_date)
        issue_date = issue.date() if issue else date.today()
        return Invoice(
            id=self.invoice_id or objects.new_id("inv"),
            number=self.number,
            client_id=self.client_id,
            issue_date=issue_date,
            due_date=due.date() if due else issue_date,
            status=InvoiceStatus(self.status),
            items=tuple(line_item_from_model(model) for model in self.items),
            notes=self.notes,
            discount_type=AdjustmentMode(self.discount_type),
            discount_value=self.discount_value,
            tax_type=AdjustmentMode(self.tax_type),
            tax_value=self.tax_value,
            shipping=self.shipping,
            amount_paid=self.amount_paid,
            currency=self.currency,
            template=self.template,
            layout=Layout(self.layout),
            payment_link=self.payment_link,
            tax_rate=self.tax_rate,
        )
