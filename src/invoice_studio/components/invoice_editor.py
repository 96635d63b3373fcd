"""
Invoice editor component for Reflex.

Two columns: the form on the left and the live preview on the right. Every
change goes through an InvoiceState event, which makes the totals computed
var re-run the calculator.
"""

import reflex as rx

from invoice_studio.components.invoice_preview import invoice_preview
from invoice_studio.models.invoice import AdjustmentMode
from invoice_studio.models.reflex_models import ClientModel, LineItemModel
from invoice_studio.state import (
    CURRENCY_CODES,
    FORMAT_PRESETS,
    STATUS_NAMES,
    TEMPLATE_NAMES,
    InvoiceState,
)

_MODES = [mode.value for mode in AdjustmentMode]


def invoice_editor() -> rx.Component:
    """Build the editor page body."""
    return rx.grid(
        rx.box(
            rx.hstack(
                rx.link(rx.icon("arrow-left"), "Back", href="/"),
                rx.spacer(),
                rx.button(rx.icon("save"), "Save", on_click=InvoiceState.save),
            ),
            _details(),
            _line_items(),
            _adjustments(),
            _appearance(),
            class_name="editor-form",
        ),
        invoice_preview(),
        columns="2",
        spacing="6",
        class_name="editor",
    )


def _field(label: str, control: rx.Component) -> rx.Component:
    return rx.box(rx.text(label, class_name="field-label"), control, class_name="field")


def _text_input(name: str, value, type_: str = "text") -> rx.Component:
    return rx.input(
        value=value,
        type=type_,
        on_change=lambda v: InvoiceState.set_field(name, v),
    )


def _client_option(client: ClientModel) -> rx.Component:
    return rx.select.item(client.name, value=client.id)


def _details() -> rx.Component:
    return rx.card(
        rx.heading("Details", size="3"),
        rx.grid(
            _field("Invoice Number", _text_input("number", InvoiceState.number)),
            _field(
                "Client",
                rx.select.root(
                    rx.select.trigger(),
                    rx.select.content(rx.foreach(InvoiceState.clients, _client_option)),
                    value=InvoiceState.client_id,
                    on_change=lambda v: InvoiceState.set_field("client_id", v),
                ),
            ),
            _field("Issue Date", _text_input("issue_date", InvoiceState.issue_date, "date")),
            _field("Due Date", _text_input("due_date", InvoiceState.due_date, "date")),
            _field(
                "Status",
                rx.select(
                    STATUS_NAMES,
                    value=InvoiceState.status,
                    on_change=lambda v: InvoiceState.set_field("status", v),
                ),
            ),
            _field(
                "Numbering Format",
                rx.select(
                    FORMAT_PRESETS,
                    value=InvoiceState.invoice_format,
                    on_change=InvoiceState.set_invoice_format,
                ),
            ),
            columns="2",
            spacing="3",
        ),
    )


def _line_items() -> rx.Component:
    return rx.card(
        rx.heading("Line Items", size="3"),
        rx.foreach(InvoiceState.items, _line_item_row),
        rx.button(rx.icon("plus"), "Add Item", variant="soft", on_click=InvoiceState.add_item),
    )


def _line_item_row(item: LineItemModel) -> rx.Component:
    return rx.hstack(
        rx.input(
            value=item.description,
            placeholder="Description",
            on_change=lambda v: InvoiceState.set_item_field(item.id, "description", v),
            flex="3",
        ),
        rx.input(
            value=item.quantity,
            type="number",
            min="0",
            on_change=lambda v: InvoiceState.set_item_field(item.id, "quantity", v),
            flex="1",
        ),
        rx.input(
            value=item.unit_price,
            type="number",
            min="0",
            on_change=lambda v: InvoiceState.set_item_field(item.id, "unit_price", v),
            flex="1",
        ),
        rx.text(item.amount, class_name="line-amount"),
        rx.icon_button(
            rx.icon("trash-2"),
            variant="ghost",
            color_scheme="red",
            on_click=InvoiceState.remove_item(item.id),
        ),
        width="100%",
    )


def _mode_select(name: str, value) -> rx.Component:
    return rx.select(
        _MODES,
        value=value,
        on_change=lambda v: InvoiceState.set_field(name, v),
    )


def _adjustments() -> rx.Component:
    return rx.card(
        rx.heading("Adjustments", size="3"),
        rx.grid(
            _field("Discount Type", _mode_select("discount_type", InvoiceState.discount_type)),
            _field(
                "Discount",
                _text_input("discount_value", InvoiceState.discount_value, "number"),
            ),
            _field("Tax Type", _mode_select("tax_type", InvoiceState.tax_type)),
            _field("Tax", _text_input("tax_value", InvoiceState.tax_value, "number")),
            _field("Shipping", _text_input("shipping", InvoiceState.shipping, "number")),
            _field(
                "Amount Paid",
                _text_input("amount_paid", InvoiceState.amount_paid, "number"),
            ),
            columns="2",
            spacing="3",
        ),
    )


def _appearance() -> rx.Component:
    return rx.card(
        rx.heading("Appearance", size="3"),
        rx.grid(
            _field(
                "Template",
                rx.select(
                    TEMPLATE_NAMES,
                    value=InvoiceState.template,
                    on_change=lambda v: InvoiceState.set_field("template", v),
                ),
            ),
            _field(
                "Currency",
                rx.select(
                    CURRENCY_CODES,
                    value=InvoiceState.currency,
                    on_change=lambda v: InvoiceState.set_field("currency", v),
                ),
            ),
            _field("Payment Link", _text_input("payment_link", InvoiceState.payment_link)),
            _field("Notes", rx.text_area(
                value=InvoiceState.notes,
                on_change=lambda v: InvoiceState.set_field("notes", v),
            )),
            columns="2",
            spacing="3",
        ),
    )
