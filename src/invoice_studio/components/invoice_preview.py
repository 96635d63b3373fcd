"""
Invoice preview component for Reflex.

Renders the invoice being edited with the style resolved from its template
identifier. Templates differ only cosmetically; every figure comes from
InvoiceState.totals, the TotalsSummary formatted with the shared
currency rounding.
"""

import reflex as rx

from invoice_studio.models.reflex_models import LineItemModel
from invoice_studio.state import InvoiceState

_STYLE = InvoiceState.template_style


def invoice_preview() -> rx.Component:
    """Build the template-styled invoice preview."""
    return rx.box(
        _header(),
        _items_table(),
        _totals(),
        rx.cond(
            InvoiceState.notes != "",
            rx.box(rx.text("Notes", class_name="label"), rx.text(InvoiceState.notes)),
        ),
        rx.cond(
            InvoiceState.payment_link != "",
            rx.link("Pay online", href=InvoiceState.payment_link, is_external=True),
        ),
        id="invoice-preview",
        class_name=f"invoice-preview header-{_STYLE['header']} table-{_STYLE['table']}",
        style={
            "font_family": _STYLE["font_family"],
            "background": _STYLE["background"],
            "color": _STYLE["text_color"],
        },
    )


def _accent():
    """Brand color when the template uses it, else the template text color."""
    return rx.cond(_STYLE["use_brand_color"], InvoiceState.brand_color, _STYLE["text_color"])


def _header() -> rx.Component:
    return rx.hstack(
        rx.box(
            rx.heading(
                "INVOICE",
                size="7",
                color=_accent(),
                text_transform=rx.cond(_STYLE["uppercase_title"], "uppercase", "none"),
            ),
            rx.text(f"# {InvoiceState.number}"),
        ),
        rx.spacer(),
        rx.box(
            rx.text(InvoiceState.profile_name, weight="bold"),
            rx.text("Bill To", color=_STYLE["muted_color"]),
            rx.text(InvoiceState.client_name),
            rx.text(f"Issued {InvoiceState.issue_date}", color=_STYLE["muted_color"]),
            rx.text(f"Due {InvoiceState.due_date}", color=_STYLE["muted_color"]),
            text_align="right",
        ),
        class_name="preview-header",
    )


def _items_table() -> rx.Component:
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.table.column_header_cell("Item"),
                rx.table.column_header_cell("Quantity"),
                rx.table.column_header_cell("Rate"),
                rx.table.column_header_cell("Amount"),
            )
        ),
        rx.table.body(rx.foreach(InvoiceState.items, _item_row)),
        width="100%",
    )


def _item_row(item: LineItemModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(item.description),
        rx.table.cell(item.quantity),
        rx.table.cell(item.unit_price),
        rx.table.cell(item.amount),
    )


def _total_line(label: str, key: str, strong: bool = False) -> rx.Component:
    return rx.hstack(
        rx.text(label, color=_STYLE["muted_color"]),
        rx.spacer(),
        rx.text(
            InvoiceState.totals[key],
            weight="bold" if strong else "regular",
            color=_accent() if strong else None,
        ),
        width="100%",
    )


def _totals() -> rx.Component:
    return rx.vstack(
        _total_line("Subtotal", "subtotal"),
        _total_line("Discount", "discount_amount"),
        _total_line("Tax", "tax_amount"),
        _total_line("Shipping", "shipping_amount"),
        _total_line("Total", "total", strong=True),
        _total_line("Amount Paid", "amount_paid"),
        _total_line("Balance Due", "balance_due", strong=True),
        class_name="preview-totals",
        align="end",
    )
