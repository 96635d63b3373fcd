"""
Dashboard component for Reflex.

Shows revenue and receivable cards and the list of invoices.
"""

import reflex as rx

from invoice_studio.models.reflex_models import InvoiceRowModel
from invoice_studio.state import APP_SUBTITLE, APP_TITLE, InvoiceState


def dashboard() -> rx.Component:
    """
    Build the dashboard page body.

    Returns:
        Header, stat cards and the invoice table.
    """
    return rx.box(
        rx.hstack(
            rx.box(
                rx.heading(APP_TITLE, size="6", as_="h1"),
                rx.text(APP_SUBTITLE, class_name="muted"),
            ),
            rx.spacer(),
            rx.button(
                rx.icon("plus"),
                "New Invoice",
                on_click=InvoiceState.new_invoice,
                class_name="button primary",
            ),
            class_name="page-header",
        ),
        rx.cond(
            InvoiceState.error != "",
            rx.callout(InvoiceState.error, icon="triangle_alert", color_scheme="red"),
        ),
        rx.grid(
            _stat_card("Total Revenue", "dollar-sign", InvoiceState.stats["revenue"]),
            _stat_card("Outstanding", "clock", InvoiceState.stats["outstanding"]),
            _stat_card("Overdue", "triangle-alert", InvoiceState.stats["overdue"]),
            columns="3",
            spacing="4",
        ),
        _invoice_table(),
        class_name="dashboard",
    )


def _stat_card(label: str, icon: str, value) -> rx.Component:
    return rx.card(
        rx.hstack(rx.icon(icon, size=18), rx.text(label, class_name="muted")),
        rx.heading(value, size="5"),
        class_name="stat-card",
    )


def _invoice_table() -> rx.Component:
    """Build the invoice list."""
    return rx.table.root(
        rx.table.header(
            rx.table.row(
                rx.table.column_header_cell("Number"),
                rx.table.column_header_cell("Client"),
                rx.table.column_header_cell("Date"),
                rx.table.column_header_cell("Status"),
                rx.table.column_header_cell("Total"),
                rx.table.column_header_cell(""),
            )
        ),
        rx.table.body(rx.foreach(InvoiceState.invoices, _invoice_row)),
        width="100%",
    )


def _invoice_row(row: InvoiceRowModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(row.number),
        rx.table.cell(row.client_name),
        rx.table.cell(row.issue_date),
        rx.table.cell(rx.badge(row.status, class_name=f"status-{row.status}")),
        rx.table.cell(row.total),
        rx.table.cell(
            rx.hstack(
                rx.icon_button(
                    rx.icon("pencil"),
                    variant="ghost",
                    on_click=InvoiceState.edit_invoice(row.id),
                ),
                rx.icon_button(
                    rx.icon("trash-2"),
                    variant="ghost",
                    color_scheme="red",
                    on_click=InvoiceState.delete_invoice(row.id),
                ),
            )
        ),
    )
