"""
Reflex UI components for Invoice Studio.

This package provides:
- dashboard: Revenue cards and the invoice list
- invoice_editor: Form for profile-scoped invoice fields and line items
- invoice_preview: Template-styled rendering of the invoice and its totals

Components only read InvoiceState; all figures they show are formatted by
the pure totals and currency helpers.
"""

from invoice_studio.components.dashboard import dashboard
from invoice_studio.components.invoice_editor import invoice_editor
from invoice_studio.components.invoice_preview import invoice_preview

__all__ = ["dashboard", "invoice_editor", "invoice_preview"]
