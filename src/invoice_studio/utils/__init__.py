"""
Pure invoice computation helpers.

Modules:
- numbering: Sequential invoice number generation from a format pattern
- totals: The subtotal to balance-due cascade
- currency: Decimal coercion, rounding and display formatting
- templates: Template identifier to style resolution
- invoice_helpers: Search matching, date parsing, pagination, dashboard stats

Modules are imported directly (``from invoice_studio.utils.totals import
compute_totals``); the models package depends on them.
"""
