"""
Seed data for Invoice Studio.

This package contains fixture data used by DemoInvoiceService and to seed
an empty on-device store.

Modules:
- demo_invoices: A sample profile, clients and invoices
"""
