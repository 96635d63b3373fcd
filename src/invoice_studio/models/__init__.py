"""
Data models and serialization helpers for Invoice Studio.

This package provides:
- Invoice domain models (Invoice, LineItem, Client, Profile)
- Derived figures (TotalsSummary, DashboardStats)
- Serialization/deserialization for the on-device store

All models use Python dataclasses. Reflex row models live in
models.reflex_models and are imported directly by the UI.
"""

from invoice_studio.models.common import DashboardStats
from invoice_studio.models.invoice import (
    AdjustmentMode,
    Client,
    Invoice,
    InvoicePage,
    InvoiceStatus,
    Layout,
    LineItem,
    Profile,
    TemplateType,
    TotalsSummary,
    deserialize_client,
    deserialize_invoice,
    deserialize_profile,
    migrate_legacy_tax,
    serialize_client,
    serialize_invoice,
    serialize_profile,
)

__all__ = [
    "AdjustmentMode",
    "Client",
    "DashboardStats",
    "Invoice",
    "InvoicePage",
    "InvoiceStatus",
    "Layout",
    "LineItem",
    "Profile",
    "TemplateType",
    "TotalsSummary",
    "deserialize_client",
    "deserialize_invoice",
    "deserialize_profile",
    "migrate_legacy_tax",
    "serialize_client",
    "serialize_invoice",
    "serialize_profile",
]
