"""Reflex configuration for the Invoice Studio application."""

import reflex as rx

config = rx.Config(
    app_name="invoice_studio",
    # Use the src directory structure
    app_module_import="invoice_studio.app",
)
