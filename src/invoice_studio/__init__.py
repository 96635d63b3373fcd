"""
Invoice Studio: an invoice authoring and preview application.

This package provides a browser editor for business profile, clients and
invoice line items, with a live multi-template preview backed by a pure
numbering and totals core.

Subpackages:
- utils: Numbering, totals, currency formatting and template selection
- models: Invoice, client and profile value objects and serialization
- services: Data access layer (demo and on-device store implementations)
- components: Reflex UI components
- data: Seed data for the demo service
- lib: Logging, storage and path helpers

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
