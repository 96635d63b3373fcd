"""
Reflex application entry point for Invoice Studio.

This module initializes the Reflex app and registers the dashboard and
editor pages.
"""

import os

import reflex as rx

from invoice_studio.components.dashboard import dashboard
from invoice_studio.components.invoice_editor import invoice_editor
from invoice_studio.lib import logs
from invoice_studio.state import APP_TITLE, InvoiceState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("APP_PORT", "8000"))
LOG.info("INVOICE_STUDIO_SERVICE: %s", os.getenv("INVOICE_STUDIO_SERVICE", "impl"))

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&family=Merriweather:wght@400;700&family=Inconsolata:wght@400;500&family=Playfair+Display:wght@400;600&family=Montserrat:wght@500;700&family=Poppins:wght@400;600&family=Outfit:wght@400;600&family=Roboto:wght@400;500&display=swap"


def index() -> rx.Component:
    """Build the dashboard page."""
    return rx.box(
        rx.box(dashboard(), class_name="app-container"),
        class_name="app-shell",
    )


def editor() -> rx.Component:
    """Build the invoice editor page."""
    return rx.box(
        rx.box(invoice_editor(), class_name="app-container"),
        class_name="app-shell",
    )


app = rx.App(
    theme=rx.theme(
        appearance="dark",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(index, route="/", title=APP_TITLE, on_load=InvoiceState.on_load)
app.add_page(editor, route="/editor", title=f"{APP_TITLE} - Editor")


def main() -> None:
    """Entrypoint used by `invoice-studio`; in production use `reflex run`."""
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(APP_PORT)])


if __name__ == "__main__":
    main()
