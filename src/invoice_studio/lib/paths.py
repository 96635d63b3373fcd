"""
Path utilities for Invoice Studio.

Resolves where on-device data lives. The location can be overridden with
the INVOICE_STUDIO_DATA_DIR environment variable.
"""

import os
import tempfile
from pathlib import Path

_DATA_DIR_KEY = "INVOICE_STUDIO_DATA_DIR"


def temp_dir() -> Path:
    """Return the system temporary directory as a Path."""
    return Path(tempfile.gettempdir())


def data_dir() -> Path:
    """
    Return the directory used for the on-device invoice store.

    Returns:
        INVOICE_STUDIO_DATA_DIR when set, otherwise an ``invoice_studio``
        folder inside the system temporary directory.
    """
    configured = os.getenv(_DATA_DIR_KEY)
    if configured:
        return Path(configured).expanduser()
    return temp_dir() / "invoice_studio"
