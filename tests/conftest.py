"""Shared fixtures for the Invoice Studio tests."""

from datetime import datetime

import pytest

from invoice_studio.lib.caches import DiskStore
from invoice_studio.services.invoice_service_demo import DemoInvoiceService
from invoice_studio.services.invoice_service_impl import InvoiceServiceImpl


@pytest.fixture
def clock_2024():
    """Clock frozen on 15 March 2024."""
    return lambda: datetime(2024, 3, 15, 9, 30)


@pytest.fixture
def demo_service():
    return DemoInvoiceService()


@pytest.fixture
def store(tmp_path):
    disk_store = DiskStore(tmp_path / "store")
    yield disk_store
    disk_store.close()


@pytest.fixture
def store_service(store):
    return InvoiceServiceImpl(store=store)
