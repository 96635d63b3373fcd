"""Tests for the demo and store-backed invoice services."""

import json
from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from invoice_studio.data.demo_invoices import DEMO_CLIENTS, DEMO_INVOICES, DEMO_PROFILE
from invoice_studio.models.invoice import Client, InvoiceStatus
from invoice_studio.services import get_invoice_service
from invoice_studio.services.invoice_service_demo import DemoInvoiceService
from invoice_studio.services.invoice_service_impl import (
    CLIENTS_KEY,
    INVOICES_KEY,
    PROFILE_KEY,
    InvoiceServiceImpl,
)


@pytest.fixture(params=["demo", "store"])
def service(request, demo_service, store_service):
    if request.param == "demo":
        return demo_service
    for client in DEMO_CLIENTS:
        store_service.save_client(client)
    for invoice in DEMO_INVOICES:
        store_service.save_invoice(invoice)
    return store_service


def test_list_and_search(service):
    assert service.list_invoices().total == 2
    page = service.list_invoices(query="logo")
    assert [inv.number for inv in page.items] == ["INV-2023-0002"]
    assert service.list_invoices(query="nothing-matches").items == []


def test_pagination(service):
    first = service.list_invoices(page=1, page_size=1)
    second = service.list_invoices(page=2, page_size=1)
    assert first.has_more and not second.has_more
    assert first.items[0].id != second.items[0].id


def test_save_replaces_by_id(service):
    updated = replace(DEMO_INVOICES[1], status=InvoiceStatus.PAID)
    service.save_invoice(updated)
    assert service.get_invoice(updated.id).status is InvoiceStatus.PAID
    assert len(service.all_invoices()) == 2


def test_delete_unknown_is_noop(service):
    service.delete_invoice("missing")
    service.delete_invoice("inv-001")
    assert [inv.id for inv in service.all_invoices()] == ["inv-002"]
    assert service.get_invoice("inv-001") is None


def test_clients(service):
    assert service.get_client("client-2").name == "GreenLeaf Organics"
    service.save_client(Client("client-3", "Northwind"))
    service.delete_client("client-1")
    assert [c.id for c in service.list_clients()] == ["client-2", "client-3"]
    assert service.get_client("client-1") is None


def test_new_invoice_uses_profile_format(service, clock_2024):
    service.save_invoice(replace(DEMO_INVOICES[0], id="inv-003", number="INV-2024-0004"))
    draft = service.new_invoice(clock_2024)
    assert draft.number == "INV-2024-0005"
    assert draft.issue_date == date(2024, 3, 15)
    assert draft.due_date == date(2024, 3, 29)
    assert draft.client_id == "client-1"
    assert draft.status is InvoiceStatus.DRAFT
    assert draft.currency == DEMO_PROFILE.currency
    assert draft.payment_link == DEMO_PROFILE.default_payment_link
    assert [item.description for item in draft.items] == ["Consultation"]
    assert service.get_invoice(draft.id) is None


def test_new_invoice_follows_changed_format(service, clock_2024):
    service.save_profile(replace(service.get_profile(), invoice_format="#{NNNN}"))
    assert service.new_invoice(clock_2024).number == "#0001"


def test_dashboard_stats(service):
    overdue = replace(
        DEMO_INVOICES[1], id="inv-003", number="INV-2023-0003", status=InvoiceStatus.OVERDUE
    )
    service.save_invoice(overdue)
    stats = service.dashboard_stats()
    assert stats.revenue == Decimal("7040")
    assert stats.outstanding == Decimal("3150")
    assert stats.overdue == Decimal("1575")
    assert stats.counts == {"paid": 1, "sent": 1, "overdue": 1}
    assert stats.invoice_count == 3
    assert stats.formatted()["revenue"] == "$7,040.00"


def test_fresh_store_is_seeded(store, store_service, clock_2024):
    assert store_service.get_profile() == DEMO_PROFILE
    assert list(store_service.list_clients()) == list(DEMO_CLIENTS)
    assert list(store_service.all_invoices()) == list(DEMO_INVOICES)
    assert {PROFILE_KEY, CLIENTS_KEY, INVOICES_KEY} <= set(store.keys())
    assert store_service.new_invoice(clock_2024).client_id == "client-1"


def test_seeding_keeps_existing_keys(store):
    store.set(CLIENTS_KEY, [])
    store.set(INVOICES_KEY, [])
    service = InvoiceServiceImpl(store=store)
    assert service.list_clients() == []
    assert service.all_invoices() == []
    assert service.get_profile() == DEMO_PROFILE


def test_store_persists_across_instances(store, store_service):
    store_service.save_invoice(DEMO_INVOICES[0])
    reopened = InvoiceServiceImpl(store=store)
    assert reopened.get_invoice("inv-001") == DEMO_INVOICES[0]


def test_store_migrates_legacy_tax(store, store_service):
    store.set(
        INVOICES_KEY,
        [
            {
                "id": "inv-old",
                "number": "INV-2022-0001",
                "items": [{"id": "a", "description": "Audit", "quantity": 1, "unit_price": 200}],
                "tax_rate": 5,
            }
        ],
    )
    invoice = store_service.get_invoice("inv-old")
    assert invoice.tax_value == 5
    assert store.get(INVOICES_KEY)[0]["tax_type"] == "percent"


def test_store_export_json(store_service):
    store_service.save_invoice(DEMO_INVOICES[1])
    exported = json.loads(store_service.export_json())
    assert exported["profile"]["name"] == DEMO_PROFILE.name
    assert [inv["number"] for inv in exported["invoices"]] == ["INV-2023-0001", "INV-2023-0002"]


def test_demo_service_is_isolated():
    service = DemoInvoiceService(invoices=[], clients=[])
    assert service.all_invoices() == []
    assert service.new_invoice().client_id == ""


def test_factory_rejects_unknown_kind():
    with pytest.raises(ValueError, match="Unknown invoice service kind"):
        get_invoice_service("cloud")


def test_factory_returns_demo():
    assert isinstance(get_invoice_service("demo"), DemoInvoiceService)
