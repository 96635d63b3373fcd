"""
On-device implementation of InvoiceService.

Records are kept in a DiskStore (diskcache) as JSON-compatible values
under three keys:

- ``profile``: the serialized business profile
- ``clients``: list of serialized clients
- ``invoices``: list of serialized invoices

Each write replaces the whole collection. Keys missing when the store is
opened are seeded with the demo profile, clients and invoices. Invoices written before the tax_type/tax_value
split are migrated when loaded (see models.invoice.migrate_legacy_tax) and
the migrated collection is written back.
"""

from pathlib import Path
from typing import Any, Sequence

from invoice_studio.data.demo_invoices import DEMO_CLIENTS, DEMO_INVOICES, DEMO_PROFILE
from invoice_studio.lib import logs, objects, paths
from invoice_studio.lib.caches import DiskStore
from invoice_studio.models.invoice import (
    Client,
    Invoice,
    Profile,
    deserialize_client,
    deserialize_invoice,
    deserialize_profile,
    migrate_legacy_tax,
    needs_tax_migration,
    serialize_client,
    serialize_invoice,
    serialize_profile,
)
from invoice_studio.services.invoice_service import InvoiceService

LOG = logs.logger(__file__)

PROFILE_KEY = "profile"
CLIENTS_KEY = "clients"
INVOICES_KEY = "invoices"


class InvoiceServiceImpl(InvoiceService):
    """
    Invoice service persisted to an on-device key-value store.

    Attributes:
        store: The underlying DiskStore.
    """

    def __init__(
        self,
        store: DiskStore | None = None,
        directory: str | Path | None = None,
    ) -> None:
        """
        Open the store.

        Args:
            store: An already opened store, mainly for tests.
            directory: Store directory; defaults to paths.data_dir().
        """
        self.store = store or DiskStore(directory or paths.data_dir())
        self._seed()

    def all_invoices(self) -> Sequence[Invoice]:
        payloads: list[dict[str, Any]] = self.store.get(INVOICES_KEY, [])
        if any(needs_tax_migration(payload) for payload in payloads):
            payloads = self._migrate_invoices(payloads)
        return [deserialize_invoice(payload) for payload in payloads]

    def get_invoice(self, invoice_id: str) -> Invoice | None:
        return next((inv for inv in self.all_invoices() if inv.id == invoice_id), None)

    def save_invoice(self, invoice: Invoice) -> Invoice:
        invoices = _replace_by_id(self.all_invoices(), invoice)
        self.store.set(INVOICES_KEY, [serialize_invoice(inv) for inv in invoices])
        LOG.info("Saved invoice %s (%s)", invoice.id, invoice.number)
        return invoice

    def delete_invoice(self, invoice_id: str) -> None:
        invoices = [inv for inv in self.all_invoices() if inv.id != invoice_id]
        self.store.set(INVOICES_KEY, [serialize_invoice(inv) for inv in invoices])
        LOG.info("Deleted invoice %s", invoice_id)

    def list_clients(self) -> Sequence[Client]:
        return [deserialize_client(payload) for payload in self.store.get(CLIENTS_KEY, [])]

    def save_client(self, client: Client) -> Client:
        clients = _replace_by_id(self.list_clients(), client)
        self.store.set(CLIENTS_KEY, [serialize_client(c) for c in clients])
        LOG.info("Saved client %s", client.id)
        return client

    def delete_client(self, client_id: str) -> None:
        clients = [c for c in self.list_clients() if c.id != client_id]
        self.store.set(CLIENTS_KEY, [serialize_client(c) for c in clients])
        LOG.info("Deleted client %s", client_id)

    def get_profile(self) -> Profile:
        payload = self.store.get(PROFILE_KEY)
        return DEMO_PROFILE if payload is None else deserialize_profile(payload)

    def save_profile(self, profile: Profile) -> Profile:
        self.store.set(PROFILE_KEY, serialize_profile(profile))
        return profile

    def export_json(self) -> str:
        """Return every stored record as a JSON document, for backups."""
        return objects.to_json(
            {
                PROFILE_KEY: serialize_profile(self.get_profile()),
                CLIENTS_KEY: [serialize_client(c) for c in self.list_clients()],
                INVOICES_KEY: [serialize_invoice(inv) for inv in self.all_invoices()],
            },
            indent=2,
        )

    def _seed(self) -> None:
        """Write the demo records under any key the store does not hold yet."""
        defaults = {
            PROFILE_KEY: serialize_profile(DEMO_PROFILE),
            CLIENTS_KEY: [serialize_client(c) for c in DEMO_CLIENTS],
            INVOICES_KEY: [serialize_invoice(inv) for inv in DEMO_INVOICES],
        }
        for key, value in defaults.items():
            if key not in self.store:
                self.store.set(key, value)
                LOG.info("Seeded empty store key %s", key)

    def _migrate_invoices(self, payloads: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Apply the legacy tax migration and persist the result."""
        migrated = [migrate_legacy_tax(payload) for payload in payloads]
        count = sum(1 for payload in payloads if needs_tax_migration(payload))
        self.store.set(INVOICES_KEY, migrated)
        LOG.info("Migrated %s invoice(s) from tax_rate to tax_type/tax_value", count)
        return migrated


def _replace_by_id(records: Sequence[Any], record: Any) -> list[Any]:
    """Return records with the entry sharing record.id replaced or appended."""
    result = list(records)
    for index, existing in enumerate(result):
        if existing.id == record.id:
            result[index] = record
            return result
    result.append(record)
    return result
