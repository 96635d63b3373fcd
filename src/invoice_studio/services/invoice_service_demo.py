"""
Demo implementation of InvoiceService using in-memory data.

This service is useful for:
- Local development without touching the on-device store
- Testing UI components with realistic data
- Demonstrating the application

Changes live only as long as the service instance.
"""

from typing import Sequence

from invoice_studio.data.demo_invoices import DEMO_CLIENTS, DEMO_INVOICES, DEMO_PROFILE
from invoice_studio.models.invoice import Client, Invoice, Profile
from invoice_studio.services.invoice_service import InvoiceService


class DemoInvoiceService(InvoiceService):
    """
    In-memory invoice service seeded with sample records.

    Records are kept in insertion-ordered dictionaries keyed by id.
    """

    def __init__(
        self,
        invoices: Sequence[Invoice] | None = None,
        clients: Sequence[Client] | None = None,
        profile: Profile | None = None,
    ) -> None:
        """
        Initialize with seed data.

        Args:
            invoices: Custom invoice list, or None to use DEMO_INVOICES.
            clients: Custom client list, or None to use DEMO_CLIENTS.
            profile: Custom profile, or None to use DEMO_PROFILE.
        """
        seed_invoices = DEMO_INVOICES if invoices is None else invoices
        seed_clients = DEMO_CLIENTS if clients is None else clients
        self._invoices: dict[str, Invoice] = {inv.id: inv for inv in seed_invoices}
        self._clients: dict[str, Client] = {c.id: c for c in seed_clients}
        self._profile: Profile = profile or DEMO_PROFILE

    def all_invoices(self) -> Sequence[Invoice]:
        return list(self._invoices.values())

    def get_invoice(self, invoice_id: str) -> Invoice | None:
        return self._invoices.get(invoice_id)

    def save_invoice(self, invoice: Invoice) -> Invoice:
        self._invoices[invoice.id] = invoice
        return invoice

    def delete_invoice(self, invoice_id: str) -> None:
        self._invoices.pop(invoice_id, None)

    def list_clients(self) -> Sequence[Client]:
        return list(self._clients.values())

    def save_client(self, client: Client) -> Client:
        self._clients[client.id] = client
        return client

    def delete_client(self, client_id: str) -> None:
        self._clients.pop(client_id, None)

    def get_profile(self) -> Profile:
        return self._profile

    def save_profile(self, profile: Profile) -> Profile:
        self._profile = profile
        return profile
