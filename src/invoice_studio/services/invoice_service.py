"""
Abstract base class defining the invoice data access contract.

All invoice service implementations must extend InvoiceService and provide
the storage primitives for invoices, clients and the business profile.
Invoice creation (with a generated number) and dashboard aggregation are
implemented here on top of those primitives.

Implementations:
- DemoInvoiceService: In-memory data seeded with sample records
- InvoiceServiceImpl: On-device key-value store backed by diskcache
"""

from abc import ABC, abstractmethod
from collections import Counter
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Sequence

from invoice_studio.lib import objects
from invoice_studio.models.common import DashboardStats
from invoice_studio.models.invoice import (
    Client,
    Invoice,
    InvoicePage,
    InvoiceStatus,
    LineItem,
    Profile,
)
from invoice_studio.utils.invoice_helpers import matches_query, page_slice
from invoice_studio.utils.numbering import DEFAULT_FORMAT, Clock, next_number
from invoice_studio.utils.totals import totals_for

PAYMENT_TERMS_DAYS = 14


class InvoiceService(ABC):
    """
    Abstract base class for invoice data access.

    Subclasses implement the storage primitives. Records are immutable
    values: save_* replaces the stored record with the same id.
    """

    @abstractmethod
    def all_invoices(self) -> Sequence[Invoice]:
        """Return every stored invoice in insertion order."""

    @abstractmethod
    def get_invoice(self, invoice_id: str) -> Invoice | None:
        """Return the invoice with invoice_id, or None when unknown."""

    @abstractmethod
    def save_invoice(self, invoice: Invoice) -> Invoice:
        """Insert or replace an invoice by id and return it."""

    @abstractmethod
    def delete_invoice(self, invoice_id: str) -> None:
        """Delete an invoice. Unknown ids are ignored."""

    @abstractmethod
    def list_clients(self) -> Sequence[Client]:
        """Return every stored client in insertion order."""

    @abstractmethod
    def save_client(self, client: Client) -> Client:
        """Insert or replace a client by id and return it."""

    @abstractmethod
    def delete_client(self, client_id: str) -> None:
        """Delete a client. Unknown ids are ignored."""

    @abstractmethod
    def get_profile(self) -> Profile:
        """Return the business profile."""

    @abstractmethod
    def save_profile(self, profile: Profile) -> Profile:
        """Replace the business profile and return it."""

    def list_invoices(
        self,
        query: str | None = None,
        page: int = 1,
        page_size: int = 10,
    ) -> InvoicePage:
        """
        Return a paginated set of invoices matching the optional query.

        Args:
            query: Search text matched against number, notes, status and
                line item descriptions.
            page: Page number (1-indexed).
            page_size: Number of items per page.
        """
        page, page_size = max(page, 1), max(page_size, 1)
        filtered = [inv for inv in self.all_invoices() if matches_query(inv, query or "")]
        return InvoicePage(
            items=page_slice(filtered, page, page_size),
            total=len(filtered),
            page=page,
            page_size=page_size,
        )

    def get_client(self, client_id: str) -> Client | None:
        """Return the client with client_id, or None when unknown."""
        return next((c for c in self.list_clients() if c.id == client_id), None)

    def next_invoice_number(self, clock: Clock = datetime.now) -> str:
        """Return the next number for the profile's numbering format."""
        number_format = self.get_profile().invoice_format or DEFAULT_FORMAT
        return next_number(
            number_format, (inv.number for inv in self.all_invoices()), clock
        )

    def new_invoice(self, clock: Clock = datetime.now) -> Invoice:
        """
        Build an unsaved draft invoice.

        The draft gets the next invoice number, the first client, today's
        issue date with a due date PAYMENT_TERMS_DAYS later, one placeholder
        line item and the profile's currency and payment link.

        Args:
            clock: Zero-argument callable returning the current date/time.
        """
        profile = self.get_profile()
        clients = self.list_clients()
        today = today_of(clock)
        return Invoice(
            id=objects.new_id("inv"),
            number=self.next_invoice_number(clock),
            client_id=clients[0].id if clients else "",
            issue_date=today,
            due_date=today + timedelta(days=PAYMENT_TERMS_DAYS),
            status=InvoiceStatus.DRAFT,
            items=(LineItem(id=objects.new_id("item"), description="Consultation"),),
            notes="Thank you for your business!",
            currency=profile.currency,
            payment_link=profile.default_payment_link or "",
        )

    def dashboard_stats(self) -> DashboardStats:
        """
        Summarize revenue and receivables across all invoices.

        Paid invoices count as revenue, sent and overdue invoices as
        outstanding. Totals come from the same calculator as the preview.
        """
        revenue = outstanding = overdue = Decimal(0)
        counts: Counter[str] = Counter()
        for invoice in self.all_invoices():
            total = totals_for(invoice).total
            counts[invoice.status.value] += 1
            if invoice.status is InvoiceStatus.PAID:
                revenue += total
            elif invoice.status is InvoiceStatus.SENT:
                outstanding += total
            elif invoice.status is InvoiceStatus.OVERDUE:
                outstanding += total
                overdue += total
        return DashboardStats(
            revenue=revenue,
            outstanding=outstanding,
            overdue=overdue,
            counts=dict(counts),
            currency=self.get_profile().currency,
        )


def today_of(clock: Clock) -> date:
    """Return the calendar date reported by clock."""
    now = clock()
    return now.date() if isinstance(now, datetime) else now
