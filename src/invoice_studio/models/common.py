"""
Aggregate models shared across the application.

DashboardStats summarizes a set of invoices for the dashboard cards. Like
TotalsSummary it is derived on every read and never stored.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from invoice_studio.utils.currency import DEFAULT_CURRENCY, format_currency


@dataclass(frozen=True, slots=True)
class DashboardStats:
    """
    Revenue and receivables across invoices.

    Attributes:
        revenue: Sum of totals of paid invoices.
        outstanding: Sum of totals of sent and overdue invoices.
        overdue: Sum of totals of overdue invoices.
        counts: Number of invoices per status value.
        currency: Currency used for display.
    """

    revenue: Decimal = Decimal(0)
    outstanding: Decimal = Decimal(0)
    overdue: Decimal = Decimal(0)
    counts: dict[str, int] = field(default_factory=dict)
    currency: str = DEFAULT_CURRENCY

    @property
    def invoice_count(self) -> int:
        """Total number of invoices summarized."""
        return sum(self.counts.values())

    def formatted(self) -> dict[str, str]:
        """Return the monetary figures as display strings."""
        return {
            "revenue": format_currency(self.revenue, self.currency),
            "outstanding": format_currency(self.outstanding, self.currency),
            "overdue": format_currency(self.overdue, self.currency),
        }
