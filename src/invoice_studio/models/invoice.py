"""
Invoice domain models and serialization helpers.

This module defines the value objects the editor passes into the pure
numbering and totals functions. The hierarchy is:

    Profile (the business issuing invoices, numbering format, currency)
    Client (who is billed)
    Invoice
    ├── LineItem[] (description, quantity, unit price)
    └── adjustments (discount, tax, shipping, amount paid)
    TotalsSummary (derived from an Invoice, never stored)

Models are frozen; edits produce new instances via dataclasses.replace.
Serialization functions convert between dataclasses and JSON-compatible
dictionaries for the on-device store.
"""

from dataclasses import asdict, dataclass, field, fields
from datetime import date, datetime, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, List, Mapping, Sequence, TypeVar

from invoice_studio.utils.currency import (
    DEFAULT_CURRENCY,
    format_currency,
    round_money,
    to_decimal,
)
from invoice_studio.utils.invoice_helpers import parse_date
from invoice_studio.utils.numbering import DEFAULT_FORMAT

E = TypeVar("E", bound=Enum)


class AdjustmentMode(str, Enum):
    """How a discount or tax value is interpreted."""

    PERCENT = "percent"
    AMOUNT = "amount"


class InvoiceStatus(str, Enum):
    """Lifecycle state shown on the dashboard."""

    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class TemplateType(str, Enum):
    """Visual templates available in the preview."""

    MODERN = "modern"
    CLASSIC = "classic"
    MINIMAL = "minimal"
    BOLD = "bold"
    AGENCY = "agency"
    BOUTIQUE = "boutique"
    TECH = "tech"
    FINANCE = "finance"
    CREATIVE = "creative"
    SIMPLE = "simple"


class Layout(str, Enum):
    """Page orientation of the exported document."""

    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True, slots=True)
class LineItem:
    """One billable row on an invoice."""

    id: str
    description: str = ""
    quantity: float = 1
    unit_price: float = 0

    @property
    def amount(self) -> Decimal:
        """Return quantity times unit price; always recomputed."""
        return to_decimal(self.quantity) * to_decimal(self.unit_price)


@dataclass(frozen=True, slots=True)
class Client:
    """A customer invoices are addressed to."""

    id: str
    name: str
    email: str = ""
    address: str = ""


@dataclass(frozen=True, slots=True)
class Profile:
    """The business issuing invoices."""

    id: str
    name: str
    email: str = ""
    address: str = ""
    logo_url: str = ""
    brand_color: str = "#4f46e5"
    currency: str = DEFAULT_CURRENCY
    invoice_format: str = DEFAULT_FORMAT
    tax_id: str | None = None
    default_payment_link: str | None = None
    font_family: str = "sans"
    website: str | None = None


@dataclass(frozen=True, slots=True)
class Invoice:
    """
    Primary invoice record.

    tax_rate is the legacy percentage-only tax field. It is kept so older
    records round-trip, but totals read tax_type/tax_value only; see
    migrate_legacy_tax.
    """

    id: str
    number: str
    client_id: str = ""
    issue_date: date = field(default_factory=date.today)
    due_date: date = field(default_factory=lambda: date.today() + timedelta(days=14))
    status: InvoiceStatus = InvoiceStatus.DRAFT
    items: tuple[LineItem, ...] = ()
    notes: str = ""
    discount_type: AdjustmentMode = AdjustmentMode.PERCENT
    discount_value: float = 0
    tax_type: AdjustmentMode = AdjustmentMode.PERCENT
    tax_value: float = 0
    shipping: float = 0
    amount_paid: float = 0
    currency: str = DEFAULT_CURRENCY
    template: str = TemplateType.MODERN.value
    layout: Layout = Layout.PORTRAIT
    payment_link: str = ""
    tax_rate: float = 0

    def searchable_terms(self) -> List[str]:
        """Return the terms that should be matched when filtering."""
        terms: List[str] = [self.number, self.notes, self.status.value]
        terms.extend(item.description for item in self.items)
        return [value.lower() for value in terms if value]


@dataclass(frozen=True, slots=True)
class TotalsSummary:
    """
    The derived monetary figures of an invoice.

    Produced by utils.totals.compute_totals and never stored. Values are
    unrounded Decimals; use rounded() or formatted() before display.
    """

    subtotal: Decimal
    discount_amount: Decimal
    taxable_base: Decimal
    tax_amount: Decimal
    shipping_amount: Decimal
    total: Decimal
    amount_paid: Decimal
    balance_due: Decimal

    def rounded(self, currency: str = DEFAULT_CURRENCY) -> "TotalsSummary":
        """Return a copy with every figure rounded for display in currency."""
        return TotalsSummary(
            **{f.name: round_money(getattr(self, f.name), currency) for f in fields(self)}
        )

    def formatted(self, currency: str = DEFAULT_CURRENCY) -> dict[str, str]:
        """Return every figure as a display string keyed by field name."""
        return {
            f.name: format_currency(getattr(self, f.name), currency)
            for f in fields(self)
        }

    def to_dict(self) -> dict[str, str]:
        """Serialize to a JSON-compatible dictionary of decimal strings."""
        return {f.name: str(getattr(self, f.name)) for f in fields(self)}


@dataclass(slots=True)
class InvoicePage:
    """Represents a single page of invoices."""

    items: Sequence[Invoice]
    total: int
    page: int
    page_size: int

    @property
    def has_more(self) -> bool:
        """Return True when additional pages are available."""
        if len(self.items) < self.page_size:
            return False
        return self.page * self.page_size < self.total


def _enum(enum_type: type[E], value: Any, default: E) -> E:
    """Coerce a stored value to enum_type, falling back to default."""
    try:
        return enum_type(value)
    except ValueError:
        return default


def migrate_legacy_tax(payload: Mapping[str, Any]) -> dict[str, Any]:
    """
    Migrate a stored invoice that predates the tax_type/tax_value split.

    Records written before adjustable tax modes only carry ``tax_rate`` (a
    percentage). When neither ``tax_type`` nor ``tax_value`` is present, the
    rate is copied into ``tax_value`` with ``tax_type`` set to percent.
    Records that already use the new fields are returned unchanged.

    Args:
        payload: A serialized invoice.

    Returns:
        A new dictionary; the input is not modified.
    """
    data = dict(payload)
    if not needs_tax_migration(data):
        return data
    data["tax_type"] = AdjustmentMode.PERCENT.value
    data["tax_value"] = data["tax_rate"]
    return data


def needs_tax_migration(payload: Mapping[str, Any]) -> bool:
    """Return True when migrate_legacy_tax would change payload."""
    return (
        "tax_rate" in payload
        and "tax_type" not in payload
        and "tax_value" not in payload
    )


def serialize_line_item(item: LineItem) -> dict:
    """Convert a LineItem into a JSON serializable dictionary."""
    return asdict(item)


def deserialize_line_item(payload: Mapping[str, Any]) -> LineItem:
    """Convert a dictionary back into a LineItem."""
    return LineItem(
        id=str(payload.get("id", "")),
        description=payload.get("description", ""),
        quantity=payload.get("quantity", 0),
        unit_price=payload.get("unit_price", 0),
    )


def serialize_invoice(invoice: Invoice) -> dict:
    """Convert an Invoice dataclass into a JSON serializable dictionary."""
    data = asdict(invoice)
    data["items"] = [serialize_line_item(item) for item in invoice.items]
    data["issue_date"] = invoice.issue_date.isoformat()
    data["due_date"] = invoice.due_date.isoformat()
    data["status"] = invoice.status.value
    data["discount_type"] = invoice.discount_type.value
    data["tax_type"] = invoice.tax_type.value
    data["layout"] = invoice.layout.value
    return data


def deserialize_invoice(payload: Mapping[str, Any]) -> Invoice:
    """
    Convert a dictionary structure back into an Invoice dataclass.

    Missing optional keys take their defaults and unknown enum values fall
    back to the default member. Legacy tax records are not migrated here;
    call migrate_legacy_tax first.
    """
    issue_date = _as_date(payload.get("issue_date")) or date.today()
    due_date = _as_date(payload.get("due_date")) or issue_date + timedelta(days=14)
    return Invoice(
        id=payload["id"],
        number=payload.get("number", ""),
        client_id=payload.get("client_id", ""),
        issue_date=issue_date,
        due_date=due_date,
        status=_enum(InvoiceStatus, payload.get("status"), InvoiceStatus.DRAFT),
        items=tuple(deserialize_line_item(item) for item in payload.get("items", [])),
        notes=payload.get("notes") or "",
        discount_type=_enum(
            AdjustmentMode, payload.get("discount_type"), AdjustmentMode.PERCENT
        ),
        discount_value=payload.get("discount_value", 0),
        tax_type=_enum(AdjustmentMode, payload.get("tax_type"), AdjustmentMode.PERCENT),
        tax_value=payload.get("tax_value", 0),
        shipping=payload.get("shipping", 0),
        amount_paid=payload.get("amount_paid", 0),
        currency=payload.get("currency") or DEFAULT_CURRENCY,
        template=payload.get("template") or TemplateType.MODERN.value,
        layout=_enum(Layout, payload.get("layout"), Layout.PORTRAIT),
        payment_link=payload.get("payment_link") or "",
        tax_rate=payload.get("tax_rate", 0),
    )


def serialize_client(client: Client) -> dict:
    """Convert a Client into a JSON serializable dictionary."""
    return asdict(client)


def deserialize_client(payload: Mapping[str, Any]) -> Client:
    """Convert a dictionary back into a Client."""
    return Client(
        id=payload["id"],
        name=payload.get("name", ""),
        email=payload.get("email", ""),
        address=payload.get("address", ""),
    )


def serialize_profile(profile: Profile) -> dict:
    """Convert a Profile into a JSON serializable dictionary."""
    return asdict(profile)


def deserialize_profile(payload: Mapping[str, Any]) -> Profile:
    """Convert a dictionary back into a Profile, ignoring unknown keys."""
    known = {f.name for f in fields(Profile)}
    data = {key: value for key, value in payload.items() if key in known}
    data.setdefault("id", "profile")
    data.setdefault("name", "")
    if not data.get("invoice_format"):
        data["invoice_format"] = DEFAULT_FORMAT
    if not data.get("currency"):
        data["currency"] = DEFAULT_CURRENCY
    return Profile(**data)


def _as_date(value: Any) -> date | None:
    """Parse a stored date (ISO or m/d/y string, or a date) into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    parsed = parse_date(value)
    return parsed.date() if parsed else None
