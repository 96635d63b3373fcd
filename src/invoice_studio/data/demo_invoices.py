"""Sample profile, clients and invoices used by the demo service."""

from datetime import date

from invoice_studio.models.invoice import (
    AdjustmentMode,
    Client,
    Invoice,
    InvoiceStatus,
    LineItem,
    Profile,
    TemplateType,
)

DEMO_PROFILE = Profile(
    id="user-1",
    name="Acme Creative Studio",
    email="hello@acme.studio",
    address="123 Design Blvd, Creative City, CA 90210",
    logo_url="https://picsum.photos/id/64/200/200",
    brand_color="#4f46e5",
    currency="USD",
    invoice_format="INV-{YYYY}-{NNNN}",
    default_payment_link="https://paypal.me/acmestudio",
    font_family="sans",
    website="https://acme.studio",
)

DEMO_CLIENTS = (
    Client(
        id="client-1",
        name="TechFlow Systems",
        email="billing@techflow.com",
        address="442 Server Ln, Silicon Valley, CA",
    ),
    Client(
        id="client-2",
        name="GreenLeaf Organics",
        email="finance@greenleaf.co",
        address="88 Market St, Portland, OR",
    ),
)

DEMO_INVOICES = (
    Invoice(
        id="inv-001",
        number="INV-2023-0001",
        client_id="client-1",
        issue_date=date(2023, 10, 1),
        due_date=date(2023, 10, 15),
        status=InvoiceStatus.PAID,
        items=(
            LineItem("item-1", "UI/UX Design Phase 1", quantity=40, unit_price=100),
            LineItem("item-2", "Frontend Implementation", quantity=20, unit_price=120),
        ),
        tax_type=AdjustmentMode.PERCENT,
        tax_value=10,
        tax_rate=10,
        currency="USD",
        template=TemplateType.MODERN.value,
    ),
    Invoice(
        id="inv-002",
        number="INV-2023-0002",
        client_id="client-2",
        issue_date=date(2023, 11, 1),
        due_date=date(2023, 11, 15),
        status=InvoiceStatus.SENT,
        items=(LineItem("item-3", "Logo Redesign", quantity=1, unit_price=1500),),
        tax_type=AdjustmentMode.PERCENT,
        tax_value=5,
        tax_rate=5,
        currency="USD",
        template=TemplateType.CLASSIC.value,
        payment_link="https://stripe.com/pay/demo",
    ),
)
