"""
Invoice total computation.

The cascade is evaluated in a fixed order, each step reading only earlier
results:

    subtotal        = sum(quantity * unit_price)
    discount_amount = subtotal * discount% | discount
    taxable_base    = subtotal - discount_amount
    tax_amount      = taxable_base * tax% | tax
    total           = taxable_base + tax_amount + shipping
    balance_due     = total - amount_paid

Nothing is clamped: a discount larger than the subtotal yields a negative
taxable base and percentage tax is applied to it as-is. Input validation
belongs to the editor. All arithmetic is Decimal and unrounded; rounding
happens once, at display time, in utils.currency.
"""

from decimal import Decimal
from typing import Any, Iterable

from invoice_studio.models.invoice import AdjustmentMode, Invoice, LineItem, TotalsSummary
from invoice_studio.utils.currency import to_decimal

_HUNDRED = Decimal(100)


def line_amount(item: LineItem) -> Decimal:
    """Return quantity * unit_price for a line item."""
    return to_decimal(item.quantity) * to_decimal(item.unit_price)


def _adjustment(mode: Any, value: Any, base: Decimal) -> Decimal:
    """Apply a percent-or-amount adjustment value against base."""
    if mode == AdjustmentMode.PERCENT:
        return base * (to_decimal(value) / _HUNDRED)
    return to_decimal(value)


def compute_totals(
    items: Iterable[LineItem],
    discount_type: AdjustmentMode | str = AdjustmentMode.PERCENT,
    discount_value: Any = 0,
    tax_type: AdjustmentMode | str = AdjustmentMode.PERCENT,
    tax_value: Any = 0,
    shipping: Any = 0,
    amount_paid: Any = 0,
) -> TotalsSummary:
    """
    Compute the totals cascade for a set of line items.

    Args:
        items: Line items (anything with quantity and unit_price).
        discount_type: PERCENT applies discount_value as a percentage of
            the subtotal; any other mode subtracts it as an amount.
        discount_value: Discount percentage or amount.
        tax_type: PERCENT applies tax_value as a percentage of the taxable
            base; any other mode adds it as an amount.
        tax_value: Tax percentage or amount.
        shipping: Shipping amount added after tax. None counts as 0.
        amount_paid: Amount already received. None counts as 0.

    Returns:
        TotalsSummary with unrounded Decimal figures.
    """
    subtotal = sum((line_amount(item) for item in items), Decimal(0))
    discount_amount = _adjustment(discount_type, discount_value, subtotal)
    taxable_base = subtotal - discount_amount
    tax_amount = _adjustment(tax_type, tax_value, taxable_base)
    shipping_amount = to_decimal(shipping)
    total = taxable_base + tax_amount + shipping_amount
    paid = to_decimal(amount_paid)
    return TotalsSummary(
        subtotal=subtotal,
        discount_amount=discount_amount,
        taxable_base=taxable_base,
        tax_amount=tax_amount,
        shipping_amount=shipping_amount,
        total=total,
        amount_paid=paid,
        balance_due=total - paid,
    )


def totals_for(invoice: Invoice) -> TotalsSummary:
    """Compute the totals of an invoice from its items and adjustments."""
    return compute_totals(
        invoice.items,
        discount_type=invoice.discount_type,
        discount_value=invoice.discount_value,
        tax_type=invoice.tax_type,
        tax_value=invoice.tax_value,
        shipping=invoice.shipping,
        amount_paid=invoice.amount_paid,
    )
