"""
Currency catalog, rounding and display formatting.

The totals calculator works in unrounded Decimals. Everything shown to a
user (editor preview, exported PDF, dashboard) goes through round_money and
format_currency so that every surface rounds the same way:
ROUND_HALF_UP at the currency's minor-unit exponent.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any

ROUNDING = ROUND_HALF_UP
DEFAULT_CURRENCY = "USD"
_GENERIC_EXPONENT = 2
_NUMBER_PATTERN = re.compile(r"[^0-9.\-]")
# Leading code label of the fallback form, e.g. "X1" in "-X1 5.00".
_LABEL_PATTERN = re.compile(r"^\s*(-?)\s*\S*[^\W\d_]\S*\s+(?=\S)")


@dataclass(frozen=True, slots=True)
class Currency:
    """A supported currency and how it is displayed."""

    code: str
    symbol: str
    name: str
    exponent: int = 2


CURRENCIES: dict[str, Currency] = {
    currency.code: currency
    for currency in (
        Currency("USD", "$", "US Dollar"),
        Currency("EUR", "€", "Euro"),
        Currency("GBP", "£", "British Pound"),
        Currency("CAD", "CA$", "Canadian Dollar"),
        Currency("AUD", "A$", "Australian Dollar"),
        Currency("JPY", "¥", "Japanese Yen", exponent=0),
        Currency("INR", "₹", "Indian Rupee"),
        Currency("CNY", "CN¥", "Chinese Yuan"),
        Currency("AED", "AED", "UAE Dirham"),
    )
}


def to_decimal(value: Any) -> Decimal:
    """
    Coerce a numeric input to Decimal.

    None and empty strings count as zero. Floats are converted through their
    shortest repr so that 0.1 becomes Decimal("0.1"), not its binary
    expansion. Unparseable strings and non-finite values count as zero.
    """
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal(0)
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, int):
        return Decimal(value)
    text = str(value).strip()
    if not text:
        return Decimal(0)
    try:
        result = Decimal(text)
    except InvalidOperation:
        return Decimal(0)
    return result if result.is_finite() else Decimal(0)


def get_currency(code: str | None) -> Currency | None:
    """Return the catalog entry for code (case-insensitive), or None."""
    if not code:
        return None
    return CURRENCIES.get(code.strip().upper())


def currency_exponent(code: str | None) -> int:
    """Return the number of minor-unit digits shown for code."""
    currency = get_currency(code)
    return currency.exponent if currency else _GENERIC_EXPONENT


def round_money(value: Any, code: str | None = DEFAULT_CURRENCY) -> Decimal:
    """
    Round a monetary value for display.

    Args:
        value: Any numeric value accepted by to_decimal.
        code: Currency code; selects the number of decimal places.

    Returns:
        Decimal quantized to the currency exponent with ROUND_HALF_UP. The
        working precision grows with the magnitude so no amount is too
        large to quantize.
    """
    amount = to_decimal(value)
    exponent = currency_exponent(code)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + exponent + 2)
        return amount.quantize(Decimal(1).scaleb(-exponent), rounding=ROUNDING)


def format_currency(value: Any, code: str | None = DEFAULT_CURRENCY) -> str:
    """
    Format a monetary amount for display.

    Known currencies render as symbol plus grouped amount (``$1,234.56``,
    ``¥1,235``). Negative amounts put the sign first (``-$12.00``). Unknown
    codes fall back to ``XYZ 1,234.56``; an empty code renders the number
    alone.

    Args:
        value: Numeric amount to format.
        code: Currency code (e.g., 'USD', 'EUR').

    Returns:
        Display string.
    """
    exponent = currency_exponent(code)
    amount = round_money(value, code)
    sign = "-" if amount < 0 else ""
    digits = f"{amount.copy_abs():,.{exponent}f}"

    currency = get_currency(code)
    if currency is None:
        label = code.strip().upper() if code and code.strip() else ""
        return f"{sign}{label} {digits}" if label else f"{sign}{digits}"
    if currency.symbol.isalpha():
        return f"{sign}{currency.symbol} {digits}"
    return f"{sign}{currency.symbol}{digits}"


def parse_amount(text: str) -> Decimal:
    """
    Parse the numeric portion of a formatted amount.

    Currency symbols, codes, whitespace and grouping separators are
    stripped; a leading code label is dropped whole so digits inside it
    (``X1 5.00``) are not read as part of the amount. Text without any
    digits parses as zero.

    Args:
        text: Display string such as ``-$1,234.50``.

    Returns:
        The Decimal value shown in the string.
    """
    text = _LABEL_PATTERN.sub(r"\1", text or "", count=1)
    return to_decimal(_NUMBER_PATTERN.sub("", text))
