"""
Sequential invoice number generation.

A numbering format is a template such as ``INV-{YYYY}-{NNNN}``. The text
before ``{NNNN}`` (with the year filled in) is the prefix that scopes the
sequence; the next number is one past the largest number already issued
under that prefix. Gaps left by deleted invoices are never reused.
"""

import re
from datetime import date, datetime
from typing import Callable, Iterable

YEAR_TOKEN = "{YYYY}"
MONTH_TOKEN = "{MM}"
SEQUENCE_TOKEN = "{NNNN}"

DEFAULT_FORMAT = "INV-{YYYY}-{NNNN}"

NUMBERING_PRESETS: tuple[tuple[str, str], ...] = (
    ("Standard (INV-2024-0001)", "INV-{YYYY}-{NNNN}"),
    ("Simple (#0001)", "#{NNNN}"),
    ("Year Based (2024-0001)", "{YYYY}-{NNNN}"),
    ("Compact (INV0001)", "INV{NNNN}"),
    ("Dated (202410-0001)", "{YYYY}{MM}-{NNNN}"),
)

# Leading base-10 integer, the way a lenient integer parse reads "0007" or "12b".
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

Clock = Callable[[], date]


def number_prefix(number_format: str, today: date) -> str:
    """
    Return the literal prefix that scopes the sequence for number_format.

    The prefix is everything before the first ``{NNNN}`` (the whole format
    when the token is absent) with the first ``{YYYY}`` replaced by the
    4-digit year and ``{MM}`` by the 2-digit month.
    """
    prefix = number_format.split(SEQUENCE_TOKEN, 1)[0]
    prefix = prefix.replace(YEAR_TOKEN, f"{today.year:04d}", 1)
    return prefix.replace(MONTH_TOKEN, f"{today.month:02d}", 1)


def sequence_width(number_format: str) -> int:
    """Return the zero-padding width: 4 when ``{NNNN}`` is present, else 2."""
    return 4 if SEQUENCE_TOKEN in number_format else 2


def parse_sequence(text: str) -> int | None:
    """
    Parse the sequence part of an invoice number.

    Reads an optionally signed run of digits at the start of text; anything
    after the digits is ignored. Returns None when text has no leading
    integer.
    """
    match = _LEADING_INT.match(text)
    if not match:
        return None
    return int(match.group(1))


def next_number(
    number_format: str,
    existing_numbers: Iterable[str],
    clock: Clock = datetime.now,
) -> str:
    """
    Return the next invoice number for number_format.

    Args:
        number_format: Format pattern, e.g. ``INV-{YYYY}-{NNNN}``.
        existing_numbers: Invoice numbers already issued, in any format.
        clock: Zero-argument callable returning the current date.

    Returns:
        The prefix followed by the zero-padded successor of the largest
        sequence already issued under that prefix.

    Example:
        >>> next_number("INV-{YYYY}-{NNNN}", ["INV-2024-0007"], lambda: date(2024, 5, 1))
        'INV-2024-0008'
    """
    prefix = number_prefix(number_format, clock())

    max_num = 0
    for number in existing_numbers:
        if not number.startswith(prefix):
            continue
        value = parse_sequence(number[len(prefix):])
        if value is not None and value > max_num:
            max_num = value

    return f"{prefix}{max_num + 1:0{sequence_width(number_format)}d}"
