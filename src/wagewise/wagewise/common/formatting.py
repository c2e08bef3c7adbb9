from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import CURRENCY_SYMBOL


def _group_indian(digits: str) -> str:
    # Last three digits, then groups of two: 12,34,56,789
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_inr(amount: float | int) -> str:
    """Format an amount as rupees with two decimals and Indian digit grouping.

    >>> format_inr(123456.5)
    '₹1,23,456.50'
    >>> format_inr(-470)
    '-₹470.00'
    """
    value = Decimal(str(amount or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, _, fraction = f"{abs(value):.2f}".partition(".")
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(whole)}.{fraction}"


def format_number(value: float | int) -> str:
    """Plain number for form inputs, exact enough to post back unchanged.

    >>> format_number(100000.25)
    '100000.25'
    >>> format_number(12.0)
    '12'
    """
    value = float(value or 0)
    if value.is_integer():
        return str(int(value))
    # repr is the shortest text that parses back to the same float
    return format(Decimal(repr(value)), "f")
