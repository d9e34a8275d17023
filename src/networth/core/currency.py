#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

Amounts are held as integer cents everywhere in the tracker. Parsing goes
through Decimal so user input such as "$1,234.567" never touches binary
floating point before it is rounded to cents.

Key Principles:
- Never use floating-point arithmetic for stored amounts
- Strip currency punctuation ("$" and ",") before parsing
- Reject anything that is not a finite number
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def parse_amount_to_cents(amount_str: str | int | float | Decimal) -> int:
    """
    Parse a user-supplied amount into signed integer cents.

    Args:
        amount_str: String like "$1,234.56", "12", "-3.5" or a number

    Returns:
        Amount in cents, rounded half-up to the nearest cent. Blank input is 0.

    Raises:
        ValueError: If the input is not a finite number

    Examples:
        parse_amount_to_cents("$1,234.56") -> 123456
        parse_amount_to_cents("12.345") -> 1235
        parse_amount_to_cents("") -> 0
    """
    if isinstance(amount_str, bool):
        raise ValueError(f"Not a number: {amount_str!r}")

    if isinstance(amount_str, (int, Decimal)):
        decimal_amount = Decimal(amount_str)
    elif isinstance(amount_str, float):
        decimal_amount = Decimal(repr(amount_str))
    else:
        clean = str(amount_str).replace("$", "").replace(",", "").strip()
        if not clean:
            return 0
        try:
            decimal_amount = Decimal(clean)
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {amount_str!r}") from e

    if not decimal_amount.is_finite():
        raise ValueError(f"Not a finite number: {amount_str!r}")

    try:
        return int((decimal_amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    except ArithmeticError as e:
        raise ValueError(f"Amount out of range: {amount_str!r}") from e


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to a plain dollar string using integer arithmetic.

    Example:
        cents_to_dollars_str(123456) -> "1234.56"
        cents_to_dollars_str(-5) -> "-0.05"
    """
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(int(cents)), 100)
    return f"{sign}{dollars}.{remainder:02d}"


def cents_to_float(cents: int) -> float:
    """Convert cents to float dollars (for charting only, never for storage)."""
    return float(Decimal(cents) * CENT)


def format_cents(cents: int) -> str:
    """
    Format cents for display with $ prefix and thousands separators.

    Example:
        format_cents(-123456) -> "-$1,234.56"
    """
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(int(cents)), 100)
    return f"{sign}${dollars:,}.{remainder:02d}"
