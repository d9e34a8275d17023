#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors in stored assets and debts.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import cents_to_dollars_str, cents_to_float, format_cents, parse_amount_to_cents


@dataclass(frozen=True, order=True)
class Money:
    """
    Immutable money value in cents (USD).

    Examples:
        >>> assets = Money.from_dollars("$1,500.25")
        >>> str(assets)
        '$1,500.25'

        >>> debts = Money.from_cents(50025)
        >>> str(assets - debts)
        '$1,000.00'

        >>> Money.from_cents(-100).abs()
        Money(cents=100)
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int | float | Decimal) -> "Money":
        """
        Parse from a dollar string like '$1,234.56' or a number of dollars.

        Raises:
            ValueError: If the value is not a finite number
        """
        return cls(cents=parse_amount_to_cents(dollars))

    @classmethod
    def zero(cls) -> "Money":
        """Zero dollars."""
        return cls(cents=0)

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_plain_str(self) -> str:
        """Get unformatted dollar string like '1234.56'."""
        return cents_to_dollars_str(self.cents)

    def to_float(self) -> float:
        """Get value as float dollars (charting only)."""
        return cents_to_float(self.cents)

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(cents=abs(self.cents))

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects."""
        return Money(cents=self.cents - other.cents)

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(cents={self.cents})"
