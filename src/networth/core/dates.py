#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Immutable date wrapper with consistent formatting. Entries are keyed by the
ISO form of this date, so ordering on the key string matches calendar order.
"""

from dataclasses import dataclass
from datetime import date, datetime

# Formats accepted from user input and imported files, tried in order.
ACCEPTED_DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
)

DISPLAY_FORMAT = "%m/%d/%Y"


@dataclass(frozen=True, order=True)
class FinancialDate:
    """Immutable financial date wrapper with consistent formatting."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse from string in specified format.

        Args:
            date_str: Date string to parse
            date_format: Date format (default: ISO format "%Y-%m-%d")

        Returns:
            FinancialDate object

        Raises:
            ValueError: If the string does not match the format
        """
        return cls(date=datetime.strptime(date_str, date_format).date())

    @classmethod
    def parse(cls, value: "str | date | FinancialDate") -> "FinancialDate":
        """
        Parse a date in any of the accepted formats.

        ISO timestamps ("2024-01-15T10:30:00") are accepted and truncated to
        their date part.

        Raises:
            ValueError: If no accepted format matches
        """
        if isinstance(value, FinancialDate):
            return value
        if isinstance(value, datetime):
            return cls(date=value.date())
        if isinstance(value, date):
            return cls(date=value)

        text = str(value).strip()
        if "T" in text[:11]:
            text = text.split("T", 1)[0]

        for date_format in ACCEPTED_DATE_FORMATS:
            try:
                return cls.from_string(text, date_format)
            except ValueError:
                continue
        raise ValueError(f"Unrecognized date: {value!r}")

    @classmethod
    def today(cls) -> "FinancialDate":
        """Get today's date."""
        return cls(date=date.today())

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def to_display_string(self) -> str:
        """Format as MM/DD/YYYY for tables and chart labels."""
        return self.date.strftime(DISPLAY_FORMAT)

    def days_until(self, other: "FinancialDate") -> int:
        """Whole days from this date to another (negative if other is earlier)."""
        return (other.date - self.date).days

    def __str__(self) -> str:
        """String representation."""
        return self.to_iso_string()

    def __repr__(self) -> str:
        """Repr format."""
        return f"FinancialDate(date={self.date!r})"
