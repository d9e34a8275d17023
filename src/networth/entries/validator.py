#!/usr/bin/env python3
"""
Entry Validation

Pure functions that turn raw user or CSV input into a validated Entry. Any
failure raises InvalidEntry and nothing is written.
"""

from bs4 import BeautifulSoup

from ..core.dates import FinancialDate
from ..core.errors import InvalidEntry
from ..core.money import Money
from .models import Entry


def parse_entry_date(value: object) -> FinancialDate:
    """
    Parse the date field.

    Raises:
        InvalidEntry: If the value is not a recognizable calendar date
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidEntry("date", value, "date is required")
    try:
        return FinancialDate.parse(value)  # type: ignore[arg-type]
    except ValueError as e:
        raise InvalidEntry("date", value, "not a valid calendar date") from e


def parse_amount(field: str, value: object) -> Money:
    """
    Parse an assets/debts field into a non-negative Money.

    Currency punctuation is stripped and the sign is dropped. Blank means zero.

    Raises:
        InvalidEntry: If the value is not a finite number
    """
    if value is None:
        return Money.zero()
    try:
        return Money.from_dollars(value).abs()  # type: ignore[arg-type]
    except (ValueError, TypeError) as e:
        raise InvalidEntry(field, value, "not a finite number") from e


def strip_markup(text: str | None) -> str:
    """Strip HTML markup, keeping only the visible text."""
    if not text:
        return ""
    if "<" not in text and "&" not in text:
        return text
    return BeautifulSoup(text, "lxml").get_text()


def validate_entry(date: object, assets: object, debts: object, notes: str | None = "") -> Entry:
    """
    Validate raw field values and build an Entry.

    Args:
        date: Date string (any accepted format) or date object
        assets: Assets amount, e.g. "$12,000.50"
        debts: Debts amount
        notes: Free text; markup is stripped

    Returns:
        The validated Entry

    Raises:
        InvalidEntry: On the first field that fails validation
    """
    return Entry(
        date=parse_entry_date(date),
        assets=parse_amount("assets", assets),
        debts=parse_amount("debts", debts),
        notes=strip_markup(notes),
    )
