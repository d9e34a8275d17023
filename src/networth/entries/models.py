#!/usr/bin/env python3
"""
Entry Data Model

An Entry is one dated net-worth snapshot. The date is the primary key: the
store holds at most one entry per calendar date.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money


class SortOrder(Enum):
    """Order in which entries are listed."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class Entry:
    """
    A net-worth snapshot for a single date.

    Assets and debts are always non-negative; net worth is derived and never
    stored.
    """

    date: FinancialDate
    assets: Money
    debts: Money
    notes: str = ""

    @property
    def key(self) -> str:
        """Primary key (ISO date string)."""
        return self.date.to_iso_string()

    @property
    def net_worth(self) -> Money:
        """Assets minus debts."""
        return self.assets - self.debts

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "date": self.key,
            "assets_cents": self.assets.to_cents(),
            "debts_cents": self.debts.to_cents(),
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entry":
        """Create Entry from its serialized dictionary."""
        return cls(
            date=FinancialDate.from_string(data["date"]),
            assets=Money.from_cents(int(data["assets_cents"])),
            debts=Money.from_cents(int(data["debts_cents"])),
            notes=data.get("notes") or "",
        )
