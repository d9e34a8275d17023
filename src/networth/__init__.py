"""
Net Worth Tracker - Personal Net Worth Snapshots

Records dated net-worth snapshots (assets, debts, notes) in local storage,
reports growth over time, and moves data in and out as CSV.

Domain Packages:
- core: Money, dates, configuration, errors
- entries: Date-keyed entry store, validation, undo buffer
- analysis: Chart series, growth rates, trend chart
- interchange: CSV import/export
- cli: Command-line interface

Example Usage:
    from networth import NetWorthSession
    from pathlib import Path

    session = NetWorthSession.open(Path("~/.networth").expanduser())
    session.save_entry("2024-05-01", "$125,000", "$40,000", "After bonus")
    print(session.view().growth.yearly_rate)

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "Net Worth Tracker Contributors"

from .core.config import Environment, get_config
from .core.dates import FinancialDate
from .core.errors import (
    EntryNotFound,
    ImportAborted,
    ImportFileRejected,
    InvalidEntry,
    NetWorthError,
    StorageOpenFailed,
    StorageUnavailable,
)
from .core.money import Money
from .entries.models import Entry, SortOrder
from .session import NetWorthSession

__all__ = [
    "Entry",
    "EntryNotFound",
    "Environment",
    "FinancialDate",
    "ImportAborted",
    "ImportFileRejected",
    "InvalidEntry",
    "Money",
    "NetWorthError",
    "NetWorthSession",
    "SortOrder",
    "StorageOpenFailed",
    "StorageUnavailable",
    "get_config",
]
