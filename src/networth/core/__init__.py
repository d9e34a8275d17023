"""
Core Utilities Package

Shared primitives used across the tracker.

This package provides:
- Money with integer-cent arithmetic
- FinancialDate with the accepted input formats
- Environment-based configuration and logging setup
- The NetWorthError exception hierarchy
- Atomic JSON file helpers
"""

from .config import Config, Environment, get_config, reload_config
from .currency import cents_to_dollars_str, format_cents, parse_amount_to_cents
from .dates import FinancialDate
from .errors import (
    EntryNotFound,
    ImportAborted,
    ImportFileRejected,
    InvalidEntry,
    NetWorthError,
    StorageError,
    StorageOpenFailed,
    StorageUnavailable,
)
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "reload_config",
    # Currency utilities
    "cents_to_dollars_str",
    "format_cents",
    "parse_amount_to_cents",
    # Primitives
    "FinancialDate",
    "Money",
    # Errors
    "EntryNotFound",
    "ImportAborted",
    "ImportFileRejected",
    "InvalidEntry",
    "NetWorthError",
    "StorageError",
    "StorageOpenFailed",
    "StorageUnavailable",
]
