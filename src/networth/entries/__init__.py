#!/usr/bin/env python3
"""
Entry Management

Date-keyed storage of net-worth entries with validation and single-level undo.
"""

from .datastore import EntryStore
from .models import Entry, SortOrder
from .undo import UndoBuffer
from .validator import parse_amount, parse_entry_date, strip_markup, validate_entry

__all__ = [
    "Entry",
    "EntryStore",
    "SortOrder",
    "UndoBuffer",
    "parse_amount",
    "parse_entry_date",
    "strip_markup",
    "validate_entry",
]
