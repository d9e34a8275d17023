#!/usr/bin/env python3
"""
Net Worth Session

Explicit context object owning the entry store, the undo buffer and the
pending edit key. The presentation layer calls these command methods and
renders what they return; every mutation is committed before the method
returns, so the view built afterwards reflects it.
"""

import logging
from datetime import date
from pathlib import Path

from .analysis.growth import NetWorthView, view_from_store
from .core.config import DEFAULT_IMPORT_MAX_BYTES, Config
from .core.dates import FinancialDate
from .entries.datastore import EntryStore
from .entries.models import Entry, SortOrder
from .entries.undo import UndoBuffer
from .entries.validator import parse_entry_date, validate_entry
from .interchange.csv_codec import (
    ImportResult,
    export_csv,
    export_filename,
    import_csv,
    read_import_file,
)

logger = logging.getLogger(__name__)

ENTRIES_FILENAME = "entries.json"
UNDO_FILENAME = "undo.json"


class NetWorthSession:
    """
    Command surface over the entry store.

    Example:
        >>> session = NetWorthSession.open(Path("/tmp/networth"))
        >>> entry = session.save_entry("2024-05-01", "$100", "20", "first snapshot")
        >>> deleted = session.delete_entry("2024-05-01")
        >>> session.undo()
        1
    """

    def __init__(self, store: EntryStore, undo: UndoBuffer | None = None):
        self.store = store
        self.undo_buffer = undo or UndoBuffer()
        self.editing_date: str | None = None

    @classmethod
    def open(cls, data_dir: Path, persist_undo: bool = True) -> "NetWorthSession":
        """
        Open the store (and undo buffer) under a data directory.

        Raises:
            StorageUnavailable: If the directory cannot be used
            StorageOpenFailed: If the entry file is unreadable
        """
        store = EntryStore(data_dir / ENTRIES_FILENAME)
        undo = UndoBuffer(data_dir / UNDO_FILENAME if persist_undo else None)
        return cls(store, undo)

    @classmethod
    def from_config(cls, config: Config) -> "NetWorthSession":
        """Open a session at the configured storage locations."""
        store = EntryStore(config.storage.entries_file)
        undo = UndoBuffer(config.storage.undo_file if config.storage.persist_undo else None)
        return cls(store, undo)

    # Editing

    def begin_add(self) -> None:
        """Start a new entry (no key is being edited)."""
        self.editing_date = None

    def begin_edit(self, date_value: str | FinancialDate) -> Entry:
        """
        Start editing an existing entry.

        Raises:
            EntryNotFound: If no entry exists for the date
        """
        entry = self.store.get(date_value)
        self.editing_date = entry.key
        return entry

    def save_entry(
        self,
        date_value: object,
        assets: object,
        debts: object,
        notes: str | None = "",
        original_date: str | FinancialDate | None = None,
    ) -> Entry:
        """
        Validate and store an entry.

        When editing (``original_date`` given, or a pending edit started with
        begin_edit) and the date changed, the old key is removed and the new
        entry written in one transaction.

        Raises:
            InvalidEntry: If any field is invalid; nothing is written
        """
        entry = validate_entry(date_value, assets, debts, notes)

        previous_key = self.editing_date
        if original_date is not None:
            previous_key = parse_entry_date(original_date).to_iso_string()

        with self.store.transaction():
            if previous_key is not None and previous_key != entry.key:
                self.store.delete(previous_key)
                logger.info(f"Moved entry {previous_key} -> {entry.key}")
            self.store.put(entry)

        self.editing_date = None
        return entry

    # Destructive operations

    def delete_entry(self, date_value: str | FinancialDate) -> Entry | None:
        """
        Delete an entry, keeping it in the undo buffer.

        Deleting a date with no entry is a no-op and leaves the undo buffer
        untouched.

        Returns:
            The deleted entry, or None if there was none

        Raises:
            StorageUnavailable: If the undo file or the entry file cannot be
                written; the entry and the previous undo contents are kept
        """
        entry = self.store.find(date_value)
        if entry is None:
            return None

        with self.undo_buffer.capturing(entry):
            self.store.delete(entry.key)
        if self.editing_date == entry.key:
            self.editing_date = None
        return entry

    def clear_entries(self) -> int:
        """
        Remove every entry, keeping the full set in the undo buffer.

        Returns:
            Number of entries removed

        Raises:
            StorageUnavailable: If the undo file or the entry file cannot be
                written; nothing is cleared
        """
        entries = self.store.list_all(SortOrder.ASCENDING)
        with self.undo_buffer.capturing(entries):
            count = self.store.clear()
        self.editing_date = None
        return count

    def undo(self) -> int:
        """
        Restore whatever the last delete or clear removed.

        Returns:
            Number of entries restored (0 if there was nothing to undo)
        """
        return self.undo_buffer.restore(self.store)

    # Import / export

    def import_csv_text(self, text: str) -> ImportResult:
        """
        Import CSV text row by row.

        Raises:
            ImportAborted: At the first invalid row; earlier rows stay stored
        """
        return import_csv(self.store, text)

    def import_csv_file(self, path: Path, max_bytes: int = DEFAULT_IMPORT_MAX_BYTES) -> ImportResult:
        """
        Check and import a CSV file.

        Raises:
            ImportFileRejected: Wrong extension, empty, or too large
            ImportAborted: At the first invalid row
        """
        text = read_import_file(path, max_bytes)
        logger.info(f"Importing {path}")
        return self.import_csv_text(text)

    def export_csv_text(self) -> str:
        """Serialize every entry in the store's natural (ascending) order."""
        return export_csv(self.store.list_all(SortOrder.ASCENDING))

    def export_csv_file(self, directory: Path, day: date | None = None) -> Path:
        """
        Write NetWorthExport_<date>.csv into a directory.

        Returns:
            Path of the written file
        """
        directory.mkdir(parents=True, exist_ok=True)
        output_file = directory / export_filename(day)
        output_file.write_text(self.export_csv_text(), encoding="utf-8")
        logger.info(f"Exported {len(self.store)} entries to {output_file}")
        return output_file

    # Reads

    def view(self) -> NetWorthView:
        """Rows, chart series and growth from a fresh scan of the store."""
        return view_from_store(self.store)

    def entries(self, order: SortOrder = SortOrder.DESCENDING) -> list[Entry]:
        return self.store.list_all(order)
