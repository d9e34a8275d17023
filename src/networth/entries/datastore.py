#!/usr/bin/env python3
"""
Entry DataStore

Durable, local, date-keyed storage of net-worth entries backed by a single
JSON file. Every mutation runs inside a transaction: changes are applied to a
working copy and written atomically on commit, so a multi-step operation
(for example delete-old-key then insert-new-key) is either fully persisted or
not persisted at all.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from json import JSONDecodeError
from pathlib import Path

from ..core.datastore_mixin import DataStoreMixin
from ..core.dates import FinancialDate
from ..core.errors import EntryNotFound, InvalidEntry, StorageOpenFailed, StorageUnavailable
from ..core.json_utils import read_json, write_json
from ..core.money import Money
from .models import Entry, SortOrder

logger = logging.getLogger(__name__)

FILE_FORMAT_VERSION = 1

RANGE_FIELDS = ("assets", "debts")


def _date_key(date_value: "str | FinancialDate") -> str:
    """Normalize a date argument to the ISO key used by the store."""
    if isinstance(date_value, FinancialDate):
        return date_value.to_iso_string()
    try:
        return FinancialDate.parse(date_value).to_iso_string()
    except ValueError as e:
        raise InvalidEntry("date", date_value, "not a valid calendar date") from e


class EntryStore(DataStoreMixin):
    """
    Date-keyed entry storage.

    The committed entry set is cached in memory and mirrored to ``path``.
    Reads inside an open transaction see that transaction's uncommitted
    changes; no other reader exists in a single-user process.
    """

    def __init__(self, path: Path):
        """
        Open (or create on first write) the entry file.

        Args:
            path: Location of the entries JSON file

        Raises:
            StorageUnavailable: If the parent directory cannot be created
            StorageOpenFailed: If an existing file cannot be read or decoded
        """
        self.path = path
        self._entries: dict[str, Entry] = {}
        self._working: dict[str, Entry] | None = None
        self._available = False
        self._open()

    def _open(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"Cannot create storage directory {self.path.parent}: {e}") from e

        if self.path.exists():
            try:
                data = read_json(self.path)
                entries = [Entry.from_dict(item) for item in data["entries"]]
            except (OSError, JSONDecodeError, UnicodeDecodeError) as e:
                raise StorageOpenFailed(f"Cannot read {self.path}: {e}") from e
            except (KeyError, TypeError, ValueError) as e:
                raise StorageOpenFailed(f"Malformed entry file {self.path}: {e}") from e

            self._entries = {entry.key: entry for entry in entries}
            logger.debug(f"Loaded {len(self._entries)} entries from {self.path}")

        self._available = True

    def _require_available(self) -> None:
        if not self._available:
            raise StorageUnavailable(f"Entry store at {self.path} is not open")

    def _view(self) -> dict[str, Entry]:
        return self._working if self._working is not None else self._entries

    def _commit(self, entries: dict[str, Entry]) -> None:
        ordered = [entries[key] for key in sorted(entries)]
        payload = {
            "version": FILE_FORMAT_VERSION,
            "entries": [entry.to_dict() for entry in ordered],
        }
        try:
            write_json(self.path, payload)
        except OSError as e:
            self._available = False
            raise StorageUnavailable(f"Failed to write {self.path}: {e}") from e
        self._entries = entries
        logger.info(f"Committed {len(ordered)} entries to {self.path}")

    @contextmanager
    def transaction(self) -> Iterator["EntryStore"]:
        """
        Group mutations so they commit together.

        Changes become durable when the block exits normally; an exception
        discards them. Nested transactions join the outermost one.
        """
        self._require_available()

        if self._working is not None:
            yield self
            return

        self._working = dict(self._entries)
        try:
            yield self
        except BaseException:
            logger.debug("Transaction rolled back")
            self._working = None
            raise

        working, self._working = self._working, None
        if working != self._entries:
            self._commit(working)

    def put(self, entry: Entry) -> None:
        """Insert or overwrite the entry for ``entry.date``."""
        with self.transaction():
            existing = self._view().get(entry.key)
            self._view()[entry.key] = entry
        action = "Updated" if existing is not None else "Added"
        logger.debug(f"{action} entry for {entry.key}: net worth {entry.net_worth}")

    def find(self, date_value: "str | FinancialDate") -> Entry | None:
        """Get the entry for a date, or None if there is none."""
        self._require_available()
        return self._view().get(_date_key(date_value))

    def get(self, date_value: "str | FinancialDate") -> Entry:
        """
        Get the entry for a date.

        Raises:
            EntryNotFound: If no entry exists for the date
        """
        entry = self.find(date_value)
        if entry is None:
            raise EntryNotFound(_date_key(date_value))
        return entry

    def delete(self, date_value: "str | FinancialDate") -> bool:
        """
        Remove the entry for a date.

        Deleting an absent key is a successful no-op.

        Returns:
            True if an entry was removed
        """
        key = _date_key(date_value)
        with self.transaction():
            removed = self._view().pop(key, None)
        if removed is not None:
            logger.debug(f"Deleted entry for {key}")
        return removed is not None

    def list_all(self, order: SortOrder = SortOrder.DESCENDING) -> list[Entry]:
        """List every entry sorted by date."""
        self._require_available()
        entries = self._view()
        keys = sorted(entries, reverse=order == SortOrder.DESCENDING)
        return [entries[key] for key in keys]

    def range_by(self, field: str, low: Money, high: Money) -> list[Entry]:
        """
        Entries whose assets or debts fall within ``[low, high]``, ascending by date.

        Raises:
            ValueError: If field is not "assets" or "debts"
        """
        if field not in RANGE_FIELDS:
            raise ValueError(f"Cannot range over {field!r}; expected one of {RANGE_FIELDS}")
        return [entry for entry in self.list_all(SortOrder.ASCENDING) if low <= getattr(entry, field) <= high]

    def clear(self) -> int:
        """
        Remove every entry.

        Returns:
            Number of entries removed
        """
        with self.transaction():
            count = len(self._view())
            self._view().clear()
        logger.debug(f"Cleared {count} entries")
        return count

    def item_count(self) -> int | None:
        """Get count of stored entries."""
        if not self._available:
            return None
        return len(self._entries)

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return "Entry store unavailable"
        if count == 0:
            return "No entries recorded"
        entries = self.list_all(SortOrder.ASCENDING)
        return f"{count} entries ({entries[0].key} to {entries[-1].key})"

    def __len__(self) -> int:
        self._require_available()
        return len(self._view())
