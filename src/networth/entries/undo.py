#!/usr/bin/env python3
"""
Undo Buffer

Single-generation memory of the last destructive operation: either the one
entry removed by a delete or every entry removed by a clear. A new capture
overwrites whatever was held; a restore replays the captured entries and
empties the buffer.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ..core.errors import StorageUnavailable
from ..core.json_utils import read_json, write_json
from .datastore import EntryStore
from .models import Entry

logger = logging.getLogger(__name__)


class UndoBuffer:
    """
    Holds the payload of the last delete or clear.

    When ``path`` is given the buffer is mirrored to a JSON file so that a
    restore can be requested by a later process.
    """

    def __init__(self, path: Path | None = None):
        self.path = path
        self._payload: Entry | list[Entry] | None = None
        if path is not None and path.exists():
            self._payload = self._load(path)

    @staticmethod
    def _load(path: Path) -> Entry | list[Entry] | None:
        try:
            data = read_json(path)
            entries = [Entry.from_dict(item) for item in data["entries"]]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Ignoring unreadable undo file {path}: {e}")
            return None
        if data.get("kind") == "entry" and len(entries) == 1:
            return entries[0]
        return entries

    def _persist(self) -> None:
        if self.path is None:
            return
        try:
            if self._payload is None:
                self.path.unlink(missing_ok=True)
            elif isinstance(self._payload, Entry):
                write_json(self.path, {"kind": "entry", "entries": [self._payload.to_dict()]})
            else:
                write_json(self.path, {"kind": "entries", "entries": [entry.to_dict() for entry in self._payload]})
        except OSError as e:
            raise StorageUnavailable(f"Failed to write undo file {self.path}: {e}") from e

    @property
    def payload(self) -> Entry | list[Entry] | None:
        """The captured entry, entry list, or None."""
        return self._payload

    def is_empty(self) -> bool:
        return self._payload is None

    def capture(self, payload: Entry | list[Entry]) -> None:
        """
        Replace the buffer contents with a deleted entry or a cleared entry set.

        Raises:
            StorageUnavailable: If the undo file cannot be written; the buffer
                keeps its previous contents
        """
        previous = self._payload
        self._payload = payload if isinstance(payload, Entry) else list(payload)
        try:
            self._persist()
        except StorageUnavailable:
            self._payload = previous
            raise

    @contextmanager
    def capturing(self, payload: Entry | list[Entry]) -> Iterator[None]:
        """
        Capture before a destructive store change, reverting if the change fails.

        The payload is durable before the block runs, so a committed delete or
        clear can always be undone from a later process.
        """
        previous = self._payload
        self.capture(payload)
        try:
            yield
        except BaseException:
            logger.debug("Destructive change failed; reverting undo capture")
            if previous is None:
                self.discard()
            else:
                self.capture(previous)
            raise

    def discard(self) -> None:
        self._payload = None
        self._persist()

    def describe(self) -> str:
        """Human-readable description of what a restore would bring back."""
        if self._payload is None:
            return "Nothing to undo"
        if isinstance(self._payload, Entry):
            return f"Deleted entry for {self._payload.key}"
        return f"{len(self._payload)} cleared entries"

    def restore(self, store: EntryStore) -> int:
        """
        Put the captured entries back into the store and empty the buffer.

        All entries are written in a single transaction. An empty buffer is a
        no-op.

        Returns:
            Number of entries restored
        """
        if self._payload is None:
            return 0

        entries = [self._payload] if isinstance(self._payload, Entry) else self._payload
        with store.transaction():
            for entry in entries:
                store.put(entry)

        logger.info(f"Restored {len(entries)} entries")
        self.discard()
        return len(entries)
