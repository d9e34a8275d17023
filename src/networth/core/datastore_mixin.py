#!/usr/bin/env python3
"""
DataStore Mixin - Common functionality for file-backed stores.

Provides shared implementation of metadata methods so every store reports
its existence, age and size the same way.
"""

from abc import abstractmethod
from datetime import datetime
from pathlib import Path


class DataStoreMixin:
    """
    Mixin providing common DataStore metadata.

    Subclasses must set ``self.path`` and implement:
    - item_count() -> int | None
    - summary_text() -> str
    """

    path: Path

    def exists(self) -> bool:
        """Check if data exists in storage."""
        return self.path.exists()

    def last_modified(self) -> datetime | None:
        """Get timestamp of the backing file, or None if it doesn't exist."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.path.stat().st_mtime)

    def age_days(self) -> int | None:
        """
        Get age of data in days since last modification.

        Returns:
            Number of days since last modification, or None if data doesn't exist
        """
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def size_bytes(self) -> int | None:
        """Get size of the backing file in bytes."""
        if not self.exists():
            return None
        return self.path.stat().st_size

    @abstractmethod
    def item_count(self) -> int | None:
        """Get count of items/records in stored data."""
        ...

    @abstractmethod
    def summary_text(self) -> str:
        """Get human-readable summary of current data state."""
        ...
