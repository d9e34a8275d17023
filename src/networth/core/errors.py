#!/usr/bin/env python3
"""
Error Types for the Net Worth Tracker

All domain failures derive from NetWorthError so the CLI can report them
uniformly. Nothing in the core retries automatically; errors are raised to
the caller as soon as they are detected.
"""


class NetWorthError(Exception):
    """Base class for all net worth tracker errors."""


class InvalidEntry(NetWorthError, ValueError):
    """
    Raised when an entry field fails validation.

    Attributes:
        field: Name of the offending field ("date", "assets", "debts", ...)
        value: The raw value that was rejected
    """

    def __init__(self, field: str, value: object, reason: str = ""):
        self.field = field
        self.value = value
        self.reason = reason
        message = f"Invalid {field}: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class EntryNotFound(NetWorthError, KeyError):
    """Raised when a lookup by date finds no entry."""

    def __init__(self, date_key: str):
        self.date_key = date_key
        super().__init__(date_key)

    def __str__(self) -> str:
        return f"No entry for {self.date_key}"


class StorageError(NetWorthError):
    """Base class for storage engine failures."""


class StorageUnavailable(StorageError):
    """The storage location cannot be used (fatal for the session)."""


class StorageOpenFailed(StorageError):
    """The persisted entry file exists but could not be read or decoded."""


class ImportFileRejected(NetWorthError):
    """An import file failed the extension or size acceptance checks."""

    def __init__(self, path: object, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot import {path}: {reason}")


class ImportAborted(NetWorthError):
    """
    Raised when an import stops at the first invalid row.

    Rows before the failing one remain committed.

    Attributes:
        row_number: 1-based number of the rejected row
        rows_imported: Count of rows committed before the failure
        cause: The validation error for the rejected row
    """

    def __init__(self, row_number: int, rows_imported: int, cause: InvalidEntry):
        self.row_number = row_number
        self.rows_imported = rows_imported
        self.cause = cause
        super().__init__(
            f"Import stopped at row {row_number}: {cause} "
            f"({rows_imported} row(s) imported before the failure)"
        )
