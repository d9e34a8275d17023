#!/usr/bin/env python3
"""
CSV Import/Export Codec

Translates between stored entries and the quoted, comma-separated interchange
format:

    "2024-05-01","100.00","20.00","notes text"

Every field is double-quoted; an embedded quote is written doubled. There is
no header row. Import validates and stores rows one at a time and stops at the
first invalid row, leaving earlier rows committed.
"""

import csv
import io
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from ..core.config import DEFAULT_IMPORT_MAX_BYTES
from ..core.errors import ImportAborted, ImportFileRejected, InvalidEntry
from ..entries.datastore import EntryStore
from ..entries.models import Entry
from ..entries.validator import validate_entry

logger = logging.getLogger(__name__)

EXPORT_FILENAME_PREFIX = "NetWorthExport_"
FIELD_COUNT = 4


@dataclass
class ImportResult:
    """Outcome of a completed import."""

    rows_imported: int


def export_csv(entries: Iterable[Entry]) -> str:
    """
    Serialize entries as CSV text.

    Args:
        entries: Entries in the order they should appear

    Returns:
        Newline-joined records without a trailing newline
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for entry in entries:
        writer.writerow([entry.key, entry.assets.to_plain_str(), entry.debts.to_plain_str(), entry.notes])
    return buffer.getvalue().removesuffix("\n")


def export_filename(day: date | None = None) -> str:
    """Export file name for a day, e.g. NetWorthExport_2024-05-01.csv."""
    day = day or date.today()
    return f"{EXPORT_FILENAME_PREFIX}{day.isoformat()}.csv"


def parse_csv(text: str) -> list[list[str]]:
    """
    Split CSV text into rows of fields.

    Quoted fields may contain commas, newlines and doubled quotes. Both LF
    and CRLF line endings are accepted. Empty lines are dropped; a record of
    blank fields such as ``"","","",""`` is kept so the importer rejects it.
    """
    reader = csv.reader(io.StringIO(text, newline=""), strict=False)
    try:
        return [row for row in reader if row]
    except csv.Error as e:
        raise InvalidEntry("csv line", reader.line_num, str(e)) from e


def _row_fields(row: list[str]) -> list[str]:
    padded = list(row[:FIELD_COUNT])
    padded.extend([""] * (FIELD_COUNT - len(padded)))
    return padded


def import_rows(store: EntryStore, rows: Iterable[list[str]]) -> ImportResult:
    """
    Validate and store rows sequentially.

    Each row is committed before the next one is read. The first invalid row
    stops the import.

    Args:
        store: Destination store
        rows: Rows of [date, assets, debts, notes]

    Returns:
        ImportResult with the number of rows stored

    Raises:
        ImportAborted: On the first invalid row; earlier rows stay committed
    """
    imported = 0
    for row_number, row in enumerate(rows, start=1):
        date_field, assets_field, debts_field, notes_field = _row_fields(row)
        try:
            entry = validate_entry(date_field, assets_field, debts_field, notes_field)
        except InvalidEntry as e:
            logger.warning(f"Import stopped at row {row_number}: {e}")
            raise ImportAborted(row_number, imported, e) from e

        store.put(entry)
        imported += 1

    logger.info(f"Imported {imported} rows")
    return ImportResult(rows_imported=imported)


def import_csv(store: EntryStore, text: str) -> ImportResult:
    """Parse CSV text and import its rows (see import_rows)."""
    return import_rows(store, parse_csv(text))


def check_import_file(path: Path, max_bytes: int = DEFAULT_IMPORT_MAX_BYTES) -> None:
    """
    Check that a file may be imported.

    Raises:
        ImportFileRejected: If the extension is not .csv, the file is missing
            or empty, or it is larger than max_bytes
    """
    if path.suffix.lower() != ".csv":
        raise ImportFileRejected(path, "only .csv files can be imported")
    if not path.is_file():
        raise ImportFileRejected(path, "file not found")

    size = path.stat().st_size
    if size == 0:
        raise ImportFileRejected(path, "file is empty")
    if size > max_bytes:
        raise ImportFileRejected(path, f"file is {size:,} bytes; the limit is {max_bytes:,}")


def read_import_file(path: Path, max_bytes: int = DEFAULT_IMPORT_MAX_BYTES) -> str:
    """Check a file for import and return its text (UTF-8, BOM tolerated)."""
    check_import_file(path, max_bytes)
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise ImportFileRejected(path, "file is not UTF-8 text") from e
