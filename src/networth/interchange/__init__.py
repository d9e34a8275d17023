#!/usr/bin/env python3
"""
Interchange Package

CSV import and export of net-worth entries.
"""

from .csv_codec import (
    ImportResult,
    check_import_file,
    export_csv,
    export_filename,
    import_csv,
    import_rows,
    parse_csv,
    read_import_file,
)

__all__ = [
    "ImportResult",
    "check_import_file",
    "export_csv",
    "export_filename",
    "import_csv",
    "import_rows",
    "parse_csv",
    "read_import_file",
]
