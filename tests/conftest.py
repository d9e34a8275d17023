"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from pathlib import Path

import pytest

from networth.core import config as config_module
from networth.entries.datastore import EntryStore
from networth.entries.models import Entry
from networth.entries.validator import validate_entry
from networth.session import NetWorthSession


@pytest.fixture
def temp_dir(tmp_path) -> Path:
    """A temporary directory for test files."""
    return tmp_path


@pytest.fixture
def store(temp_dir) -> EntryStore:
    """An empty entry store backed by a temporary file."""
    return EntryStore(temp_dir / "entries.json")


@pytest.fixture
def session(temp_dir) -> NetWorthSession:
    """A session with a persisted undo buffer in a temporary directory."""
    return NetWorthSession.open(temp_dir)


@pytest.fixture
def sample_entries() -> list[Entry]:
    """Three snapshots spanning a year."""
    return [
        validate_entry("2023-01-01", "1000", "250", "Start"),
        validate_entry("2023-07-01", "$1,500.50", "200", "Mid-year"),
        validate_entry("2024-01-01", "2000", "100.25", "Year end"),
    ]


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point configuration at a per-test data directory."""
    monkeypatch.setenv("NETWORTH_ENV", "test")
    monkeypatch.setenv("NETWORTH_DATA_DIR", str(tmp_path / "data"))
    for name in (
        "NETWORTH_EXPORT_DIR",
        "NETWORTH_IMPORT_MAX_BYTES",
        "NETWORTH_PERSIST_UNDO",
        "CHART_WIDTH",
        "CHART_HEIGHT",
        "CHART_DPI",
        "LOG_LEVEL",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)

    # Force get_config() to rebuild from the patched environment
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "storage: Tests for the entry store and undo buffer")
    config.addinivalue_line("markers", "csv: Tests for CSV import and export")
    config.addinivalue_line("markers", "slow: Tests that take significant time to run")
