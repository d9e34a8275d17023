#!/usr/bin/env python3
"""
Configuration Management for the Net Worth Tracker

Handles environment-based configuration with safe defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_IMPORT_MAX_BYTES = 10_000_000


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class StorageConfig:
    """Entry storage settings."""

    entries_file: Path
    undo_file: Path
    persist_undo: bool = True


@dataclass
class InterchangeConfig:
    """CSV import/export settings."""

    export_dir: Path
    import_max_bytes: int = DEFAULT_IMPORT_MAX_BYTES


@dataclass
class ChartConfig:
    """Trend chart rendering settings."""

    output_dir: Path
    width: int = 12
    height: int = 6
    dpi: int = 150


@dataclass
class Config:
    """
    Main configuration class for the tracker.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path

    # Component configurations
    storage: StorageConfig
    interchange: InterchangeConfig
    chart: ChartConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("NETWORTH_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_networth"
            data_dir = Path(os.getenv("NETWORTH_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("NETWORTH_DATA_DIR", "~/.networth")).expanduser().resolve()

        storage = StorageConfig(
            entries_file=data_dir / "entries.json",
            undo_file=data_dir / "undo.json",
            persist_undo=os.getenv("NETWORTH_PERSIST_UNDO", "true").lower() == "true",
        )

        interchange = InterchangeConfig(
            export_dir=Path(os.getenv("NETWORTH_EXPORT_DIR", str(data_dir / "exports"))),
            import_max_bytes=int(os.getenv("NETWORTH_IMPORT_MAX_BYTES", str(DEFAULT_IMPORT_MAX_BYTES))),
        )

        chart = ChartConfig(
            output_dir=data_dir / "charts",
            width=int(os.getenv("CHART_WIDTH", "12")),
            height=int(os.getenv("CHART_HEIGHT", "6")),
            dpi=int(os.getenv("CHART_DPI", "150")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            storage=storage,
            interchange=interchange,
            chart=chart,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.interchange.import_max_bytes <= 0:
            errors.append("NETWORTH_IMPORT_MAX_BYTES must be positive")

        if self.chart.width <= 0 or self.chart.height <= 0:
            errors.append("Chart width and height must be positive")

        if self.chart.dpi <= 0:
            errors.append("Chart DPI must be positive")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

        # matplotlib is chatty at DEBUG
        logging.getLogger("matplotlib").setLevel(logging.WARNING)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a JSON-friendly dictionary."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if hasattr(field_value, "__dict__") and not isinstance(field_value, (Path, Enum)):
                result[field_name] = {
                    nested_name: _plain(nested_value) for nested_name, nested_value in field_value.__dict__.items()
                }
            else:
                result[field_name] = _plain(field_value)

        return result


def _plain(value: Any) -> Any:
    """Convert Path and Enum values to plain strings."""
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
