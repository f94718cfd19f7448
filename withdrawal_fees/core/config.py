"""Configuration management for the command-line surface.

Loads settings from ``WITHDRAWAL_FEES_*`` environment variables. The
library functions never read settings; only the CLI does.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError
from .types import OUTPUT_FORMATS

ENV_PREFIX = "WITHDRAWAL_FEES_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class FeeSettings:
    """Settings for running the estimator from the command line."""

    # Root log level when --verbose is not given
    log_level: str = "INFO"

    # Default output format: table, json, csv
    output_format: str = "table"

    # Width of rich tables
    table_width: int = 100

    # Refuse to process when any config fails validation
    strict: bool = False

    @classmethod
    def from_env(cls) -> "FeeSettings":
        """Load settings from environment variables."""
        defaults = cls()
        settings = cls(
            log_level=os.getenv(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            output_format=os.getenv(f"{ENV_PREFIX}OUTPUT", defaults.output_format).lower(),
            table_width=_parse_int("TABLE_WIDTH", defaults.table_width),
            strict=_parse_bool("STRICT", defaults.strict),
        )
        settings.validate()
        return settings

    def validate(self) -> None:
        """Check that every setting holds an accepted value."""
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(
                f"{ENV_PREFIX}LOG_LEVEL", f"unknown log level {self.log_level!r}"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"{ENV_PREFIX}OUTPUT",
                f"expected one of {', '.join(OUTPUT_FORMATS)}, got {self.output_format!r}",
            )
        if self.table_width <= 0:
            raise ConfigurationError(
                f"{ENV_PREFIX}TABLE_WIDTH", "table width must be positive"
            )

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


def _parse_int(name: str, default: int) -> int:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name}", f"expected an integer, got {raw!r}")


def _parse_bool(name: str, default: bool) -> bool:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{ENV_PREFIX}{name}", f"expected a boolean, got {raw!r}")


# Global settings instance (lazy loaded)
_settings: Optional[FeeSettings] = None


def get_settings() -> FeeSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = FeeSettings.from_env()
    return _settings


def reload_settings() -> FeeSettings:
    """Reload settings from environment."""
    global _settings
    _settings = FeeSettings.from_env()
    return _settings
