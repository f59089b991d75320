"""
Logging-related settings for fogbound-content.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/fogbound_content.csv"

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings:
    """Manages logging-related settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    # === CONSOLE LOGGING SETTINGS ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self.settings.setValue("logging/console_enabled", value)
        self.settings.sync()

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._get_str("logging/console_level", "WARNING")

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level; invalid names are ignored."""
        if value.upper() in VALID_LEVELS:
            self.settings.setValue("logging/console_level", value.upper())
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid console log level: {value}, keeping current: {self.console_log_level}"
            )

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self.settings.setValue("logging/console_use_colors", value)
        self.settings.sync()

    # === FILE LOGGING SETTINGS ===

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self.settings.setValue("logging/file_enabled", value)
        self.settings.sync()

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only, always returns constant)."""
        return LOG_FILE_PATH

    @property
    def log_file_absolute_path(self) -> Path:
        """Get absolute path to log file."""
        return Path(LOG_FILE_PATH).resolve()
