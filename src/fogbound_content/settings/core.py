"""
Core settings management for fogbound-content.
"""

import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QSettings

from ..spawning.tables import HybridWeights
from .logging import LoggingSettings
from .migration import SettingsMigrator
from .paths import PathSettings
from .spawning import SpawnWeightSettings
from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator

logger = logging.getLogger(__name__)

ORGANIZATION = "fogbound"
APPLICATION = "fogbound_content"


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to content locations, spawn weights and
    logging options with cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default"):
        """Initialize settings for a profile.

        Args:
            profile: Settings profile name (default: "default")
        """
        self.settings = QSettings(ORGANIZATION, APPLICATION)
        self.profile = profile

        # Profile is a group: fogbound/fogbound_content/<profile>/...
        self.settings.beginGroup(profile)

        self._migrator = SettingsMigrator(self.settings)
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._spawn_weights = SpawnWeightSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        self._migrator.ensure_version()

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === SUBSYSTEM ACCESS ===

    @property
    def paths(self) -> PathSettings:
        """Access path settings subsystem."""
        return self._paths

    @property
    def spawn_weights(self) -> SpawnWeightSettings:
        """Access spawn weight settings subsystem."""
        return self._spawn_weights

    @property
    def logging(self) -> LoggingSettings:
        """Access logging settings subsystem."""
        return self._logging

    # === VERSION AND FIRST RUN ===

    @property
    def is_first_run(self) -> bool:
        """Check if this is the first run of the application."""
        return self._get_bool("app/first_run", True)

    def set_first_run_complete(self) -> None:
        """Mark first run as complete."""
        self.settings.setValue("app/first_run", False)
        self.settings.sync()

    @property
    def version(self) -> str:
        """Get configuration version."""
        return self._get_str("app/version", ConfigVersion.CURRENT.value)

    # === HELPER METHODS ===

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

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def content_path(self) -> Optional[Path]:
        """Get custom content pack directory."""
        return self._paths.content_path

    @content_path.setter
    def content_path(self, value: Optional[Path]) -> None:
        self._paths.content_path = value

    @property
    def powergates_file(self) -> Optional[Path]:
        """Get custom powergate definitions file."""
        return self._paths.powergates_file

    @powergates_file.setter
    def powergates_file(self, value: Optional[Path]) -> None:
        self._paths.powergates_file = value

    # === SPAWN WEIGHTS (DELEGATED) ===

    def hybrid_weights(self) -> Dict[str, HybridWeights]:
        """Weight pairs for every spawn category."""
        return self._spawn_weights.hybrid_weights()

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    @property
    def log_file_absolute_path(self) -> Path:
        """Get absolute path to log file."""
        return self._logging.log_file_absolute_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

    # === UTILITY METHODS ===

    def clear(self) -> None:
        """Remove every stored value of this profile."""
        self.settings.remove("")
        self.settings.sync()

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()

    def sync(self) -> None:
        """Force synchronization of settings to storage."""
        self.settings.sync()
