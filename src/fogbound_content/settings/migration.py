"""
Settings migration system for fogbound-content.
"""

import logging
from typing import TYPE_CHECKING

from .types import ConfigVersion

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SettingsMigrator:
    """Handles configuration migration between versions."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def ensure_version(self) -> None:
        """Ensure configuration version is set and handle migrations."""
        current_version = str(self.settings.value("app/version", "") or "")

        if not current_version:
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)
            self.settings.setValue("app/first_run", True)
            self.settings.sync()
            logger.info("First run detected, initializing configuration")
        elif current_version != ConfigVersion.CURRENT.value:
            self._migrate_config(current_version, ConfigVersion.CURRENT.value)

    def _migrate_config(self, from_version: str, to_version: str) -> None:
        """Migrate configuration from old version to new version."""
        logger.info(f"Migrating configuration from {from_version} to {to_version}")

        self.settings.setValue("app/version", to_version)
        self.settings.setValue("app/migrated_from", from_version)
        self.settings.sync()
        logger.info(f"Migration from {from_version} to {to_version} completed")

