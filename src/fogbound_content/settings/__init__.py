"""
Settings package for fogbound-content.

Configuration is stored with Qt's QSettings for cross-platform storage.
Importing this package requires PySide6; the content core does not.

Usage:
    from fogbound_content.settings import AppSettings

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .paths import PathSettings
from .spawning import SpawnWeightSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "PathSettings",
    "SpawnWeightSettings",
    "LoggingSettings",
]
