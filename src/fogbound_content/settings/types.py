"""
Configuration type definitions for fogbound-content.

ConfigError and ValidationResult are shared with the content registry and
re-exported here so settings code can import everything from one place.
"""

from enum import Enum

from ..content.types import ConfigError, ValidationResult


class ConfigVersion(Enum):
    """Configuration version for migration support."""
    V1_0 = "1.0"
    CURRENT = V1_0


__all__ = ["ConfigVersion", "ConfigError", "ValidationResult"]
