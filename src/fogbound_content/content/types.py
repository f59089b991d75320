"""
Validation result and exceptions shared by content loading and settings.
"""

from dataclasses import dataclass, field
from typing import List


class ConfigError(Exception):
    """Raised when configuration or content packs are invalid or cannot be accessed."""
    pass


class ContentLoadError(ConfigError):
    """Raised when a content pack or powergate file cannot be read or parsed."""
    pass


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
