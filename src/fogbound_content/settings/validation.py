"""
Settings validation system for fogbound-content.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        content_path = self.settings.content_path
        if content_path:
            if not content_path.is_dir():
                errors.append(f"Content pack directory does not exist: {content_path}")
            elif not any(content_path.glob("*.json")):
                warnings.append(f"Content pack directory has no JSON files: {content_path}")

        powergates_file = self.settings.powergates_file
        if powergates_file and not powergates_file.is_file():
            errors.append(f"Powergate file does not exist: {powergates_file}")

        for category, weights in self.settings.spawn_weights.hybrid_weights().items():
            if weights.latest + weights.previous <= 0:
                warnings.append(
                    f"Spawn weights for '{category}' are both zero; every pick falls back "
                    f"to the first entry"
                )

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)
