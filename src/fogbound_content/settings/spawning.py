"""
Spawn weight settings for fogbound-content.

Stores a latest/previous weight pair per spawn category, e.g.
``spawning/shop_stock/latest``. Unset values fall back to HYBRID_WEIGHTS.
"""

import logging
from typing import Dict, TYPE_CHECKING, cast

from ..spawning.tables import HYBRID_WEIGHTS, SPAWN_CATEGORIES, HybridWeights

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)


class SpawnWeightSettings:
    """Manages per-category hybrid spawn weights."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_float(self, key: str, default: float = 0.0) -> float:
        """Type-safe float retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            if value is None:
                return default
            return float(cast(str | float, value))
        except (ValueError, TypeError):
            return default

    def _check_category(self, category: str) -> None:
        if category not in SPAWN_CATEGORIES:
            raise KeyError(f"Unknown spawn category: {category}")

    def get_weights(self, category: str) -> HybridWeights:
        """Get the weight pair for one category.

        Raises:
            KeyError: If the category is unknown
        """
        self._check_category(category)
        default = HYBRID_WEIGHTS[category]
        return HybridWeights(
            latest=max(0.0, self._get_float(f"spawning/{category}/latest", default.latest)),
            previous=max(0.0, self._get_float(f"spawning/{category}/previous", default.previous)),
        )

    def set_weights(self, category: str, latest: float, previous: float) -> None:
        """Store the weight pair for one category; negative values are clamped to 0.

        Raises:
            KeyError: If the category is unknown
        """
        self._check_category(category)
        if latest < 0 or previous < 0:
            logger.warning(
                f"Negative spawn weight for {category} ({latest}/{previous}), clamping to 0"
            )
        self.settings.setValue(f"spawning/{category}/latest", max(0.0, float(latest)))
        self.settings.setValue(f"spawning/{category}/previous", max(0.0, float(previous)))
        self.settings.sync()

    def reset_category(self, category: str) -> None:
        """Drop stored weights for one category so defaults apply again."""
        self._check_category(category)
        self.settings.remove(f"spawning/{category}")
        self.settings.sync()

    def hybrid_weights(self) -> Dict[str, HybridWeights]:
        """Weight pairs for every spawn category."""
        return {category: self.get_weights(category) for category in SPAWN_CATEGORIES}
