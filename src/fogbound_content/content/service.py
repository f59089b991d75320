"""
Content service.

Owns the content registry and caches one ResolvedContent snapshot per
unlock level, so the world generator and shop can ask for content
repeatedly without rebuilding spawn tables.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional

from ..progression.gates import pick_gate_by_distance
from ..spawning.picker import ContentPicker
from ..spawning.tables import HYBRID_WEIGHTS, HybridWeights
from ..spawning.weighted import RandomSource
from .merger import ResolvedContent, build_resolved_content
from .registry import ContentRegistry

if TYPE_CHECKING:
    from ..settings import AppSettings


class ContentService:
    """Cached access to resolved content by unlock level."""

    def __init__(
        self,
        registry: Optional[ContentRegistry] = None,
        settings: Optional["AppSettings"] = None,
    ):
        """Initialize the service.

        Args:
            registry: Registry to serve; if None it is loaded from the
                settings' content paths, or from the built-in packs
            settings: Application settings (custom paths and spawn weights)

        Raises:
            ContentLoadError: If configured pack files cannot be read
            ConfigError: If the loaded packs are invalid
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings

        if registry is None:
            if settings is not None:
                registry = ContentRegistry.load(
                    directory=settings.content_path,
                    powergates_file=settings.powergates_file,
                )
            else:
                registry = ContentRegistry.builtin()
        self.registry = registry

        self.weights: Mapping[str, HybridWeights] = (
            settings.hybrid_weights() if settings is not None else HYBRID_WEIGHTS
        )
        self._cache: Dict[int, ResolvedContent] = {}
        # Levels past the last threshold all resolve to the same snapshot
        self._max_level = max(
            [self.registry.max_powergate] + [g.gate for g in self.registry.powergates]
        )

        self.logger.debug("ContentService initialized")

    def content_for(self, unlock_level: int) -> ResolvedContent:
        """Resolved content for an unlock level, built on first request.

        Levels above the highest pack or powergate threshold share the
        snapshot of that threshold.
        """
        unlock_level = min(unlock_level, self._max_level)
        content = self._cache.get(unlock_level)
        if content is not None:
            self.logger.debug(f"Content cache hit for unlock level {unlock_level}")
            return content

        content = build_resolved_content(self.registry, unlock_level, self.weights)
        self._cache[unlock_level] = content
        return content

    def picker_for(self, unlock_level: int, rng: Optional[RandomSource] = None) -> ContentPicker:
        """Pick facade over the content of an unlock level."""
        return ContentPicker(self.content_for(unlock_level), rng)

    def content_for_tile(
        self, tile_x: int, tile_y: int, unlock_level: int, rng: RandomSource
    ) -> ResolvedContent:
        """Content for a world cell, chosen by its distance from the origin.

        Args:
            tile_x: Cell x coordinate (origin is the starting town)
            tile_y: Cell y coordinate
            unlock_level: Highest gate the player has unlocked
            rng: Uniform [0, 1) random source

        Returns:
            The resolved content of the gate picked for that distance
        """
        gate = pick_gate_by_distance(tile_x, tile_y, unlock_level, rng)
        return self.content_for(gate)

    def content_by_gate(self, unlock_level: int) -> List[ResolvedContent]:
        """Resolved content for every gate from 0 up to ``unlock_level``."""
        return [self.content_for(gate) for gate in range(max(0, unlock_level) + 1)]

    def clear_cache(self) -> None:
        """Drop every cached snapshot."""
        self._cache.clear()
        self.logger.debug("Content cache cleared")
