"""
Content pack registry.

The registry is the process-wide, read-only configuration of the content
system: every content pack (ordered by tier) and every powergate quest
chain. It is validated once when constructed and never mutated afterwards,
so it can be shared freely and passed explicitly to the content merger.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

from ..progression.models import Powergate
from .loaders import ContentPackLoader
from .models import ContentPack
from .types import ConfigError, ValidationResult
from .validation import RegistryValidator


class ContentRegistry:
    """Immutable, validated collection of content packs and powergates.

    Packs are stored in ascending tier order; that order is the "registry
    order" used whenever packs are merged.
    """

    def __init__(self, packs: Iterable[ContentPack], powergates: Iterable[Powergate] = ()):
        """Build and validate the registry.

        Args:
            packs: Content packs in any order
            powergates: Powergate quest chains in any order

        Raises:
            ConfigError: If the packs break tier resolution (duplicate tiers,
                unlock thresholds decreasing as tiers increase)
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._packs: Tuple[ContentPack, ...] = tuple(sorted(packs, key=lambda p: p.tier))
        self._powergates: Tuple[Powergate, ...] = tuple(sorted(powergates, key=lambda g: g.gate))

        result = self.validate()
        for warning in result.warnings:
            self.logger.warning(f"Content registry: {warning}")
        if not result.is_valid:
            error_msg = "\n  - ".join(result.errors)
            raise ConfigError(f"Invalid content registry:\n  - {error_msg}")

        self.logger.info(
            f"Content registry ready: {len(self._packs)} pack(s), "
            f"{len(self._powergates)} powergate(s)"
        )

    @classmethod
    def load(
        cls,
        directory: Optional[Path] = None,
        powergates_file: Optional[Path] = None,
        loader: Optional[ContentPackLoader] = None,
    ) -> "ContentRegistry":
        """Load packs and powergates from disk, falling back to built-ins.

        Args:
            directory: Directory of pack JSON files (None -> built-in packs)
            powergates_file: Powergate JSON file (None -> built-in powergates)
            loader: Loader to use (a new one if None)

        Raises:
            ContentLoadError: If a file cannot be read or parsed
            ConfigError: If the loaded packs are invalid
        """
        loader = loader or ContentPackLoader()
        packs = loader.load_directory(directory) if directory else loader.load_builtin_packs()
        powergates = (
            loader.load_powergates_file(powergates_file)
            if powergates_file
            else loader.load_builtin_powergates()
        )
        return cls(packs, powergates)

    @classmethod
    def builtin(cls) -> "ContentRegistry":
        """Registry built from the packs and powergates shipped with the package."""
        return cls.load()

    @property
    def packs(self) -> Tuple[ContentPack, ...]:
        """All packs in ascending tier order."""
        return self._packs

    @property
    def powergates(self) -> Tuple[Powergate, ...]:
        """All powergates in ascending gate order."""
        return self._powergates

    @property
    def max_powergate(self) -> int:
        """Highest unlock threshold any pack requires (0 for an empty registry)."""
        return max((p.min_powergate for p in self._packs), default=0)

    def eligible_packs(self, unlock_level: int) -> Tuple[ContentPack, ...]:
        """Packs whose unlock threshold is met, in registry order."""
        return tuple(p for p in self._packs if p.min_powergate <= unlock_level)

    def resolve_active_tier(self, unlock_level: int) -> int:
        """Highest tier whose unlock threshold is met; 0 if none is."""
        active_tier = 0
        for pack in self._packs:
            if pack.min_powergate <= unlock_level:
                active_tier = max(active_tier, pack.tier)
        return active_tier

    def eligible_powergates(self, unlock_level: int) -> Tuple[Powergate, ...]:
        """Powergates at or below the unlock level, in gate order."""
        return tuple(g for g in self._powergates if g.gate <= unlock_level)

    def get_pack(self, tier: int) -> Optional[ContentPack]:
        """Return the pack for a tier, or None."""
        return next((p for p in self._packs if p.tier == tier), None)

    def get_powergate(self, gate: int) -> Optional[Powergate]:
        """Return the powergate definition for a gate number, or None."""
        return next((g for g in self._powergates if g.gate == gate), None)

    def validate(self) -> ValidationResult:
        """Validate registry contents (see RegistryValidator)."""
        return RegistryValidator(self._packs, self._powergates).validate()
