"""
Content registry validation.

Errors are problems that break tier resolution (duplicate tiers, unlock
thresholds that go down as tiers go up). Everything else the pick facade
already tolerates at runtime (duplicate ids, dangling item references,
weights that count as zero) is reported as a warning only.
"""

import logging
from collections import Counter
from typing import TYPE_CHECKING, List, Sequence, Set

from ..spawning.weighted import effective_weight
from .models import ContentPack, ItemTreasure
from .types import ValidationResult

if TYPE_CHECKING:
    from ..progression.models import Powergate

logger = logging.getLogger(__name__)

_CATEGORIES = ("tiles", "cave_tiles", "monsters", "items", "treasures")


class RegistryValidator:
    """Validates a set of content packs and powergates."""

    def __init__(self, packs: Sequence[ContentPack], powergates: Sequence["Powergate"] = ()):
        self.packs = sorted(packs, key=lambda p: p.tier)
        self.powergates = list(powergates)

    def validate(self) -> ValidationResult:
        """Validate the registry contents."""
        errors: List[str] = []
        warnings: List[str] = []

        self._check_tiers(errors, warnings)
        self._check_duplicate_ids(warnings)
        self._check_references(warnings)
        self._check_weights(warnings)
        self._check_powergates(errors, warnings)

        return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)

    def _check_tiers(self, errors: List[str], warnings: List[str]) -> None:
        if not self.packs:
            warnings.append("No content packs defined")
            return

        tier_counts = Counter(p.tier for p in self.packs)
        for tier, count in sorted(tier_counts.items()):
            if count > 1:
                errors.append(f"Tier {tier} is defined by {count} packs")

        for pack in self.packs:
            if pack.tier < 0 or pack.min_powergate < 0:
                errors.append(
                    f"Pack '{pack.name}' has negative tier/minPowergate "
                    f"({pack.tier}/{pack.min_powergate})"
                )

        for lower, higher in zip(self.packs, self.packs[1:]):
            if higher.min_powergate < lower.min_powergate:
                errors.append(
                    f"Tier {higher.tier} unlocks at powergate {higher.min_powergate}, "
                    f"before tier {lower.tier} (powergate {lower.min_powergate})"
                )

        if not any(p.min_powergate == 0 for p in self.packs):
            warnings.append("No pack is available at powergate 0; new games start with no content")

    def _check_duplicate_ids(self, warnings: List[str]) -> None:
        for category in _CATEGORIES:
            counts = Counter(
                entry.id for pack in self.packs for entry in getattr(pack, category)
            )
            for entry_id, count in sorted(counts.items()):
                if count > 1:
                    warnings.append(
                        f"Duplicate {category} id '{entry_id}' ({count} definitions, latest tier wins)"
                    )

    def _check_references(self, warnings: List[str]) -> None:
        known_terrain: Set[str] = set()
        for pack in self.packs:
            known_terrain.update(t.id for t in pack.tiles)
            known_terrain.update(t.id for t in pack.cave_tiles)

        available_items: Set[str] = set()
        for pack in self.packs:
            # Items from this tier and every lower tier are merged when the pack is active
            available_items.update(i.id for i in pack.items)

            for monster in pack.monsters:
                for tile_id in monster.tile_ids:
                    if tile_id not in known_terrain:
                        warnings.append(
                            f"Monster '{monster.id}' (tier {pack.tier}) spawns on unknown terrain '{tile_id}'"
                        )

            for treasure in pack.treasures:
                if isinstance(treasure, ItemTreasure) and treasure.item_id not in available_items:
                    warnings.append(
                        f"Treasure '{treasure.id}' (tier {pack.tier}) references unavailable item "
                        f"'{treasure.item_id}'"
                    )
                for tile_id in treasure.tile_ids:
                    if tile_id not in known_terrain:
                        warnings.append(
                            f"Treasure '{treasure.id}' (tier {pack.tier}) drops on unknown terrain '{tile_id}'"
                        )

    def _check_weights(self, warnings: List[str]) -> None:
        for pack in self.packs:
            for treasure in pack.treasures:
                if effective_weight(treasure.weight) <= 0:
                    warnings.append(
                        f"Treasure '{treasure.id}' (tier {pack.tier}) has weight {treasure.weight!r} "
                        f"and will never be selected"
                    )

    def _check_powergates(self, errors: List[str], warnings: List[str]) -> None:
        gate_counts = Counter(g.gate for g in self.powergates)
        for gate, count in sorted(gate_counts.items()):
            if count > 1:
                errors.append(f"Powergate {gate} is defined {count} times")

        quest_counts = Counter(q.id for g in self.powergates for q in g.quests)
        for quest_id, count in sorted(quest_counts.items()):
            if count > 1:
                warnings.append(f"Duplicate quest id '{quest_id}' ({count} definitions)")
