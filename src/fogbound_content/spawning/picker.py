"""
Content pick facade.

Typed accessors the world generator, encounter system and shop/loot UI call
to answer "what spawns here". Every pick is total: an empty table, an
unknown id or a dangling reference yields None (or, for loot, a guaranteed
small gold reward) instead of an exception.
"""

import logging
import math
import random
from typing import TYPE_CHECKING, List, Optional

from ..content.models import (
    GoldLoot,
    GoldTreasure,
    ItemLoot,
    ItemTemplate,
    ItemTreasure,
    LootResult,
    MonsterInstance,
    TerrainTile,
)
from .weighted import RandomSource, weighted_pick

if TYPE_CHECKING:
    from ..content.merger import ResolvedContent

logger = logging.getLogger(__name__)

FALLBACK_LOOT_GOLD = 1
"""Gold awarded when a terrain has no usable loot table."""

DANGLING_ITEM_GOLD = 2
"""Gold awarded when an item treasure names an item that does not exist."""

DEFAULT_SHOP_SLOTS = 4


def roll_gold(treasure: GoldTreasure, rng: RandomSource) -> int:
    """Uniform integer in [min, max] inclusive."""
    low, high = min(treasure.min, treasure.max), max(treasure.min, treasure.max)
    return math.floor(rng() * (high - low + 1)) + low


class ContentPicker:
    """Pick facade bound to one ResolvedContent snapshot.

    The random source is a constructor dependency (``random.random`` by
    default); every method also accepts a per-call ``rng`` override.
    """

    def __init__(self, content: "ResolvedContent", rng: Optional[RandomSource] = None):
        """Initialize the picker.

        Args:
            content: Snapshot to pick from
            rng: Uniform [0, 1) random source (``random.random`` if None)
        """
        self.content = content
        self.rng: RandomSource = rng or random.random

    def _rng(self, rng: Optional[RandomSource]) -> RandomSource:
        return rng or self.rng

    # === TERRAIN ===

    def pick_overworld_terrain(self, rng: Optional[RandomSource] = None) -> Optional[str]:
        """Terrain id for one overworld cell, or None if no terrain is unlocked."""
        return weighted_pick(self.content.spawn.overworld_tiles, self._rng(rng))

    def pick_cave_terrain(self, rng: Optional[RandomSource] = None) -> Optional[str]:
        """Terrain id for one cave cell, or None if no cave terrain is unlocked."""
        return weighted_pick(self.content.spawn.cave_tiles, self._rng(rng))

    def resolve_terrain_by_id(self, terrain_id: Optional[str]) -> Optional[TerrainTile]:
        """Look up terrain in overworld tiles first, then cave tiles."""
        if terrain_id is None:
            return None
        return self.content.tiles.get(terrain_id) or self.content.cave_tiles.get(terrain_id)

    # === MONSTERS ===

    def pick_monster_for_terrain(
        self, terrain_id: str, rng: Optional[RandomSource] = None
    ) -> Optional[MonsterInstance]:
        """Spawn a monster that lives on ``terrain_id``.

        Returns:
            A fresh instance at full hp, or None when nothing can spawn there
            (no table, nothing selected, or the selected id is unknown)
        """
        table = self.content.spawn.monsters_by_tile.get(terrain_id, ())
        monster_id = weighted_pick(table, self._rng(rng))
        if monster_id is None:
            return None

        template = self.content.monsters.get(monster_id)
        if template is None:
            logger.debug(f"Encounter table for '{terrain_id}' names unknown monster '{monster_id}'")
            return None
        return template.spawn()

    def roll_encounter(
        self, terrain_id: str, rng: Optional[RandomSource] = None
    ) -> Optional[MonsterInstance]:
        """Roll the terrain's encounter chance and spawn a monster on success.

        Unknown terrain never produces an encounter.
        """
        rng = self._rng(rng)
        terrain = self.resolve_terrain_by_id(terrain_id)
        if terrain is None or terrain.encounter_chance <= 0:
            return None
        if rng() >= terrain.encounter_chance:
            return None
        return self.pick_monster_for_terrain(terrain_id, rng)

    # === LOOT ===

    def pick_loot_for_terrain(
        self, terrain_id: str, rng: Optional[RandomSource] = None
    ) -> LootResult:
        """Roll ground loot for a treasure cell on ``terrain_id``.

        Never returns None. Missing tables, empty tables and unknown treasure
        ids give FALLBACK_LOOT_GOLD; an item treasure whose item does not
        exist gives DANGLING_ITEM_GOLD.
        """
        rng = self._rng(rng)
        table = self.content.spawn.loot_by_tile.get(terrain_id)
        if not table:
            logger.debug(f"No loot table for terrain '{terrain_id}', using fallback gold")
            return GoldLoot(amount=FALLBACK_LOOT_GOLD)

        treasure_id = weighted_pick(table, rng)
        treasure = self.content.treasures.get(treasure_id) if treasure_id else None
        if treasure is None:
            logger.debug(f"Loot table for '{terrain_id}' names unknown treasure '{treasure_id}'")
            return GoldLoot(amount=FALLBACK_LOOT_GOLD)

        if isinstance(treasure, GoldTreasure):
            return GoldLoot(amount=roll_gold(treasure, rng))

        if isinstance(treasure, ItemTreasure):
            item = self.content.items.get(treasure.item_id)
            if item is None:
                logger.debug(
                    f"Treasure '{treasure.id}' references missing item '{treasure.item_id}'"
                )
                return GoldLoot(amount=DANGLING_ITEM_GOLD)
            return ItemLoot(item=item)

        return GoldLoot(amount=FALLBACK_LOOT_GOLD)

    # === SHOP / ITEMS ===

    def pick_shop_item_id(self, rng: Optional[RandomSource] = None) -> Optional[str]:
        """Item id for one shop slot, or None if no items are unlocked."""
        return weighted_pick(self.content.spawn.shop_stock, self._rng(rng))

    def pick_shop_stock(
        self, count: int = DEFAULT_SHOP_SLOTS, rng: Optional[RandomSource] = None
    ) -> List[ItemTemplate]:
        """Roll a rotating shop stock of up to ``count`` items.

        Each slot is an independent pick, so duplicates are possible; picks
        that cannot be resolved to a template leave their slot empty.
        """
        rng = self._rng(rng)
        stock: List[ItemTemplate] = []
        for _ in range(max(0, count)):
            item = self.resolve_item_by_id(self.pick_shop_item_id(rng))
            if item is not None:
                stock.append(item)
        return stock

    def resolve_item_by_id(self, item_id: Optional[str]) -> Optional[ItemTemplate]:
        """Return the item template for ``item_id``, or None."""
        if item_id is None:
            return None
        return self.content.items.get(item_id)

    # === QUESTS ===

    def pick_quest_id(self, rng: Optional[RandomSource] = None) -> Optional[str]:
        """Quest id from the blended quest pool, or None if no quests are unlocked."""
        return weighted_pick(self.content.spawn.quest_pool, self._rng(rng))


# Function-style facade for callers that do not keep a picker around


def pick_overworld_terrain(content: "ResolvedContent", rng: RandomSource = random.random) -> Optional[str]:
    return ContentPicker(content, rng).pick_overworld_terrain()


def pick_cave_terrain(content: "ResolvedContent", rng: RandomSource = random.random) -> Optional[str]:
    return ContentPicker(content, rng).pick_cave_terrain()


def pick_monster_for_terrain(
    content: "ResolvedContent", terrain_id: str, rng: RandomSource = random.random
) -> Optional[MonsterInstance]:
    return ContentPicker(content, rng).pick_monster_for_terrain(terrain_id)


def pick_loot_for_terrain(
    content: "ResolvedContent", terrain_id: str, rng: RandomSource = random.random
) -> LootResult:
    return ContentPicker(content, rng).pick_loot_for_terrain(terrain_id)


def pick_shop_item_id(content: "ResolvedContent", rng: RandomSource = random.random) -> Optional[str]:
    return ContentPicker(content, rng).pick_shop_item_id()


def pick_quest_id(content: "ResolvedContent", rng: RandomSource = random.random) -> Optional[str]:
    return ContentPicker(content, rng).pick_quest_id()


def resolve_terrain_by_id(content: "ResolvedContent", terrain_id: Optional[str]) -> Optional[TerrainTile]:
    return ContentPicker(content).resolve_terrain_by_id(terrain_id)


def resolve_item_by_id(content: "ResolvedContent", item_id: Optional[str]) -> Optional[ItemTemplate]:
    return ContentPicker(content).resolve_item_by_id(item_id)
