"""
Spawn tables and weighted selection.
"""

from .weighted import (
    RandomSource,
    WeightedEntry,
    WeightedTable,
    effective_weight,
    total_weight,
    weighted_pick,
)
from .tables import (
    CAVE_TILES,
    ENCOUNTERS,
    HYBRID_WEIGHTS,
    OFF_TIER_MONSTER_DIVISOR,
    OVERWORLD_TILES,
    QUEST_POOL,
    SHOP_STOCK,
    SPAWN_CATEGORIES,
    HybridWeights,
    build_hybrid_table,
    build_loot_by_terrain,
    build_monsters_by_terrain,
)
from .picker import DANGLING_ITEM_GOLD, FALLBACK_LOOT_GOLD, ContentPicker

__all__ = [
    "RandomSource",
    "WeightedEntry",
    "WeightedTable",
    "effective_weight",
    "total_weight",
    "weighted_pick",
    "HybridWeights",
    "HYBRID_WEIGHTS",
    "OFF_TIER_MONSTER_DIVISOR",
    "SPAWN_CATEGORIES",
    "OVERWORLD_TILES",
    "CAVE_TILES",
    "SHOP_STOCK",
    "QUEST_POOL",
    "ENCOUNTERS",
    "build_hybrid_table",
    "build_monsters_by_terrain",
    "build_loot_by_terrain",
    "ContentPicker",
    "FALLBACK_LOOT_GOLD",
    "DANGLING_ITEM_GOLD",
]
