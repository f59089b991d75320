"""
Content merging.

Turns a registry plus an unlock level into a ResolvedContent snapshot: the
merged id -> template dictionaries of every eligible pack and the weighted
spawn tables built from them. A snapshot is a pure function of its inputs,
so it can be cached per unlock level and shared.
"""

import logging
from dataclasses import dataclass, field
from operator import attrgetter
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Sequence

from ..progression.models import Quest
from ..spawning.tables import (
    CAVE_TILES,
    ENCOUNTERS,
    HYBRID_WEIGHTS,
    OVERWORLD_TILES,
    QUEST_POOL,
    SHOP_STOCK,
    ByTerrainTables,
    HybridWeights,
    build_hybrid_table,
    build_loot_by_terrain,
    build_monsters_by_terrain,
)
from ..spawning.weighted import WeightedTable
from .models import ContentPack, ItemMap, MonsterMap, TerrainMap, TreasureMap

if TYPE_CHECKING:
    from .registry import ContentRegistry

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True)
class SpawnTables:
    """Weighted tables for every spawn category of one snapshot."""

    overworld_tiles: WeightedTable = ()
    cave_tiles: WeightedTable = ()
    shop_stock: WeightedTable = ()
    quest_pool: WeightedTable = ()
    monsters_by_tile: ByTerrainTables = field(default_factory=lambda: _EMPTY)
    loot_by_tile: ByTerrainTables = field(default_factory=lambda: _EMPTY)


@dataclass(frozen=True)
class ResolvedContent:
    """Merged, read-only view of all content unlocked at one unlock level."""

    unlock_level: int
    active_tier: int
    tiles: TerrainMap = field(default_factory=lambda: _EMPTY)
    cave_tiles: TerrainMap = field(default_factory=lambda: _EMPTY)
    monsters: MonsterMap = field(default_factory=lambda: _EMPTY)
    items: ItemMap = field(default_factory=lambda: _EMPTY)
    treasures: TreasureMap = field(default_factory=lambda: _EMPTY)
    quests: Mapping[str, Quest] = field(default_factory=lambda: _EMPTY)
    spawn: SpawnTables = field(default_factory=SpawnTables)


def _merge_category(packs: Sequence[Any], category: str) -> Mapping[str, Any]:
    """Merge one category of every pack into an id-keyed read-only dict.

    Packs are visited in registry order, so on an id collision the later
    (higher tier) entry wins.
    """
    merged: Dict[str, Any] = {}
    for pack in packs:
        for entry in getattr(pack, category) or ():
            merged[entry.id] = entry
    return MappingProxyType(merged)


def _weights_for(weights: Mapping[str, HybridWeights], category: str) -> HybridWeights:
    return weights.get(category) or HYBRID_WEIGHTS[category]


def build_resolved_content(
    registry: "ContentRegistry",
    unlock_level: int,
    weights: Optional[Mapping[str, HybridWeights]] = None,
) -> ResolvedContent:
    """Merge all packs unlocked at ``unlock_level`` and build their spawn tables.

    Args:
        registry: Content registry
        unlock_level: Player's powergate progress
        weights: Per-category hybrid weights; missing categories use HYBRID_WEIGHTS

    Returns:
        Fresh ResolvedContent snapshot. If no pack is eligible every
        dictionary and table is empty.
    """
    weights = weights or HYBRID_WEIGHTS
    active_tier = registry.resolve_active_tier(unlock_level)
    packs: Sequence[ContentPack] = registry.eligible_packs(unlock_level)

    tiles = _merge_category(packs, "tiles")
    cave_tiles = _merge_category(packs, "cave_tiles")
    monsters = _merge_category(packs, "monsters")
    items = _merge_category(packs, "items")
    treasures = _merge_category(packs, "treasures")

    gates = registry.eligible_powergates(unlock_level)
    active_gate = max((g.gate for g in gates), default=0)
    quests = _merge_category(gates, "quests")

    spawn = SpawnTables(
        overworld_tiles=build_hybrid_table(
            packs, active_tier, attrgetter("tiles"), _weights_for(weights, OVERWORLD_TILES)
        ),
        cave_tiles=build_hybrid_table(
            packs, active_tier, attrgetter("cave_tiles"), _weights_for(weights, CAVE_TILES)
        ),
        shop_stock=build_hybrid_table(
            packs, active_tier, attrgetter("items"), _weights_for(weights, SHOP_STOCK)
        ),
        quest_pool=build_hybrid_table(
            gates, active_gate, attrgetter("quests"), _weights_for(weights, QUEST_POOL)
        ),
        monsters_by_tile=MappingProxyType(
            dict(build_monsters_by_terrain(monsters, active_tier, _weights_for(weights, ENCOUNTERS)))
        ),
        loot_by_tile=MappingProxyType(dict(build_loot_by_terrain(packs, active_tier))),
    )

    logger.debug(
        f"Resolved content for unlock level {unlock_level}: active tier {active_tier}, "
        f"{len(packs)} pack(s), {len(tiles)} tiles, {len(cave_tiles)} cave tiles, "
        f"{len(monsters)} monsters, {len(items)} items, {len(treasures)} treasures, "
        f"{len(quests)} quests"
    )

    return ResolvedContent(
        unlock_level=unlock_level,
        active_tier=active_tier,
        tiles=tiles,
        cave_tiles=cave_tiles,
        monsters=monsters,
        items=items,
        treasures=treasures,
        quests=quests,
        spawn=spawn,
    )
