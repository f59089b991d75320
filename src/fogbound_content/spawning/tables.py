"""
Spawn table builders.

Builds the weighted tables the pick facade draws from:

- hybrid tables (overworld terrain, cave terrain, shop stock, quest pool)
  that blend the active tier with every earlier tier;
- the monsters-by-terrain table, which discounts off-tier monsters steeply;
- the loot-by-terrain table, which uses only the newest pack that defines
  treasures.

All builders are pure and return fresh immutable tables; nothing is ever
updated in place.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from ..content.models import ContentPack, MonsterTemplate
from .weighted import WeightedEntry, WeightedTable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HybridWeights:
    """Two-way weight split between the active tier and earlier tiers.

    ``latest`` is a flat weight given to every active-tier entry; ``previous``
    is a pool shared evenly by all earlier-tier entries.
    """

    latest: float
    previous: float


# Spawn categories
OVERWORLD_TILES = "overworld_tiles"
CAVE_TILES = "cave_tiles"
SHOP_STOCK = "shop_stock"
QUEST_POOL = "quest_pool"
ENCOUNTERS = "encounters"

SPAWN_CATEGORIES = (OVERWORLD_TILES, CAVE_TILES, SHOP_STOCK, QUEST_POOL, ENCOUNTERS)

HYBRID_WEIGHTS: Mapping[str, HybridWeights] = {
    # Terrain mixes lean towards earlier tiers
    OVERWORLD_TILES: HybridWeights(latest=0.30, previous=0.70),
    CAVE_TILES: HybridWeights(latest=0.50, previous=0.50),
    # Shops and quests lean towards the active tier
    SHOP_STOCK: HybridWeights(latest=0.70, previous=0.30),
    QUEST_POOL: HybridWeights(latest=0.75, previous=0.25),
    # Read by the monster table; off-tier weight is further divided
    ENCOUNTERS: HybridWeights(latest=0.20, previous=0.80),
}

OFF_TIER_MONSTER_DIVISOR = 10
"""Extra discount applied to the ``previous`` weight of off-tier monsters."""

ByTerrainTables = Mapping[str, WeightedTable]
"""terrain id -> weighted table of monster or treasure ids."""


def build_hybrid_table(
    sources: Sequence[Any],
    active_tier: int,
    extractor: Callable[[Any], Optional[Iterable[Any]]],
    weights: HybridWeights,
) -> WeightedTable:
    """Build a table blending the active tier with all earlier tiers.

    Args:
        sources: Eligible tiered sources (content packs or powergates) in
            registry order
        active_tier: Tier whose entries count as "latest"
        extractor: Returns the category entries of a source (None -> empty)
        weights: Latest / previous split for this category

    Returns:
        Latest-tier entries at ``weights.latest`` each, followed by earlier-tier
        entries sharing ``weights.previous`` evenly
    """
    latest_source = next((s for s in sources if s.tier == active_tier), None)
    latest = list(extractor(latest_source) or []) if latest_source is not None else []

    previous: List[Any] = []
    for source in sources:
        if source.tier < active_tier:
            previous.extend(extractor(source) or [])

    previous_weight = weights.previous / max(1, len(previous))

    table = [WeightedEntry(entry.id, weights.latest) for entry in latest]
    table.extend(WeightedEntry(entry.id, previous_weight) for entry in previous)
    return tuple(table)


def build_monsters_by_terrain(
    monsters: Mapping[str, MonsterTemplate],
    active_tier: int,
    weights: HybridWeights = HYBRID_WEIGHTS[ENCOUNTERS],
) -> ByTerrainTables:
    """Map each terrain id to the monsters that may spawn there.

    A monster whose own tier equals the active tier gets ``weights.latest``;
    any other monster gets ``weights.previous / OFF_TIER_MONSTER_DIVISOR``.
    Terrain no monster references gets no table at all.
    """
    latest_weight = weights.latest
    off_tier_weight = weights.previous / OFF_TIER_MONSTER_DIVISOR

    by_terrain: Dict[str, List[WeightedEntry]] = {}
    for monster_id, monster in monsters.items():
        weight = latest_weight if monster.tier == active_tier else off_tier_weight
        for tile_id in monster.tile_ids:
            by_terrain.setdefault(tile_id, []).append(WeightedEntry(monster_id, weight))

    return {tile_id: tuple(entries) for tile_id, entries in by_terrain.items()}


def build_loot_by_terrain(packs: Sequence[ContentPack], active_tier: int) -> ByTerrainTables:
    """Map each terrain id to the treasures that may drop there.

    Only the newest eligible pack (``tier <= active_tier``) that defines any
    treasures is used; older packs' treasures are ignored entirely. Each
    treasure keeps its own declared weight.
    """
    candidates = [p for p in packs if p.tier <= active_tier and p.treasures]
    if not candidates:
        return {}

    pack = max(candidates, key=lambda p: p.tier)
    logger.debug(f"Ground loot for active tier {active_tier} comes from tier {pack.tier}")

    by_terrain: Dict[str, List[WeightedEntry]] = {}
    for treasure in pack.treasures:
        for tile_id in treasure.tile_ids:
            by_terrain.setdefault(tile_id, []).append(WeightedEntry(treasure.id, treasure.weight))

    return {tile_id: tuple(entries) for tile_id, entries in by_terrain.items()}
