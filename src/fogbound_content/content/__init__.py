"""
Content packs: data models, loading, the registry and resolved snapshots.
"""

from .models import (
    CombatEffect,
    ConsumableItem,
    ContentPack,
    GearItem,
    GoldLoot,
    GoldTreasure,
    ItemLoot,
    ItemSlot,
    ItemTemplate,
    ItemTreasure,
    LootResult,
    MonsterInstance,
    MonsterTemplate,
    TerrainTile,
    TreasureTemplate,
)
from .types import ConfigError, ContentLoadError, ValidationResult
from .loaders import ContentPackLoader
from .validation import RegistryValidator
from .registry import ContentRegistry
from .merger import ResolvedContent, SpawnTables, build_resolved_content
from .service import ContentService

__all__ = [
    "CombatEffect",
    "ConsumableItem",
    "ContentPack",
    "GearItem",
    "GoldLoot",
    "GoldTreasure",
    "ItemLoot",
    "ItemSlot",
    "ItemTemplate",
    "ItemTreasure",
    "LootResult",
    "MonsterInstance",
    "MonsterTemplate",
    "TerrainTile",
    "TreasureTemplate",
    "ConfigError",
    "ContentLoadError",
    "ValidationResult",
    "ContentPackLoader",
    "RegistryValidator",
    "ContentRegistry",
    "ResolvedContent",
    "SpawnTables",
    "build_resolved_content",
    "ContentService",
]
