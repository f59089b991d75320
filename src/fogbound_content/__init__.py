"""
fogbound-content: tiered content packs and spawn tables for Fogbound.

Resolves which terrain, monsters, items, treasures and quests are available
at a player's powergate unlock level, and picks from them with weighted
randomness.
"""

__version__ = "0.1.0"
__author__ = "Fogbound Contributors"

# Content must be imported first; spawning and progression depend on its models
from .content import (
    ConfigError,
    ContentLoadError,
    ContentPack,
    ContentPackLoader,
    ContentRegistry,
    ContentService,
    GoldLoot,
    ItemLoot,
    MonsterInstance,
    ResolvedContent,
    build_resolved_content,
)
from .spawning import (
    HYBRID_WEIGHTS,
    ContentPicker,
    HybridWeights,
    WeightedEntry,
    weighted_pick,
)
from .progression import Powergate, Quest, next_unlock_level, pick_gate_by_distance
from .utils.logging_config import setup_logging

__all__ = [
    # Registry and services
    'ContentRegistry',
    'ContentService',
    'ContentPackLoader',
    'build_resolved_content',
    'ResolvedContent',

    # Picking
    'ContentPicker',
    'HybridWeights',
    'HYBRID_WEIGHTS',
    'WeightedEntry',
    'weighted_pick',

    # Data models
    'ContentPack',
    'MonsterInstance',
    'GoldLoot',
    'ItemLoot',
    'Powergate',
    'Quest',

    # Progression
    'next_unlock_level',
    'pick_gate_by_distance',

    # Errors
    'ConfigError',
    'ContentLoadError',

    # Logging
    'setup_logging',
]
