"""
Powergate progression rules.

Decides when a player's unlock level advances and which gate's content a
world cell belongs to, based on its distance from the world origin.
"""

import logging
from typing import TYPE_CHECKING, Iterable

from ..spawning.weighted import RandomSource
from .models import Powergate

if TYPE_CHECKING:
    from ..content.registry import ContentRegistry

logger = logging.getLogger(__name__)

SAFE_RADIUS = 1
"""Cells within this Manhattan distance of the origin always use gate 0."""

DISTANCE_PER_GATE = 2

DROP_BAND_CHANCE = 0.30
"""Chance that a cell beyond the safe radius uses the previous gate's content."""


def is_gate_cleared(powergate: Powergate, completed_quest_ids: Iterable[str]) -> bool:
    """Check whether every quest of a powergate has been completed.

    A gate without quests is never cleared, so it cannot be skipped.
    """
    if not powergate.quests:
        return False
    completed = set(completed_quest_ids)
    return all(quest_id in completed for quest_id in powergate.quest_ids)


def next_unlock_level(
    registry: "ContentRegistry", unlock_level: int, completed_quest_ids: Iterable[str]
) -> int:
    """Compute the unlock level after the player's completed quests are counted.

    Args:
        registry: Content registry holding the powergate definitions
        unlock_level: Current unlock level
        completed_quest_ids: Ids of every quest the player has completed

    Returns:
        ``unlock_level + 1`` if the current gate is cleared and the next gate
        is defined, otherwise ``unlock_level`` unchanged
    """
    current = registry.get_powergate(unlock_level)
    if current is None:
        return unlock_level

    if not is_gate_cleared(current, completed_quest_ids):
        return unlock_level

    if registry.get_powergate(unlock_level + 1) is None:
        logger.debug(f"Powergate {unlock_level} cleared, no further gate defined")
        return unlock_level

    logger.info(f"Powergate {current.gate} ({current.name}) cleared, unlock level -> {unlock_level + 1}")
    return unlock_level + 1


def pick_gate_by_distance(
    tile_x: int, tile_y: int, max_unlocked_gate: int, rng: RandomSource
) -> int:
    """Choose which gate's content a world cell uses.

    Cells close to the origin are always gate 0. Further out, every
    DISTANCE_PER_GATE steps of Manhattan distance move one gate up, capped
    at ``max_unlocked_gate``; with DROP_BAND_CHANCE the previous gate is used
    instead so older content keeps appearing at the frontier.
    """
    distance = abs(tile_x) + abs(tile_y)
    if distance <= SAFE_RADIUS:
        return 0

    band = max(0, min(distance // DISTANCE_PER_GATE, max_unlocked_gate))
    if band > 0 and rng() < DROP_BAND_CHANCE:
        return band - 1
    return band
