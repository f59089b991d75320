"""
Powergate progression: quest chains that unlock content tiers.
"""

from .gates import is_gate_cleared, next_unlock_level, pick_gate_by_distance
from .models import Powergate, Quest, QuestObjective, QuestReward

__all__ = [
    "Powergate",
    "Quest",
    "QuestObjective",
    "QuestReward",
    "is_gate_cleared",
    "next_unlock_level",
    "pick_gate_by_distance",
]
