"""
Data models for powergate progression.

A powergate is the quest chain that unlocks the next content tier. These
models hold the quest definitions only; tracking progress against
objectives belongs to the game's quest system.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class QuestObjective:
    """What the player must do, e.g. ``KILL_COUNT`` 3 times in ``OVERWORLD``."""

    type: str
    count: int = 1
    zone: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestObjective":
        return cls(
            type=str(data["type"]),
            count=int(data.get("count", 1)),
            zone=data.get("zone"),
            source=data.get("source"),
        )


@dataclass(frozen=True)
class QuestReward:
    """Gold and/or a feature unlock (e.g. ``TENT``) granted on completion."""

    gold: int = 0
    unlock: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "QuestReward":
        return cls(gold=int(data.get("gold", 0)), unlock=data.get("unlock"))


@dataclass(frozen=True)
class Quest:
    """A single quest offered by a powergate's quest giver."""

    id: str
    title: str
    objective: QuestObjective
    reward: QuestReward = QuestReward()
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Quest":
        """Create Quest from powergate JSON.

        Raises:
            KeyError: If ``id`` or ``objective.type`` is missing
        """
        return cls(
            id=str(data["id"]),
            title=str(data.get("title", data["id"])),
            objective=QuestObjective.from_dict(data["objective"]),
            reward=QuestReward.from_dict(data.get("reward") or {}),
            description=str(data.get("description", "")),
        )


@dataclass(frozen=True)
class Powergate:
    """Quest chain guarding one unlock level."""

    gate: int
    name: str
    quest_giver: str = ""
    quest_intro: str = ""
    quests: Tuple[Quest, ...] = ()

    @property
    def tier(self) -> int:
        """Alias of ``gate`` so powergates can feed the hybrid table builder."""
        return self.gate

    @property
    def quest_ids(self) -> Tuple[str, ...]:
        return tuple(quest.id for quest in self.quests)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Powergate":
        """Create Powergate from JSON.

        Raises:
            KeyError: If ``gate`` is missing or a quest is malformed
        """
        return cls(
            gate=int(data["gate"]),
            name=str(data.get("name", f"Powergate {data['gate']}")),
            quest_giver=str(data.get("questGiver", "")),
            quest_intro=str(data.get("questIntro", "")),
            quests=tuple(Quest.from_dict(q) for q in data.get("quests") or []),
        )
