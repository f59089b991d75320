"""Shared fixtures for fogbound-content tests."""

import itertools
from typing import Any, Callable, Dict, Iterable, List

import pytest


def scripted(values: Iterable[float]) -> Callable[[], float]:
    """Random source that replays ``values`` forever."""
    return itertools.cycle(list(values)).__next__


def pack_dict(tier: int, min_powergate: int, **categories: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Build raw pack JSON; category keyword names use the JSON spelling."""
    data: Dict[str, Any] = {"tier": tier, "minPowergate": min_powergate, "name": f"Tier {tier}"}
    data.update(categories)
    return data


@pytest.fixture
def rng_script() -> Callable[[Iterable[float]], Callable[[], float]]:
    return scripted


@pytest.fixture
def scenario_packs() -> List[Any]:
    """Two-tier registry: plains/blocked at tier 0, marsh at tier 1."""
    from fogbound_content.content.models import ContentPack

    tier0 = pack_dict(
        0,
        0,
        tiles=[
            {"id": "plains", "name": "Plains", "walkable": True, "encounterChance": 0.05},
            {"id": "blocked", "name": "Blocked", "walkable": False},
        ],
        caveTiles=[{"id": "cave_stone", "name": "Cave Stone", "encounterChance": 0.2}],
        monsters=[
            {"id": "rat", "name": "Rat", "tier": 0, "maxHp": 6, "tileIds": ["plains"]},
            {"id": "old-wolf", "name": "Old Wolf", "tier": 3, "maxHp": 12, "tileIds": ["plains"]},
        ],
        items=[
            {"id": "stick", "name": "Stick", "type": "gear", "slot": "weapon", "cost": 5, "powMod": 1},
            {"id": "herb", "name": "Herb", "type": "consumable", "cost": 3, "healAmount": 4},
        ],
        treasures=[
            {"id": "t0-gold", "type": "gold", "min": 1, "max": 3, "weight": 10, "tileIds": ["plains"]},
            {"id": "t0-herb", "type": "item", "itemId": "herb", "weight": 5, "tileIds": ["plains"]},
        ],
    )
    tier1 = pack_dict(
        1,
        1,
        tiles=[{"id": "marsh", "name": "Marsh", "encounterChance": 0.1}],
        monsters=[
            {"id": "bog-beast", "name": "Bog Beast", "tier": 1, "maxHp": 20, "tileIds": ["marsh", "plains"]},
        ],
        items=[{"id": "cleaver", "name": "Cleaver", "type": "gear", "slot": "weapon", "cost": 41}],
        treasures=[
            {"id": "t1-gold", "type": "gold", "min": 5, "max": 5, "weight": 1, "tileIds": ["marsh", "plains"]},
        ],
    )
    return [ContentPack.from_dict(tier0), ContentPack.from_dict(tier1)]


@pytest.fixture
def scenario_registry(scenario_packs: List[Any]) -> Any:
    from fogbound_content.content.registry import ContentRegistry

    return ContentRegistry(scenario_packs)


@pytest.fixture(scope="session")
def builtin_registry() -> Any:
    from fogbound_content.content.registry import ContentRegistry

    return ContentRegistry.builtin()


@pytest.fixture
def make_pack() -> Callable[..., Any]:
    """Factory building a ContentPack from JSON-style keyword arguments."""
    from fogbound_content.content.models import ContentPack

    def factory(tier: int, min_powergate: int, **categories: List[Dict[str, Any]]) -> Any:
        return ContentPack.from_dict(pack_dict(tier, min_powergate, **categories))

    return factory
