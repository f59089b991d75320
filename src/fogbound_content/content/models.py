"""
Data models for Fogbound content packs.

Contains the immutable templates a content pack is made of (terrain,
monsters, items, treasures), the runtime monster instance cloned from a
template, and the loot results handed to the loot UI. Models are plain
dataclasses with no file-system or service logic.

Pack JSON uses camelCase field names
(``minPowergate``, ``encounterChance``, ``tileIds``...); every model has a
``from_dict`` constructor that understands that schema.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Tuple, TypeAlias, Union


class ItemSlot(str, Enum):
    """Equipment slot a gear item occupies."""

    WEAPON = "weapon"
    ARMOR = "armor"
    BOOTS = "boots"
    MAGIC = "magic"


class CombatEffect(str, Enum):
    """Effect a consumable has when used during combat."""

    HEAL = "heal"
    AUTO_FLEE = "autoFlee"


# Treasure / item discriminators used in pack JSON
ITEM_TYPE_GEAR = "gear"
ITEM_TYPE_CONSUMABLE = "consumable"
TREASURE_TYPE_GOLD = "gold"
TREASURE_TYPE_ITEM = "item"


def _str_tuple(value: Any) -> Tuple[str, ...]:
    """Convert a JSON list of ids to a tuple of strings (None -> empty)."""
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


def _to_bool(value: Any, default: bool) -> bool:
    """Boolean from JSON; strings such as ``"false"`` are read by their text."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _weight(value: Any) -> float:
    """Treasure weight as declared; anything that is not a real number is 0.0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _to_float(value: Any, default: float = 0.0) -> float:
    """Lenient float conversion; non-numeric values become ``default``."""
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return default if math.isnan(result) else result


# =============================================================================
# Terrain
# =============================================================================


@dataclass(frozen=True)
class TerrainTile:
    """A type of ground cell.

    ``bg``/``border`` are fallback colours for renderers that cannot load
    ``bg_image``. ``encounter_chance`` is the per-step probability of a
    random encounter on this terrain.
    """

    id: str
    name: str
    bg: str = "#555555"
    border: str = "#3a3a3a"
    walkable: bool = True
    encounter_chance: float = 0.0
    bg_image: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TerrainTile":
        """Create TerrainTile from pack JSON.

        Raises:
            KeyError: If the entry has no ``id``
        """
        chance = _to_float(data.get("encounterChance", 0.0))
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            bg=str(data.get("bg", "#555555")),
            border=str(data.get("border", "#3a3a3a")),
            walkable=_to_bool(data.get("walkable"), True),
            encounter_chance=max(0.0, min(1.0, chance)),
            bg_image=data.get("bgImage") or None,
        )


# =============================================================================
# Monsters
# =============================================================================


@dataclass(frozen=True)
class MonsterTemplate:
    """Static definition of a monster.

    ``tier`` is the monster's own difficulty tier; the encounter table
    compares it against the active pack tier. ``tile_ids`` lists the
    terrain ids the monster may spawn on.
    """

    id: str
    name: str
    tier: int = 0
    max_hp: int = 1
    pow: int = 0
    spd: int = 0
    gold_reward: int = 0
    can_flee: bool = True
    emoji: str = ""
    tile_ids: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MonsterTemplate":
        """Create MonsterTemplate from pack JSON."""
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", data["id"])),
            tier=int(data.get("tier", 0)),
            max_hp=int(data.get("maxHp", 1)),
            pow=int(data.get("pow", 0)),
            spd=int(data.get("spd", 0)),
            gold_reward=int(data.get("goldReward", 0)),
            can_flee=_to_bool(data.get("canFlee"), True),
            emoji=str(data.get("emoji", "")),
            tile_ids=_str_tuple(data.get("tileIds")),
        )

    def spawn(self) -> "MonsterInstance":
        """Clone this template into a fresh combat instance at full hp."""
        return MonsterInstance(template=self, hp=self.max_hp)


@dataclass
class MonsterInstance:
    """Runtime monster owned by a single combat encounter.

    Only ``hp`` is mutable; every other stat is read from the template.
    """

    template: MonsterTemplate
    hp: int

    @property
    def id(self) -> str:
        return self.template.id

    @property
    def name(self) -> str:
        return self.template.name

    @property
    def max_hp(self) -> int:
        return self.template.max_hp

    @property
    def pow(self) -> int:
        return self.template.pow

    @property
    def spd(self) -> int:
        return self.template.spd

    @property
    def gold_reward(self) -> int:
        return self.template.gold_reward

    @property
    def can_flee(self) -> bool:
        return self.template.can_flee

    @property
    def tier(self) -> int:
        return self.template.tier

    @property
    def emoji(self) -> str:
        return self.template.emoji

    @property
    def tile_ids(self) -> Tuple[str, ...]:
        return self.template.tile_ids

    @property
    def is_defeated(self) -> bool:
        """True once hp has reached zero."""
        return self.hp <= 0

    def take_damage(self, amount: int) -> int:
        """Apply damage (negative amounts are ignored) and return remaining hp."""
        self.hp = max(0, self.hp - max(0, amount))
        return self.hp


# =============================================================================
# Items (tagged union: gear | consumable)
# =============================================================================


@dataclass(frozen=True)
class BaseItem:
    """Fields shared by every item template."""

    id: str
    name: str
    tier: int = 0
    rarity: str = "common"
    cost: int = 0
    emoji: str = ""

    @property
    def sell_price(self) -> int:
        """Gold the shop pays for this item (half of its cost, rounded down)."""
        return self.cost // 2

    @staticmethod
    def _common_fields(data: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": str(data["id"]),
            "name": str(data.get("name", data["id"])),
            "tier": int(data.get("tier", 0)),
            "rarity": str(data.get("rarity", "common")),
            "cost": int(data.get("cost", 0)),
            "emoji": str(data.get("emoji", "")),
        }


@dataclass(frozen=True)
class GearItem(BaseItem):
    """Equippable item that modifies the wearer's stats."""

    kind: ClassVar[str] = ITEM_TYPE_GEAR

    slot: ItemSlot = ItemSlot.WEAPON
    pow_mod: int = 0
    spd_mod: int = 0
    max_hp_mod: int = 0
    weapon_action: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GearItem":
        """Create GearItem from pack JSON.

        Raises:
            ValueError: If ``slot`` is not a known ItemSlot
        """
        return cls(
            **cls._common_fields(data),
            slot=ItemSlot(data.get("slot", ItemSlot.WEAPON.value)),
            pow_mod=int(data.get("powMod", 0)),
            spd_mod=int(data.get("spdMod", 0)),
            max_hp_mod=int(data.get("maxHpMod", 0)),
            weapon_action=data.get("weaponAction") or None,
        )


@dataclass(frozen=True)
class ConsumableItem(BaseItem):
    """Single-use item, optionally usable during combat."""

    kind: ClassVar[str] = ITEM_TYPE_CONSUMABLE

    usable_in_combat: bool = False
    combat_effect_type: Optional[CombatEffect] = None
    heal_amount: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConsumableItem":
        """Create ConsumableItem from pack JSON."""
        effect = data.get("combatEffectType")
        return cls(
            **cls._common_fields(data),
            usable_in_combat=_to_bool(data.get("usableInCombat"), False),
            combat_effect_type=CombatEffect(effect) if effect else None,
            heal_amount=int(data.get("healAmount", 0)),
        )


ItemTemplate: TypeAlias = Union[GearItem, ConsumableItem]
"""Any item template; dispatch on ``kind`` or isinstance."""


def item_from_dict(data: Dict[str, Any]) -> ItemTemplate:
    """Build the right item variant for a pack JSON entry.

    Raises:
        ValueError: If ``type`` is neither ``gear`` nor ``consumable``
    """
    item_type = data.get("type")
    if item_type == ITEM_TYPE_GEAR:
        return GearItem.from_dict(data)
    if item_type == ITEM_TYPE_CONSUMABLE:
        return ConsumableItem.from_dict(data)
    raise ValueError(f"Unknown item type {item_type!r} for item {data.get('id')!r}")


# =============================================================================
# Treasures (tagged union: gold | item)
# =============================================================================


@dataclass(frozen=True)
class GoldTreasure:
    """Treasure that pays out a uniform random gold amount in [min, max]."""

    kind: ClassVar[str] = TREASURE_TYPE_GOLD

    id: str
    min: int
    max: int
    weight: float = 1.0
    tile_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ItemTreasure:
    """Treasure that awards a specific item template."""

    kind: ClassVar[str] = TREASURE_TYPE_ITEM

    id: str
    item_id: str
    weight: float = 1.0
    tile_ids: Tuple[str, ...] = ()


TreasureTemplate: TypeAlias = Union[GoldTreasure, ItemTreasure]


def treasure_from_dict(data: Dict[str, Any]) -> TreasureTemplate:
    """Build the right treasure variant for a pack JSON entry.

    Gold ranges given in the wrong order are swapped. Weights that are not
    numbers (strings and booleans included) are stored as 0.0 so the
    selector ignores them.

    Raises:
        ValueError: If ``type`` is unknown or an item treasure has no ``itemId``
    """
    treasure_type = data.get("type")
    treasure_id = str(data["id"])
    weight = _weight(data.get("weight", 1.0))
    tile_ids = _str_tuple(data.get("tileIds"))

    if treasure_type == TREASURE_TYPE_GOLD:
        low = int(data.get("min", 1))
        high = int(data.get("max", low))
        if low > high:
            low, high = high, low
        return GoldTreasure(id=treasure_id, min=low, max=high, weight=weight, tile_ids=tile_ids)

    if treasure_type == TREASURE_TYPE_ITEM:
        item_id = data.get("itemId")
        if not item_id:
            raise ValueError(f"Item treasure {treasure_id!r} has no itemId")
        return ItemTreasure(id=treasure_id, item_id=str(item_id), weight=weight, tile_ids=tile_ids)

    raise ValueError(f"Unknown treasure type {treasure_type!r} for treasure {treasure_id!r}")


# =============================================================================
# Content pack
# =============================================================================


@dataclass(frozen=True)
class ContentPack:
    """One powergate tier: an unlock threshold plus its content bundle."""

    tier: int
    min_powergate: int
    name: str
    tiles: Tuple[TerrainTile, ...] = ()
    cave_tiles: Tuple[TerrainTile, ...] = ()
    monsters: Tuple[MonsterTemplate, ...] = ()
    items: Tuple[ItemTemplate, ...] = ()
    treasures: Tuple[TreasureTemplate, ...] = ()

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], skipped: Optional[List[str]] = None
    ) -> "ContentPack":
        """Create ContentPack from pack JSON.

        Args:
            data: Raw pack dict
            skipped: If given, malformed category entries are skipped and a
                description of each is appended here. If None, the first
                malformed entry raises.

        Returns:
            ContentPack instance

        Raises:
            KeyError: If ``tier`` is missing (always), or an entry is malformed
                and ``skipped`` is None
            ValueError: On malformed entries when ``skipped`` is None
        """
        tier = int(data["tier"])

        def parse(category: str, parser: Any) -> Tuple[Any, ...]:
            parsed: List[Any] = []
            for raw in data.get(category) or []:
                try:
                    parsed.append(parser(raw))
                except (KeyError, ValueError, TypeError, AttributeError) as e:
                    if skipped is None:
                        raise
                    entry_id = raw.get("id") if isinstance(raw, dict) else None
                    skipped.append(f"tier {tier} {category} entry {entry_id!r}: {e!r}")
            return tuple(parsed)

        return cls(
            tier=tier,
            min_powergate=int(data.get("minPowergate", 0)),
            name=str(data.get("name", f"Tier {tier}")),
            tiles=parse("tiles", TerrainTile.from_dict),
            cave_tiles=parse("caveTiles", TerrainTile.from_dict),
            monsters=parse("monsters", MonsterTemplate.from_dict),
            items=parse("items", item_from_dict),
            treasures=parse("treasures", treasure_from_dict),
        )


# =============================================================================
# Loot results (tagged union: gold | item)
# =============================================================================


@dataclass(frozen=True)
class GoldLoot:
    """Loot outcome: an amount of gold."""

    kind: ClassVar[str] = TREASURE_TYPE_GOLD

    amount: int


@dataclass(frozen=True)
class ItemLoot:
    """Loot outcome: a resolved item template."""

    kind: ClassVar[str] = TREASURE_TYPE_ITEM

    item: ItemTemplate


LootResult: TypeAlias = Union[GoldLoot, ItemLoot]


# Type aliases for merged dictionaries
TerrainMap: TypeAlias = Mapping[str, TerrainTile]
MonsterMap: TypeAlias = Mapping[str, MonsterTemplate]
ItemMap: TypeAlias = Mapping[str, ItemTemplate]
TreasureMap: TypeAlias = Mapping[str, TreasureTemplate]
