"""Tests for the content registry, tier resolution and content merging."""

from typing import Any

import pytest


class TestTierResolution:
    """Test active tier resolution."""

    def test_scenario_unlock_level_zero(self, scenario_registry: Any) -> None:
        """Test level 0 resolves tier 0 and merges only tier-0 terrain."""
        from fogbound_content.content.merger import build_resolved_content

        assert scenario_registry.resolve_active_tier(0) == 0

        content = build_resolved_content(scenario_registry, 0)
        assert set(content.tiles) == {"plains", "blocked"}
        assert content.tiles["plains"].walkable is True
        assert content.tiles["plains"].encounter_chance == pytest.approx(0.05)
        assert content.tiles["blocked"].walkable is False

    def test_unlock_level_one(self, scenario_registry: Any) -> None:
        """Test level 1 unlocks the tier-1 pack on top of tier 0."""
        assert scenario_registry.resolve_active_tier(1) == 1
        assert [p.tier for p in scenario_registry.eligible_packs(1)] == [0, 1]
        assert scenario_registry.resolve_active_tier(7) == 1

    def test_monotonic(self, builtin_registry: Any) -> None:
        """Test active tier never decreases as unlock level grows."""
        tiers = [builtin_registry.resolve_active_tier(level) for level in range(0, 10)]
        assert tiers == sorted(tiers)
        assert tiers[0] == 0

    def test_no_qualifying_pack_defaults_to_zero(self, make_pack: Any) -> None:
        """Test tier 0 is returned when no pack is unlocked yet."""
        from fogbound_content.content.registry import ContentRegistry

        registry = ContentRegistry([make_pack(2, 3)])
        assert registry.resolve_active_tier(0) == 0
        assert registry.eligible_packs(0) == ()


class TestRegistryValidation:
    """Test registry validation at construction."""

    def test_duplicate_tiers_raise(self, make_pack: Any) -> None:
        """Test two packs claiming the same tier are rejected."""
        from fogbound_content.content.registry import ContentRegistry
        from fogbound_content.content.types import ConfigError

        with pytest.raises(ConfigError, match="Tier 0"):
            ContentRegistry([make_pack(0, 0), make_pack(0, 0)])

    def test_decreasing_thresholds_raise(self, make_pack: Any) -> None:
        """Test a higher tier may not unlock before a lower one."""
        from fogbound_content.content.registry import ContentRegistry
        from fogbound_content.content.types import ConfigError

        with pytest.raises(ConfigError):
            ContentRegistry([make_pack(0, 0), make_pack(1, 3), make_pack(2, 1)])

    def test_authoring_problems_are_warnings(self, make_pack: Any, caplog: Any) -> None:
        """Test dangling references and unknown terrain only warn."""
        from fogbound_content.content.registry import ContentRegistry

        pack = make_pack(
            0,
            0,
            tiles=[{"id": "plains"}],
            monsters=[{"id": "ghost", "tileIds": ["nowhere"]}],
            treasures=[{"id": "lost", "type": "item", "itemId": "missing", "tileIds": ["plains"]}],
        )
        with caplog.at_level("WARNING"):
            registry = ContentRegistry([pack])

        result = registry.validate()
        assert result.is_valid
        assert any("missing" in w for w in result.warnings)
        assert any("nowhere" in w for w in result.warnings)
        assert "missing" in caplog.text

    def test_builtin_registry_is_valid(self, builtin_registry: Any) -> None:
        """Test the shipped packs validate without errors."""
        result = builtin_registry.validate()
        assert result.is_valid, result.errors
        assert [p.tier for p in builtin_registry.packs] == [0, 1]
        assert builtin_registry.max_powergate == 1
        assert builtin_registry.get_pack(1).name
        assert builtin_registry.get_pack(9) is None


class TestContentMerger:
    """Test ResolvedContent construction."""

    def test_later_tier_wins_on_collision(self, make_pack: Any) -> None:
        """Test the higher tier's entry replaces a colliding id."""
        from fogbound_content.content.merger import build_resolved_content
        from fogbound_content.content.registry import ContentRegistry

        registry = ContentRegistry(
            [
                make_pack(0, 0, items=[{"id": "blade", "name": "Old Blade", "type": "gear"}]),
                make_pack(1, 1, items=[{"id": "blade", "name": "New Blade", "type": "gear"}]),
            ]
        )
        assert build_resolved_content(registry, 0).items["blade"].name == "Old Blade"
        assert build_resolved_content(registry, 1).items["blade"].name == "New Blade"

    def test_snapshot_is_read_only(self, scenario_registry: Any) -> None:
        """Test merged dictionaries cannot be modified."""
        from fogbound_content.content.merger import build_resolved_content

        content = build_resolved_content(scenario_registry, 1)
        with pytest.raises(TypeError):
            content.tiles["lava"] = content.tiles["plains"]  # type: ignore[index]
        with pytest.raises(TypeError):
            content.spawn.loot_by_tile["plains"] = ()  # type: ignore[index]

    def test_empty_registry_degrades(self) -> None:
        """Test an empty registry yields empty content and total picks."""
        from fogbound_content.content.merger import build_resolved_content
        from fogbound_content.content.models import GoldLoot
        from fogbound_content.content.registry import ContentRegistry
        from fogbound_content.spawning.picker import ContentPicker

        content = build_resolved_content(ContentRegistry([]), 3)
        assert content.active_tier == 0
        assert not content.tiles and not content.items
        assert content.spawn.overworld_tiles == ()

        picker = ContentPicker(content)
        assert picker.pick_overworld_terrain() is None
        assert picker.pick_cave_terrain() is None
        assert picker.pick_shop_item_id() is None
        assert picker.pick_monster_for_terrain("plains") is None
        assert picker.pick_loot_for_terrain("plains") == GoldLoot(amount=1)

    def test_builtin_quest_pool(self, builtin_registry: Any) -> None:
        """Test the quest pool blends the current gate with earlier gates."""
        from fogbound_content.content.merger import build_resolved_content

        gate0 = builtin_registry.get_powergate(0)
        gate1 = builtin_registry.get_powergate(1)

        level0 = build_resolved_content(builtin_registry, 0)
        assert [e.id for e in level0.spawn.quest_pool] == list(gate0.quest_ids)
        assert all(e.weight == pytest.approx(0.75) for e in level0.spawn.quest_pool)

        level1 = build_resolved_content(builtin_registry, 1)
        weights = {e.id: e.weight for e in level1.spawn.quest_pool}
        assert set(weights) == set(gate0.quest_ids) | set(gate1.quest_ids)
        assert weights[gate1.quest_ids[0]] == pytest.approx(0.75)
        assert weights[gate0.quest_ids[0]] == pytest.approx(0.25 / len(gate0.quests))
        assert set(level1.quests) == set(weights)

    def test_custom_weights_override_defaults(self, scenario_registry: Any) -> None:
        """Test per-category weights replace the defaults they name."""
        from fogbound_content.content.merger import build_resolved_content
        from fogbound_content.spawning.tables import OVERWORLD_TILES, HybridWeights

        content = build_resolved_content(
            scenario_registry, 1, {OVERWORLD_TILES: HybridWeights(latest=1.0, previous=0.0)}
        )
        weights = {e.id: e.weight for e in content.spawn.overworld_tiles}
        assert weights == {"marsh": 1.0, "plains": 0.0, "blocked": 0.0}
        # Untouched categories keep their defaults
        assert content.spawn.shop_stock[0].weight == pytest.approx(0.70)
