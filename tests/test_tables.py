"""Tests for spawn table builders."""

from operator import attrgetter
from typing import Any

import pytest


class TestHybridTable:
    """Test the latest/previous blended table builder."""

    def test_latest_and_previous_split(self, make_pack: Any) -> None:
        """Test two latest entries at 0.30 each and three previous sharing 0.70."""
        from fogbound_content.spawning.tables import HybridWeights, build_hybrid_table
        from fogbound_content.spawning.weighted import total_weight

        packs = [
            make_pack(0, 0, tiles=[{"id": "a"}, {"id": "b"}, {"id": "c"}]),
            make_pack(1, 1, tiles=[{"id": "x"}, {"id": "y"}]),
        ]
        table = build_hybrid_table(packs, 1, attrgetter("tiles"), HybridWeights(latest=0.30, previous=0.70))

        assert [e.id for e in table] == ["x", "y", "a", "b", "c"]
        assert [e.weight for e in table[:2]] == [0.30, 0.30]
        assert all(e.weight == pytest.approx(0.70 / 3) for e in table[2:])
        assert total_weight(table) == pytest.approx(1.3)

    def test_no_previous_entries(self, make_pack: Any) -> None:
        """Test a lone active tier gets only latest weights."""
        from fogbound_content.spawning.tables import HybridWeights, build_hybrid_table

        packs = [make_pack(0, 0, items=[{"id": "stick", "type": "gear"}])]
        table = build_hybrid_table(packs, 0, attrgetter("items"), HybridWeights(0.7, 0.3))

        assert len(table) == 1
        assert table[0].weight == 0.7

    def test_active_tier_without_pack(self, make_pack: Any) -> None:
        """Test a missing active pack leaves only previous entries."""
        from fogbound_content.spawning.tables import HybridWeights, build_hybrid_table

        packs = [make_pack(0, 0, tiles=[{"id": "a"}, {"id": "b"}])]
        table = build_hybrid_table(packs, 2, attrgetter("tiles"), HybridWeights(0.3, 0.7))

        assert [e.id for e in table] == ["a", "b"]
        assert all(e.weight == pytest.approx(0.35) for e in table)

    def test_default_weights(self) -> None:
        """Test the shipped per-category weight pairs."""
        from fogbound_content.spawning.tables import HYBRID_WEIGHTS, SPAWN_CATEGORIES

        assert set(HYBRID_WEIGHTS) == set(SPAWN_CATEGORIES)
        assert (HYBRID_WEIGHTS["overworld_tiles"].latest, HYBRID_WEIGHTS["overworld_tiles"].previous) == (0.30, 0.70)
        assert (HYBRID_WEIGHTS["cave_tiles"].latest, HYBRID_WEIGHTS["cave_tiles"].previous) == (0.50, 0.50)
        assert (HYBRID_WEIGHTS["shop_stock"].latest, HYBRID_WEIGHTS["shop_stock"].previous) == (0.70, 0.30)
        assert (HYBRID_WEIGHTS["quest_pool"].latest, HYBRID_WEIGHTS["quest_pool"].previous) == (0.75, 0.25)


class TestMonstersByTerrain:
    """Test the encounter table builder."""

    def test_on_and_off_tier_weights(self, scenario_registry: Any) -> None:
        """Test on-tier monsters use the latest weight, others a tenth of previous."""
        from fogbound_content.content.merger import build_resolved_content

        content = build_resolved_content(scenario_registry, 1)
        plains = {e.id: e.weight for e in content.spawn.monsters_by_tile["plains"]}

        assert plains["bog-beast"] == pytest.approx(0.20)
        assert plains["rat"] == pytest.approx(0.08)
        assert plains["old-wolf"] == pytest.approx(0.08)
        assert [e.id for e in content.spawn.monsters_by_tile["marsh"]] == ["bog-beast"]

    def test_unreferenced_terrain_has_no_table(self, scenario_registry: Any) -> None:
        """Test terrain no monster lives on is absent from the mapping."""
        from fogbound_content.content.merger import build_resolved_content

        content = build_resolved_content(scenario_registry, 1)
        assert "blocked" not in content.spawn.monsters_by_tile


class TestLootByTerrain:
    """Test the ground loot table builder."""

    def test_only_newest_treasure_pack_is_used(self, scenario_packs: Any) -> None:
        """Test older treasures vanish once a newer pack defines any."""
        from fogbound_content.spawning.tables import build_loot_by_terrain

        loot = build_loot_by_terrain(scenario_packs, 1)
        ids = {e.id for table in loot.values() for e in table}

        assert ids == {"t1-gold"}
        assert set(loot) == {"marsh", "plains"}

    def test_declared_weights_are_kept(self, scenario_packs: Any) -> None:
        """Test treasure weights are copied, not recomputed."""
        from fogbound_content.spawning.tables import build_loot_by_terrain

        loot = build_loot_by_terrain(scenario_packs, 0)
        assert {e.id: e.weight for e in loot["plains"]} == {"t0-gold": 10, "t0-herb": 5}

    def test_falls_back_to_older_pack_with_treasures(self, make_pack: Any) -> None:
        """Test a newest pack without treasures defers to the next one down."""
        from fogbound_content.spawning.tables import build_loot_by_terrain

        packs = [
            make_pack(0, 0, treasures=[{"id": "g", "type": "gold", "min": 1, "max": 2, "tileIds": ["p"]}]),
            make_pack(1, 1),
        ]
        assert [e.id for e in build_loot_by_terrain(packs, 1)["p"]] == ["g"]
        assert build_loot_by_terrain([make_pack(0, 0)], 0) == {}
