"""Tests for weighted random selection."""

import math
import random
from collections import Counter
from typing import Any


class TestWeightedPick:
    """Test the cumulative-weight selector."""

    def test_empty_table_returns_none(self) -> None:
        """Test empty and missing tables give no result."""
        from fogbound_content.spawning.weighted import weighted_pick

        assert weighted_pick((), random.random) is None
        assert weighted_pick(None, random.random) is None

    def test_zero_weights_return_first_entry(self, rng_script: Any) -> None:
        """Test all-zero tables always return the first id, for any draw."""
        from fogbound_content.spawning.weighted import WeightedEntry, weighted_pick

        table = (WeightedEntry("a", 0), WeightedEntry("b", 0.0), WeightedEntry("c", -2))
        for draw in (0.0, 0.25, 0.5, 0.999):
            assert weighted_pick(table, rng_script([draw])) == "a"

    def test_zero_total_does_not_draw(self) -> None:
        """Test the random source is not consulted when nothing has weight."""
        from fogbound_content.spawning.weighted import WeightedEntry, weighted_pick

        def exploding_rng() -> float:
            raise AssertionError("rng should not be called")

        assert weighted_pick((WeightedEntry("only", 0),), exploding_rng) == "only"

    def test_scripted_draws(self, rng_script: Any) -> None:
        """Test draws map onto cumulative weight ranges."""
        from fogbound_content.spawning.weighted import WeightedEntry, weighted_pick

        table = (WeightedEntry("a", 1), WeightedEntry("b", 3))
        assert weighted_pick(table, rng_script([0.0])) == "a"
        assert weighted_pick(table, rng_script([0.2])) == "a"
        assert weighted_pick(table, rng_script([0.3])) == "b"
        assert weighted_pick(table, rng_script([0.999999])) == "b"

    def test_invalid_weights_count_as_zero(self, rng_script: Any) -> None:
        """Test NaN, infinite, negative and non-numeric weights are ignored."""
        from fogbound_content.spawning.weighted import WeightedEntry, weighted_pick

        table = (
            WeightedEntry("nan", math.nan),
            WeightedEntry("inf", math.inf),
            WeightedEntry("neg", -5),
            WeightedEntry("text", "heavy"),  # type: ignore[arg-type]
            WeightedEntry("real", 2),
        )
        for draw in (0.1, 0.5, 0.9):
            assert weighted_pick(table, rng_script([draw])) == "real"

    def test_effective_weight(self) -> None:
        """Test weight sanitising."""
        from fogbound_content.spawning.weighted import effective_weight, total_weight, WeightedEntry

        assert effective_weight(2) == 2.0
        assert effective_weight(0.5) == 0.5
        assert effective_weight(True) == 0.0
        assert effective_weight(None) == 0.0
        assert effective_weight(float("nan")) == 0.0
        assert total_weight((WeightedEntry("a", 1), WeightedEntry("b", -1), WeightedEntry("c", 2.5))) == 3.5

    def test_float_drift_falls_back_to_last_entry(self) -> None:
        """Test a draw that never exhausts the roll returns the last id."""
        from fogbound_content.spawning.weighted import WeightedEntry, weighted_pick

        table = (WeightedEntry("a", 1), WeightedEntry("b", 1))
        # An out-of-contract draw >= 1 leaves roll unconsumed
        assert weighted_pick(table, lambda: 1.5) == "b"

    def test_distribution_converges(self) -> None:
        """Test empirical frequencies approach weight / total over many draws."""
        from fogbound_content.spawning.weighted import WeightedEntry, weighted_pick

        table = (WeightedEntry("a", 1), WeightedEntry("b", 2), WeightedEntry("c", 7))
        rng = random.Random(1234).random
        draws = 20_000

        counts = Counter(weighted_pick(table, rng) for _ in range(draws))

        for entry in table:
            expected = entry.weight / 10
            assert abs(counts[entry.id] / draws - expected) < 0.02
