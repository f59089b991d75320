"""
Weighted random selection.

A weighted table is an ordered sequence of (id, weight) entries. Selection
is a cumulative-weight scan: draw ``roll = rng() * total`` and subtract
each entry's weight until the roll is used up. Table order only decides
floating-point edge cases, never the distribution itself.

Randomness is always injected as a callable returning uniform floats in
[0, 1), so every caller can substitute a scripted or seeded source.
"""

import math
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple, TypeAlias

RandomSource: TypeAlias = Callable[[], float]
"""Callable producing uniform floats in [0, 1), e.g. ``random.random``."""


@dataclass(frozen=True)
class WeightedEntry:
    """One row of a weighted table.

    ``weight`` is kept exactly as declared; invalid values (NaN, negative,
    non-numeric) are treated as zero at selection time rather than rejected.
    """

    id: str
    weight: float


WeightedTable: TypeAlias = Tuple[WeightedEntry, ...]
"""Ordered, immutable weighted table."""


def effective_weight(weight: Any) -> float:
    """Return the weight the selector actually uses.

    Booleans, non-numbers, NaN, infinities and negative values all count as 0.
    """
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        return 0.0
    if math.isnan(weight) or math.isinf(weight) or weight < 0:
        return 0.0
    return float(weight)


def total_weight(table: Sequence[WeightedEntry]) -> float:
    """Sum of effective weights in a table."""
    return sum(effective_weight(entry.weight) for entry in table)


def weighted_pick(table: Optional[Sequence[WeightedEntry]], rng: RandomSource) -> Optional[str]:
    """Pick one id from a weighted table.

    Args:
        table: Weighted entries in insertion order (None is treated as empty)
        rng: Uniform [0, 1) random source

    Returns:
        The selected id. If the table has no positive weight the first
        entry's id is returned; an empty table returns None. Never raises.
    """
    if not table:
        return None

    total = total_weight(table)
    if total <= 0:
        return table[0].id

    roll = rng() * total
    for entry in table:
        roll -= effective_weight(entry.weight)
        if roll <= 0:
            return entry.id

    # Floating point drift left a sliver of roll unconsumed
    return table[-1].id
