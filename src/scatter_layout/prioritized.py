"""
Density-target layout: Bridson-style active-list sampling up to a count.

Every distinct asset is drawn once (in random order) before any asset is
allowed to repeat, so small target counts still show the whole pool.
"""

from typing import List, Sequence, Set
import logging

import numpy as np

from scatter_layout.assets import AssetDescriptor
from scatter_layout.sampling import Sample, SamplingState
from scatter_layout.validator import BoundsPolicy

logger = logging.getLogger(__name__)

DEFAULT_K = 30  # Candidates per active point
DISTANCE_SPREAD = 0.5  # Candidate distance in [min, min * (1 + spread))
SEED_ATTEMPTS = 20  # Random seed points tried when the first one is rejected


class AssetSelector:
    """Pick unused assets uniformly at random, then any asset."""

    def __init__(self, pool: Sequence[AssetDescriptor], rng: np.random.Generator):
        self.pool = pool
        self.rng = rng
        self.used: Set[int] = set()

    def select(self) -> AssetDescriptor:
        unused = [i for i in range(len(self.pool)) if i not in self.used]

        if unused:
            index = unused[int(self.rng.integers(len(unused)))]
            self.used.add(index)
            return self.pool[index]

        # Every asset has been drawn once, duplicates allowed from here on
        return self.pool[int(self.rng.integers(len(self.pool)))]


def generate_prioritized_layout(
    pool: Sequence[AssetDescriptor],
    width: float,
    height: float,
    gap: float,
    target_count: int,
    rng: np.random.Generator,
    k: int = DEFAULT_K,
    bounds_policy: BoundsPolicy = BoundsPolicy.CENTER,
) -> List[Sample]:
    """
    Fill the canvas with up to target_count samples.

    Args:
        pool: Asset descriptors (non-empty)
        width: Canvas width in pixels
        height: Canvas height in pixels
        gap: Minimum boundary-to-boundary spacing
        target_count: Maximum number of samples to place
        rng: Random generator used for every draw
        k: Candidate attempts per active point before it is retired
        bounds_policy: Canvas bounds check applied to every candidate

    Returns:
        Samples in acceptance order. Fewer than target_count is a normal
        outcome when the canvas fills up.
    """
    if not pool or target_count <= 0:
        return []

    state = SamplingState(pool, width, height, gap, rng, bounds_policy)
    selector = AssetSelector(pool, rng)

    if not _place_seed(state, selector):
        logger.info("Prioritized layout: no valid seed position, canvas left empty")
        return []

    while state.active and len(state) < target_count:
        slot, parent = state.pick_active()
        placed = False

        for _ in range(k):
            asset = selector.select()
            min_distance = state.min_distance(parent, asset)
            distance = min_distance + rng.random() * min_distance * DISTANCE_SPREAD
            x, y = state.point_around(parent, distance)

            if state.try_place(x, y, asset) is not None:
                placed = True
                break

        if not placed:
            state.deactivate(slot)

    distinct = len({id(s.asset) for s in state.samples})
    logger.info(
        f"Prioritized layout: {len(state)}/{target_count} samples "
        f"({distinct}/{len(pool)} unique assets used before duplicating)"
    )
    return state.samples


def _place_seed(state: SamplingState, selector: AssetSelector) -> bool:
    """Place the first sample at a random point. Returns False if none fit."""
    asset = selector.select()

    for _ in range(SEED_ATTEMPTS):
        x, y = state.random_point()
        if state.try_place(x, y, asset) is not None:
            return True

    return False
