"""
Unique-asset layout: try to place every asset in the pool exactly once.

Unique placement cannot fall back to duplicating an asset that fits, so
this strategy spends far more effort than the density-target mode: a
large per-point candidate budget, several restarts from different seed
points, wider distance variation on later restarts, and re-seeding of the
active frontier when it is about to run dry.
"""

from collections import deque
from typing import List, Sequence, Tuple
import math
import logging

import numpy as np

from scatter_layout.assets import AssetDescriptor
from scatter_layout.sampling import Sample, SamplingState
from scatter_layout.validator import BoundsPolicy

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 5  # Independent restarts, one per seed heuristic
MAX_CANDIDATES_PER_POINT = 200
CANDIDATES_PER_REMAINING_ASSET = 50
VARIATION_STEP = 0.2  # Extra distance variation per restart
MIN_ACTIVE_POINTS = 3  # Re-seed the frontier below this size
RESEED_ATTEMPTS = 20


def seed_point(attempt: int, width: float, height: float, rng: np.random.Generator) -> Tuple[float, float]:
    """
    Starting point for a restart.

    0: canvas center, 1: uniform random, 2: quarter offset, 3: near the left
    edge, 4+: on a 60-degree spiral step around the center.
    """
    if attempt == 0:
        return width / 2, height / 2
    if attempt == 1:
        return float(rng.random() * width), float(rng.random() * height)
    if attempt == 2:
        return width * 0.25, height * 0.25
    if attempt == 3:
        return width * 0.1, height / 2

    angle = attempt * math.pi / 3
    return (
        width / 2 + math.cos(angle) * width * 0.3,
        height / 2 + math.sin(angle) * height * 0.3,
    )


def generate_unique_layout(
    pool: Sequence[AssetDescriptor],
    width: float,
    height: float,
    gap: float,
    rng: np.random.Generator,
    bounds_policy: BoundsPolicy = BoundsPolicy.CENTER,
    max_attempts: int = MAX_ATTEMPTS,
) -> List[Sample]:
    """
    Place each asset at most once, aiming for all of them.

    Args:
        pool: Asset descriptors (non-empty)
        width: Canvas width in pixels
        height: Canvas height in pixels
        gap: Minimum boundary-to-boundary spacing
        rng: Random generator used for every draw
        bounds_policy: Canvas bounds check applied to every candidate
        max_attempts: Number of restarts

    Returns:
        The first attempt that places the whole pool, otherwise the attempt
        that placed the most assets (earliest on ties).
    """
    if not pool:
        return []

    best: List[Sample] = []

    for attempt in range(max_attempts):
        result = attempt_unique_layout(pool, width, height, gap, rng, attempt, bounds_policy)
        logger.debug(f"Unique layout attempt {attempt}: placed {len(result)}/{len(pool)}")

        if len(result) == len(pool):
            best = result
            break

        if len(result) > len(best):
            best = result

    success_rate = len(best) / len(pool) * 100
    logger.info(
        f"Unique layout: placed {len(best)}/{len(pool)} unique assets "
        f"({success_rate:.0f}% success rate)"
    )
    return best


def attempt_unique_layout(
    pool: Sequence[AssetDescriptor],
    width: float,
    height: float,
    gap: float,
    rng: np.random.Generator,
    attempt: int,
    bounds_policy: BoundsPolicy = BoundsPolicy.CENTER,
) -> List[Sample]:
    """Run one restart of the unique strategy from the seed for `attempt`."""
    state = SamplingState(pool, width, height, gap, rng, bounds_policy)
    remaining = deque(pool)
    variation = 1 + attempt * VARIATION_STEP

    x, y = seed_point(attempt, width, height, rng)
    if state.try_place(x, y, remaining[0]) is not None:
        remaining.popleft()
    else:
        _reseed(state, remaining)

    while state.active and remaining:
        slot, parent = state.pick_active()
        budget = min(MAX_CANDIDATES_PER_POINT, len(remaining) * CANDIDATES_PER_REMAINING_ASSET)
        asset = remaining[0]
        placed = False

        for _ in range(budget):
            min_distance = state.min_distance(parent, asset)
            distance = min_distance + rng.random() * min_distance * variation
            x, y = state.point_around(parent, distance)

            if state.try_place(x, y, asset) is not None:
                remaining.popleft()
                placed = True
                break

        if not placed:
            state.deactivate(slot)
            if len(state.active) < MIN_ACTIVE_POINTS and remaining:
                _reseed(state, remaining)

    return state.samples


def _reseed(state: SamplingState, remaining: deque) -> bool:
    """Drop the head asset at a random free spot to revive the frontier."""
    asset = remaining[0]

    for _ in range(RESEED_ATTEMPTS):
        x, y = state.random_point()
        if state.try_place(x, y, asset) is not None:
            remaining.popleft()
            return True

    return False
