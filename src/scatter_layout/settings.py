"""
User-facing setting scales and the parameters derived from them.

The layout engine works in pixels and counts. These helpers translate the
coarse levels exposed to users (density 1-10, asset size 1-7, gap in
pixels) into engine parameters, and provide the auto-tune that suggests a
reasonable starting point for a given canvas and asset set.
"""

from dataclasses import dataclass
from typing import Sequence
import math

from scatter_layout.assets import AssetSource

REFERENCE_ASSET_SIZE = 100.0  # Pixels at size level 4 ("Original")

# Index = level; index 0 is unused
SIZE_SCALES = [0, 0.5, 0.7, 0.85, 1.0, 1.2, 1.5, 2.0]
SIZE_LABELS = ["", "Tiny", "Small", "Smaller", "Original", "Bigger", "Large", "Huge"]
DENSITY_LABELS = [
    "", "Minimal", "Very Sparse", "Sparse", "Light", "Medium",
    "Dense", "Very Dense", "Heavy", "Maximum",
]

MIN_ITEMS = 10
MAX_ITEMS = 200
DENSITY_CURVE = 1.5

MIN_GAP = 10
MAX_GAP = 200
GAP_UNIT = 50  # Gap shown as a multiplier of this many pixels

TARGET_COVERAGE = 0.65
OPTIMAL_SIZE_LEVEL = 3


def _clamp(value, low, high):
    return max(low, min(high, value))


def _round(value: float) -> int:
    """Round half up, so 0.5 steps always go to the larger integer."""
    return int(math.floor(value + 0.5))


def asset_size_for_level(level: int) -> float:
    """Max asset size in pixels for a size level (unknown levels: original size)."""
    if 1 <= level < len(SIZE_SCALES):
        return SIZE_SCALES[level] * REFERENCE_ASSET_SIZE
    return REFERENCE_ASSET_SIZE


def target_count_for_density(level: int, pool_size: int, unique_only: bool = False) -> int:
    """
    Number of samples to aim for at a density level.

    Levels 1-10 map onto 10-200 items along a slight exponential curve.
    Unique-only mode always aims for the whole pool.
    """
    if unique_only:
        return pool_size

    normalized = (_clamp(level, 1, 10) - 1) / 9
    factor = normalized ** DENSITY_CURVE
    return _round(MIN_ITEMS + (MAX_ITEMS - MIN_ITEMS) * factor)


def suggested_gap(asset_size: float) -> int:
    """Default gap for an asset size."""
    return _clamp(_round(asset_size * 0.6), MIN_GAP, MAX_GAP)


def gap_multiplier_label(gap: float) -> str:
    return f"{gap / GAP_UNIT:.1f}x"


def density_label(level: int) -> str:
    if 0 < level < len(DENSITY_LABELS):
        return DENSITY_LABELS[level]
    return DENSITY_LABELS[-1]


def size_label(level: int) -> str:
    if 0 < level < len(SIZE_LABELS):
        return SIZE_LABELS[level]
    return "Original"


@dataclass(frozen=True)
class OptimalSettings:
    """Auto-tuned starting point for a canvas and asset set."""

    density_level: int
    size_level: int
    gap: int


def optimal_settings(canvas_width: float, canvas_height: float, sources: Sequence[AssetSource]) -> OptimalSettings:
    """
    Suggest density, size and gap aiming for roughly 65% canvas coverage.

    Each asset is approximated as a 100x100 box shrunk by its aspect ratio.

    Raises:
        ValueError: If no sources are given
    """
    if not sources:
        raise ValueError("Cannot derive settings without assets")

    canvas_area = canvas_width * canvas_height
    average_area = sum(
        REFERENCE_ASSET_SIZE * REFERENCE_ASSET_SIZE
        * min(1.0, s.width / s.height, s.height / s.width)
        for s in sources
    ) / len(sources)

    optimal_items = int((canvas_area * TARGET_COVERAGE) // average_area)
    density_level = _clamp(
        _round(1 + 9 * ((optimal_items - MIN_ITEMS) / (MAX_ITEMS - MIN_ITEMS))), 1, 10
    )
    gap = _clamp(_round(asset_size_for_level(OPTIMAL_SIZE_LEVEL) * 0.4), MIN_GAP, MAX_GAP)

    return OptimalSettings(density_level=density_level, size_level=OPTIMAL_SIZE_LEVEL, gap=gap)
