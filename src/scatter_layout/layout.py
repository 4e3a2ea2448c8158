"""
Layout orchestration: request/config types and strategy selection.

generate_layout() is the engine entry point. LayoutPlacer wraps it with a
YAML-backed configuration for the pipeline and scripts.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

import numpy as np

from scatter_layout.assets import AssetDescriptor, AssetSource, build_asset_pool
from scatter_layout.prioritized import DEFAULT_K, generate_prioritized_layout
from scatter_layout.sampling import Sample
from scatter_layout.settings import (
    asset_size_for_level,
    suggested_gap,
    target_count_for_density,
)
from scatter_layout.unique import generate_unique_layout
from scatter_layout.validator import BoundsPolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutRequest:
    """Everything a single layout run depends on."""

    canvas_width: int
    canvas_height: int
    gap: float  # Minimum empty space between asset boundaries
    assets: Tuple[AssetDescriptor, ...]
    unique_only: bool = False
    target_count: int = 0  # Ignored when unique_only
    k: int = DEFAULT_K
    bounds_policy: BoundsPolicy = BoundsPolicy.CENTER
    seed: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "assets", tuple(self.assets))
        object.__setattr__(self, "bounds_policy", BoundsPolicy.parse(self.bounds_policy))


def generate_layout(request: LayoutRequest, rng: Optional[np.random.Generator] = None) -> List[Sample]:
    """
    Place assets for a request.

    Args:
        request: Canvas, spacing and asset pool
        rng: Random generator for every draw. Defaults to one seeded from
            request.seed (unseeded when that is None).

    Returns:
        Samples in acceptance order. An empty pool gives an empty list.
    """
    if not request.assets:
        logger.warning("No assets to place, returning empty layout")
        return []

    if rng is None:
        rng = np.random.default_rng(request.seed)

    pool = list(request.assets)

    if request.unique_only:
        return generate_unique_layout(
            pool,
            request.canvas_width,
            request.canvas_height,
            request.gap,
            rng,
            bounds_policy=request.bounds_policy,
        )

    return generate_prioritized_layout(
        pool,
        request.canvas_width,
        request.canvas_height,
        request.gap,
        request.target_count,
        rng,
        k=request.k,
        bounds_policy=request.bounds_policy,
    )


@dataclass(frozen=True)
class LayoutSummary:
    """Quality signal for a finished layout."""

    placed: int
    distinct_assets: int
    pool_size: int
    target_count: int

    @property
    def success_rate(self) -> float:
        """Fraction of the target that was placed (0-1). An empty target is always met."""
        if self.target_count <= 0:
            return 1.0
        return min(1.0, self.placed / self.target_count)

    @property
    def complete(self) -> bool:
        """Whether every targeted placement was made."""
        return self.placed >= self.target_count

    def to_dict(self) -> dict:
        return {
            "placed": self.placed,
            "distinct_assets": self.distinct_assets,
            "pool_size": self.pool_size,
            "target_count": self.target_count,
            "success_rate": round(self.success_rate, 4),
        }


def summarize_layout(samples: Sequence[Sample], request: LayoutRequest) -> LayoutSummary:
    target = len(request.assets) if request.unique_only else request.target_count
    return LayoutSummary(
        placed=len(samples),
        distinct_assets=len({id(s.asset) for s in samples}),
        pool_size=len(request.assets),
        target_count=target,
    )


@dataclass
class LayoutConfig:
    """Configuration for layout generation."""

    canvas_width: int
    canvas_height: int

    # Asset sizing (max pixels for the longer side)
    max_size: float

    # Spacing
    gap: float

    # Density
    density_level: int
    unique_only: bool

    # Sampling
    k: int = DEFAULT_K
    bounds_policy: BoundsPolicy = BoundsPolicy.CENTER
    seed: Optional[int] = None

    # Explicit target count overrides the density level
    target_count: Optional[int] = None

    @classmethod
    def from_dict(cls, config: dict) -> "LayoutConfig":
        """Create config from dictionary (loaded from YAML)."""
        canvas = config["canvas"]
        assets_cfg = config.get("assets", {})
        density_cfg = config.get("density", {})
        sampling_cfg = config.get("sampling", {})

        if "max_size" in assets_cfg:
            max_size = float(assets_cfg["max_size"])
        else:
            max_size = asset_size_for_level(int(assets_cfg.get("size_level", 4)))

        gap = config.get("spacing", {}).get("gap")
        if gap is None:
            gap = suggested_gap(max_size)
            logger.info(f"No gap configured, using suggested gap {gap}px for {max_size:.0f}px assets")

        if not 0 <= gap <= 200:
            raise ValueError(f"Gap must be between 0 and 200 pixels, got {gap}")

        if canvas["width"] <= 0 or canvas["height"] <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {canvas['width']}x{canvas['height']}")

        return cls(
            canvas_width=int(canvas["width"]),
            canvas_height=int(canvas["height"]),
            max_size=max_size,
            gap=float(gap),
            density_level=int(density_cfg.get("level", 5)),
            unique_only=bool(density_cfg.get("unique_only", False)),
            k=int(sampling_cfg.get("k", DEFAULT_K)),
            bounds_policy=BoundsPolicy.parse(sampling_cfg.get("bounds_policy", "center")),
            seed=config.get("seed"),
            target_count=density_cfg.get("target_count"),
        )


class LayoutPlacer:
    """
    Generate placements for a set of asset sources.

    Builds the descriptor pool for the configured size, derives the target
    count from the density level and runs the layout engine.
    """

    def __init__(self, config: LayoutConfig):
        self.config = config
        logger.info(f"Initialized LayoutPlacer with seed={config.seed}")

    def build_request(self, sources: Sequence[AssetSource]) -> LayoutRequest:
        pool = build_asset_pool(sources, self.config.max_size)

        if self.config.target_count is not None:
            target_count = int(self.config.target_count)
        else:
            target_count = target_count_for_density(
                self.config.density_level, len(pool), self.config.unique_only
            )

        return LayoutRequest(
            canvas_width=self.config.canvas_width,
            canvas_height=self.config.canvas_height,
            gap=self.config.gap,
            assets=tuple(pool),
            unique_only=self.config.unique_only,
            target_count=target_count,
            k=self.config.k,
            bounds_policy=self.config.bounds_policy,
            seed=self.config.seed,
        )

    def generate_placements(self, sources: Sequence[AssetSource]) -> Tuple[LayoutRequest, List[Sample]]:
        """
        Run the layout engine for the sources.

        Returns:
            The request that was run and the resulting samples
        """
        request = self.build_request(sources)
        mode = "unique-only" if request.unique_only else f"target={request.target_count}"
        logger.info(
            f"Generating layout on {request.canvas_width}x{request.canvas_height} canvas "
            f"({len(request.assets)} assets, gap={request.gap:g}px, {mode})"
        )

        samples = generate_layout(request)

        logger.info(f"Generated {len(samples)} placements")
        return request, samples
