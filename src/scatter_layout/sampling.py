"""
Shared state for one Poisson-disk sampling run.

Holds the accepted samples, the active frontier, the spatial grid and the
validator backed by it. A fresh SamplingState is built for every run so
nothing leaks between layouts.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import math

import numpy as np

from scatter_layout.assets import AssetDescriptor, max_effective_radius
from scatter_layout.grid import SpatialGrid
from scatter_layout.validator import BoundsPolicy, CandidateValidator


@dataclass(frozen=True)
class Sample:
    """A placed asset (production output of the layout engine)."""

    x: float  # Canvas position in pixels
    y: float
    asset: AssetDescriptor

    @property
    def ref(self):
        return self.asset.ref


class SamplingState:
    """Samples, active list and grid for a single strategy invocation."""

    def __init__(
        self,
        pool: Sequence[AssetDescriptor],
        width: float,
        height: float,
        gap: float,
        rng: np.random.Generator,
        bounds_policy: BoundsPolicy = BoundsPolicy.CENTER,
    ):
        self.width = width
        self.height = height
        self.gap = gap
        self.rng = rng

        self.samples: List[Sample] = []
        self.active: List[int] = []
        self.grid = SpatialGrid(width, height, max_effective_radius(pool), gap)
        self.validator = CandidateValidator(
            self.grid, self.samples, width, height, gap, bounds_policy
        )

    def is_valid(self, x: float, y: float, asset: AssetDescriptor) -> bool:
        return self.validator.is_valid(x, y, asset)

    def accept(self, x: float, y: float, asset: AssetDescriptor) -> Sample:
        """Append a validated sample, activate it and index it in the grid."""
        sample = Sample(x=float(x), y=float(y), asset=asset)
        index = len(self.samples)
        self.samples.append(sample)
        self.active.append(index)
        self.grid.insert(index, sample.x, sample.y)
        return sample

    def try_place(self, x: float, y: float, asset: AssetDescriptor) -> Optional[Sample]:
        if self.is_valid(x, y, asset):
            return self.accept(x, y, asset)
        return None

    def pick_active(self) -> Tuple[int, Sample]:
        """Uniformly random member of the active list (slot, parent sample)."""
        slot = int(self.rng.integers(len(self.active)))
        return slot, self.samples[self.active[slot]]

    def deactivate(self, slot: int):
        self.active.pop(slot)

    def random_point(self) -> Tuple[float, float]:
        return float(self.rng.random() * self.width), float(self.rng.random() * self.height)

    def point_around(self, parent: Sample, distance: float) -> Tuple[float, float]:
        """Point at the given distance from parent in a uniformly random direction."""
        angle = self.rng.random() * 2 * math.pi
        return (
            parent.x + math.cos(angle) * distance,
            parent.y + math.sin(angle) * distance,
        )

    def min_distance(self, parent: Sample, asset: AssetDescriptor) -> float:
        return parent.asset.effective_radius + asset.effective_radius + self.gap

    def __len__(self) -> int:
        return len(self.samples)
