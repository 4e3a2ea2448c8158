"""
Candidate acceptance test shared by both layout strategies.
"""

from enum import Enum
from typing import Sequence, Union
import math

from scatter_layout.assets import AssetDescriptor
from scatter_layout.grid import SpatialGrid


class BoundsPolicy(str, Enum):
    """How a candidate is checked against the canvas edges."""

    CENTER = "center"  # raw point inside [0, W) x [0, H)
    CONTAIN = "contain"  # footprint (by effective radius) inside the canvas

    @classmethod
    def parse(cls, value: Union[str, "BoundsPolicy"]) -> "BoundsPolicy":
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown bounds policy '{value}' (expected one of: {valid})") from None


class CandidateValidator:
    """
    Decide whether an asset may be placed at a candidate position.

    Checks canvas bounds first, then every sample the grid reports in the
    candidate's neighborhood. Has no side effects.
    """

    def __init__(
        self,
        grid: SpatialGrid,
        samples: Sequence,
        width: float,
        height: float,
        gap: float,
        bounds_policy: BoundsPolicy = BoundsPolicy.CENTER,
    ):
        self.grid = grid
        self.samples = samples
        self.width = width
        self.height = height
        self.gap = gap
        self.bounds_policy = BoundsPolicy.parse(bounds_policy)

    def in_bounds(self, x: float, y: float, asset: AssetDescriptor) -> bool:
        if self.bounds_policy is BoundsPolicy.CONTAIN:
            r = asset.effective_radius
            return r <= x < self.width - r and r <= y < self.height - r
        return 0 <= x < self.width and 0 <= y < self.height

    def is_valid(self, x: float, y: float, asset: AssetDescriptor) -> bool:
        """Return True if asset at (x, y) stays in bounds and clear of all neighbors."""
        if not self.in_bounds(x, y, asset):
            return False

        for index in self.grid.query_neighbors(x, y):
            neighbor = self.samples[index]
            required = asset.effective_radius + neighbor.asset.effective_radius + self.gap
            if math.hypot(x - neighbor.x, y - neighbor.y) < required:
                return False

        return True
