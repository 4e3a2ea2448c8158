"""
Shared fixtures for layout tests.
"""

import math

import numpy as np
import pytest

from scatter_layout.assets import AssetSource, build_descriptor


def square_asset(radius: float, name: str = "asset"):
    """Descriptor whose effective radius is exactly `radius`."""
    size = 2 * radius
    return build_descriptor(AssetSource(ref=name, width=size, height=size), max_size=size)


def spacing_violations(samples, gap):
    """Pairs (i, j) closer than their radii plus gap."""
    violations = []
    for i in range(len(samples)):
        for j in range(i + 1, len(samples)):
            a, b = samples[i], samples[j]
            required = a.asset.effective_radius + b.asset.effective_radius + gap
            if math.hypot(a.x - b.x, a.y - b.y) + 1e-9 < required:
                violations.append((i, j))
    return violations


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_asset():
    return square_asset


@pytest.fixture
def make_pool():
    def _make_pool(*radii):
        return [square_asset(r, name=f"asset_{i}") for i, r in enumerate(radii)]

    return _make_pool


@pytest.fixture
def check_spacing():
    return spacing_violations
