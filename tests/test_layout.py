"""
Tests for the layout orchestrator and the end-to-end layout properties.
"""

import math

import numpy as np
import pytest

from scatter_layout.assets import AssetSource
from scatter_layout.layout import (
    LayoutConfig,
    LayoutPlacer,
    LayoutRequest,
    generate_layout,
    summarize_layout,
)
from scatter_layout.validator import BoundsPolicy


def request_for(pool, width, height, gap, unique_only=False, target_count=10, **kwargs):
    return LayoutRequest(
        canvas_width=width,
        canvas_height=height,
        gap=gap,
        assets=tuple(pool),
        unique_only=unique_only,
        target_count=target_count,
        **kwargs,
    )


@pytest.mark.parametrize("unique_only", [False, True])
def test_empty_pool_gives_empty_layout(unique_only):
    request = request_for([], 800, 600, 20, unique_only=unique_only)
    assert generate_layout(request) == []


def test_scenario_single_asset_fills_to_target(make_pool, check_spacing):
    request = request_for(make_pool(50), 800, 600, gap=20, target_count=10)
    samples = generate_layout(request, np.random.default_rng(11))

    assert len(samples) == 10
    assert check_spacing(samples, 20) == []
    for a in samples:
        assert 0 <= a.x < 800 and 0 <= a.y < 600
        for b in samples:
            if a is not b:
                assert math.hypot(a.x - b.x, a.y - b.y) >= 120


def test_scenario_unique_assets_on_square_canvas(make_pool, check_spacing):
    pool = make_pool(40, 40, 40, 40, 40)

    for seed in range(5):
        samples = generate_layout(
            request_for(pool, 1000, 1000, gap=10, unique_only=True), np.random.default_rng(seed)
        )
        assert 1 <= len(samples) <= 5
        assert len({id(s.asset) for s in samples}) == len(samples)
        assert check_spacing(samples, 10) == []
        if len(samples) == 5:
            assert {id(s.asset) for s in samples} == {id(a) for a in pool}


def test_larger_canvas_completes_unique_layout_at_least_as_often(make_pool):
    pool = make_pool(40, 40, 40, 40, 40)

    def complete_runs(size):
        runs = 0
        for seed in range(20):
            request = request_for(pool, size, size, gap=10, unique_only=True)
            if len(generate_layout(request, np.random.default_rng(seed))) == len(pool):
                runs += 1
        return runs

    assert complete_runs(2000) >= complete_runs(1000)
    assert complete_runs(2000) == 20


@pytest.mark.parametrize("target_count", [1, 10, 500])
def test_scenario_oversized_asset_places_once(make_pool, target_count):
    request = request_for(make_pool(300), 400, 400, gap=0, target_count=target_count)
    samples = generate_layout(request, np.random.default_rng(5))

    assert len(samples) == 1


def test_scenario_zero_gap_allows_touching_but_not_overlap(make_pool, check_spacing):
    request = request_for(make_pool(15, 25, 35), 600, 600, gap=0, target_count=300)
    samples = generate_layout(request, np.random.default_rng(2))

    assert len(samples) > 10
    assert check_spacing(samples, 0) == []


def test_unique_mode_ignores_target_count(make_pool):
    pool = make_pool(10, 10, 10, 10)
    request = request_for(pool, 1000, 1000, gap=5, unique_only=True, target_count=1)

    assert len(generate_layout(request, np.random.default_rng(0))) == 4


def test_request_seed_makes_layout_reproducible(make_pool):
    request = request_for(make_pool(10, 20), 800, 600, gap=10, target_count=50, seed=99)

    first = generate_layout(request)
    second = generate_layout(request)

    assert [(s.x, s.y) for s in first] == [(s.x, s.y) for s in second]


def test_reruns_do_not_share_state(make_pool, check_spacing):
    pool = make_pool(30)
    rng = np.random.default_rng(4)
    request = request_for(pool, 700, 700, gap=10, target_count=40)

    first = generate_layout(request, rng)
    second = generate_layout(request, rng)

    assert check_spacing(first, 10) == []
    assert check_spacing(second, 10) == []
    assert [(s.x, s.y) for s in first] != [(s.x, s.y) for s in second]


def test_request_normalizes_fields(make_pool):
    request = LayoutRequest(100, 100, 0, assets=make_pool(5), bounds_policy="contain")

    assert isinstance(request.assets, tuple)
    assert request.bounds_policy is BoundsPolicy.CONTAIN


def test_summary_reports_distinct_assets(make_pool):
    pool = make_pool(10, 10, 10)
    request = request_for(pool, 2000, 2000, gap=5, target_count=8)
    samples = generate_layout(request, np.random.default_rng(8))
    summary = summarize_layout(samples, request)

    assert summary.placed == len(samples) == 8
    assert summary.pool_size == 3
    assert 1 <= summary.distinct_assets <= 3
    assert summary.success_rate == pytest.approx(1.0)
    assert summary.complete
    assert summary.to_dict()["target_count"] == 8


def test_summary_uses_pool_size_in_unique_mode(make_pool):
    pool = make_pool(10, 10)
    request = request_for(pool, 500, 500, gap=5, unique_only=True, target_count=99)

    summary = summarize_layout([], request)
    assert summary.target_count == 2
    assert summary.success_rate == 0.0
    assert not summary.complete


LAYOUT_DICT = {
    "canvas": {"width": 800, "height": 600},
    "assets": {"size_level": 4},
    "spacing": {"gap": 20},
    "density": {"level": 1, "unique_only": False},
    "sampling": {"k": 30, "bounds_policy": "center"},
    "seed": 3,
}


def test_layout_config_from_dict():
    config = LayoutConfig.from_dict(LAYOUT_DICT)

    assert config.canvas_width == 800
    assert config.max_size == pytest.approx(100)
    assert config.gap == 20
    assert config.density_level == 1
    assert config.bounds_policy is BoundsPolicy.CENTER
    assert config.seed == 3
    assert config.target_count is None


def test_layout_config_defaults_gap_from_asset_size():
    config = LayoutConfig.from_dict({**LAYOUT_DICT, "spacing": {}, "assets": {"max_size": 50}})

    assert config.max_size == 50
    assert config.gap == 30


@pytest.mark.parametrize(
    "override",
    [
        {"spacing": {"gap": 250}},
        {"canvas": {"width": 0, "height": 600}},
        {"sampling": {"bounds_policy": "wrap"}},
    ],
)
def test_layout_config_rejects_bad_values(override):
    with pytest.raises(ValueError):
        LayoutConfig.from_dict({**LAYOUT_DICT, **override})


def test_placer_derives_target_from_density():
    config = LayoutConfig.from_dict(LAYOUT_DICT)
    placer = LayoutPlacer(config)
    sources = [AssetSource("a.png", 200, 100), AssetSource("b.png", 50, 50)]

    request, samples = placer.generate_placements(sources)

    assert request.target_count == 10
    assert request.assets[0].effective_radius == pytest.approx(50)
    assert len(samples) <= 10
    assert all(s.asset in request.assets for s in samples)


def test_placer_unique_mode_targets_whole_pool():
    config = LayoutConfig.from_dict({**LAYOUT_DICT, "density": {"level": 9, "unique_only": True}})
    request = LayoutPlacer(config).build_request([AssetSource("a", 10, 10)] * 3)

    assert request.unique_only
    assert request.target_count == 3
    assert len(request.assets) == 3


def test_summary_of_empty_target_is_complete(make_pool):
    request = request_for(make_pool(10), 500, 500, gap=5, target_count=0)
    summary = summarize_layout(generate_layout(request), request)

    assert summary.placed == 0
    assert summary.complete
    assert summary.success_rate == 1.0
