"""
Tests for the spatial grid index.
"""

import math

import pytest

from scatter_layout.grid import SpatialGrid


def test_dimensions_follow_max_min_distance():
    grid = SpatialGrid(800, 600, max_radius=50, gap=20)

    assert grid.max_min_distance == pytest.approx(120)
    assert grid.cell_size == pytest.approx(120 / math.sqrt(2))
    assert grid.cols == math.ceil(800 / grid.cell_size)
    assert grid.rows == math.ceil(600 / grid.cell_size)


def test_search_radius_is_derived_from_geometry():
    grid = SpatialGrid(1000, 1000, max_radius=40, gap=10)

    # ceil(sqrt(2)) + 1
    assert grid.search_radius == 3
    assert grid.search_radius_for(grid.cell_size * 4.5) == 6


def test_cell_holds_multiple_samples():
    grid = SpatialGrid(1000, 1000, max_radius=100, gap=0)
    grid.insert(0, 10, 10)
    grid.insert(1, 12, 11)

    assert grid.cell_of(10, 10) == grid.cell_of(12, 11)
    assert sorted(grid.query_neighbors(11, 11)) == [0, 1]
    assert len(grid) == 2


def test_query_skips_distant_cells():
    grid = SpatialGrid(1000, 1000, max_radius=10, gap=0)
    grid.insert(0, 900, 900)
    grid.insert(1, 30, 30)

    assert list(grid.query_neighbors(10, 10)) == [1]


def test_query_clamps_at_canvas_edges():
    grid = SpatialGrid(100, 100, max_radius=10, gap=5)
    grid.insert(0, 0, 0)
    grid.insert(1, 99.9, 99.9)

    assert list(grid.query_neighbors(0, 0)) == [0]
    assert list(grid.query_neighbors(99, 99)) == [1]


def test_tiny_canvas_has_at_least_one_cell():
    grid = SpatialGrid(10, 10, max_radius=300, gap=0)

    assert grid.cols == 1 and grid.rows == 1
    grid.insert(0, 5, 5)
    assert list(grid.query_neighbors(9, 9)) == [0]
