import math

import pytest

from scatter_api.services.poisson.acceptance import (
    has_conflict,
    scaled_acceptance_radius,
    search_cells_for,
    within_extent,
)
from scatter_api.services.poisson.grid import SpatialGrid
from scatter_api.services.validator import InvalidParameterError, ScalingTableError


def _grid_with(points, radius=10.0):
    grid = SpatialGrid(100.0, 100.0, radius / math.sqrt(2))
    for idx, pt in enumerate(points):
        grid.insert(pt, idx)
    return grid


def test_within_extent_is_half_open():
    extent = (0.0, 0.0, 10.0, 5.0)
    assert within_extent((0.0, 0.0), extent)
    assert within_extent((9.999, 4.999), extent)
    assert not within_extent((10.0, 1.0), extent)
    assert not within_extent((1.0, 5.0), extent)
    assert not within_extent((-0.001, 1.0), extent)


def test_neighbor_at_exact_radius_is_accepted():
    points = [(5.0, 5.0)]
    grid = _grid_with(points)
    assert not has_conflict((15.0, 5.0), points, grid, 10.0)
    assert has_conflict((14.9, 5.0), points, grid, 10.0)


def test_empty_neighborhood_never_conflicts():
    grid = _grid_with([])
    assert not has_conflict((50.0, 50.0), [], grid, 10.0)


def test_conflict_limited_to_scanned_block():
    points = [(1.0, 1.0)]
    grid = _grid_with(points, radius=2.0)
    # ~5.7 units away, outside a 5x5 block of 1.41-unit cells
    candidate = (5.0, 5.0)
    assert not has_conflict(candidate, points, grid, 8.0, search_cells=2)
    assert has_conflict(candidate, points, grid, 8.0, search_cells=search_cells_for(8.0, grid.cell_size))


def test_search_cells_for_covers_radius():
    cell = 1.0 / math.sqrt(2)
    assert search_cells_for(1.0, cell) == 2
    assert search_cells_for(4.0, cell) == 6
    assert search_cells_for(0.1, cell) == 2


def test_scaled_radius_formula():
    table = [1.0, 2.0, 0.5, 1.0]
    # y=0: sine term vanishes
    assert scaled_acceptance_radius(0.0, 4.0, 2.0, table, 1.0) == pytest.approx(3 * 1.0 * 2.0)
    # y=2 is mid-height: sine term is 1
    assert scaled_acceptance_radius(2.0, 4.0, 2.0, table, 1.5) == pytest.approx(4 * 1.5 * 0.5 * 2.0)
    y = 1.3
    expected = (3 + math.sin(y / 4.0 * math.pi) ** 3) * 0.8 * 2.0 * 2.0
    assert scaled_acceptance_radius(y, 4.0, 2.0, table, 0.8) == pytest.approx(expected)


def test_scaled_radius_short_table_raises_index_fault():
    with pytest.raises(ScalingTableError) as exc_info:
        scaled_acceptance_radius(7.5, 10.0, 1.0, [1.0] * 5, 1.0)
    assert isinstance(exc_info.value, IndexError)
    assert isinstance(exc_info.value.__cause__, IndexError)


def test_scaled_radius_rejects_zero_entries():
    with pytest.raises(InvalidParameterError):
        scaled_acceptance_radius(1.0, 10.0, 1.0, [1.0, 0.0, 1.0], 1.0)


def test_scaled_radius_keeps_sign_of_entry():
    radius = scaled_acceptance_radius(0.0, 10.0, 2.0, [-0.5], 1.0)
    assert radius == pytest.approx(-3.0)
    assert search_cells_for(radius, 1.0) == search_cells_for(3.0, 1.0)


def test_negative_radius_conflicts_like_its_magnitude():
    points = [(5.0, 5.0)]
    grid = _grid_with(points)
    assert has_conflict((14.9, 5.0), points, grid, -10.0)
    assert not has_conflict((15.0, 5.0), points, grid, -10.0)


def test_scaled_radius_mapping_table_missing_bucket():
    with pytest.raises(ScalingTableError):
        scaled_acceptance_radius(3.2, 10.0, 1.0, {0: 1.0, 1: 1.0}, 1.0)
    assert scaled_acceptance_radius(1.0, 10.0, 1.0, {1: 1.0}, 1.0) > 0
