import math

import pytest

from scatter_api.services.poisson.grid import SpatialGrid


def _filled(layout, points, cell_size=2.0, origin=(0.0, 0.0)):
    grid = SpatialGrid(20.0, 12.0, cell_size, origin=origin, layout=layout)
    for idx, pt in enumerate(points):
        grid.insert(pt, idx)
    return grid


def test_grid_dimensions_cover_domain():
    grid = SpatialGrid(10.0, 5.0, 3.0)
    assert grid.cols == 4
    assert grid.rows == 2


def test_grid_never_smaller_than_one_cell():
    grid = SpatialGrid(1.0, 1.0, 10.0 / math.sqrt(2))
    assert (grid.rows, grid.cols) == (1, 1)


def test_cell_of_uses_origin():
    grid = SpatialGrid(10.0, 10.0, 2.0, origin=(100.0, 50.0))
    assert grid.cell_of((100.0, 50.0)) == (0, 0)
    assert grid.cell_of((105.0, 53.9)) == (1, 2)


def test_unknown_layout_rejected():
    with pytest.raises(ValueError):
        SpatialGrid(1.0, 1.0, 0.5, layout="sparse")


def test_query_skips_out_of_range_cells():
    grid = _filled("2d", [(0.5, 0.5)])
    # a corner query clamps its block instead of wrapping around
    assert list(grid.query_neighbors_in_block((0.1, 0.1))) == [0]
    assert list(grid.query_neighbors_in_block((19.9, 11.9))) == []


def test_query_block_size_is_configurable():
    grid = _filled("2d", [(1.0, 1.0), (9.0, 1.0)])
    # (9, 1) sits four cells to the right of (1, 1)
    assert sorted(grid.query_neighbors_in_block((1.0, 1.0), 2)) == [0]
    assert sorted(grid.query_neighbors_in_block((1.0, 1.0), 4)) == [0, 1]
    assert sorted(grid.query_neighbors_in_block((1.0, 1.0), 0)) == [0]


def test_layouts_return_identical_neighbors():
    points = [(1.0, 1.0), (3.5, 2.2), (7.1, 9.9), (15.0, 4.0), (19.5, 11.5), (8.0, 6.0)]
    grid_2d = _filled("2d", points)
    grid_flat = _filled("flat", points)
    queries = [(0.0, 0.0), (5.0, 5.0), (10.0, 6.0), (18.0, 11.0), (2.0, 10.0)]
    for query in queries:
        for cells in (0, 1, 2, 3):
            assert sorted(grid_2d.query_neighbors_in_block(query, cells)) == sorted(
                grid_flat.query_neighbors_in_block(query, cells)
            )


def test_shared_cell_keeps_every_index():
    grid = _filled("flat", [(1.0, 1.0), (1.5, 1.5)])
    assert sorted(grid.query_neighbors_in_block((1.2, 1.2), 0)) == [0, 1]
    assert len(grid) == 2
