import math
from typing import Sequence, Tuple

from ..validator import InvalidParameterError, ScalingTableError
from .grid import SpatialGrid

Point = Tuple[float, float]
Extent = Tuple[float, float, float, float]


def within_extent(point: Sequence[float], extent: Extent) -> bool:
    """Half-open containment test against ``(x0, y0, x1, y1)``."""
    x, y = point[0], point[1]
    x0, y0, x1, y1 = extent
    return x0 <= x < x1 and y0 <= y < y1


def search_cells_for(radius: float, cell_size: float, minimum: int = 2) -> int:
    """Number of cells to scan on each side so ``radius`` is fully covered."""
    return max(minimum, int(math.ceil(abs(radius) / cell_size)))


def has_conflict(
    candidate: Sequence[float],
    points: Sequence[Point],
    grid: SpatialGrid,
    radius: float,
    search_cells: int = 2,
) -> bool:
    """Return True if a point in the scanned block lies strictly closer than ``radius``.

    Only buckets within ``search_cells`` of the candidate's cell are examined.
    A neighbor at exactly ``radius`` does not conflict.
    """
    x, y = candidate[0], candidate[1]
    radius_sq = radius * radius
    for idx in grid.query_neighbors_in_block(candidate, search_cells):
        px, py = points[idx]
        dx = x - px
        dy = y - py
        if dx * dx + dy * dy < radius_sq:
            return True
    return False


def scaled_acceptance_radius(
    y: float,
    range_height: float,
    base_radius: float,
    scaling_table: Sequence[float],
    clumpiness_factor: float,
) -> float:
    """Position-dependent minimum separation used by the density-scaled sampler.

    ``(3 + sin(pi * y / range_height) ** 3) * clumpiness_factor * scaling_table[floor(y)] * base_radius``

    Signed table entries are allowed; conflicts compare squared distances, so
    a negative radius separates points like its magnitude. ``scaling_table``
    may be a sequence or a mapping keyed by bucket.
    """
    bucket = int(math.floor(y))
    try:
        scale = scaling_table[bucket]
    except (IndexError, KeyError) as exc:
        raise ScalingTableError(
            f"scaling_table has no entry for y-bucket {bucket} (y={y!r})"
        ) from exc
    y_factor = math.sin((y / range_height) * math.pi) ** 3
    clumpy_radius = (3 + y_factor) * clumpiness_factor * float(scale)
    radius = clumpy_radius * base_radius
    if radius == 0 or not math.isfinite(radius):
        raise InvalidParameterError(
            f"scaling_table[{bucket}]={scale!r} gives a zero or non-finite acceptance radius"
        )
    return radius


__all__ = [
    "within_extent",
    "search_cells_for",
    "has_conflict",
    "scaled_acceptance_radius",
]
