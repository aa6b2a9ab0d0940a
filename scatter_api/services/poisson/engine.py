"""Active-list Poisson-disc engine shared by the uniform and scaled samplers.

Both samplers run the same loop: seed one point, then repeatedly pick a
random active point and try up to ``k`` candidates around it. The first
candidate that lies inside the domain and keeps its distance from every
accepted neighbor is accepted and activated. A point whose ``k`` attempts all
fail is retired. Every visit either grows the accepted list or shrinks the
active list, so the loop always terminates.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import numpy as np

from ...constants import DEFAULT_SEARCH_CELLS
from .acceptance import has_conflict, search_cells_for, within_extent
from .grid import SpatialGrid

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass
class SamplingPolicy:
    """Capabilities that distinguish one sampler variant from another.

    Attributes
    ----------
    extent:
        Half-open domain ``(x0, y0, x1, y1)``.
    base_radius:
        Radius used for the grid cell size and for candidate generation.
    seed:
        ``seed(rng) -> Point`` returning the first accepted point.
    propose:
        ``propose(rng, point, base_radius) -> Point`` producing one candidate.
    acceptance_radius:
        ``acceptance_radius(candidate) -> float``; only called for candidates
        inside ``extent``. ``None`` means the constant ``base_radius``.
    layout:
        :class:`SpatialGrid` layout.
    name:
        Label used in log records.
    search_cells:
        Cells scanned on each side of a candidate. ``None`` derives it from
        the acceptance radius so every point within that radius is examined.
    """

    extent: Tuple[float, float, float, float]
    base_radius: float
    seed: Callable[[np.random.Generator], Point]
    propose: Callable[[np.random.Generator, Point, float], Point]
    acceptance_radius: Optional[Callable[[Point], float]] = None
    layout: str = "2d"
    name: str = "poisson"
    search_cells: Optional[int] = DEFAULT_SEARCH_CELLS


class DiscSampler:
    """Run one sampling pass for a :class:`SamplingPolicy`.

    A sampler instance owns its grid, accepted list and active list; it is
    meant for a single :meth:`sample` call.
    """

    def __init__(self, policy: SamplingPolicy, k: int, rng: np.random.Generator):
        self.policy = policy
        self.k = k
        self.rng = rng
        x0, y0, x1, y1 = policy.extent
        self.cell_size = policy.base_radius / math.sqrt(2)
        self.grid = SpatialGrid(
            x1 - x0, y1 - y0, self.cell_size, origin=(x0, y0), layout=policy.layout
        )
        self.points: List[Point] = []
        self.active: List[int] = []
        self.visits = 0

    def _emit(self, point: Point) -> None:
        index = len(self.points)
        self.points.append(point)
        self.active.append(index)
        self.grid.insert(point, index)

    def _retire(self, slot: int) -> None:
        # order of the active list is irrelevant, so swap-remove in O(1)
        last = self.active.pop()
        if slot < len(self.active):
            self.active[slot] = last

    def _try_candidate(self, source: Point) -> Optional[Point]:
        policy = self.policy
        candidate = policy.propose(self.rng, source, policy.base_radius)
        if not within_extent(candidate, policy.extent):
            return None
        if policy.acceptance_radius is None:
            radius = policy.base_radius
        else:
            radius = policy.acceptance_radius(candidate)
        search_cells = policy.search_cells
        if search_cells is None:
            search_cells = search_cells_for(radius, self.cell_size)
        if has_conflict(candidate, self.points, self.grid, radius, search_cells):
            return None
        return candidate

    def sample(self) -> List[Point]:
        if self.points:
            raise RuntimeError("DiscSampler.sample() may only be called once per instance")
        policy = self.policy
        logger.debug(
            "%s sampling started",
            policy.name,
            extra={
                "mode": policy.name,
                "extent": policy.extent,
                "base_radius": policy.base_radius,
                "k": self.k,
                "grid_shape": (self.grid.rows, self.grid.cols),
            },
        )
        self._emit(policy.seed(self.rng))

        while self.active:
            self.visits += 1
            slot = int(self.rng.integers(len(self.active)))
            source = self.points[self.active[slot]]
            for _ in range(self.k):
                accepted = self._try_candidate(source)
                if accepted is not None:
                    self._emit(accepted)
                    break
            else:
                self._retire(slot)

        logger.debug(
            "%s sampling finished with %d points after %d visits",
            policy.name,
            len(self.points),
            self.visits,
            extra={"mode": policy.name, "point_count": len(self.points)},
        )
        return self.points


def run_sampler(
    policy: SamplingPolicy, k: int, rng: Optional[np.random.Generator] = None
) -> List[Point]:
    """Convenience wrapper: build a :class:`DiscSampler` and run it."""
    if rng is None:
        rng = np.random.default_rng()
    return DiscSampler(policy, k, rng).sample()


__all__ = ["Point", "SamplingPolicy", "DiscSampler", "run_sampler"]
