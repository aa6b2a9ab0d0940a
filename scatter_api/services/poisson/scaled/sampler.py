from functools import partial
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ....constants import DEFAULT_SEARCH_CELLS
from ...validator import require_search_cells, validate_scaled_params
from ..acceptance import scaled_acceptance_radius
from ..candidates import linear_annulus_candidate
from ..engine import SamplingPolicy, run_sampler


def _random_seed_point(start_x: float, end_x: float, range_height: float, rng: np.random.Generator):
    return (start_x + rng.random() * (end_x - start_x), rng.random() * range_height)


def scaled_poisson_disc_sampling(
    start_x: float,
    end_x: float,
    range_height: float,
    base_radius: float,
    k: int,
    scaling_table: Sequence[float],
    clumpiness_factor: float,
    *,
    rng: Optional[np.random.Generator] = None,
    search_cells: Optional[int] = DEFAULT_SEARCH_CELLS,
) -> List[Tuple[float, float]]:
    """Poisson-disc sample ``[start_x, end_x) x [0, range_height)`` with a varying radius.

    A candidate at height ``y`` must keep

        (3 + sin(pi * y / range_height) ** 3) * clumpiness_factor
            * scaling_table[floor(y)] * base_radius

    from the accepted points around it, so larger table entries thin the result out.
    The seed point is drawn uniformly from the domain and candidate
    distances are drawn linearly from ``[base_radius, 2*base_radius]``.

    ``scaling_table`` must be indexable for every integer in
    ``[0, range_height)``; a missing entry raises
    :class:`~scatter_api.services.validator.ScalingTableError`.

    Neighbors are looked up in the same 5x5 cell block as the uniform
    sampler, so acceptance radii wider than that block are only enforced
    against nearby points. Pass ``search_cells=None`` to scan every cell the
    acceptance radius can reach, which makes the separation strict.
    """
    start_x, end_x, range_height, base_radius, k, clumpiness_factor = validate_scaled_params(
        start_x, end_x, range_height, base_radius, k, clumpiness_factor
    )
    if search_cells is not None:
        search_cells = require_search_cells(search_cells)

    def acceptance_radius(candidate):
        return scaled_acceptance_radius(
            candidate[1], range_height, base_radius, scaling_table, clumpiness_factor
        )

    policy = SamplingPolicy(
        extent=(start_x, 0.0, end_x, range_height),
        base_radius=base_radius,
        seed=partial(_random_seed_point, start_x, end_x, range_height),
        propose=linear_annulus_candidate,
        acceptance_radius=acceptance_radius,
        layout="flat",
        name="scaled",
        search_cells=search_cells,
    )
    return run_sampler(policy, k, rng)


__all__ = ["scaled_poisson_disc_sampling"]
