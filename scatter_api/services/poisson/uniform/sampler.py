from typing import List, Optional, Tuple

import numpy as np

from ....constants import DEFAULT_ATTEMPTS
from ...validator import validate_uniform_params
from ..candidates import annulus_candidate
from ..engine import SamplingPolicy, run_sampler


def uniform_poisson_disc_sampling(
    width: float,
    height: float,
    radius: float,
    k: int = DEFAULT_ATTEMPTS,
    *,
    rng: Optional[np.random.Generator] = None,
) -> List[Tuple[float, float]]:
    """Poisson-disc sample the rectangle ``[0, width) x [0, height)``.

    Sampling starts from the domain center. Candidates are drawn uniformly
    by area from the annulus ``[radius, 2*radius]`` around a random active
    point and accepted when no earlier point lies strictly closer than
    ``radius``.

    Parameters
    ----------
    width, height:
        Domain size, both positive.
    radius:
        Minimum separation between any two returned points.
    k:
        Candidate attempts per visit before an active point is retired.
    rng:
        Random source; pass a seeded ``np.random.Generator`` for
        reproducible output.

    Returns
    -------
    list of (x, y) tuples in discovery order. The first entry is the center.
    """
    width, height, radius, k = validate_uniform_params(width, height, radius, k)
    center = (width / 2.0, height / 2.0)
    policy = SamplingPolicy(
        extent=(0.0, 0.0, width, height),
        base_radius=radius,
        seed=lambda _rng: center,
        propose=annulus_candidate,
        layout="2d",
        name="uniform",
    )
    return run_sampler(policy, k, rng)

__all__ = ["uniform_poisson_disc_sampling"]
