from . import scaled
from . import uniform
from .engine import DiscSampler, SamplingPolicy, run_sampler
from .grid import SpatialGrid
from .scaled import scaled_poisson_disc_sampling
from .uniform import uniform_poisson_disc_sampling

__all__ = [
    "scaled",
    "uniform",
    "DiscSampler",
    "SamplingPolicy",
    "SpatialGrid",
    "run_sampler",
    "scaled_poisson_disc_sampling",
    "uniform_poisson_disc_sampling",
]
