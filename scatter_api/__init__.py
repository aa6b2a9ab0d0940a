"""Blue-noise point scattering and colored-noise sequences."""

from .services.noise import generate_noise
from .services.poisson import scaled_poisson_disc_sampling, uniform_poisson_disc_sampling
from .services.validator import InvalidParameterError, ScalingTableError

__version__ = "0.1"

__all__ = [
    "generate_noise",
    "scaled_poisson_disc_sampling",
    "uniform_poisson_disc_sampling",
    "InvalidParameterError",
    "ScalingTableError",
]
