from .sampler import scaled_poisson_disc_sampling

__all__ = ["scaled_poisson_disc_sampling"]
