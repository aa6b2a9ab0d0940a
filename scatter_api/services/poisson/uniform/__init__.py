from .sampler import uniform_poisson_disc_sampling

__all__ = ["uniform_poisson_disc_sampling"]
