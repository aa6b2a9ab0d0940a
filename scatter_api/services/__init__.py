from . import noise
from . import poisson
from .validator import InvalidParameterError, ScalingTableError

__all__ = ["noise", "poisson", "InvalidParameterError", "ScalingTableError"]
