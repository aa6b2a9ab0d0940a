import logging
import math
from numbers import Integral, Real
from typing import Any

logger = logging.getLogger(__name__)


class InvalidParameterError(ValueError):
    """Raised when sampling or noise parameters are rejected before any work starts."""
    pass


class ScalingTableError(IndexError):
    """Raised when a scaling-table lookup falls outside the supplied table."""
    pass


def require_positive(name: str, value: Any) -> float:
    """Return ``value`` as a float, rejecting non-numeric, non-finite or ``<= 0`` input."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(f"{name} must be a positive finite number, got {value!r}")
    return value


def require_finite(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")
    return value


def require_attempts(k: Any) -> int:
    """Validate the per-visit attempt limit ``k`` (an integer ``>= 1``)."""
    if isinstance(k, bool) or not isinstance(k, Integral):
        raise InvalidParameterError(f"k must be an integer, got {k!r}")
    if k < 1:
        raise InvalidParameterError(f"k must be >= 1, got {k}")
    return int(k)


def require_search_cells(search_cells: Any) -> int:
    if isinstance(search_cells, bool) or not isinstance(search_cells, Integral):
        raise InvalidParameterError(f"search_cells must be an integer, got {search_cells!r}")
    if search_cells < 0:
        raise InvalidParameterError(f"search_cells must be >= 0, got {search_cells}")
    return int(search_cells)


def require_size(size: Any) -> int:
    if isinstance(size, bool) or not isinstance(size, Integral):
        raise InvalidParameterError(f"size must be an integer, got {size!r}")
    if size < 0:
        raise InvalidParameterError(f"size must be >= 0, got {size}")
    return int(size)


def require_unit_interval(name: str, value: Any) -> float:
    value = require_finite(name, value)
    if not 0.0 <= value <= 1.0:
        raise InvalidParameterError(f"{name} must lie in [0, 1], got {value}")
    return value


def validate_uniform_params(width: Any, height: Any, radius: Any, k: Any) -> tuple:
    """Check the uniform sampler arguments.

    Returns
    -------
    tuple
        ``(width, height, radius, k)`` coerced to ``float, float, float, int``.

    Raises
    ------
    InvalidParameterError
        If any dimension or the radius is not positive, or ``k < 1``.
    """
    return (
        require_positive("width", width),
        require_positive("height", height),
        require_positive("radius", radius),
        require_attempts(k),
    )


def validate_scaled_params(
    start_x: Any,
    end_x: Any,
    range_height: Any,
    base_radius: Any,
    k: Any,
    clumpiness_factor: Any,
) -> tuple:
    """Check the density-scaled sampler arguments.

    The scaling table itself is not inspected here; a short table surfaces as
    :class:`ScalingTableError` during sampling.
    """
    start_x = require_finite("start_x", start_x)
    end_x = require_finite("end_x", end_x)
    if end_x <= start_x:
        raise InvalidParameterError(
            f"end_x must be greater than start_x, got start_x={start_x}, end_x={end_x}"
        )
    return (
        start_x,
        end_x,
        require_positive("range_height", range_height),
        require_positive("base_radius", base_radius),
        require_attempts(k),
        require_positive("clumpiness_factor", clumpiness_factor),
    )


__all__ = [
    "InvalidParameterError",
    "ScalingTableError",
    "require_positive",
    "require_finite",
    "require_attempts",
    "require_search_cells",
    "require_size",
    "require_unit_interval",
    "validate_uniform_params",
    "validate_scaled_params",
]
