"""One-dimensional colored-noise sequences.

Each generator takes a sequence length and an optional ``rng`` and returns a
``float64`` array of that length. The sequences are independent of each other
and of the samplers; they are mostly used to build scaling tables for
:func:`scatter_api.services.poisson.scaled_poisson_disc_sampling`.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Optional

import numpy as np

from ..constants import DEFAULT_VELVET_DENSITY
from .validator import InvalidParameterError, require_size, require_unit_interval

logger = logging.getLogger(__name__)

# Paul Kellet's refined pink filter: (pole, gain) per stage b0..b5
_PINK_STAGES = (
    (0.99886, 0.0555179),
    (0.99332, 0.0750759),
    (0.96900, 0.1538520),
    (0.86650, 0.3104856),
    (0.55000, 0.5329522),
    (-0.7616, -0.0168980),
)
_PINK_DIRECT_GAIN = 0.5362
_PINK_DELAY_GAIN = 0.115926
_PINK_OUTPUT_GAIN = 0.11


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def white(size: int, *, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Uniform samples in ``[0, 1)``."""
    size = require_size(size)
    return _rng(rng).random(size)


def _pink_filter(centered: np.ndarray) -> np.ndarray:
    state = [0.0] * len(_PINK_STAGES)
    delayed = 0.0
    out = np.empty_like(centered)
    for i, w in enumerate(centered):
        w = float(w)
        for j, (pole, gain) in enumerate(_PINK_STAGES):
            state[j] = pole * state[j] + w * gain
        out[i] = (sum(state) + delayed + w * _PINK_DIRECT_GAIN) * _PINK_OUTPUT_GAIN
        delayed = w * _PINK_DELAY_GAIN
    return out


def pink(size: int, *, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """1/f noise from a white source filtered through a bank of one-pole stages."""
    size = require_size(size)
    return _pink_filter(_rng(rng).random(size) - 0.5)


def red(size: int, *, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Running mean of a white sequence."""
    values = white(size, rng=rng)
    return np.cumsum(values) / np.arange(1, size + 1)


def brown(size: int, *, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Random walk with steps in ``[-0.5, 0.5)``."""
    values = white(size, rng=rng)
    return np.cumsum(values - 0.5)


def violet(size: int, *, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """First difference of ``size + 1`` white samples."""
    size = require_size(size)
    return np.diff(white(size + 1, rng=rng))


def velvet(
    size: int,
    density: float = DEFAULT_VELVET_DENSITY,
    *,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Sparse impulses: ``int(size * density)`` random slots set to values in ``[-1, 1)``.

    Slots may be hit more than once; the last write wins, so fewer than
    ``int(size * density)`` slots can end up non-zero.
    """
    size = require_size(size)
    density = require_unit_interval("density", density)
    rng = _rng(rng)
    noise = np.zeros(size)
    for _ in range(int(size * density)):
        noise[rng.integers(size)] = rng.uniform(-1.0, 1.0)
    return noise


def gray(size: int, *, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """``sin(pi * (white + pink) / 2)`` elementwise."""
    rng = _rng(rng)
    mixed = (white(size, rng=rng) + pink(size, rng=rng)) / 2.0
    return np.sin(mixed * math.pi)


NOISE_GENERATORS: Dict[str, Callable[..., np.ndarray]] = {
    "white": white,
    "pink": pink,
    "red": red,
    "brown": brown,
    "violet": violet,
    "velvet": velvet,
    "gray": gray,
}


def generate_noise(
    kind: str, size: int, *, rng: Optional[np.random.Generator] = None, **kwargs
) -> np.ndarray:
    """Dispatch to a generator by name (``"pink"``, ``"velvet"``, ...)."""
    try:
        generator = NOISE_GENERATORS[str(kind).lower()]
    except KeyError:
        raise InvalidParameterError(
            f"unknown noise kind {kind!r}, expected one of {sorted(NOISE_GENERATORS)}"
        ) from None
    if kwargs and generator is not velvet:
        raise InvalidParameterError(f"{kind} noise takes no extra parameters, got {sorted(kwargs)}")
    logger.debug("generating %s noise of length %s", kind, size)
    return generator(size, rng=rng, **kwargs)


__all__ = [
    "white",
    "pink",
    "red",
    "brown",
    "violet",
    "velvet",
    "gray",
    "NOISE_GENERATORS",
    "generate_noise",
]
