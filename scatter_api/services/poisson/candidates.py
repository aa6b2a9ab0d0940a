"""Candidate proposals around an active point."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np


def annulus_candidate(
    rng: np.random.Generator, point: Sequence[float], radius: float
) -> Tuple[float, float]:
    """Draw a point uniformly by area from the annulus ``[radius, 2*radius]``.

    The distance ``sqrt(u * 3r^2 + r^2)`` inverts the annulus area CDF.
    """
    angle = rng.random() * 2.0 * math.pi
    distance = math.sqrt(rng.random() * 3.0 * radius * radius + radius * radius)
    return (point[0] + distance * math.cos(angle), point[1] + distance * math.sin(angle))


def linear_annulus_candidate(
    rng: np.random.Generator, point: Sequence[float], radius: float
) -> Tuple[float, float]:
    """Draw a point at a distance drawn linearly from ``[radius, 2*radius]``.

    Denser towards the inner ring than :func:`annulus_candidate`; the scaled
    sampler relies on this distribution.
    """
    angle = rng.random() * 2.0 * math.pi
    distance = radius + rng.random() * radius
    return (point[0] + distance * math.cos(angle), point[1] + distance * math.sin(angle))


__all__ = ["annulus_candidate", "linear_annulus_candidate"]
