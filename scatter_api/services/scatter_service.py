from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

import numpy as np

from ..constants import DEFAULT_CLUMPINESS
from ..settings import load_settings
from .noise import generate_noise
from .poisson import scaled_poisson_disc_sampling, uniform_poisson_disc_sampling
from .validator import InvalidParameterError, ScalingTableError

logger = logging.getLogger(__name__)

MODES = ("uniform", "scaled")


def _extent_from_spec(spec: Dict[str, Any]) -> tuple:
    """Return ``(x0, y0, x1, y1)`` from either bbox keys or width/height keys."""
    bbox_min = spec.get("bbox_min")
    bbox_max = spec.get("bbox_max")
    if bbox_min is not None and bbox_max is not None:
        return float(bbox_min[0]), float(bbox_min[1]), float(bbox_max[0]), float(bbox_max[1])
    if spec.get("end_x") is not None:
        start_x = float(spec.get("start_x", 0.0))
        height = spec.get("range_height", spec.get("height"))
        if height is None:
            raise InvalidParameterError("scatter spec needs range_height (or height)")
        return start_x, 0.0, float(spec["end_x"]), float(height)
    width = spec.get("width")
    height = spec.get("height", spec.get("range_height"))
    if width is None or height is None:
        raise InvalidParameterError("scatter spec needs width/height or bbox_min/bbox_max")
    start_x = float(spec.get("start_x", 0.0))
    return start_x, 0.0, start_x + float(width), float(height)


def _scaling_table_from_spec(
    spec: Dict[str, Any], range_height: float, rng: Optional[np.random.Generator]
) -> Any:
    table = spec.get("scaling_table")
    if table is not None:
        return table
    noise_spec = spec.get("scaling_noise")
    length = max(0, int(math.ceil(range_height)))
    if noise_spec is None:
        return np.ones(length)
    if isinstance(noise_spec, str):
        noise_spec = {"kind": noise_spec}
    params = dict(noise_spec)
    kind = params.pop("kind", None)
    if kind is None:
        raise InvalidParameterError("scaling_noise needs a 'kind'")
    offset = float(spec.get("scaling_offset", 1.0))
    values = generate_noise(kind, length, rng=rng, **params)
    return np.abs(values) + offset


def resolve_scatter_spec(spec: Dict[str, Any]) -> Dict[str, Any]:
    """Normalize a scatter request into sampler keyword arguments.

    Parameters
    ----------
    spec:
        Request dictionary. Recognized keys are ``mode`` (``"uniform"`` or
        ``"scaled"``, default ``"uniform"``), ``radius`` or its alias
        ``min_dist``, ``k``, the domain as ``width``/``height``,
        ``start_x``/``end_x``/``range_height`` or ``bbox_min``/``bbox_max``,
        and for the scaled mode ``clumpiness``, ``scaling_table``,
        ``scaling_noise`` and ``scaling_offset``.

    Returns
    -------
    dict
        ``mode``, ``extent``, ``radius``, ``k`` and the scaled-mode extras.
        The scaling table itself is resolved later, in :func:`generate_scatter`,
        because noise-based tables consume the request's random source.
    """
    if not isinstance(spec, dict):
        raise InvalidParameterError(f"scatter spec must be a dict, got {type(spec).__name__}")
    settings = load_settings()

    mode = (spec.get("mode") or "uniform").lower()
    if mode not in MODES:
        raise InvalidParameterError(f"unknown scatter mode {mode!r}, expected one of {MODES}")

    radius = spec.get("radius", spec.get("min_dist"))
    if radius is None:
        raise InvalidParameterError("scatter spec needs radius (or min_dist)")

    x0, y0, x1, y1 = _extent_from_spec(spec)
    if mode == "scaled" and y0 != 0.0:
        raise InvalidParameterError("scaled mode samples heights from 0; bbox_min[1] must be 0")

    return {
        "mode": mode,
        "extent": (x0, y0, x1, y1),
        "radius": radius,
        "k": spec.get("k", settings.default_attempts),
        "clumpiness": spec.get("clumpiness", DEFAULT_CLUMPINESS),
        "max_points": settings.max_scatter_points,
    }


def _sample(
    resolved: Dict[str, Any], spec: Dict[str, Any], rng: np.random.Generator
) -> List[List[float]]:
    x0, y0, x1, y1 = resolved["extent"]
    if resolved["mode"] == "uniform":
        raw = uniform_poisson_disc_sampling(
            x1 - x0, y1 - y0, resolved["radius"], resolved["k"], rng=rng
        )
        return [[x + x0, y + y0] for x, y in raw]

    table = _scaling_table_from_spec(spec, y1, rng)
    raw = scaled_poisson_disc_sampling(
        x0,
        x1,
        y1,
        resolved["radius"],
        resolved["k"],
        table,
        resolved["clumpiness"],
        rng=rng,
    )
    return [[x, y] for x, y in raw]


def generate_scatter(
    spec: Dict[str, Any],
    *,
    rng: Optional[np.random.Generator] = None,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Run the sampler described by ``spec`` and package its output.

    The returned dictionary holds ``points`` as ``[x, y]`` lists in discovery
    order plus a ``debug`` block. Results longer than the configured
    ``max_scatter_points`` are cut off in discovery order and flagged as
    ``truncated``.
    """
    try:
        resolved = resolve_scatter_spec(spec)
        if rng is None:
            rng = np.random.default_rng(spec.get("seed"))
        points = _sample(resolved, spec, rng)
    except (InvalidParameterError, ScalingTableError) as exc:
        logger.warning("rejected scatter spec: %s", exc, extra={"request_id": request_id})
        raise

    x0, y0, x1, y1 = resolved["extent"]
    mode = resolved["mode"]
    max_points = resolved["max_points"]
    truncated = len(points) > max_points
    if truncated:
        logger.info(
            "capped scatter output from %d to %d points",
            len(points),
            max_points,
            extra={"request_id": request_id},
        )
        points = points[:max_points]

    logger.debug(
        "generate_scatter produced %d points",
        len(points),
        extra={"request_id": request_id, "mode": mode, "point_count": len(points)},
    )
    return {
        "points": points,
        "mode": mode,
        "radius": float(resolved["radius"]),
        "extent": [x0, y0, x1, y1],
        "debug": {
            "point_count": len(points),
            "truncated": truncated,
        },
    }


__all__ = ["resolve_scatter_spec", "generate_scatter"]
