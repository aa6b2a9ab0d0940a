import logging

import numpy as np
import pytest

from scatter_api.services.poisson.candidates import annulus_candidate
from scatter_api.services.poisson.engine import DiscSampler, SamplingPolicy, run_sampler


def _policy(**overrides):
    params = dict(
        extent=(0.0, 0.0, 40.0, 40.0),
        base_radius=4.0,
        seed=lambda rng: (20.0, 20.0),
        propose=annulus_candidate,
    )
    params.update(overrides)
    return SamplingPolicy(**params)


def test_sampler_starts_from_seed_point(rng):
    points = run_sampler(_policy(), 30, rng)
    assert points[0] == (20.0, 20.0)
    assert len(points) > 1


def test_every_visit_grows_points_or_retires(rng):
    sampler = DiscSampler(_policy(), 10, rng)
    points = sampler.sample()
    assert not sampler.active
    # each accepted point beyond the seed costs one visit, each retirement one more
    assert sampler.visits == (len(points) - 1) + len(points)


def test_rejecting_proposals_retire_the_seed(rng):
    calls = []

    def outside(rng, point, radius):
        calls.append(point)
        return (-1.0, -1.0)

    sampler = DiscSampler(_policy(propose=outside), 7, rng)
    assert sampler.sample() == [(20.0, 20.0)]
    assert len(calls) == 7
    assert sampler.visits == 1


def test_sample_is_single_use(rng):
    sampler = DiscSampler(_policy(), 5, rng)
    sampler.sample()
    with pytest.raises(RuntimeError):
        sampler.sample()


def test_acceptance_radius_policy_is_consulted(rng):
    seen = []

    def radius_at(candidate):
        seen.append(candidate)
        return 4.0

    points = run_sampler(_policy(acceptance_radius=radius_at), 10, rng)
    assert seen
    assert all(0.0 <= y < 40.0 for _, y in seen)
    assert len(points) > 1


def test_same_seed_same_points():
    a = run_sampler(_policy(), 30, np.random.default_rng(99))
    b = run_sampler(_policy(), 30, np.random.default_rng(99))
    assert a == b


def test_sampler_logs_summary(caplog, rng):
    with caplog.at_level(logging.DEBUG, logger="scatter_api.services.poisson.engine"):
        points = run_sampler(_policy(name="custom"), 5, rng)
    finished = [r for r in caplog.records if "finished" in r.getMessage()]
    assert finished
    assert finished[-1].point_count == len(points)
    assert finished[-1].mode == "custom"
