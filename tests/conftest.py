# tests/conftest.py
import os
import sys

import numpy as np
import pytest

# add the project root (one level up) onto sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture
def rng():
    """Seeded generator so sampler output is reproducible within a test."""
    return np.random.default_rng(1234)


@pytest.fixture
def make_rng():
    """Factory for independent generators sharing a seed."""
    def _make(seed=1234):
        return np.random.default_rng(seed)
    return _make
