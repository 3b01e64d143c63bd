"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from surftext.surface.grid import Surface

# 10×10 grid of the distinct heights -50..49, shuffled into scan order
_RNG_SEED = 7


def ramp_heights(count: int = 100, offset: float = -50.0) -> np.ndarray:
    rng = np.random.default_rng(_RNG_SEED)
    return rng.permutation(np.arange(count, dtype=np.float64) + offset)


@pytest.fixture
def ramp_surface() -> Surface:
    return Surface.from_grid(ramp_heights().reshape(10, 10), clx=2.5, cly=3.5)


@pytest.fixture
def small_surface() -> Surface:
    grid = [
        [-95.0, -10.0, 0.0, 10.0],
        [-10.5, 10.5, 95.0, 40.0],
        [-40.0, -0.5, 0.5, 55.0],
        [1.0, 2.0, -3.0, 99.0],
    ]
    return Surface.from_grid(grid, rms=12.5, clx=0.25, cly=0.75)


@pytest.fixture
def uniform_grid_text() -> str:
    return "rms:1.5:clx:0.1:cly:0.2:N:2\n1.0 -2.0\n3.5 4.0\n"
