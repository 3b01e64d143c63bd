"""Numeric helpers shared by the partition strategies."""

from __future__ import annotations

import string

import numpy as np
from numpy.typing import NDArray

from surftext.errors import AlphabetExhaustedError

# One alphabet per case; zone symbols never wrap or collide.
ALPHABET_SIZE = len(string.ascii_uppercase)


def linspace(low: float, high: float, count: int) -> NDArray[np.float64]:
    """``count`` evenly spaced values from ``low`` to ``high`` inclusive."""
    return np.linspace(low, high, count, dtype=np.float64)


def midpoint(values: NDArray[np.float64], i: int, j: int) -> float:
    """Mean of two entries of a sorted array."""
    return float((values[i] + values[j]) / 2.0)


def upper_letter(offset: int) -> str:
    if not 0 <= offset < ALPHABET_SIZE:
        raise AlphabetExhaustedError(f"No uppercase letter at offset {offset}")
    return string.ascii_uppercase[offset]


def lower_letter(offset: int) -> str:
    if not 0 <= offset < ALPHABET_SIZE:
        raise AlphabetExhaustedError(f"No lowercase letter at offset {offset}")
    return string.ascii_lowercase[offset]


def root_mean_square(values: NDArray[np.float64]) -> float:
    if values.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(values))))
