"""Surface — an N×N grid of height samples with its reference metadata.

Heights are stored flat in scan (row-major) order. Arrays are copied on
construction and frozen, so a Surface never aliases caller data.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, replace

import numpy as np
from numpy.typing import ArrayLike, NDArray

from surftext.errors import SurfaceError
from surftext.models.metadata import SurfaceMetadata
from surftext.utils.math_helpers import root_mean_square


@dataclass(frozen=True)
class Sample:
    """One grid point: its position in scan order and its height."""

    index: int
    height: float


@dataclass(frozen=True, eq=False)
class Surface:
    # Flat heights in scan order, length N*N
    heights: NDArray[np.float64]
    # Reference height used for metadata and the deviation strategy
    rms: float
    # Correlation lengths, passed through untouched
    clx: float = 0.0
    cly: float = 0.0
    # Point indices; defaults to 0..N*N-1
    indices: NDArray[np.int64] | None = None

    def __post_init__(self) -> None:
        heights = np.array(self.heights, dtype=np.float64).ravel()
        if heights.size == 0:
            raise SurfaceError("Surface has no samples")
        side = math.isqrt(heights.size)
        if side * side != heights.size:
            raise SurfaceError(f"Sample count {heights.size} is not a square grid")

        if self.indices is None:
            indices = np.arange(heights.size, dtype=np.int64)
        else:
            indices = np.array(self.indices, dtype=np.int64).ravel()
            if indices.size != heights.size:
                raise SurfaceError(
                    f"Got {indices.size} indices for {heights.size} heights"
                )

        heights.flags.writeable = False
        indices.flags.writeable = False
        object.__setattr__(self, "heights", heights)
        object.__setattr__(self, "indices", indices)
        object.__setattr__(self, "rms", float(self.rms))
        object.__setattr__(self, "clx", float(self.clx))
        object.__setattr__(self, "cly", float(self.cly))

    @classmethod
    def from_grid(
        cls,
        grid: ArrayLike,
        rms: float | None = None,
        clx: float = 0.0,
        cly: float = 0.0,
    ) -> Surface:
        """Build from a square 2-D array. ``rms`` defaults to the heights' RMS."""
        arr = np.asarray(grid, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise SurfaceError(f"Expected a square 2-D grid, got shape {arr.shape}")
        if rms is None:
            rms = root_mean_square(arr.ravel())
        return cls(heights=arr, rms=rms, clx=clx, cly=cly)

    @property
    def total_count(self) -> int:
        return int(self.heights.size)

    @property
    def side(self) -> int:
        return math.isqrt(self.total_count)

    @property
    def metadata(self) -> SurfaceMetadata:
        return SurfaceMetadata(rms=self.rms, clx=self.clx, cly=self.cly, side=self.side)

    def points(self) -> Iterator[Sample]:
        for index, height in zip(self.indices, self.heights):
            yield Sample(index=int(index), height=float(height))

    def deviations(self) -> NDArray[np.float64]:
        """Absolute distance of every height from the rms reference, in scan order."""
        return np.abs(self.heights - self.rms)

    def sorted_heights(self) -> NDArray[np.float64]:
        return np.sort(self.heights)

    def sorted_deviations(self) -> NDArray[np.float64]:
        return np.sort(self.deviations())

    def rescaled(self, new_rms: float) -> Surface:
        """Scale every height so the rms reference becomes ``new_rms``."""
        if self.rms == 0.0:
            raise SurfaceError("Cannot rescale a surface whose rms reference is zero")
        factor = new_rms / self.rms
        return replace(self, heights=self.heights * factor, rms=new_rms)

    def copy(self) -> Surface:
        return replace(self)

    def as_grid(self) -> NDArray[np.float64]:
        return self.heights.reshape(self.side, self.side)
