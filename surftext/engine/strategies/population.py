"""Equal-population partitioning shared by the height and deviation strategies.

Boundaries are placed so each zone holds about the same number of samples.
The walk starts from both ends of the sorted values and alternates toward
the middle; each boundary is the mean of the two samples it separates.
Samples left over by the integer split end up in the middle zone.
"""

from __future__ import annotations

import abc
import logging

import numpy as np
from numpy.typing import NDArray

from surftext.engine.records import BoundaryEntry, BoundaryTable, Labelling
from surftext.engine.strategies.base import PartitionStrategy
from surftext.errors import AlphabetExhaustedError, InvalidZoneCountError
from surftext.surface.grid import Surface
from surftext.utils.math_helpers import ALPHABET_SIZE, midpoint, upper_letter

logger = logging.getLogger(__name__)


def split_bounds(values: NDArray[np.float64], zones: int) -> NDArray[np.float64]:
    """Zone boundaries over ascending ``values`` with ``zones`` equal-count zones.

    Returns ``zones + 1`` ascending boundaries; the first and last are the
    minimum and maximum of ``values``.
    """
    total = values.size
    per_zone = total // zones
    half = zones // 2

    bounds = np.empty(zones + 1, dtype=np.float64)
    bounds[0] = values[0]
    bounds[zones] = values[-1]

    low, high = float(values[0]), float(values[-1])
    # Sorted position of the last sample in the current zone, counted from either end
    cursor = per_zone - 1
    index = 0
    take_low = True

    while True:
        if take_low:
            bounds[index] = low
            if index == half:
                break
            low = midpoint(values, cursor, cursor + 1)
        else:
            bounds[zones - index] = high
            high = midpoint(values, total - 1 - cursor, total - 2 - cursor)
            cursor += per_zone
            index += 1
        take_low = not take_low

    # Odd counts leave one slot between the two halves
    if zones % 2:
        bounds[zones - half] = high

    return bounds


class EqualPopulationStrategy(PartitionStrategy):
    max_zones = ALPHABET_SIZE - 1

    def check_zones(self, surface: Surface, zones: int) -> None:
        super().check_zones(surface, zones)
        if zones > self.max_zones:
            raise AlphabetExhaustedError(
                f"{zones} zones need {zones + 1} letters, only {ALPHABET_SIZE} exist"
            )
        if zones > surface.total_count:
            raise InvalidZoneCountError(
                f"Cannot split {surface.total_count} samples into {zones} populated zones"
            )

    @abc.abstractmethod
    def sorted_values(self, surface: Surface) -> NDArray[np.float64]: ...

    def build_table(self, surface: Surface, zones: int) -> BoundaryTable:
        values = self.sorted_values(surface)
        remainder = values.size % zones
        if remainder:
            logger.debug(
                "%s: %d samples beyond %d per zone go to the middle zone",
                self.name,
                remainder,
                values.size // zones,
            )

        bounds = split_bounds(values, zones)
        entries = tuple(
            BoundaryEntry(upper_letter(i), float(b)) for i, b in enumerate(bounds)
        )
        return BoundaryTable(entries=entries, labelling=Labelling.ASCENDING)
