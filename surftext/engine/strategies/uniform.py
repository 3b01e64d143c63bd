"""Uniform width — equal-width zones over a fixed report-unit domain.

The domain (default [-100, 100]) is split into an even number of zones.
Negative zones get lowercase letters that fall toward 'a' as the zone
nears zero, the zero boundary gets 'A', positive zones get uppercase
letters rising from 'A'. With 20 zones: j..a | A..J.
"""

from __future__ import annotations

import numpy as np

from surftext.engine.records import BoundaryEntry, BoundaryTable, Labelling
from surftext.engine.registry import strategy
from surftext.engine.strategies.base import PartitionStrategy
from surftext.errors import AlphabetExhaustedError, EncodingError, InvalidZoneCountError
from surftext.surface.grid import Surface
from surftext.utils.math_helpers import ALPHABET_SIZE, linspace, lower_letter, upper_letter


@strategy(name="uniform", description="Equal-width zones over a fixed domain")
class UniformStrategy(PartitionStrategy):
    max_zones = 2 * ALPHABET_SIZE

    def check_zones(self, surface: Surface, zones: int) -> None:
        super().check_zones(surface, zones)
        if zones % 2:
            raise InvalidZoneCountError(
                f"Uniform partition needs an even zone count to split around zero, got {zones}"
            )
        if zones > self.max_zones:
            raise AlphabetExhaustedError(
                f"{zones} zones need {zones // 2} letters per case, only {ALPHABET_SIZE} exist"
            )
        low, high = self.config.uniform_low, self.config.uniform_high
        if not low < 0.0 < high or not np.isclose(low, -high):
            raise EncodingError(
                f"Uniform domain [{low}, {high}] must be symmetric around zero"
            )

    def build_table(self, surface: Surface, zones: int) -> BoundaryTable:
        bounds = linspace(self.config.uniform_low, self.config.uniform_high, zones + 1)
        half = zones // 2
        middle = 0.0

        entries: list[BoundaryEntry] = []
        for i in range(half):
            entries.append(BoundaryEntry(lower_letter(half - 1 - i), float(bounds[i])))
        entries.append(BoundaryEntry("A", middle))
        for i in range(half + 1, zones + 1):
            entries.append(BoundaryEntry(upper_letter(i - half - 1), float(bounds[i])))

        return BoundaryTable(entries=tuple(entries), labelling=Labelling.SIGNED)
