"""Equal population over deviation — zones over |height - rms|.

Both the boundary table and the classified values are deviation
magnitudes, so every sample is measured the same way it was binned.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from surftext.engine.registry import strategy
from surftext.engine.strategies.population import EqualPopulationStrategy
from surftext.surface.grid import Surface


@strategy(name="equal_deviation", description="Equal-count zones over sorted |height - rms|")
class EqualDeviationStrategy(EqualPopulationStrategy):
    def sorted_values(self, surface: Surface) -> NDArray[np.float64]:
        return surface.sorted_deviations()

    def measure(self, surface: Surface) -> NDArray[np.float64]:
        return surface.deviations()
