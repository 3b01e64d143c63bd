"""Equal population over raw height — zones hold equal sample counts of [min, max]."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from surftext.engine.registry import strategy
from surftext.engine.strategies.population import EqualPopulationStrategy
from surftext.surface.grid import Surface


@strategy(name="equal_height", description="Equal-count zones over sorted heights")
class EqualHeightStrategy(EqualPopulationStrategy):
    def sorted_values(self, surface: Surface) -> NDArray[np.float64]:
        return surface.sorted_heights()
