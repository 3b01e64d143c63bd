"""PartitionStrategy — computes a boundary table from a surface and a zone count."""

from __future__ import annotations

import abc
import logging

import numpy as np
from numpy.typing import NDArray

from surftext.engine.config import EncoderConfig
from surftext.engine.records import BoundaryTable
from surftext.errors import InvalidZoneCountError
from surftext.surface.grid import Surface

logger = logging.getLogger(__name__)


class PartitionStrategy(abc.ABC):
    """Splits a value range into zones and names each zone with a letter."""

    name: str = ""
    # Largest zone count the strategy's alphabet can label
    max_zones: int = 0

    def __init__(self, config: EncoderConfig | None = None) -> None:
        self.config = config or EncoderConfig()

    def partition(self, surface: Surface, zones: int) -> BoundaryTable:
        """Validate ``zones`` then build the table."""
        self.check_zones(surface, zones)
        table = self.build_table(surface, zones)
        logger.debug(
            "%s: %d zones, symbols %s, bounds %s",
            self.name,
            table.zones,
            table.symbols,
            np.array2string(table.bounds, precision=4),
        )
        return table

    def check_zones(self, surface: Surface, zones: int) -> None:
        if isinstance(zones, bool) or not isinstance(zones, (int, np.integer)):
            raise InvalidZoneCountError(f"Zone count must be an integer, got {zones!r}")
        if zones <= 0:
            raise InvalidZoneCountError(f"Invalid zone count {zones}: must be positive")

    @abc.abstractmethod
    def build_table(self, surface: Surface, zones: int) -> BoundaryTable: ...

    def measure(self, surface: Surface) -> NDArray[np.float64]:
        """Values the classifier sees for each sample, in scan order."""
        return surface.heights

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
