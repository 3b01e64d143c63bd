"""Zoned classifier — maps a value to the symbol of the zone containing it.

Zone lookup is a binary search over the table's boundaries. Ties on a
boundary resolve by sign: a positive value belongs to the zone it closes
``(low, high]``, a zero or negative value to the zone it opens
``[low, high)``. The two outermost edges are closed.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from surftext.engine.config import OutOfDomainPolicy
from surftext.engine.records import BoundaryTable
from surftext.errors import OutOfDomainError

logger = logging.getLogger(__name__)


class ZonedClassifier:
    def __init__(
        self,
        table: BoundaryTable,
        policy: OutOfDomainPolicy = OutOfDomainPolicy.CLAMP,
    ) -> None:
        self.table = table
        self.policy = policy
        self._bounds = table.bounds
        self._zone_symbols = np.array(table.zone_symbols(), dtype="<U1")

    @classmethod
    def build(
        cls,
        table: BoundaryTable,
        policy: OutOfDomainPolicy = OutOfDomainPolicy.CLAMP,
    ) -> ZonedClassifier:
        clf = cls(table, policy)
        logger.debug(
            "Classifier built: %d zones over [%g, %g], policy=%s",
            table.zones,
            table.low,
            table.high,
            policy.value,
        )
        return clf

    @property
    def zones(self) -> int:
        return self.table.zones

    def in_domain(self, value: float) -> bool:
        return bool(self.table.low <= value <= self.table.high)

    def out_of_domain_mask(self, values: ArrayLike) -> NDArray[np.bool_]:
        arr = np.asarray(values, dtype=np.float64)
        return ~((arr >= self.table.low) & (arr <= self.table.high))

    def locate(self, values: ArrayLike) -> NDArray[np.int64]:
        """Zone index of every value; out-of-range values follow the policy."""
        arr = np.atleast_1d(np.asarray(values, dtype=np.float64))
        outside = self.out_of_domain_mask(arr)
        if outside.any():
            # NaN has no zone under either policy
            if np.isnan(arr).any():
                raise OutOfDomainError(float("nan"), self.table.low, self.table.high)
            if self.policy is OutOfDomainPolicy.RAISE:
                bad = float(arr[np.argmax(outside)])
                raise OutOfDomainError(bad, self.table.low, self.table.high)

        closing = np.searchsorted(self._bounds, arr, side="left") - 1
        opening = np.searchsorted(self._bounds, arr, side="right") - 1
        zone = np.where(arr > 0.0, closing, opening)
        return np.clip(zone, 0, self.zones - 1).astype(np.int64)

    def classify(self, value: float) -> str:
        return str(self._zone_symbols[self.locate(value)[0]])

    def classify_many(self, values: ArrayLike) -> list[str]:
        return [str(s) for s in self._zone_symbols[self.locate(values)]]
