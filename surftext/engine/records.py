"""Records exchanged between strategies, classifier and encoder.

A BoundaryTable holds ``zones + 1`` ordered entries. Zone ``k`` spans
entries ``k`` and ``k + 1``:

    positive side   (low, high]
    negative side   [low, high)
    zero side       [low, high]     (also the outermost edges)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class BoundaryEntry:
    """A zone symbol paired with one edge of the value range."""

    symbol: str
    boundary: float


@dataclass(frozen=True)
class TextPoint:
    """A classified sample: original point index and its symbol."""

    index: int
    symbol: str


class Labelling(enum.Enum):
    # Negative zones take their low entry's symbol, positive zones their high entry's
    SIGNED = "signed"
    # Zone k takes entry k's symbol; the last entry only closes the range
    ASCENDING = "ascending"


@dataclass(frozen=True)
class BoundaryTable:
    entries: tuple[BoundaryEntry, ...]
    labelling: Labelling

    def __post_init__(self) -> None:
        if len(self.entries) < 2:
            raise ValueError("A boundary table needs at least two entries")
        bounds = [e.boundary for e in self.entries]
        if any(b > a for a, b in zip(bounds[1:], bounds)):
            raise ValueError(f"Boundaries must be ascending: {bounds}")

    @property
    def zones(self) -> int:
        return len(self.entries) - 1

    @property
    def bounds(self) -> NDArray[np.float64]:
        return np.array([e.boundary for e in self.entries], dtype=np.float64)

    @property
    def symbols(self) -> str:
        return "".join(e.symbol for e in self.entries)

    @property
    def low(self) -> float:
        return self.entries[0].boundary

    @property
    def high(self) -> float:
        return self.entries[-1].boundary

    def zone_symbols(self) -> list[str]:
        """Symbol of every zone, lowest zone first."""
        out: list[str] = []
        for k in range(self.zones):
            low, high = self.entries[k], self.entries[k + 1]
            if self.labelling is Labelling.SIGNED and low.boundary >= 0.0:
                out.append(high.symbol)
            else:
                out.append(low.symbol)
        return out

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
