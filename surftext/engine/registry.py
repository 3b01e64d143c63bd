"""Strategy registry — every partition strategy is a class registered via decorator.

Usage:
    @strategy(name="uniform", description="Equal-width zones over a fixed domain")
    class UniformStrategy(PartitionStrategy):
        def partition(self, surface, zones):
            ...

Adding a new strategy = creating one module with the decorator. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from surftext.engine.config import EncoderConfig
    from surftext.engine.strategies.base import PartitionStrategy

logger = logging.getLogger(__name__)


@dataclass
class StrategySpec:
    name: str
    cls: type[PartitionStrategy]
    description: str = ""


class StrategyRegistry:
    """Singleton registry of all partition strategies."""

    def __init__(self) -> None:
        self._strategies: dict[str, StrategySpec] = {}

    def register(self, spec: StrategySpec) -> None:
        if spec.name in self._strategies:
            raise ValueError(f"Duplicate strategy name: {spec.name}")
        self._strategies[spec.name] = spec
        logger.debug("Registered strategy %s (%s)", spec.name, spec.cls.__name__)

    def get(self, name: str) -> StrategySpec:
        try:
            return self._strategies[name]
        except KeyError:
            known = ", ".join(sorted(self._strategies)) or "none"
            raise KeyError(f"Unknown strategy {name!r} (known: {known})") from None

    def create(self, name: str, config: EncoderConfig | None = None) -> PartitionStrategy:
        return self.get(name).cls(config)

    def all(self) -> list[StrategySpec]:
        return sorted(self._strategies.values(), key=lambda s: s.name)

    def names(self) -> list[str]:
        return sorted(self._strategies)

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_registry = StrategyRegistry()


def get_registry() -> StrategyRegistry:
    return _registry


def strategy(*, name: str, description: str = ""):
    """Decorator to register a partition strategy class."""

    def decorator(cls: type[PartitionStrategy]) -> type[PartitionStrategy]:
        cls.name = name
        _registry.register(StrategySpec(name=name, cls=cls, description=description))
        return cls

    return decorator
