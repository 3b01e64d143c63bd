"""Partition strategies. Importing this package registers all of them."""

from surftext.engine.strategies.base import PartitionStrategy
from surftext.engine.strategies.equal_deviation import EqualDeviationStrategy
from surftext.engine.strategies.equal_height import EqualHeightStrategy
from surftext.engine.strategies.population import EqualPopulationStrategy, split_bounds
from surftext.engine.strategies.uniform import UniformStrategy

__all__ = [
    "PartitionStrategy",
    "EqualPopulationStrategy",
    "UniformStrategy",
    "EqualHeightStrategy",
    "EqualDeviationStrategy",
    "split_bounds",
]
