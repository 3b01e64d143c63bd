"""surftext encoding engine — partition strategies, zoned classifier, encoder."""

from surftext.engine.classifier import ZonedClassifier
from surftext.engine.config import EncoderConfig, OutOfDomainPolicy
from surftext.engine.encoder import Encoder
from surftext.engine.records import BoundaryEntry, BoundaryTable, Labelling, TextPoint
from surftext.engine.registry import StrategyRegistry, get_registry, strategy
from surftext.engine.strategies import (
    EqualDeviationStrategy,
    EqualHeightStrategy,
    PartitionStrategy,
    UniformStrategy,
)

__all__ = [
    "BoundaryEntry",
    "BoundaryTable",
    "Encoder",
    "EncoderConfig",
    "EqualDeviationStrategy",
    "EqualHeightStrategy",
    "Labelling",
    "OutOfDomainPolicy",
    "PartitionStrategy",
    "StrategyRegistry",
    "TextPoint",
    "UniformStrategy",
    "ZonedClassifier",
    "get_registry",
    "strategy",
]
