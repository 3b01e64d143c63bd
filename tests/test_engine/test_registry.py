"""Tests for the strategy registry."""

import pytest

import surftext.engine  # noqa: F401  registers the built-in strategies
from surftext.engine.records import BoundaryEntry, BoundaryTable, Labelling
from surftext.engine.registry import StrategyRegistry, StrategySpec, get_registry
from surftext.engine.strategies import (
    EqualDeviationStrategy,
    EqualHeightStrategy,
    PartitionStrategy,
    UniformStrategy,
)


class _FlatStrategy(PartitionStrategy):
    def build_table(self, surface, zones):
        return BoundaryTable(
            entries=(BoundaryEntry("A", 0.0), BoundaryEntry("B", 1.0)),
            labelling=Labelling.ASCENDING,
        )


def test_builtin_strategies_registered():
    reg = get_registry()
    assert {"uniform", "equal_height", "equal_deviation"} <= set(reg.names())


def test_create_returns_instances():
    reg = get_registry()
    assert isinstance(reg.create("uniform"), UniformStrategy)
    assert isinstance(reg.create("equal_height"), EqualHeightStrategy)
    assert isinstance(reg.create("equal_deviation"), EqualDeviationStrategy)


def test_decorator_sets_name():
    assert UniformStrategy.name == "uniform"
    assert EqualDeviationStrategy().name == "equal_deviation"


def test_register_and_get():
    reg = StrategyRegistry()
    spec = StrategySpec(name="flat", cls=_FlatStrategy)
    reg.register(spec)
    assert reg.get("flat") is spec
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = StrategyRegistry()
    reg.register(StrategySpec(name="flat", cls=_FlatStrategy))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(StrategySpec(name="flat", cls=_FlatStrategy))


def test_unknown_name_lists_known():
    reg = StrategyRegistry()
    reg.register(StrategySpec(name="flat", cls=_FlatStrategy))
    with pytest.raises(KeyError, match="flat"):
        reg.get("missing")
