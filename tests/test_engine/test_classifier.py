"""Tests for the zoned classifier and its interval convention."""

import math

import pytest

from surftext.engine.classifier import ZonedClassifier
from surftext.engine.config import OutOfDomainPolicy
from surftext.engine.records import BoundaryEntry, BoundaryTable, Labelling
from surftext.engine.strategies.uniform import UniformStrategy
from surftext.errors import OutOfDomainError


def _uniform_table(zones=20):
    return UniformStrategy().build_table(None, zones)


def _ascending(bounds):
    letters = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    return BoundaryTable(
        entries=tuple(BoundaryEntry(letters[i], b) for i, b in enumerate(bounds)),
        labelling=Labelling.ASCENDING,
    )


def test_zero_maps_to_A():
    clf = ZonedClassifier.build(_uniform_table())
    assert clf.classify(0.0) == "A"


def test_most_negative_zone():
    clf = ZonedClassifier.build(_uniform_table())
    assert clf.classify(-95.0) == "j"
    assert clf.classify(-100.0) == "j"


def test_positive_zones_are_closed_above():
    clf = ZonedClassifier.build(_uniform_table())
    assert clf.classify(10.0) == "A"
    assert clf.classify(10.5) == "B"
    assert clf.classify(100.0) == "J"


def test_negative_zones_are_closed_below():
    clf = ZonedClassifier.build(_uniform_table())
    assert clf.classify(-10.0) == "a"
    assert clf.classify(-10.5) == "b"
    assert clf.classify(-0.001) == "a"


def test_ascending_outer_edges_closed():
    clf = ZonedClassifier.build(_ascending([1.0, 2.0, 3.0]))
    assert clf.classify(1.0) == "A"
    assert clf.classify(2.0) == "A"
    assert clf.classify(2.5) == "B"
    assert clf.classify(3.0) == "B"


def test_ascending_negative_ties_open_upward():
    clf = ZonedClassifier.build(_ascending([-3.0, -2.0, -1.0]))
    assert clf.classify(-3.0) == "A"
    assert clf.classify(-2.0) == "B"
    assert clf.classify(-1.0) == "B"


def test_zero_straddling_zone_closed():
    clf = ZonedClassifier.build(_ascending([-2.0, -1.0, 1.0, 2.0]))
    assert clf.classify(-1.0) == "B"
    assert clf.classify(0.0) == "B"
    assert clf.classify(1.0) == "B"


def test_clamp_policy():
    clf = ZonedClassifier.build(_uniform_table(), OutOfDomainPolicy.CLAMP)
    assert not clf.in_domain(150.0)
    assert clf.classify(150.0) == "J"
    assert clf.classify(-150.0) == "j"


def test_raise_policy():
    clf = ZonedClassifier.build(_uniform_table(), OutOfDomainPolicy.RAISE)
    with pytest.raises(OutOfDomainError) as exc:
        clf.classify(150.0)
    assert exc.value.value == 150.0
    assert exc.value.high == 100.0


def test_nan_always_rejected():
    clf = ZonedClassifier.build(_uniform_table(), OutOfDomainPolicy.CLAMP)
    with pytest.raises(OutOfDomainError):
        clf.classify(math.nan)


def test_classify_many_preserves_order():
    clf = ZonedClassifier.build(_uniform_table())
    assert clf.classify_many([95.0, 0.0, -95.0, 5.0]) == ["J", "A", "j", "A"]
