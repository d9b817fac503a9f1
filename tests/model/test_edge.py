"""Tests for Edge validation and immutability."""

import dataclasses
import math

import pytest

import spgraph.config as config_module
from spgraph.config import SearchConfig
from spgraph.model.edge import Edge
from spgraph.model.node import Node


def test_edge_fields():
    target = Node("B")
    edge = Edge(3, target)
    assert edge.weight == 3
    assert edge.target is target


def test_edge_is_frozen():
    edge = Edge(1, Node("B"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        edge.weight = 5


def test_equality_uses_target_identity():
    b1, b2 = Node("B"), Node("B")
    assert Edge(1, b1) == Edge(1, b1)
    assert Edge(1, b1) != Edge(1, b2)
    assert Edge(1, b1) != Edge(2, b1)


@pytest.mark.parametrize("weight", [0, 1, 2.5, 1e300])
def test_valid_weights(weight):
    assert Edge(weight, Node("B")).weight == weight


@pytest.mark.parametrize("weight", ["1", None, True, math.nan, math.inf, -math.inf])
def test_invalid_weights(weight):
    with pytest.raises(ValueError):
        Edge(weight, Node("B"))


def test_negative_weight_rejected_by_default():
    with pytest.raises(ValueError, match="Negative edge weight -1 to 'B'"):
        Edge(-1, Node("B"))


def test_negative_weight_allowed_by_config(monkeypatch):
    monkeypatch.setattr(
        config_module, "SEARCH_CONFIG", SearchConfig(allow_negative_weights=True)
    )
    a, b = Node("A"), Node("B")
    a.add_directed_edge(b, -2)
    assert a.get_edge(b).weight == -2


def test_infinite_weight_rejected_when_wiring():
    a, b = Node("A"), Node("B")
    with pytest.raises(ValueError, match="must be finite"):
        a.add_directed_edge(b, math.inf)
    assert a.edges == []


def test_negative_weight_switch_on_finder_config_is_ignored():
    from spgraph.algorithms.dijkstra import PathFinder

    finder = PathFinder(SearchConfig(allow_negative_weights=True))
    assert finder.config.allow_negative_weights is True
    with pytest.raises(ValueError, match="Negative edge weight"):
        Node("A").add_directed_edge(Node("B"), -1)
