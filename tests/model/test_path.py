"""Tests for the Path result dataclass."""

import pytest

from spgraph.algorithms.state import SearchState
from spgraph.model.node import Node
from spgraph.model.path import Path


@pytest.fixture
def abc():
    return Node("A"), Node("B"), Node("C")


def test_path_basic_creation(abc):
    a, b, c = abc
    path = Path((a, b, c), (0, 1, 3))

    assert path.cost == 3
    assert len(path) == 3
    assert path.src_node is a
    assert path.dst_node is c
    assert path[1] is b
    assert list(path) == [a, b, c]
    assert path.identifiers == ["A", "B", "C"]
    assert bool(path)


def test_empty_path():
    path = Path()
    assert len(path) == 0
    assert path.cost == 0.0
    assert not path
    assert path.identifiers == []
    with pytest.raises(IndexError):
        _ = path.src_node


def test_mismatched_lengths_rejected(abc):
    a, b, _ = abc
    with pytest.raises(ValueError, match="2 nodes but 1 distances"):
        Path((a, b), (0,))


def test_from_state(abc):
    a, b, c = abc
    state = SearchState()
    state.set_origin(a)
    state.update(b, 2, a)
    state.update(c, 5, b)

    path = Path.from_state([a, b, c], state)
    assert path.distances == (0, 2, 5)
    assert path.distance_of(b) == 2


def test_distance_of_missing_node(abc):
    a, b, c = abc
    path = Path((a, b), (0, 1))
    with pytest.raises(KeyError):
        path.distance_of(c)


def test_ordering_and_equality(abc):
    a, b, c = abc
    short = Path((a, c), (0, 2))
    long = Path((a, b, c), (0, 1, 3))

    assert short < long
    assert sorted([long, short]) == [short, long]
    assert short == Path((a, c), (0, 2))
    assert short != Path((a, c), (0, 4))
    assert short.__lt__("not a path") is NotImplemented
