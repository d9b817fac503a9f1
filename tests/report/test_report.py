"""Tests for path rendering."""

import logging

import pytest

from spgraph.algorithms.dijkstra import PathFinder
from spgraph.algorithms.state import SearchState
from spgraph.model.path import Path
from spgraph.report import format_path, print_path


def test_format_search_result(chain):
    path = PathFinder().search(chain["A"], chain["C"])
    assert format_path(path) == "(A, 0) => (B, 1) => (C, 3) => x"


def test_format_fractional_distances(chain):
    a, b = chain["A"], chain["B"]
    assert format_path(Path((a, b), (0, 2.5))) == "(A, 0) => (B, 2.5) => x"


def test_format_empty_path():
    assert format_path(Path()) == "x"
    assert format_path([]) == "x"


def test_format_node_sequence_with_state(detour):
    state = SearchState()
    nodes = PathFinder().search(detour["A"], detour["C"], state).nodes
    assert format_path(list(nodes), state) == "(A, 0) => (B, 1) => (C, 2) => x"


def test_format_node_sequence_requires_state(chain):
    with pytest.raises(ValueError, match="SearchState"):
        format_path([chain["A"]])


def test_print_path_logs_line(caplog, chain):
    path = PathFinder().search(chain["A"], chain["C"])
    with caplog.at_level(logging.INFO, logger="spgraph"):
        print_path(path)
    assert "(A, 0) => (B, 1) => (C, 3) => x" in caplog.text


@pytest.mark.parametrize(
    "distance, rendered",
    [
        (1234567, "1234567"),
        (1234567.0, "1234567"),
        (0.1 + 0.2, "0.30000000000000004"),
        (12345.678, "12345.678"),
    ],
)
def test_format_keeps_full_precision(chain, distance, rendered):
    a, b = chain["A"], chain["B"]
    assert format_path(Path((a, b), (0, distance))) == f"(A, 0) => (B, {rendered}) => x"
