"""Shared graph fixtures.

Each fixture returns a dict mapping identifiers to freshly built nodes.
"""

from __future__ import annotations

from typing import Dict

import pytest

from spgraph.model.node import Node


def build(*names: str) -> Dict[str, Node]:
    return {name: Node(name) for name in names}


@pytest.fixture
def chain():
    #  A ──1──► B ──2──► C
    g = build("A", "B", "C")
    g["A"].add_directed_edge(g["B"], 1)
    g["B"].add_directed_edge(g["C"], 2)
    return g


@pytest.fixture
def detour():
    #  A ─────10─────► C
    #  │               ▲
    #  └──1──► B ──1───┘
    g = build("A", "B", "C")
    g["A"].add_directed_edge(g["C"], 10)
    g["A"].add_directed_edge(g["B"], 1)
    g["B"].add_directed_edge(g["C"], 1)
    return g


@pytest.fixture
def disconnected():
    #  A ──1──► B      Y ──1──► Z
    g = build("A", "B", "Y", "Z")
    g["A"].add_directed_edge(g["B"], 1)
    g["Y"].add_directed_edge(g["Z"], 1)
    return g


@pytest.fixture
def two_branches():
    # The nearest first hop (B) leads to the expensive branch.
    #  A ──1──► B ──10──► D
    #  │                  ▲
    #  └──2──► C ───1─────┘
    g = build("A", "B", "C", "D")
    g["A"].add_directed_edge(g["B"], 1)
    g["A"].add_directed_edge(g["C"], 2)
    g["B"].add_directed_edge(g["D"], 10)
    g["C"].add_directed_edge(g["D"], 1)
    return g


@pytest.fixture
def dead_end_branch():
    # The nearest first hop (B) has no way out.
    #  A ──1──► B
    #  │
    #  └──5──► C ──1──► D
    g = build("A", "B", "C", "D")
    g["A"].add_directed_edge(g["B"], 1)
    g["A"].add_directed_edge(g["C"], 5)
    g["C"].add_directed_edge(g["D"], 1)
    return g


@pytest.fixture
def diamond():
    # Equal-cost branches; B is wired first.
    #  A ──1──► B ──1──► D
    #  │                 ▲
    #  └──1──► C ──1─────┘
    g = build("A", "B", "C", "D")
    g["A"].add_directed_edge(g["B"], 1)
    g["A"].add_directed_edge(g["C"], 1)
    g["B"].add_directed_edge(g["D"], 1)
    g["C"].add_directed_edge(g["D"], 1)
    return g


@pytest.fixture
def ring():
    # Undirected square with a heavier direct link A-C.
    #  A ──1── B
    #  │ \     │
    #  1   5   1
    #  │     \ │
    #  D ──1── C
    g = build("A", "B", "C", "D")
    g["A"].add_undirected_edge(g["B"], 1)
    g["B"].add_undirected_edge(g["C"], 1)
    g["C"].add_undirected_edge(g["D"], 1)
    g["D"].add_undirected_edge(g["A"], 1)
    g["A"].add_undirected_edge(g["C"], 5)
    return g
