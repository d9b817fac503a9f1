"""spgraph: shortest paths over small in-memory weighted graphs.

Callers build a directed, weighted graph out of ``Node`` objects and ask a
``PathFinder`` for the shortest path between two of them. Search state is
kept in a per-run ``SearchState``, so a graph can be searched repeatedly
without resetting anything.

Primary API:
    Node - Graph vertex; wire it with add_directed_edge/add_undirected_edge
    PathFinder - Search engine (shortest_path, search, generate_path)
    Path - Search result with per-node distances
    NoPathError - Raised when the end node cannot be reached
    format_path() - Render a path as "(A, 0) => (B, 1) => x"

Example:
    from spgraph import Node, PathFinder

    a, b, c = Node("A"), Node("B"), Node("C")
    a.add_directed_edge(b, 1)
    b.add_directed_edge(c, 2)

    nodes = PathFinder().shortest_path(a, c)    # [a, b, c]
    path = PathFinder().search(a, c)            # path.cost == 3
"""

from __future__ import annotations

from spgraph import logging
from spgraph._version import __version__
from spgraph.algorithms import PathFinder, SearchState, shortest_path
from spgraph.config import SEARCH_CONFIG, SearchConfig
from spgraph.exceptions import NoPathError, StaleSearchStateError
from spgraph.lib.nx import from_networkx, to_networkx
from spgraph.model import Edge, Node, Path
from spgraph.report import format_path, print_path
from spgraph.types import Cost, Frontier

__all__ = [
    # Version
    "__version__",
    # Model
    "Edge",
    "Node",
    "Path",
    # Search
    "PathFinder",
    "SearchState",
    "shortest_path",
    # Configuration and types
    "SearchConfig",
    "SEARCH_CONFIG",
    "Frontier",
    "Cost",
    # Errors
    "NoPathError",
    "StaleSearchStateError",
    # Presentation
    "format_path",
    "print_path",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
