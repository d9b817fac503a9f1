"""Search algorithms over spgraph nodes."""

from spgraph.algorithms.dijkstra import PathFinder, shortest_path
from spgraph.algorithms.state import SearchState

__all__ = [
    "PathFinder",
    "SearchState",
    "shortest_path",
]
