"""Shortest path between two nodes with a simplified Dijkstra search.

Two frontier strategies are available (see ``spgraph.types.Frontier``):

- ``NEIGHBOURS``: after relaxing the current node, the next node to settle is
  the closest of the neighbours that relaxation returned. Nodes discovered
  from earlier nodes are not reconsidered, so on graphs with more than one
  branching point the returned path may be longer than the optimum.
- ``PRIORITY_QUEUE`` (default): every discovered node stays on a min-heap
  keyed by ``(distance, first-discovery order)``, which yields true shortest paths.

In both modes equal distances are resolved in favour of the node seen first,
the end node is never expanded, and an exhausted frontier raises
``NoPathError``.
"""

from __future__ import annotations

from heapq import heappop, heappush
from math import isinf
from typing import Dict, List, Optional, Set, Tuple

from spgraph import config as _config
from spgraph.algorithms.state import SearchState
from spgraph.config import SearchConfig
from spgraph.exceptions import NoPathError, StaleSearchStateError
from spgraph.logging import get_logger
from spgraph.model.node import Node
from spgraph.model.path import Path
from spgraph.types import Cost, Frontier

LOGGER = get_logger(__name__)


class PathFinder:
    """Stateless shortest-path engine.

    All per-run state lives in a ``SearchState``; the finder only holds its
    configuration, so one instance can serve any number of searches.

    Args:
        config: Search configuration. When omitted, the module-level
            ``SEARCH_CONFIG`` in effect at call time is used.
    """

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self._config = config

    @property
    def config(self) -> SearchConfig:
        return self._config if self._config is not None else _config.SEARCH_CONFIG

    def shortest_path(self, start: Node, end: Node) -> List[Node]:
        """Return the nodes of the shortest path from ``start`` to ``end``.

        Returns:
            ``[start, ..., end]``, or an empty list when ``start is end``.

        Raises:
            NoPathError: If ``end`` cannot be reached from ``start``.
        """
        return list(self.search(start, end).nodes)

    def search(
        self, start: Node, end: Node, state: Optional[SearchState] = None
    ) -> Path:
        """Run a search and return the path with its recorded distances.

        Args:
            start: Node to start from.
            end: Node to reach.
            state: Optional caller-owned state to fill in. It must be fresh or
                reset; a new one is created when omitted.

        Returns:
            The path found. Empty when ``start is end``.

        Raises:
            StaleSearchStateError: If ``state`` still holds a previous run.
            NoPathError: If ``end`` cannot be reached from ``start``.
        """
        if state is None:
            state = SearchState()
        elif not state.is_pristine:
            raise StaleSearchStateError(
                "Search state holds results of a previous run; call reset() first."
            )

        if start is end:
            return Path()

        cfg = self.config
        LOGGER.debug(
            "Searching path '%s' -> '%s' (frontier=%s)",
            start.identifier,
            end.identifier,
            cfg.frontier.name,
        )

        state.set_origin(start)
        if cfg.frontier == Frontier.NEIGHBOURS:
            _explore_neighbours(start, end, state, cfg.max_iterations)
        else:
            _explore_priority_queue(start, end, state, cfg.max_iterations)

        nodes = self.generate_path(end, state)
        if nodes[0] is not start:
            raise RuntimeError(
                f"Predecessor chain of '{end.identifier}' ends at "
                f"'{nodes[0].identifier}' instead of '{start.identifier}'."
            )

        path = Path.from_state(nodes, state)
        LOGGER.debug(
            "Found path %s with cost %s after settling %d nodes",
            path.identifiers,
            path.cost,
            len(state.visited),
        )
        return path

    @staticmethod
    def generate_path(end: Node, state: SearchState) -> List[Node]:
        """Walk predecessors back from ``end`` and return the nodes in travel order.

        The walk stops at the first node without a predecessor, which is the
        search's start node for a completed run.

        Raises:
            RuntimeError: If the predecessor chain contains a cycle.
        """
        reversed_nodes = [end]
        seen: Set[Node] = {end}
        node = state.predecessor(end)
        while node is not None:
            if node in seen:
                raise RuntimeError(
                    f"Predecessor cycle detected at node '{node.identifier}'."
                )
            seen.add(node)
            reversed_nodes.append(node)
            node = state.predecessor(node)
        reversed_nodes.reverse()
        return reversed_nodes


def _check_budget(settled: int, max_iterations: Optional[int]) -> None:
    if max_iterations is not None and settled > max_iterations:
        raise RuntimeError(
            f"Search exceeded max_iterations={max_iterations} settled nodes."
        )


def _explore_neighbours(
    start: Node, end: Node, state: SearchState, max_iterations: Optional[int]
) -> None:
    """Settle nodes choosing each next node among the current node's neighbours."""
    current = start
    settled = 0
    while current is not end:
        frontier = current.relax_neighbours(state)
        state.mark_visited(current)
        settled += 1
        _check_budget(settled, max_iterations)

        # min() keeps the first of equally distant candidates
        candidate = min(frontier, key=state.distance, default=None)
        if candidate is None or isinf(state.distance(candidate)):
            # Only neighbours whose distance overflowed to inf would be left
            LOGGER.debug(
                "Frontier exhausted at '%s' before reaching '%s'",
                current.identifier,
                end.identifier,
            )
            raise NoPathError(start, end)
        current = candidate


def _explore_priority_queue(
    start: Node, end: Node, state: SearchState, max_iterations: Optional[int]
) -> None:
    """Settle nodes in global distance order until ``end`` is reached."""
    # Entries are (distance, first-discovery sequence, node). A node is pushed
    # again only when its distance drops, so no two entries share both keys and
    # nodes themselves are never compared.
    min_pq: List[Tuple[Cost, int, Node]] = [(0, 0, start)]
    discovered: Dict[Node, int] = {start: 0}
    settled = 0

    while min_pq:
        distance, _, node = heappop(min_pq)
        if state.is_visited(node) or distance > state.distance(node):
            continue
        if node is end:
            return

        queued = {n: state.distance(n) for n in node.neighbours}
        for neighbour in node.relax_neighbours(state):
            new_distance = state.distance(neighbour)
            if new_distance < queued[neighbour]:
                first_seen = discovered.setdefault(neighbour, len(discovered))
                heappush(min_pq, (new_distance, first_seen, neighbour))
        state.mark_visited(node)
        settled += 1
        _check_budget(settled, max_iterations)

    LOGGER.debug(
        "Frontier exhausted after settling %d nodes without reaching '%s'",
        settled,
        end.identifier,
    )
    raise NoPathError(start, end)


def shortest_path(
    start: Node, end: Node, config: Optional[SearchConfig] = None
) -> List[Node]:
    """Shortcut for ``PathFinder(config).shortest_path(start, end)``."""
    return PathFinder(config).shortest_path(start, end)
