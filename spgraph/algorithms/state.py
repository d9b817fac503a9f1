"""Per-search mutable state keyed by node identity.

Keeping distances, predecessors and visited flags outside the nodes lets the
same graph serve any number of searches, one after another or side by side,
without resetting anything on the nodes themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional, Set

from spgraph.types import INFINITY, Cost

if TYPE_CHECKING:
    from spgraph.model.node import Node


@dataclass
class SearchState:
    """Tentative distances, predecessors and settled nodes of one search run.

    Nodes without an entry have distance ``inf``, no predecessor and are not
    visited.

    Attributes:
        distances: Tentative distance per reached node.
        predecessors: Node preceding each node on its best-known path.
        visited: Nodes settled by the search.
    """

    distances: Dict["Node", Cost] = field(default_factory=dict)
    predecessors: Dict["Node", "Node"] = field(default_factory=dict)
    visited: Set["Node"] = field(default_factory=set)

    def distance(self, node: "Node") -> Cost:
        """Return the tentative distance of ``node`` (``inf`` if unreached)."""
        return self.distances.get(node, INFINITY)

    def predecessor(self, node: "Node") -> Optional["Node"]:
        """Return the predecessor of ``node``, or None."""
        return self.predecessors.get(node)

    def is_visited(self, node: "Node") -> bool:
        return node in self.visited

    def set_origin(self, node: "Node") -> None:
        """Mark ``node`` as the zero-distance origin of the search."""
        self.distances[node] = 0

    def update(self, node: "Node", distance: Cost, predecessor: "Node") -> None:
        """Record a strictly shorter path to ``node`` arriving from ``predecessor``.

        Raises:
            ValueError: If ``distance`` is not lower than the current distance.
        """
        if not distance < self.distance(node):
            raise ValueError(
                f"Distance of '{node.identifier}' can only decrease "
                f"({self.distance(node)} -> {distance})."
            )
        self.distances[node] = distance
        self.predecessors[node] = predecessor

    def mark_visited(self, node: "Node") -> None:
        """Settle ``node``.

        Raises:
            RuntimeError: If ``node`` was already settled in this run.
        """
        if node in self.visited:
            raise RuntimeError(f"Node '{node.identifier}' was already visited.")
        self.visited.add(node)

    @property
    def is_pristine(self) -> bool:
        """True when no node has any recorded state."""
        return not (self.distances or self.predecessors or self.visited)

    def reset(self) -> None:
        """Forget all recorded state so the object can serve a new search."""
        self.distances.clear()
        self.predecessors.clear()
        self.visited.clear()
