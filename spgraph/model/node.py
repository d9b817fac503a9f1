"""Graph vertex with an ordered list of outgoing weighted edges.

A graph is the set of nodes reachable through edge references; there is no
container object. Nodes hold no search state: distances, predecessors and the
visited flag of a run live in a ``SearchState`` passed to ``relax_neighbours``.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Optional

from spgraph.model.edge import Edge
from spgraph.types import Cost

if TYPE_CHECKING:
    from spgraph.algorithms.state import SearchState


@dataclass(eq=False, repr=False)
class Node:
    """Represents a vertex in a directed, weighted graph.

    Nodes compare and hash by identity, so two nodes sharing an identifier are
    still distinct vertices.

    Attributes:
        identifier: Name used for diagnostics and reporting.
        edges: Outgoing edges. Insertion order is the relaxation order and
            decides ties between equally distant neighbours.
    """

    identifier: str
    edges: List[Edge] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Node({self.identifier!r}, edges={len(self.edges)})"

    @property
    def neighbours(self) -> List["Node"]:
        """Targets of the outgoing edges, in edge order."""
        return [edge.target for edge in self.edges]

    @property
    def degree(self) -> int:
        """Number of outgoing edges."""
        return len(self.edges)

    def get_edge(self, target: "Node") -> Optional[Edge]:
        """Return the outgoing edge to ``target``, or None if there is none."""
        for edge in self.edges:
            if edge.target is target:
                return edge
        return None

    def remove_edge(self, target: "Node") -> bool:
        """Remove the outgoing edge to ``target``.

        Returns:
            True if an edge was removed, False if there was none.
        """
        for idx, edge in enumerate(self.edges):
            if edge.target is target:
                del self.edges[idx]
                return True
        return False

    def add_directed_edge(self, target: "Node", weight: Cost) -> Edge:
        """Add an edge from this node to ``target``.

        An existing edge to the same target is replaced: it is removed and the
        new edge is appended, so the node keeps at most one edge per target and
        the updated edge moves to the end of the relaxation order.

        Args:
            target: Destination node.
            weight: Traversal cost.

        Returns:
            The newly created edge.

        Raises:
            TypeError: If ``target`` is not a Node.
            ValueError: If ``weight`` is not a valid edge weight.
        """
        if not isinstance(target, Node):
            raise TypeError(f"Edge target must be a Node, got {type(target).__name__}")
        edge = Edge(weight, target)
        self.remove_edge(target)
        self.edges.append(edge)
        return edge

    def add_undirected_edge(self, target: "Node", weight: Cost) -> None:
        """Add edges in both directions with the same weight.

        The two edges are independent afterwards; updating one side does not
        update the other.
        """
        self.add_directed_edge(target, weight)
        target.add_directed_edge(self, weight)

    def relax_neighbours(self, state: "SearchState") -> List["Node"]:
        """Relax every outgoing edge whose target is not yet visited.

        A target's tentative distance and predecessor are updated when the path
        through this node is strictly shorter than what ``state`` holds.

        Args:
            state: Per-search distances, predecessors and visited flags.

        Self-loops are skipped: they can never shorten this node's own distance.

        Returns:
            All unvisited targets in edge order, whether or not their distance
            improved. Empty when every target has been visited.
        """
        unvisited: List[Node] = []
        own_distance = state.distance(self)
        for edge in self.edges:
            neighbour = edge.target
            if neighbour is self or state.is_visited(neighbour):
                continue
            candidate = own_distance + edge.weight
            if candidate < state.distance(neighbour):
                state.update(neighbour, candidate, self)
            unvisited.append(neighbour)
        return unvisited

    def iter_reachable(self) -> Iterator["Node"]:
        """Yield this node and every node reachable from it, breadth first."""
        seen = {self}
        queue = deque([self])
        while queue:
            node = queue.popleft()
            yield node
            for edge in node.edges:
                if edge.target not in seen:
                    seen.add(edge.target)
                    queue.append(edge.target)
