"""Result of a shortest-path search.

The ``Path`` dataclass stores the ordered nodes from start to end together
with the distance the search recorded for each of them. Helpers expose the
endpoints, identifiers and total cost, and paths order by cost.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterator, List, Tuple

from spgraph.types import Cost

if TYPE_CHECKING:
    from spgraph.algorithms.state import SearchState
    from spgraph.model.node import Node


@dataclass(frozen=True)
class Path:
    """Ordered sequence of nodes from a start node to an end node.

    An empty path means the start and end nodes were the same.

    Attributes:
        nodes: Nodes in travel order, both endpoints included.
        distances: Distance from the start node recorded for each node.
    """

    nodes: Tuple["Node", ...] = ()
    distances: Tuple[Cost, ...] = ()

    def __post_init__(self) -> None:
        if len(self.nodes) != len(self.distances):
            raise ValueError(
                f"Path has {len(self.nodes)} nodes but {len(self.distances)} distances."
            )

    @classmethod
    def from_state(cls, nodes: List["Node"], state: "SearchState") -> "Path":
        """Build a path from reconstructed nodes and the state that produced them."""
        return cls(tuple(nodes), tuple(state.distance(node) for node in nodes))

    def __getitem__(self, idx: int) -> "Node":
        return self.nodes[idx]

    def __iter__(self) -> Iterator["Node"]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __bool__(self) -> bool:
        return bool(self.nodes)

    def __lt__(self, other: Any) -> bool:
        """Compare two paths by total cost."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    @property
    def cost(self) -> Cost:
        """Total distance from the first to the last node (0 for an empty path)."""
        return self.distances[-1] if self.distances else 0.0

    @property
    def src_node(self) -> "Node":
        """Return the first node in the path.

        Raises:
            IndexError: If the path is empty.
        """
        return self.nodes[0]

    @property
    def dst_node(self) -> "Node":
        """Return the last node in the path.

        Raises:
            IndexError: If the path is empty.
        """
        return self.nodes[-1]

    @property
    def identifiers(self) -> List[str]:
        """Identifiers of the nodes in travel order."""
        return [node.identifier for node in self.nodes]

    def distance_of(self, node: "Node") -> Cost:
        """Return the recorded distance of ``node``.

        Raises:
            KeyError: If ``node`` is not on the path.
        """
        for candidate, distance in zip(self.nodes, self.distances):
            if candidate is node:
                return distance
        raise KeyError(f"Node '{node.identifier}' is not on this path.")
