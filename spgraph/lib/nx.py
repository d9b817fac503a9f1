"""NetworkX graph conversion utilities.

Converts between NetworkX graphs and spgraph's node/edge model, which is
handy for building test graphs or cross-checking results against NetworkX.

Example:
    >>> import networkx as nx
    >>> from spgraph import PathFinder
    >>> from spgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=1)
    >>> G.add_edge("B", "C", weight=2)
    >>> nodes = from_networkx(G)
    >>> [n.identifier for n in PathFinder().shortest_path(nodes["A"], nodes["C"])]
    ['A', 'B', 'C']
    >>> G_out = to_networkx(nodes["A"])
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterable, List, Union

from spgraph.model.node import Node
from spgraph.types import Cost

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Cost = 1.0,
) -> Dict[Hashable, Node]:
    """Build spgraph nodes from a NetworkX graph.

    Node identifiers are ``str(name)``. Undirected graphs produce an edge in
    each direction. Parallel edges of multigraphs collapse into the cheapest
    one, since a node keeps a single edge per target.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        Mapping from the original node names to the created nodes, in the
        graph's node order.

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If an edge weight is invalid.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    nodes: Dict[Hashable, Node] = {name: Node(str(name)) for name in G.nodes()}

    # Cheapest weight per ordered (u, v) pair, in edge iteration order
    weights: Dict[tuple, Cost] = {}
    for u, v, data in G.edges(data=True):
        weight = data.get(weight_attr, default_weight)
        pairs = [(u, v)] if G.is_directed() else [(u, v), (v, u)]
        for pair in pairs:
            if pair not in weights or weight < weights[pair]:
                weights[pair] = weight

    for (u, v), weight in weights.items():
        nodes[u].add_directed_edge(nodes[v], weight)

    return nodes


def to_networkx(
    nodes: Union[Node, Iterable[Node]], *, weight_attr: str = "weight"
) -> "nx.DiGraph":
    """Convert the graph reachable from ``nodes`` into a NetworkX DiGraph.

    Args:
        nodes: A node or an iterable of nodes; everything reachable from them
            is included.
        weight_attr: Edge attribute that receives the weight.

    Returns:
        DiGraph keyed by node identifiers.

    Raises:
        ValueError: If two distinct nodes share an identifier.
    """
    import networkx as nx

    roots: List[Node] = [nodes] if isinstance(nodes, Node) else list(nodes)

    by_identifier: Dict[str, Node] = {}
    ordered: List[Node] = []
    for root in roots:
        for node in root.iter_reachable():
            known = by_identifier.get(node.identifier)
            if known is None:
                by_identifier[node.identifier] = node
                ordered.append(node)
            elif known is not node:
                raise ValueError(
                    f"Duplicate node identifier '{node.identifier}' in graph."
                )

    G = nx.DiGraph()
    for node in ordered:
        G.add_node(node.identifier)
    for node in ordered:
        for edge in node.edges:
            G.add_edge(node.identifier, edge.target.identifier, **{weight_attr: edge.weight})
    return G
