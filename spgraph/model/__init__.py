"""Graph model package.

Defines the directed, weighted graph built by callers (``Node`` and its
outgoing ``Edge`` values) and the ``Path`` returned by searches.
"""

from spgraph.model.edge import Edge
from spgraph.model.node import Node
from spgraph.model.path import Path

__all__ = [
    "Edge",
    "Node",
    "Path",
]
