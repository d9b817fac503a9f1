"""Directed, weighted connection between two nodes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING

from spgraph import config
from spgraph.types import Cost

if TYPE_CHECKING:
    from spgraph.model.node import Node


@dataclass(frozen=True)
class Edge:
    """Immutable outgoing edge owned by its source node.

    The edge references its target but does not own it. Equality compares the
    weight and the identity of the target node.

    Attributes:
        weight: Traversal cost of the edge.
        target: Destination node.
    """

    weight: Cost
    target: "Node"

    def __post_init__(self) -> None:
        """Validate the weight against the active search configuration."""
        if isinstance(self.weight, bool) or not isinstance(self.weight, Real):
            raise ValueError(
                f"Edge weight must be a real number, got {self.weight!r}."
            )
        if not math.isfinite(self.weight):
            raise ValueError(f"Edge weight must be finite, got {self.weight}.")
        if self.weight < 0 and not config.SEARCH_CONFIG.allow_negative_weights:
            target_id = getattr(self.target, "identifier", self.target)
            raise ValueError(
                f"Negative edge weight {self.weight} to '{target_id}' is not supported."
            )
