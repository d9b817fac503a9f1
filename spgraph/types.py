"""Shared type aliases and enums for spgraph."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

#: Represents a numeric traversal cost (edge weight or accumulated distance).
Cost = Union[int, float]

#: Tentative distance of a node that no relaxation has reached yet.
INFINITY: float = float("inf")


class Frontier(IntEnum):
    """Strategies for choosing the next node to settle during a search."""

    #: Pick the closest node among the neighbours just relaxed from the current
    #: node. Nodes discovered earlier but not adjacent are never reconsidered,
    #: so the result can be suboptimal on graphs with several branching points.
    NEIGHBOURS = 1
    #: Pick the closest node among every discovered, unvisited node using a
    #: min-heap (textbook Dijkstra).
    PRIORITY_QUEUE = 2

    @classmethod
    def from_string(cls, value: str) -> "Frontier":
        """Parse a string into a Frontier enum value.

        Args:
            value: Case-insensitive member name (e.g., "neighbours").

        Returns:
            The corresponding Frontier member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid frontier '{value}'. Valid values are: {valid}"
            ) from None
