"""Exceptions raised by spgraph searches."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spgraph.model.node import Node


class NoPathError(LookupError):
    """Raised when the search frontier runs out before reaching the end node.

    Attributes:
        start: Node the search started from.
        end: Node the search was looking for.
    """

    def __init__(self, start: "Node", end: "Node") -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"No path from '{start.identifier}' to '{end.identifier}'."
        )


class StaleSearchStateError(RuntimeError):
    """Raised when a search is given state left over from a previous run."""
