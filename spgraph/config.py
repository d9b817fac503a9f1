"""Configuration classes for spgraph components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from spgraph.types import Frontier


@dataclass
class SearchConfig:
    """Configuration for shortest-path searches and edge validation.

    ``frontier`` and ``max_iterations`` apply per search, from the config given
    to a ``PathFinder`` or else the global ``SEARCH_CONFIG``.
    ``allow_negative_weights`` is checked when an edge is created, which
    happens outside any search, so only the value on the global
    ``SEARCH_CONFIG`` takes effect; setting it on a finder's config does
    nothing.
    """

    # Strategy used to pick the next node to settle
    frontier: Frontier = Frontier.PRIORITY_QUEUE

    # Accept negative edge weights (distances are no longer guaranteed correct).
    # Read from the global SEARCH_CONFIG at edge creation only.
    allow_negative_weights: bool = False

    # Upper bound on settled nodes per search; None means unbounded
    max_iterations: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.frontier, str):
            self.frontier = Frontier.from_string(self.frontier)
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be a positive integer, got {self.max_iterations}"
            )


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
