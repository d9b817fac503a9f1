"""Human-readable rendering of search results."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from spgraph.algorithms.state import SearchState
from spgraph.logging import get_logger
from spgraph.model.node import Node
from spgraph.model.path import Path
from spgraph.types import Cost

logger = get_logger(__name__)

#: Marker closing a rendered path, like the null link at the end of a list.
PATH_TERMINATOR = "x"


def _format_distance(distance: Cost) -> str:
    """Render a distance without rounding; integral floats drop the ``.0``."""
    if isinstance(distance, float) and distance.is_integer():
        return str(int(distance))
    return repr(distance)


def format_path(
    path: Union[Path, Sequence[Node]], state: Optional[SearchState] = None
) -> str:
    """Render a path as a chain of ``(identifier, distance)`` pairs.

    Example: ``(A, 0) => (B, 1) => (C, 3) => x``.

    Args:
        path: A ``Path`` or a plain sequence of nodes.
        state: Search state to read distances from when ``path`` is a plain
            sequence. Required in that case unless the sequence is empty.

    Raises:
        ValueError: If a non-empty node sequence is given without ``state``.
    """
    if isinstance(path, Path):
        pairs = zip(path.identifiers, path.distances)
    else:
        if path and state is None:
            raise ValueError("A SearchState is required to format a node sequence.")
        pairs = ((node.identifier, state.distance(node)) for node in path)

    parts = [
        f"({identifier}, {_format_distance(distance)})" for identifier, distance in pairs
    ]
    parts.append(PATH_TERMINATOR)
    return " => ".join(parts)


def print_path(
    path: Union[Path, Sequence[Node]], state: Optional[SearchState] = None
) -> None:
    """Log the rendered path at INFO level."""
    logger.info(format_path(path, state))
