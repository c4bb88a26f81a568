"""Shift method for straight-line grid drawings (de Fraysseix, Pach, Pollack).

Nodes are added in canonical order. The contour is the upper boundary of the
drawing so far, read left to right. A new node sees a contiguous stretch of
contour nodes, its contacts; the leftmost contact and everything to its left
moves one unit left, the rightmost contact and everything to its right one
unit right, and the node goes where the 45 degree lines through the outer
contacts meet. Each contour node drags along its dependants: the nodes that
were covered when it was added, so that covered parts of the drawing move
rigidly and stay planar.

All coordinates are integers on a grid of size (2n - 4) x (n - 2).
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Sequence

import numpy as np

from ..planarity._graph import Graph
from ..validation import DrawingError
from ._canonical import canonical_order

logger = logging.getLogger(__name__)


def draw_on_plane(graph: Graph, order: Optional[Sequence[int]] = None) -> np.ndarray:
    """Compute integer grid coordinates for a triangulated planar graph.

    Args:
        graph: Graph returned by ``triangulate``.
        order: Canonical order to use. Computed with ``canonical_order`` when
            omitted.

    Returns:
        Array of shape (n, 2), dtype int64, row ``i`` holding the (x, y)
        position of node ``i``. Graphs with fewer than three nodes are placed
        on the x axis.

    Raises:
        DrawingError: If a node in the order has fewer than two neighbours on
            the contour, or no canonical order exists.
    """
    n = graph.nodes_count
    positions = np.zeros((n, 2), dtype=np.int64)
    if n < 3:
        positions[:, 0] = 2 * np.arange(n)
        return positions

    if order is None:
        order = canonical_order(graph)
    if len(order) != n:
        raise DrawingError(f"Order has {len(order)} nodes, graph has {n}")

    first, second, third = order[0], order[1], order[2]
    positions[first] = (0, 0)
    positions[second] = (2, 0)
    positions[third] = (1, 1)

    dependants: list[set[int]] = [{v} for v in range(n)]
    contour = [first, third, second]

    for v in order[3:]:
        adjacent = set(graph.nodes[v].neighbors.dests())
        contacts = [i for i, u in enumerate(contour) if u in adjacent]
        if len(contacts) < 2:
            raise DrawingError(
                f"Node {v} touches {len(contacts)} contour node(s) of {contour}; "
                "need at least 2"
            )
        left, right = contacts[0], contacts[-1]

        _shift(positions, dependants, contour[: left + 1], -1)
        _shift(positions, dependants, contour[right:], 1)

        covered = {v}
        for u in contour[left + 1 : right]:
            covered |= dependants[u]
        dependants[v] = covered

        lx, ly = positions[contour[left]].tolist()
        rx, ry = positions[contour[right]].tolist()
        positions[v] = ((lx + rx + ry - ly) // 2, (ly + ry + rx - lx) // 2)
        logger.debug(
            "placed %d at %s between %d and %d",
            v,
            positions[v].tolist(),
            contour[left],
            contour[right],
        )

        contour = contour[: left + 1] + [v] + contour[right:]

    return positions


def _shift(
    positions: np.ndarray,
    dependants: list[set[int]],
    part: Sequence[int],
    amount: int,
) -> None:
    moved: set[int] = set()
    for u in part:
        moved |= dependants[u]
    positions[sorted(moved), 0] += amount


class PlanarDrawer(Protocol):
    """Protocol for straight-line drawing strategies on triangulated graphs."""

    def draw(self, triangulated: Graph) -> np.ndarray:
        """Compute node positions.

        Args:
            triangulated: Triangulated graph with consistent rotations.

        Returns:
            Array of shape (n, 2) with one (x, y) row per node.
        """
        ...


class ShiftDrawer:
    """Canonical order plus shift method.

    The order used by the last ``draw`` call is kept in ``order``.
    """

    def __init__(self) -> None:
        self.order: list[int] = []

    def draw(self, triangulated: Graph) -> np.ndarray:
        self.order = canonical_order(triangulated)
        return draw_on_plane(triangulated, self.order)


__all__ = ["draw_on_plane", "PlanarDrawer", "ShiftDrawer"]
