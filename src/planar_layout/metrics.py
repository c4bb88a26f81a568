"""
Drawing quality checks.

Provides the measures used to verify straight-line planar drawings:
- Edge crossings: Number of pairs of non-adjacent edges that meet
- Crossing pairs: The offending edge pairs themselves, for grid arrays
- Drawing extent: Width and height of the bounding box

Segments that touch, including a node lying on a non-incident edge, count as
crossing; for a planar drawing all of these must be zero.
"""

from __future__ import annotations

from typing import Sequence, Tuple, Union

import numpy as np

from .types import Link, Node

Point = Tuple[float, float]


def edge_crossings(nodes: Sequence[Node], links: Sequence[Link]) -> int:
    """
    Count the number of edge crossings in the layout.

    Two edges cross if their line segments intersect (excluding
    shared endpoints).

    Args:
        nodes: List of positioned nodes
        links: List of links

    Returns:
        Number of edge crossings

    Time Complexity: O(m^2) where m = number of edges
    """
    positions = [(node.x, node.y) for node in nodes]
    edges = [link.endpoints() for link in links]
    return len(crossing_pairs(positions, edges))


def crossing_pairs(
    positions: Union[np.ndarray, Sequence[Point]],
    edges: Sequence[Tuple[int, int]],
) -> list[tuple[tuple[int, int], tuple[int, int]]]:
    """
    List the pairs of edges whose segments meet away from a shared endpoint.

    Args:
        positions: (n, 2) array or sequence of (x, y) per node
        edges: (source, target) index pairs

    Returns:
        Crossing edge pairs, each in input order
    """
    pts = np.asarray(positions).tolist()
    n = len(pts)
    result: list[tuple[tuple[int, int], tuple[int, int]]] = []

    for i in range(len(edges)):
        s1, t1 = edges[i]
        for j in range(i + 1, len(edges)):
            s2, t2 = edges[j]
            # Skip if edges share an endpoint
            if s1 == s2 or s1 == t2 or t1 == s2 or t1 == t2:
                continue
            if not (0 <= s1 < n and 0 <= t1 < n and 0 <= s2 < n and 0 <= t2 < n):
                continue
            if segments_intersect(pts[s1], pts[t1], pts[s2], pts[t2]):
                result.append((edges[i], edges[j]))

    return result


def segments_intersect(
    p1: Sequence[float],
    p2: Sequence[float],
    p3: Sequence[float],
    p4: Sequence[float],
) -> bool:
    """Check if closed segments (p1,p2) and (p3,p4) share at least one point."""
    d1 = _orientation(p3, p4, p1)
    d2 = _orientation(p3, p4, p2)
    d3 = _orientation(p1, p2, p3)
    d4 = _orientation(p1, p2, p4)

    if d1 * d2 < 0 and d3 * d4 < 0:
        return True

    # Collinear cases: an endpoint lying on the other segment
    if d1 == 0 and _on_segment(p3, p4, p1):
        return True
    if d2 == 0 and _on_segment(p3, p4, p2):
        return True
    if d3 == 0 and _on_segment(p1, p2, p3):
        return True
    if d4 == 0 and _on_segment(p1, p2, p4):
        return True
    return False


def drawing_extent(positions: np.ndarray) -> tuple[float, float]:
    """
    Return the (width, height) of the bounding box of a drawing.

    Args:
        positions: (n, 2) array of coordinates

    Returns:
        (width, height); (0, 0) for an empty drawing
    """
    if len(positions) == 0:
        return 0.0, 0.0
    span = positions.max(axis=0) - positions.min(axis=0)
    return float(span[0]), float(span[1])


def _orientation(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> int:
    """Sign of the turn a -> b -> c: positive counterclockwise, 0 collinear."""
    value = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0


def _on_segment(a: Sequence[float], b: Sequence[float], p: Sequence[float]) -> bool:
    """Check whether p, known to be collinear with a and b, lies between them."""
    return min(a[0], b[0]) <= p[0] <= max(a[0], b[0]) and min(a[1], b[1]) <= p[1] <= max(
        a[1], b[1]
    )


__all__ = [
    "edge_crossings",
    "crossing_pairs",
    "segments_intersect",
    "drawing_extent",
]
