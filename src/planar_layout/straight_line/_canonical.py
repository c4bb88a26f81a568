"""Canonical ordering of a triangulated planar graph.

Nodes are peeled off the outer face one at a time, last order number first.
A node may be removed when it lies on the outer cycle, is not one of the two
base nodes, and has no chord: no edge to an outer node other than its two
outer-cycle neighbours. Read in reverse, the removals give an order in which
every prefix induces a 2-connected, internally triangulated graph whose outer
cycle contains the base edge.
"""

from __future__ import annotations

import logging

from ..planarity._graph import Graph
from ..validation import DrawingError

logger = logging.getLogger(__name__)


def canonical_order(graph: Graph) -> list[int]:
    """Compute a canonical ordering.

    The base nodes are node 0 and the first neighbour in its rotation; the
    outer face is node 0 with its first and last rotation neighbours.

    Args:
        graph: Triangulated graph with a consistent rotation system.

    Returns:
        Node indices in canonical order; the base nodes come first.

    Raises:
        DrawingError: If no node can be removed at some step, which means the
            graph is not a triangulation with consistent rotations.
    """
    n = graph.nodes_count
    if n < 3:
        return list(range(n))

    rotation = graph.nodes[0].neighbors
    if len(rotation) < 2:
        raise DrawingError(f"Node 0 has degree {len(rotation)}; graph is not triangulated")
    second = rotation[0].dest
    third = rotation[-1].dest

    position = [-1] * n
    position[0] = 0
    position[second] = 1

    marked = [False] * n
    outer = [False] * n
    chords = [0] * n
    outer[0] = outer[second] = outer[third] = True

    for k in range(n - 1, 1, -1):
        v = -1
        for j in range(1, n):
            if not marked[j] and outer[j] and chords[j] == 0 and j != second:
                v = j
                break
        if v < 0:
            raise DrawingError(
                f"No removable outer node with {k + 1} nodes left; "
                "graph is not a consistently rotated triangulation"
            )
        marked[v] = True
        outer[v] = False
        position[v] = k
        _update_chords(graph, v, marked, outer, chords)

    order = [0] * n
    for node, pos in enumerate(position):
        order[pos] = node
    logger.debug("canonical order %s", order)
    return order


def _exposed_arc(graph: Graph, v: int, marked: list[bool], outer: list[bool]) -> list[int]:
    """Return v's unmarked neighbours as one contiguous arc, ends first and last.

    The arc starts right after v's removed neighbours. When v has none (the
    first removal), it starts at the gap between its two outer neighbours.
    """
    dests = graph.nodes[v].neighbors.dests()
    start = -1
    for i, u in enumerate(dests):
        if not marked[u] and marked[dests[i - 1]]:
            start = i
            break
    if start < 0:
        for i, u in enumerate(dests):
            if outer[u] and outer[dests[i - 1]]:
                start = i
                break
    if start < 0:
        start = 0
    return [u for u in dests[start:] + dests[:start] if not marked[u]]


def _update_chords(
    graph: Graph,
    v: int,
    marked: list[bool],
    outer: list[bool],
    chords: list[int],
) -> None:
    arc = _exposed_arc(graph, v, marked, outer)
    for u in arc:
        outer[u] = True

    if len(arc) == 2:
        # the edge between the two ends stops being a chord
        chords[arc[0]] -= 1
        chords[arc[1]] -= 1
        return

    position = {u: i for i, u in enumerate(arc)}
    for i in range(1, len(arc) - 1):
        w = arc[i]
        for u in graph.nodes[w].neighbors.dests():
            if not outer[u] or u == arc[i - 1] or u == arc[i + 1]:
                continue
            if 0 < position.get(u, 0) < i:
                continue
            chords[w] += 1
            chords[u] += 1


__all__ = ["canonical_order"]
