"""Triangulation of an embedded planar graph.

Each face longer than three nodes is fanned out from a hub: the first
boundary node that has no edge yet to any boundary node other than its two
face neighbours. Such a node always exists on a face of a planar embedding,
because the chords of a face that run outside it cannot cross. Fanning from
it therefore never duplicates an edge.

Afterwards every rotation is turned to one global direction, taking node 0's
rotation as the reference.
"""

from __future__ import annotations

import logging
from collections import deque

from ..validation import TriangulationError
from ._face import Face
from ._graph import Edge, Graph

logger = logging.getLogger(__name__)


def triangulate(embedded: Graph) -> Graph:
    """Add chords until every face is a triangle.

    Args:
        embedded: Graph returned by ``embed`` for a planar input. It is not
            modified.

    Returns:
        A new graph holding every original edge plus temporary chords, with
        consistently oriented rotations. Its ``faces`` are the triangles.

    Raises:
        TriangulationError: If the graph carries no faces, or a face has no
            node that can serve as hub.
    """
    graph = embedded.clone()
    if graph.edges_count == 0:
        return graph
    if not graph.faces:
        raise TriangulationError("Graph has edges but no faces; embed it before triangulating")

    edge_set = {_key(e.src, e.dest) for e in graph.get_edges()}
    triangles: list[Face] = []

    for face in graph.faces:
        if len(face) < 3:
            continue
        if len(face) == 3:
            triangles.append(face)
            continue
        triangles.extend(_fan_face(graph, face, edge_set))

    graph.faces = triangles
    _normalize_rotations(graph)
    return graph


def _key(u: int, v: int) -> tuple[int, int]:
    return (u, v) if u < v else (v, u)


def _find_hub(nodes: list[int], edge_set: set[tuple[int, int]]) -> int:
    """Return the position of the first node with no chord across the face, or -1."""
    k = len(nodes)
    for i, v in enumerate(nodes):
        has_chord = False
        for j, w in enumerate(nodes):
            if j == i or abs(i - j) == 1 or abs(i - j) == k - 1:
                continue
            if _key(v, w) in edge_set:
                has_chord = True
                break
        if not has_chord:
            return i
    return -1


def _fan_face(graph: Graph, face: Face, edge_set: set[tuple[int, int]]) -> list[Face]:
    """Connect the face's hub to every boundary node it is not adjacent to."""
    walk = list(face)
    hub_pos = _find_hub(walk, edge_set)
    if hub_pos < 0:
        raise TriangulationError(f"No hub on face {walk}: every node already has a chord")

    face.rotate_to(walk[hub_pos])
    nodes = list(face)
    k = len(nodes)
    hub = nodes[0]
    logger.debug("fanning face %s from hub %d", nodes, hub)

    # the hub's new edges go between its last face neighbour and the previous chord
    after = nodes[1]
    for j in range(2, k - 1):
        target = nodes[j]
        edge_set.add(_key(hub, target))
        graph.edges_count += 1
        _splice(graph, hub, nodes[-1], after, target)
        _splice(graph, target, nodes[j - 1], nodes[j + 1], hub)
        after = target

    return [Face((hub, nodes[j], nodes[j + 1])) for j in range(1, k - 1)]


def _splice(graph: Graph, node: int, before: int, after: int, new_neighbor: int) -> None:
    try:
        graph.nodes[node].neighbors.insert_between(
            before, after, Edge(node, new_neighbor, is_temporary=True)
        )
    except ValueError as exc:
        raise TriangulationError(f"Cannot add chord at node {node}: {exc}") from exc


def _normalize_rotations(graph: Graph) -> None:
    """Make all rotations run in the direction of node 0's rotation.

    Visiting ``c``, each unvisited neighbour ``d`` is checked against the
    triangle ``c, p, d`` where ``p`` precedes ``d`` at ``c``: in a consistent
    rotation system ``p`` directly follows ``c`` at ``d``. A mirrored
    rotation at ``d`` is reversed whole.
    """
    n = graph.nodes_count
    if n == 0:
        return
    ordered = [False] * n
    ordered[0] = True
    queue: deque[int] = deque([0])

    while queue:
        c = queue.popleft()
        rotation = graph.nodes[c].neighbors
        if not rotation:
            continue
        prev = rotation[-1].dest
        for edge in rotation:
            d = edge.dest
            if not ordered[d]:
                target = graph.nodes[d].neighbors
                if not target.follows(c, prev):
                    if not target.follows(prev, c):
                        raise TriangulationError(
                            f"Nodes {c}, {prev}, {d} do not bound a face; rotation of {d} "
                            f"is {target.dests()}"
                        )
                    target.reverse()
                ordered[d] = True
                queue.append(d)
            prev = d


__all__ = ["triangulate"]
