"""Faces of an embedding: circular node sequences read clockwise."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Iterator, Sequence

if TYPE_CHECKING:
    from ._graph import Graph


class Face:
    """
    Boundary walk of one face, stored as a ring.

    The nodes live in a list with a movable logical start, so making a node
    the first one is an offset change rather than a copy. Iteration, ``len``
    and comparison all go through the logical order.
    """

    __slots__ = ("_nodes", "_start")

    def __init__(self, nodes: Iterable[int] = ()) -> None:
        self._nodes: list[int] = list(nodes)
        self._start = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[int]:
        nodes = self._nodes
        start = self._start
        for i in range(len(nodes)):
            yield nodes[(start + i) % len(nodes)]

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"Face({list(self)})"

    def first(self) -> int:
        return self._nodes[self._start]

    def rotate_to(self, node: int) -> None:
        """Make ``node`` the first node of the walk. Structure is unchanged."""
        self._start = self._nodes.index(node)

    def node_set(self) -> frozenset[int]:
        return frozenset(self._nodes)

    def edges(self) -> Iterator[tuple[int, int]]:
        """Yield consecutive node pairs of the walk, including the closing pair."""
        walk = list(self)
        for i, node in enumerate(walk):
            yield node, walk[(i + 1) % len(walk)]

    def neighbours(self, node: int) -> tuple[int, int]:
        """Return the nodes before and after ``node`` on the walk."""
        nodes = self._nodes
        i = nodes.index(node)
        return nodes[i - 1], nodes[(i + 1) % len(nodes)]

    def split(self, path: Sequence[int]) -> tuple[Face, Face]:
        """Split the face along a path whose two ends lie on the boundary.

        Returns ``(kept, new)``. ``kept`` walks from the path's start through
        the path interior to the path's end, then on along the old boundary.
        ``new`` walks the path backwards and then the old boundary between
        the path's start and end. ``kept`` keeps the old logical start when
        the path's start precedes its end in it.
        """
        start, end = path[0], path[-1]
        walk = list(self)
        if walk.index(start) > walk.index(end):
            s = walk.index(start)
            walk = walk[s:] + walk[:s]
        s, e = walk.index(start), walk.index(end)

        kept = Face(walk[: s + 1] + list(path[1:-1]) + walk[e:])
        new = Face(list(reversed(path)) + walk[s + 1 : e])
        return kept, new

    def reversed(self) -> Face:
        return Face(reversed(list(self)))

    def copy(self) -> Face:
        face = Face(self._nodes)
        face._start = self._start
        return face


def trace_faces(graph: Graph) -> list[Face]:
    """Enumerate the faces implied by the graph's rotation system.

    For a directed record (u, v), the next record on the same face leaves v
    towards the neighbour preceding u in v's rotation. Every directed record
    lies on exactly one traced face, so for a connected, consistently rotated
    embedding the count satisfies Euler's formula.

    Args:
        graph: Undirected graph whose rotations are to be read.

    Returns:
        One Face per boundary walk.
    """
    visited: set[tuple[int, int]] = set()
    faces: list[Face] = []

    for node in graph.nodes:
        for edge in node.neighbors:
            if (edge.src, edge.dest) in visited:
                continue
            walk: list[int] = []
            u, v = edge.src, edge.dest
            while (u, v) not in visited:
                visited.add((u, v))
                walk.append(u)
                rotation = graph.nodes[v].neighbors
                if rotation.index_of(u) < 0:
                    break
                u, v = v, rotation.predecessor(u)
            faces.append(Face(walk))

    return faces


__all__ = ["Face", "trace_faces"]
