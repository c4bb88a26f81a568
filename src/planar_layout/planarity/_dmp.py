"""Incremental face-splitting planar embedding (Demoucron, Malgrange, Pertuiset).

The embedding starts from any cycle, which splits the plane into two faces.
It then repeatedly takes a component of the edges not yet embedded, picks a
face that contains all the component's embedded touch points, and embeds a
path of that component through the face, splitting the face in two. If some
component fits in no face the graph is not planar.

A component that fits in exactly one face is always taken first. Otherwise
the first component goes into its first admissible face; no choice is ever
undone.

Precondition: the input graph is biconnected. Every component then touches
the embedded part in at least two nodes, joined by a path through new nodes.
A component that does not is reported as ``EmbeddingError``, not as
non-planarity.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..validation import EmbeddingError
from ._face import Face
from ._graph import Edge, Graph
from ._traversal import (
    find_non_embedded_components,
    find_path_between_any_two,
    find_some_cycle,
)

logger = logging.getLogger(__name__)


def embed(graph: Graph) -> tuple[bool, Graph]:
    """Test planarity and build a planar embedding.

    The input graph is not modified; the search runs on a private copy.

    Args:
        graph: Undirected, biconnected graph.

    Returns:
        ``(is_planar, embedded)``. When planar, ``embedded`` has the same
        nodes and edges as the input, each node's rotation in clockwise order,
        and ``embedded.faces`` holding every face. When not planar it holds
        the part embedded before the failure.

    Raises:
        EmbeddingError: If the graph is not biconnected.
    """
    return _DMPState(graph).run()


class _DMPState:
    def __init__(self, graph: Graph) -> None:
        self.graph = graph
        self.n = graph.nodes_count

        self.remaining = graph.clone()
        self.remaining.faces = []

        self.embedded = Graph(graph.is_directed)
        for _ in range(self.n):
            self.embedded.add_node()

        self.is_embedded: list[bool] = [False] * self.n
        self.faces: list[Face] = []

    # -------------------------------------------------------------------
    # Driver
    # -------------------------------------------------------------------

    def run(self) -> tuple[bool, Graph]:
        m = self.graph.edges_count
        if m == 0:
            return True, self.embedded

        if self.n >= 3 and m > 3 * self.n - 6:
            logger.debug("%d edges exceed the planar bound 3n-6 for n=%d", m, self.n)
            return False, self.embedded

        cycle = find_some_cycle(self.remaining)
        if not cycle:
            raise EmbeddingError(
                "Graph has edges but no cycle; the embedding requires a biconnected graph"
            )
        logger.debug("seed cycle %s", cycle)
        self._remove_path(cycle + [cycle[0]])
        self._embed_cycle(cycle)

        while self.remaining.edges_count > 0:
            components = find_non_embedded_components(self.remaining, self.is_embedded)
            choice = self._choose(components)
            if choice is None:
                self.embedded.faces = self.faces
                return False, self.embedded

            component, face_idx = choice
            path = self._find_path(component)
            logger.debug("embedding path %s into face %s", path, list(self.faces[face_idx]))
            self._embed_path(path, face_idx)
            self._remove_path(path)

        logger.debug("faces: %s", [list(f) for f in self.faces])
        _orient_rotations(self.embedded, self.faces)
        self.embedded.faces = self.faces
        return True, self.embedded

    # -------------------------------------------------------------------
    # Component and face selection
    # -------------------------------------------------------------------

    def _choose(self, components: list[set[int]]) -> Optional[tuple[set[int], int]]:
        """Pick the component to embed next and the face to put it in.

        Returns None when some component has no admissible face.
        """
        admissible: list[list[int]] = []
        forced = -1
        for ci, component in enumerate(components):
            touch = {v for v in component if self.is_embedded[v]}
            faces = [fi for fi, face in enumerate(self.faces) if touch <= face.node_set()]
            if not faces:
                logger.debug("no admissible face for component %s", sorted(component))
                return None
            if len(faces) == 1:
                forced = ci
            admissible.append(faces)

        ci = forced if forced >= 0 else 0
        return components[ci], admissible[ci][0]

    def _find_path(self, component: set[int]) -> list[int]:
        terminals = sorted(v for v in component if self.is_embedded[v])
        path = find_path_between_any_two(self._component_graph(component), terminals)
        if not path:
            raise EmbeddingError(
                f"No path between embedded nodes {terminals} through component "
                f"{sorted(component)}; the embedding requires a biconnected graph"
            )
        return path

    def _component_graph(self, component: set[int]) -> Graph:
        """Copy the remaining edges that belong to one component.

        An edge between two embedded nodes belongs only to its own two-node
        component, so it is dropped from larger components.
        """
        is_embedded = self.is_embedded
        chord = all(is_embedded[v] for v in component)
        sub = Graph(self.remaining.is_directed)
        for _ in range(self.n):
            sub.add_node()
        for v in sorted(component):
            for edge in self.remaining.nodes[v].neighbors:
                w = edge.dest
                if w in component and (chord or not (is_embedded[v] and is_embedded[w])):
                    sub.nodes[v].neighbors.append(edge)
        return sub

    # -------------------------------------------------------------------
    # Face bookkeeping
    # -------------------------------------------------------------------

    def _embed_cycle(self, cycle: Sequence[int]) -> None:
        for v in cycle:
            self.is_embedded[v] = True

        for prev, v in zip(cycle, cycle[1:]):
            self._add_record(prev, v)
            self._add_record(v, prev)
        self._add_record(cycle[0], cycle[-1])
        self._add_record(cycle[-1], cycle[0])
        self.embedded.edges_count += len(cycle)

        inner = Face(cycle)
        self.faces = [inner, inner.reversed()]

    def _embed_path(self, path: Sequence[int], face_idx: int) -> None:
        """Embed ``path`` inside face ``face_idx`` and split that face."""
        for v in path:
            self.is_embedded[v] = True

        start, end = path[0], path[-1]
        face = self.faces[face_idx]

        for prev, v in zip(path, path[1:]):
            if prev != start:
                self._add_record(prev, v)
            if v != end:
                self._add_record(v, prev)

        start_before, start_after = face.neighbours(start)
        end_before, end_after = face.neighbours(end)
        self._splice(start, start_before, start_after, path[1])
        self._splice(end, end_before, end_after, path[-2])
        self.embedded.edges_count += len(path) - 1

        kept, new = face.split(path)
        self.faces[face_idx] = kept
        self.faces.append(new)

    def _add_record(self, src: int, dest: int) -> None:
        self.embedded.nodes[src].neighbors.append(Edge(src, dest))

    def _splice(self, node: int, before: int, after: int, new_neighbor: int) -> None:
        """Insert an edge at ``node`` in the corner the face makes there."""
        try:
            self.embedded.nodes[node].neighbors.insert_between(
                before, after, Edge(node, new_neighbor)
            )
        except ValueError as exc:
            raise EmbeddingError(f"Rotation at node {node} lost face corner: {exc}") from exc

    def _remove_path(self, path: Sequence[int]) -> None:
        for prev, v in zip(path, path[1:]):
            self.remaining.remove_edge(prev, v)


def _orient_rotations(graph: Graph, faces: Sequence[Face]) -> None:
    """Turn every rotation to the direction the clockwise faces imply.

    While faces are split, rotations are only spliced by corner, so each one
    is right up to mirroring. A corner ``a -> v -> b`` of a clockwise face
    means ``b`` directly precedes ``a`` in the rotation of ``v``.
    """
    fixed = [False] * graph.nodes_count
    for face in faces:
        for v in face:
            if fixed[v]:
                continue
            fixed[v] = True
            rotation = graph.nodes[v].neighbors
            if len(rotation) < 3:
                continue
            before, after = face.neighbours(v)
            if not rotation.follows(after, before):
                rotation.reverse()


__all__ = ["embed"]
