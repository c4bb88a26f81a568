"""Graph model with ordered per-node adjacency (the rotation system)."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Sequence

from ..validation import InvalidIndexError, validate_node_index

if TYPE_CHECKING:
    from ._face import Face


@dataclass(frozen=True)
class Edge:
    """One directed record of an edge.

    Undirected edges are stored as two records, one in each endpoint's
    rotation.

    Attributes:
        src: Node owning the record.
        dest: Node at the other end.
        weight: Edge weight, carried along but unused by the algorithms.
        is_temporary: True for chords added by triangulation.
    """

    src: int
    dest: int
    weight: int = 1
    is_temporary: bool = False


class Rotation:
    """Ordered sequence of a node's outgoing edges.

    Once embedding has begun the order is the clockwise cyclic order of the
    incident edges, so positions are read cyclically: the last record is
    followed by the first.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: Optional[Iterable[Edge]] = None) -> None:
        self._edges: list[Edge] = list(edges) if edges is not None else []

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __getitem__(self, i: int) -> Edge:
        return self._edges[i]

    def __repr__(self) -> str:
        return f"Rotation({self.dests()})"

    def dests(self) -> list[int]:
        """Return the neighbour indices in rotation order."""
        return [e.dest for e in self._edges]

    def index_of(self, dest: int) -> int:
        """Return the position of the first record towards ``dest``, or -1."""
        for i, e in enumerate(self._edges):
            if e.dest == dest:
                return i
        return -1

    def append(self, edge: Edge) -> None:
        self._edges.append(edge)

    def remove(self, dest: int) -> bool:
        """Remove the first record towards ``dest``. Returns False if absent."""
        i = self.index_of(dest)
        if i < 0:
            return False
        del self._edges[i]
        return True

    def insert_between(self, first: int, second: int, edge: Edge) -> None:
        """Insert ``edge`` in the gap between two cyclically adjacent neighbours.

        The pair is matched in either order, so a rotation that is still the
        mirror image of the final one is spliced consistently. The wrap-around
        gap (last, first) is checked before the inner gaps.

        Raises:
            ValueError: If ``first`` and ``second`` are not adjacent.
        """
        edges = self._edges
        count = len(edges)
        if count < 2:
            edges.append(edge)
            return

        pair = {first, second}
        if {edges[0].dest, edges[-1].dest} == pair:
            edges.append(edge)
            return
        for i in range(count - 1):
            if {edges[i].dest, edges[i + 1].dest} == pair:
                edges.insert(i + 1, edge)
                return
        raise ValueError(
            f"neighbours {first} and {second} are not adjacent in rotation {self.dests()}"
        )

    def successor(self, dest: int) -> int:
        """Return the neighbour that follows ``dest`` cyclically."""
        i = self.index_of(dest)
        if i < 0:
            raise ValueError(f"{dest} is not in rotation {self.dests()}")
        return self._edges[(i + 1) % len(self._edges)].dest

    def predecessor(self, dest: int) -> int:
        """Return the neighbour that precedes ``dest`` cyclically."""
        i = self.index_of(dest)
        if i < 0:
            raise ValueError(f"{dest} is not in rotation {self.dests()}")
        return self._edges[i - 1].dest

    def follows(self, first: int, second: int) -> bool:
        """Check whether ``second`` comes right after ``first`` somewhere in the cycle."""
        edges = self._edges
        count = len(edges)
        for i in range(count):
            if edges[i].dest == first and edges[(i + 1) % count].dest == second:
                return True
        return False

    def reverse(self) -> None:
        self._edges.reverse()

    def copy(self) -> Rotation:
        return Rotation(self._edges)


class Vertex:
    """A graph node: its index and its rotation of outgoing edges."""

    __slots__ = ("idx", "neighbors")

    def __init__(self, idx: int, neighbors: Optional[Rotation] = None) -> None:
        self.idx = idx
        self.neighbors = neighbors if neighbors is not None else Rotation()

    def __repr__(self) -> str:
        return f"Vertex({self.idx}, {self.neighbors.dests()})"


class Graph:
    """
    Graph with dense integer node ids and ordered adjacency.

    Nodes are numbered 0, 1, ... in creation order and never reused. For an
    undirected graph each edge is stored once in each endpoint's rotation,
    and ``edges_count`` counts logical edges.

    After embedding, each node's rotation is the clockwise order of its
    incident edges and ``faces`` holds the clockwise boundary walk of every
    face.

    Example:
        graph = Graph()
        for _ in range(3):
            graph.add_node()
        graph.add_edge(0, 1)
        graph.add_edge(1, 2)
        graph.add_edge(2, 0)
    """

    def __init__(self, is_directed: bool = False) -> None:
        self.is_directed = is_directed
        self.nodes_count = 0
        self.edges_count = 0
        self.nodes: list[Vertex] = []
        self.faces: list[Face] = []

    @classmethod
    def from_edges(
        cls,
        num_nodes: int,
        edges: Sequence[tuple[int, int]],
        is_directed: bool = False,
    ) -> Graph:
        """Build a graph with ``num_nodes`` nodes and the given edges, in order."""
        graph = cls(is_directed)
        for _ in range(num_nodes):
            graph.add_node()
        for src, dest in edges:
            graph.add_edge(src, dest)
        return graph

    # -------------------------------------------------------------------------
    # Mutation
    # -------------------------------------------------------------------------

    def add_node(self) -> int:
        """Add a node and return its index."""
        self.nodes.append(Vertex(self.nodes_count))
        self.nodes_count += 1
        return self.nodes_count - 1

    def add_edge(
        self,
        src: int,
        dest: int,
        weight: int = 1,
        *,
        is_temporary: bool = False,
    ) -> None:
        """Add an edge. Duplicate edges are not detected.

        Raises:
            InvalidIndexError: If ``src`` or ``dest`` is not a node of the graph.
        """
        validate_node_index(src, self.nodes_count)
        validate_node_index(dest, self.nodes_count)

        self.nodes[src].neighbors.append(Edge(src, dest, weight, is_temporary))
        if not self.is_directed:
            self.nodes[dest].neighbors.append(Edge(dest, src, weight, is_temporary))
        self.edges_count += 1

    def remove_edge(self, src: int, dest: int) -> None:
        """Remove one edge between ``src`` and ``dest``, if present.

        Out-of-range indices are reported with a warning and ignored.
        """
        try:
            validate_node_index(src, self.nodes_count)
            validate_node_index(dest, self.nodes_count)
        except InvalidIndexError as exc:
            warnings.warn(f"Ignoring edge removal: {exc}", RuntimeWarning, stacklevel=2)
            return

        if not self.nodes[src].neighbors.remove(dest):
            return
        if not self.is_directed:
            self.nodes[dest].neighbors.remove(src)
        self.edges_count -= 1

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def has_edge(self, src: int, dest: int) -> bool:
        validate_node_index(src, self.nodes_count)
        validate_node_index(dest, self.nodes_count)
        return self.nodes[src].neighbors.index_of(dest) >= 0

    def neighbors(self, idx: int) -> list[int]:
        """Return the neighbours of ``idx`` in rotation order."""
        validate_node_index(idx, self.nodes_count)
        return self.nodes[idx].neighbors.dests()

    def degree(self, idx: int) -> int:
        validate_node_index(idx, self.nodes_count)
        return len(self.nodes[idx].neighbors)

    def get_edges(self) -> list[Edge]:
        """Return every edge once.

        For undirected graphs each edge is returned from its smaller to its
        larger endpoint.
        """
        edges: list[Edge] = []
        for node in self.nodes:
            for edge in node.neighbors:
                if self.is_directed or edge.src < edge.dest:
                    edges.append(edge)
        return edges

    def rotation_system(self) -> dict[int, list[int]]:
        """Return a mapping from each node to its neighbours in rotation order."""
        return {node.idx: node.neighbors.dests() for node in self.nodes}

    def clone(self) -> Graph:
        """Return a deep copy preserving rotation order, flags and faces."""
        clone = Graph(self.is_directed)
        clone.nodes_count = self.nodes_count
        clone.edges_count = self.edges_count
        clone.nodes = [Vertex(node.idx, node.neighbors.copy()) for node in self.nodes]
        clone.faces = [face.copy() for face in self.faces]
        return clone

    def describe(self) -> str:
        """Render the graph node by node, neighbours in rotation order."""
        lines = [
            f"Is directed: {self.is_directed}.",
            f"Number of nodes: {self.nodes_count}.",
            f"Number of edges: {self.edges_count}.",
        ]
        for node in self.nodes:
            dests = [
                str(e.dest) for e in node.neighbors if self.is_directed or e.src < e.dest
            ]
            lines.append(f"Node #{node.idx}: {' '.join(dests)}".rstrip() + ".")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Graph(nodes={self.nodes_count}, edges={self.edges_count}, "
            f"faces={len(self.faces)})"
        )


__all__ = ["Edge", "Rotation", "Vertex", "Graph"]
