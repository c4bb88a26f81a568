"""Planarity testing, planar embedding and triangulation.

The embedding is built by incremental face splitting (Demoucron, Malgrange
and Pertuiset): a seed cycle is embedded, then paths through the remaining
edges are added one at a time inside a face that can hold them. The
embedded graph can then be triangulated for straight-line drawing.

``embed`` works on biconnected graphs. ``check_planarity`` handles any
simple graph by testing each biconnected block on its own and joining the
block embeddings at the cut vertices.

Public API:
    embed(graph) -> (is_planar, embedded graph)
    triangulate(embedded) -> triangulated graph
    is_planar(num_nodes, edges) -> bool
    check_planarity(num_nodes, edges) -> PlanarityResult
"""

from __future__ import annotations

from typing import Sequence

from ._blocks import Block, biconnected_components
from ._dmp import embed
from ._face import Face, trace_faces
from ._graph import Edge, Graph, Rotation, Vertex
from ._traversal import (
    find_components,
    find_non_embedded_components,
    find_path_between_any_two,
    find_some_cycle,
)
from ._triangulate import triangulate
from ._types import PlanarityResult
from .embedders import DMPEmbedder, PlanarEmbedder


def is_planar(num_nodes: int, edges: Sequence[tuple[int, int]]) -> bool:
    """Test whether a graph is planar.

    This is the simple boolean API. For richer results (embedding, faces),
    use ``check_planarity`` instead.

    Args:
        num_nodes: Number of vertices (labeled 0..num_nodes-1).
        edges: Sequence of (source, target) edge tuples (undirected).

    Returns:
        True if the graph is planar, False otherwise.
    """
    return check_planarity(num_nodes, edges).is_planar


def check_planarity(
    num_nodes: int,
    edges: Sequence[tuple[int, int]],
) -> PlanarityResult:
    """Test planarity and return detailed results.

    Preprocessing:
    - Self-loops are removed (they do not affect planarity).
    - Parallel edges are merged into one.
    - The graph is decomposed into biconnected blocks; blocks with two or
      more edges are embedded separately, bridges are trivially planar.

    Block rotations are concatenated at cut vertices, which places every
    block in a corner of the blocks it hangs off and keeps the whole
    embedding planar.

    Args:
        num_nodes: Number of vertices (labeled 0..num_nodes-1).
        edges: Sequence of (source, target) edge tuples (undirected).

    Returns:
        PlanarityResult with is_planar flag and, if planar, the rotation
        system and its faces.

    Raises:
        InvalidIndexError: If an edge refers to a vertex outside the graph.
    """
    if num_nodes <= 1:
        emb: dict[int, list[int]] = {v: [] for v in range(num_nodes)}
        return PlanarityResult(is_planar=True, embedding=emb)

    clean_edges = _preprocess_edges(edges)
    graph = Graph.from_edges(num_nodes, clean_edges)

    if not clean_edges:
        emb_empty: dict[int, list[int]] = {v: [] for v in range(num_nodes)}
        return PlanarityResult(is_planar=True, embedding=emb_empty)

    # Quick edge-count check (Euler formula necessary condition)
    m = len(clean_edges)
    if num_nodes >= 3 and m > 3 * num_nodes - 6:
        return PlanarityResult(is_planar=False)

    rotation: dict[int, list[int]] = {v: [] for v in range(num_nodes)}
    for block in biconnected_components(graph):
        if len(block.edges) < 2:
            for u, v in block.edges:
                rotation[u].append(v)
                rotation[v].append(u)
            continue

        local_map = {v: i for i, v in enumerate(block.vertices)}
        local = Graph.from_edges(
            len(block.vertices),
            [(local_map[u], local_map[v]) for u, v in block.edges],
        )
        planar, embedded = embed(local)
        if not planar:
            return PlanarityResult(is_planar=False)

        for local_v, node in enumerate(embedded.nodes):
            global_v = block.vertices[local_v]
            rotation[global_v].extend(block.vertices[w] for w in node.neighbors.dests())

    merged = _graph_from_rotation(num_nodes, rotation)
    return PlanarityResult(is_planar=True, embedding=rotation, faces=trace_faces(merged))


def _preprocess_edges(edges: Sequence[tuple[int, int]]) -> list[tuple[int, int]]:
    """Remove self-loops and repeated edges, keeping first occurrences in order."""
    seen: set[tuple[int, int]] = set()
    clean: list[tuple[int, int]] = []

    for u, v in edges:
        if u == v:
            continue
        canon = (min(u, v), max(u, v))
        if canon in seen:
            continue
        seen.add(canon)
        clean.append((u, v))

    return clean


def _graph_from_rotation(num_nodes: int, rotation: dict[int, list[int]]) -> Graph:
    graph = Graph()
    for _ in range(num_nodes):
        graph.add_node()
    for v, neighbours in rotation.items():
        for w in neighbours:
            graph.nodes[v].neighbors.append(Edge(v, w))
    graph.edges_count = sum(len(ns) for ns in rotation.values()) // 2
    return graph


__all__ = [
    # Pipeline
    "embed",
    "triangulate",
    "is_planar",
    "check_planarity",
    "PlanarityResult",
    # Strategies
    "PlanarEmbedder",
    "DMPEmbedder",
    # Graph model
    "Edge",
    "Rotation",
    "Vertex",
    "Graph",
    "Face",
    "trace_faces",
    # Traversal
    "Block",
    "biconnected_components",
    "find_components",
    "find_some_cycle",
    "find_path_between_any_two",
    "find_non_embedded_components",
]
