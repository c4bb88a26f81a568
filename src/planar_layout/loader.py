"""
Plain-text graph files.

The format is a node count, an edge count, and then one ``src dest`` pair
per edge, all whitespace separated::

    4
    5
    0 1
    1 2
    2 3
    3 0
    0 2

Blank lines and lines starting with ``#`` are ignored.
"""

from __future__ import annotations

import os
from typing import Union

from .planarity._graph import Graph
from .validation import GraphFormatError, InvalidIndexError


def parse_graph(text: str) -> Graph:
    """
    Build an undirected graph from its textual description.

    Args:
        text: Graph description in the format above

    Returns:
        Graph with the nodes and edges in file order

    Raises:
        GraphFormatError: If a count is missing or negative, a token is not
            an integer, an edge is missing, or an edge names a missing node.
    """
    tokens: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        tokens.extend(line.split())

    if len(tokens) < 2:
        raise GraphFormatError("Expected node count and edge count at the start of the input")

    try:
        values = [int(tok) for tok in tokens]
    except ValueError as exc:
        raise GraphFormatError(f"Non-integer token in graph input: {exc}") from exc

    nodes_count, edges_count = values[0], values[1]
    if nodes_count < 0 or edges_count < 0:
        raise GraphFormatError(
            f"Counts must be non-negative, got {nodes_count} nodes and {edges_count} edges"
        )

    pairs = values[2:]
    if len(pairs) != 2 * edges_count:
        raise GraphFormatError(
            f"Expected {edges_count} edges ({2 * edges_count} endpoints), "
            f"found {len(pairs)} endpoint(s)"
        )

    graph = Graph()
    for _ in range(nodes_count):
        graph.add_node()
    for i in range(edges_count):
        src, dest = pairs[2 * i], pairs[2 * i + 1]
        try:
            graph.add_edge(src, dest)
        except InvalidIndexError as exc:
            raise GraphFormatError(f"Edge {i} ({src} {dest}): {exc}") from exc

    return graph


def read_graph(path: Union[str, os.PathLike[str]]) -> Graph:
    """
    Read a graph file.

    Args:
        path: File in the format accepted by parse_graph

    Returns:
        Parsed graph
    """
    with open(path, encoding="utf-8") as f:
        return parse_graph(f.read())


def format_graph(graph: Graph) -> str:
    """
    Render a graph in the format read by parse_graph.

    Each undirected edge is written once, smaller index first.
    """
    edges = graph.get_edges()
    lines = [str(graph.nodes_count), str(len(edges))]
    lines.extend(f"{e.src} {e.dest}" for e in edges)
    return "\n".join(lines) + "\n"


__all__ = ["parse_graph", "read_graph", "format_graph"]
