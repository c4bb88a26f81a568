"""Biconnected components (blocks) of an undirected graph.

The face-splitting embedding needs biconnected input, so a general graph is
tested block by block: a graph is planar exactly when all its blocks are.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._graph import Graph


@dataclass
class Block:
    """A biconnected component.

    Attributes:
        vertices: Sorted vertices of the block.
        edges: Block edges as (u, v) tuples, in discovery order.
    """

    vertices: list[int]
    edges: list[tuple[int, int]]

    def is_bridge(self) -> bool:
        return len(self.edges) == 1


def biconnected_components(graph: Graph) -> list[Block]:
    """Decompose an undirected graph into blocks (Tarjan's algorithm).

    Runs an iterative DFS per connected component. Isolated vertices come
    back as edgeless single-vertex blocks at the end.

    Args:
        graph: Undirected graph without self-loops.

    Returns:
        List of blocks.
    """
    n = graph.nodes_count
    disc = [-1] * n
    low = [0] * n
    parent = [-1] * n
    timer = 0
    edge_stack: list[tuple[int, int]] = []
    blocks: list[Block] = []

    def _pop_block(until: tuple[int, int]) -> None:
        edges: list[tuple[int, int]] = []
        verts: set[int] = set()
        while edge_stack:
            e = edge_stack.pop()
            edges.append(e)
            verts.update(e)
            if e == until:
                break
        if edges:
            blocks.append(Block(sorted(verts), edges))

    for root in range(n):
        if disc[root] != -1:
            continue
        disc[root] = low[root] = timer
        timer += 1
        stack: list[tuple[int, int]] = [(root, 0)]

        while stack:
            v, idx = stack[-1]
            rotation = graph.nodes[v].neighbors
            if idx < len(rotation):
                stack[-1] = (v, idx + 1)
                w = rotation[idx].dest
                if disc[w] == -1:
                    parent[w] = v
                    disc[w] = low[w] = timer
                    timer += 1
                    edge_stack.append((v, w))
                    stack.append((w, 0))
                elif w != parent[v] and disc[w] < disc[v]:
                    edge_stack.append((v, w))
                    low[v] = min(low[v], disc[w])
                continue

            stack.pop()
            if not stack:
                break
            u = stack[-1][0]
            low[u] = min(low[u], low[v])
            if low[v] >= disc[u]:
                _pop_block((u, v))

    covered: set[int] = set()
    for block in blocks:
        covered.update(block.vertices)
    for v in range(n):
        if v not in covered:
            blocks.append(Block([v], []))

    return blocks


__all__ = ["Block", "biconnected_components"]
