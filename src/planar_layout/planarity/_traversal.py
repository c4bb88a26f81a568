"""Depth-first traversal helpers used by the embedding engine.

Every search runs on an explicit stack but visits neighbours in rotation
order exactly as the recursive formulation would, so the cycle or path that
comes back is the same one a recursive search returns.
"""

from __future__ import annotations

from typing import Sequence

from ._graph import Graph


def find_components(graph: Graph) -> list[int]:
    """Label connected components.

    Args:
        graph: Graph to label.

    Returns:
        List with a 1-based component id for every node.
    """
    n = graph.nodes_count
    components = [-1] * n
    current = 0

    for root in range(n):
        if components[root] != -1:
            continue
        current += 1
        components[root] = current
        stack: list[tuple[int, int]] = [(root, 0)]
        while stack:
            node, i = stack[-1]
            rotation = graph.nodes[node].neighbors
            if i >= len(rotation):
                stack.pop()
                continue
            stack[-1] = (node, i + 1)
            dest = rotation[i].dest
            if components[dest] == -1:
                components[dest] = current
                stack.append((dest, 0))

    return components


def find_some_cycle(graph: Graph) -> list[int]:
    """Find a cycle, trying start nodes in index order.

    The search never steps straight back to the node it came from, so the two
    records of one undirected edge are not reported as a cycle. Self-loops
    are skipped for the same reason.

    Args:
        graph: Undirected graph to search.

    Returns:
        Nodes of the first cycle found, beginning at the node where the walk
        closed and without repeating it at the end. Empty if the graph is
        acyclic.
    """
    n = graph.nodes_count
    visited = [False] * n

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        path = [root]
        # frames: (node, parent, next rotation position)
        stack: list[tuple[int, int, int]] = [(root, -1, 0)]
        while stack:
            node, parent, i = stack[-1]
            rotation = graph.nodes[node].neighbors
            if i >= len(rotation):
                stack.pop()
                path.pop()
                continue
            stack[-1] = (node, parent, i + 1)
            dest = rotation[i].dest
            if dest == parent or dest == node:
                continue
            if visited[dest]:
                # a finished child is only seen again through a parallel edge
                if dest in path:
                    return path[path.index(dest) :]
                continue
            visited[dest] = True
            path.append(dest)
            stack.append((dest, node, 0))

    return []


def find_path_between_any_two(graph: Graph, terminals: Sequence[int]) -> list[int]:
    """Find a path joining two distinct terminals.

    A search is seeded at each terminal in turn; the visited marks are shared
    between seeds. A path is accepted as soon as it reaches a terminal other
    than its own start.

    Args:
        graph: Graph to search.
        terminals: Candidate end points, tried as start points in this order.

    Returns:
        Nodes of the path from one terminal to another, or an empty list.
    """
    n = graph.nodes_count
    visited = [False] * n
    is_terminal = [False] * n
    for t in terminals:
        is_terminal[t] = True

    for start in terminals:
        visited[start] = True
        path = [start]
        stack: list[tuple[int, int]] = [(start, 0)]
        while stack:
            node, i = stack[-1]
            rotation = graph.nodes[node].neighbors
            if i >= len(rotation):
                stack.pop()
                path.pop()
                continue
            stack[-1] = (node, i + 1)
            dest = rotation[i].dest
            if visited[dest]:
                continue
            path.append(dest)
            if is_terminal[dest]:
                return path
            visited[dest] = True
            stack.append((dest, 0))

    return []


def find_non_embedded_components(graph: Graph, is_embedded: Sequence[bool]) -> list[set[int]]:
    """Group the edges not yet embedded into components.

    A search starts from every node that is not embedded and has not been
    reached yet. Embedded nodes are collected as touch points but never
    expanded, so two components may share an embedded node. Remaining edges
    whose endpoints are both embedded form two-node components of their own.
    Nodes without edges form no component.

    Args:
        graph: Graph holding only the edges still to embed.
        is_embedded: Per-node embedded flag.

    Returns:
        Node sets, ordered by their lowest starting node, followed by the
        two-node components in edge order.
    """
    n = graph.nodes_count
    visited = [False] * n
    components: list[set[int]] = []

    for root in range(n):
        if is_embedded[root] or visited[root] or not graph.nodes[root].neighbors:
            continue
        visited[root] = True
        component = {root}
        stack = [root]
        while stack:
            node = stack.pop()
            for edge in graph.nodes[node].neighbors:
                dest = edge.dest
                component.add(dest)
                if is_embedded[dest] or visited[dest]:
                    continue
                visited[dest] = True
                stack.append(dest)
        components.append(component)

    for edge in graph.get_edges():
        if is_embedded[edge.src] and is_embedded[edge.dest]:
            components.append({edge.src, edge.dest})

    return components


__all__ = [
    "find_components",
    "find_some_cycle",
    "find_path_between_any_two",
    "find_non_embedded_components",
]
