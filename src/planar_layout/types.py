"""
Node, link and event types exchanged with ``ShiftLayout``.

- Node: a vertex of the input graph and, after a run, its canvas position
- Link: an undirected edge given by its two endpoints
- EventType / Event: the start and end notifications of a run
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Sequence, TypedDict, Union


class EventType(IntEnum):
    """Points in a layout run at which callbacks fire."""

    start = 0
    end = 1


class Event(TypedDict):
    """Payload handed to ``on_start`` / ``on_end`` callbacks."""

    type: EventType


@dataclass(eq=False)
class Node:
    """
    Graph vertex.

    ``index`` is the vertex number used by links; the layout fills it in for
    nodes that arrive without one. ``x`` and ``y`` hold the canvas position
    once the layout has run, with y growing downwards.
    """

    index: Optional[int] = None
    x: float = 0.0
    y: float = 0.0


@dataclass(eq=False)
class Link:
    """
    Undirected edge between two nodes.

    Endpoints are node indices or the ``Node`` objects themselves. Direction
    is ignored by every planarity routine.
    """

    source: Union[Node, int]
    target: Union[Node, int]

    def endpoints(self) -> tuple[int, int]:
        """
        Resolve both endpoints to node indices.

        Raises:
            ValueError: If an endpoint is a ``Node`` without an index.
        """
        return _endpoint_index(self.source), _endpoint_index(self.target)


def _endpoint_index(endpoint: Union[Node, int]) -> int:
    if isinstance(endpoint, int):
        return endpoint
    if endpoint.index is None:
        raise ValueError(f"Link endpoint {endpoint!r} has no index")
    return endpoint.index


NodeLike = Union[Node, dict[str, Any]]
"""A Node, or a dict of Node fields such as ``{"x": 0.0}``."""

LinkLike = Union[Link, dict[str, Any], tuple[int, int]]
"""A Link, a ``{"source": .., "target": ..}`` dict, or a (source, target) pair."""

SizeType = Sequence[float]
"""Canvas (width, height)."""


__all__ = [
    "EventType",
    "Event",
    "Node",
    "Link",
    "NodeLike",
    "LinkLike",
    "SizeType",
]
