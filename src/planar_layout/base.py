"""
Layout scaffolding for planar drawings.

``BaseLayout`` owns what every layout of this package takes from its caller:
the node and link lists, the canvas, and the start/end callbacks.
``StaticLayout`` adds the run lifecycle for layouts computed in one pass,
which is how ``ShiftLayout`` works: number the nodes, announce the start,
compute, optionally centre, announce the end.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import Event, EventType, Link, LinkLike, Node, NodeLike, SizeType
from .validation import validate_canvas_size, validate_link_indices

Callback = Callable[[Event], None]


class BaseLayout(ABC):
    """
    Nodes, links, canvas and callbacks of a planar layout.

    Nodes may be given as ``Node`` objects or dicts of their fields; links as
    ``Link`` objects, dicts or ``(source, target)`` pairs. Both are normalised
    on assignment, so ``layout.nodes`` always holds ``Node`` objects whose
    positions the layout writes.
    """

    def __init__(
        self,
        *,
        nodes: Optional[Sequence[NodeLike]] = None,
        links: Optional[Sequence[LinkLike]] = None,
        size: SizeType = (1.0, 1.0),
        on_start: Optional[Callback] = None,
        on_end: Optional[Callback] = None,
    ) -> None:
        """
        Args:
            nodes: Graph vertices
            links: Undirected edges between them
            size: Canvas (width, height)
            on_start: Called before the layout computes
            on_end: Called once positions are final
        """
        self._nodes: list[Node] = []
        self._links: list[Link] = []
        self._canvas_size: tuple[float, float] = validate_canvas_size(size)
        self._callbacks: dict[EventType, Callback] = {}

        if nodes is not None:
            self.nodes = nodes
        if links is not None:
            self.links = links
        if on_start is not None:
            self._callbacks[EventType.start] = on_start
        if on_end is not None:
            self._callbacks[EventType.end] = on_end

    @property
    def nodes(self) -> list[Node]:
        """Graph vertices; positions are written here by ``run``."""
        return self._nodes

    @nodes.setter
    def nodes(self, value: Sequence[NodeLike]) -> None:
        self._nodes = [_as_node(item) for item in value]

    @property
    def links(self) -> list[Link]:
        """Undirected edges."""
        return self._links

    @links.setter
    def links(self, value: Sequence[LinkLike]) -> None:
        self._links = [_as_link(item) for item in value]

    @property
    def size(self) -> tuple[float, float]:
        """Canvas (width, height)."""
        return self._canvas_size

    @size.setter
    def size(self, value: SizeType) -> None:
        self._canvas_size = validate_canvas_size(value)

    def on(self, event: EventType | str, callback: Callback) -> Self:
        """
        Register ``callback`` for ``event`` ("start" or "end"), replacing any
        earlier one.
        """
        if isinstance(event, str):
            event = EventType[event]
        self._callbacks[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """Call the callback registered for ``event["type"]``, if any."""
        callback = self._callbacks.get(event["type"])
        if callback is not None:
            callback(event)

    def validate(self) -> Self:
        """
        Check that every link names an existing node.

        Raises:
            InvalidLinkError: If a link endpoint is out of range.
        """
        if self._links:
            validate_link_indices(self._links, len(self._nodes), strict=True)
        return self

    @abstractmethod
    def run(self, **kwargs: Any) -> Self:
        """Compute node positions and return self."""

    def _link_endpoints(self) -> list[tuple[int, int]]:
        """Node indices of every link, in link order."""
        return [link.endpoints() for link in self._links]


class StaticLayout(BaseLayout):
    """One-pass layout: subclasses implement ``_compute``."""

    def run(self, **kwargs: Any) -> Self:
        """
        Lay out the graph.

        Nodes without an index are numbered by position. The drawing is
        centred on the canvas afterwards unless ``center_graph=False``.

        Returns:
            self (for chaining)
        """
        for i, node in enumerate(self._nodes):
            if node.index is None:
                node.index = i

        self.trigger({"type": EventType.start})
        self._compute(**kwargs)
        if kwargs.get("center_graph", True):
            self._center()
        self.trigger({"type": EventType.end})
        return self

    @abstractmethod
    def _compute(self, **kwargs: Any) -> None:
        """Write positions into ``self.nodes``."""

    def _center(self) -> None:
        """Translate the nodes so their bounding box is centred on the canvas."""
        if not self._nodes:
            return
        xs = [node.x for node in self._nodes]
        ys = [node.y for node in self._nodes]
        dx = self._canvas_size[0] / 2 - (min(xs) + max(xs)) / 2
        dy = self._canvas_size[1] / 2 - (min(ys) + max(ys)) / 2
        for node in self._nodes:
            node.x += dx
            node.y += dy


def _as_node(item: NodeLike) -> Node:
    if isinstance(item, Node):
        return item
    if isinstance(item, dict):
        return Node(**item)
    raise TypeError(f"Expected a Node or dict, got {type(item).__name__}")


def _as_link(item: LinkLike) -> Link:
    if isinstance(item, Link):
        return item
    if isinstance(item, dict):
        return Link(item["source"], item["target"])
    if isinstance(item, tuple) and len(item) == 2:
        return Link(item[0], item[1])
    raise TypeError(f"Expected a Link, dict or (source, target) pair, got {item!r}")


__all__ = [
    "BaseLayout",
    "StaticLayout",
]
