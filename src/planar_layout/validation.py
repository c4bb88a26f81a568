"""
Error types and input validation for planar layout.

Two families of errors live here:

- ``ValidationError`` and subclasses: the caller handed in something
  malformed (a node index out of range, a bad canvas size, an unreadable
  graph file).
- ``PlanarityError`` and subclasses: a pipeline stage found its input
  breaking a precondition of the algorithm (a graph that is not biconnected,
  a face with no chord-free node, a triangulation without a consistent
  rotation system).

Non-planarity itself is an ordinary result and never raised, except by the
APIs that cannot produce anything without an embedding.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class ValidationError(ValueError):
    """Base exception for input validation errors."""

    pass


class InvalidCanvasSizeError(ValidationError):
    """Raised when canvas dimensions are invalid."""

    pass


class InvalidIndexError(ValidationError, IndexError):
    """Raised when a node index does not exist in the graph."""

    pass


class InvalidLinkError(ValidationError):
    """Raised when a link references invalid nodes."""

    pass


class GraphFormatError(ValidationError):
    """Raised when a textual graph description cannot be parsed."""

    pass


class PlanarityError(RuntimeError):
    """Base exception for violated preconditions of the planarity pipeline."""

    pass


class EmbeddingError(PlanarityError):
    """Raised when the incremental embedding cannot continue.

    The face-splitting embedding only handles biconnected graphs. A remaining
    component that touches the embedded part in fewer than two nodes has no
    connecting path and ends up here.
    """

    pass


class TriangulationError(PlanarityError):
    """Raised when a face cannot be closed into triangles."""

    pass


class DrawingError(PlanarityError):
    """Raised when the shift drawing meets an inconsistent triangulation."""

    pass


class NotPlanarError(PlanarityError):
    """Raised by APIs that need an embedding when the graph is not planar."""

    pass


def validate_canvas_size(size: Sequence[float]) -> tuple[float, float]:
    """
    Validate canvas size dimensions.

    Args:
        size: [width, height] sequence

    Returns:
        Validated (width, height) tuple

    Raises:
        InvalidCanvasSizeError: If dimensions are invalid
    """
    if len(size) < 2:
        raise InvalidCanvasSizeError(
            f"Canvas size must have 2 elements [width, height], got {len(size)}"
        )

    width, height = float(size[0]), float(size[1])

    if width <= 0:
        raise InvalidCanvasSizeError(f"Canvas width must be positive, got {width}")
    if height <= 0:
        raise InvalidCanvasSizeError(f"Canvas height must be positive, got {height}")

    return width, height


def validate_node_index(index: int, node_count: int) -> int:
    """
    Validate that a node index exists.

    Args:
        index: Node index to check
        node_count: Number of nodes in the graph

    Returns:
        The index, unchanged

    Raises:
        InvalidIndexError: If index is outside [0, node_count)
    """
    if not 0 <= index < node_count:
        raise InvalidIndexError(
            f"Invalid node index {index}. Number of nodes in graph: {node_count}."
        )
    return index


def validate_link_indices(
    links: Sequence[Any],
    node_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that all link source/target indices are within bounds.

    Args:
        links: Sequence of Link objects or dicts with source/target
        node_count: Number of nodes in the graph
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (link_index, issue_description) tuples

    Raises:
        InvalidLinkError: If strict=True and invalid links found
    """
    issues: list[tuple[int, str]] = []

    for i, link in enumerate(links):
        src = _get_index(link, "source")
        tgt = _get_index(link, "target")

        if src is None:
            issues.append((i, f"Link {i}: source is None"))
        elif src < 0 or src >= node_count:
            issues.append((i, f"Link {i}: source index {src} out of bounds [0, {node_count})"))

        if tgt is None:
            issues.append((i, f"Link {i}: target is None"))
        elif tgt < 0 or tgt >= node_count:
            issues.append((i, f"Link {i}: target index {tgt} out of bounds [0, {node_count})"))

    if strict and issues:
        msg = "Invalid link indices:\n" + "\n".join(issue[1] for issue in issues)
        raise InvalidLinkError(msg)

    return issues


def validate_padding(padding: float, size: tuple[float, float]) -> float:
    """
    Validate drawing padding against the canvas.

    Args:
        padding: Margin kept free on every side of the canvas
        size: Canvas (width, height)

    Returns:
        Validated padding as float

    Raises:
        ValidationError: If padding is negative or leaves no drawing area
    """
    padding = float(padding)
    if padding < 0:
        raise ValidationError(f"padding must be >= 0, got {padding}")
    if 2 * padding >= min(size):
        raise ValidationError(
            f"padding {padding} leaves no drawing area on canvas {size[0]}x{size[1]}"
        )
    return padding


def _get_index(obj: Any, attr: str) -> Optional[int]:
    """Extract index from int, Node, or object with index attribute."""
    if hasattr(obj, attr):
        val = getattr(obj, attr, None)
    elif isinstance(obj, dict):
        val = obj.get(attr)
    else:
        val = None

    if val is None:
        return None
    if isinstance(val, int):
        return val
    index = getattr(val, "index", None)
    return index if isinstance(index, int) else None


__all__ = [
    "ValidationError",
    "InvalidCanvasSizeError",
    "InvalidIndexError",
    "InvalidLinkError",
    "GraphFormatError",
    "PlanarityError",
    "EmbeddingError",
    "TriangulationError",
    "DrawingError",
    "NotPlanarError",
    "validate_canvas_size",
    "validate_node_index",
    "validate_link_indices",
    "validate_padding",
]
