"""Result types of the planarity test."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ._face import Face


@dataclass
class PlanarityResult:
    """Result of a planarity test.

    Attributes:
        is_planar: Whether the graph is planar.
        embedding: If planar, a dict mapping each vertex to its clockwise
            neighbor ordering (rotation system). None if non-planar.
        faces: If planar, the faces traced from the rotation system. Empty if
            non-planar.
    """

    is_planar: bool
    embedding: Optional[dict[int, list[int]]] = None
    faces: list[Face] = field(default_factory=list)


__all__ = ["PlanarityResult"]
